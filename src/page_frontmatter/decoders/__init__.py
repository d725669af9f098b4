"""
Front matter payload decoders.

Decodes an extracted front matter span into a mapping, using the
decoder that matches the delimiter convention.
"""

from __future__ import annotations

import json
import tomllib
from typing import Any, Callable

import yaml

from page_frontmatter.core.delimiters import (
    BRACE_CLOSE,
    BRACE_OPEN,
    DelimiterKind,
)
from page_frontmatter.errors import MalformedFrontMatter
from page_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)


def _decode_yaml(data: bytes) -> Any:
	return yaml.safe_load(data)


def _decode_toml(data: bytes) -> Any:
	return tomllib.loads(data.decode("utf-8"))


def _decode_json(data: bytes) -> Any:
	# the scanner strips the outermost braces
	return json.loads(BRACE_OPEN + data + BRACE_CLOSE)


DECODERS: dict[DelimiterKind, Callable[[bytes], Any]] = {
    DelimiterKind.YAML: _decode_yaml,
    DelimiterKind.TOML: _decode_toml,
    DelimiterKind.BRACE: _decode_json,
}

_DECODE_ERRORS = (
    yaml.YAMLError,
    tomllib.TOMLDecodeError,
    json.JSONDecodeError,
    UnicodeDecodeError,
    # integer digit limit, invalid dates
    ValueError,
    # deeply nested payloads
    RecursionError,
)


def decode_front_matter(kind: DelimiterKind, data: bytes) -> dict[str, Any]:
	"""
	Decode a front matter span into a mapping.

	An empty or whitespace-only YAML span decodes to an empty mapping.

	Parameters:
		kind: Delimiter convention the span was extracted with.
		data: Bytes between the delimiters.

	Returns:
		Mapping of front matter keys to decoded values.

	Raises:
		MalformedFrontMatter: If decoding fails or the payload is not
			a mapping.
	"""
	try:
		meta = DECODERS[kind](data)
	except _DECODE_ERRORS as exc:
		logger.debug("failed to decode %s front matter: %s", kind.value, exc)
		raise MalformedFrontMatter(
		    f"invalid {kind.value} front matter: {exc}", kind) from exc

	if meta is None:
		return {}
	if not isinstance(meta, dict):
		raise MalformedFrontMatter(
		    f"{kind.value} front matter must be a mapping, "
		    f"got {type(meta).__name__}", kind)
	return meta


__all__ = ["decode_front_matter", "DECODERS"]
