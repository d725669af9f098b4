"""
Boundary scanning.

Consumes a front matter block byte by byte, tracking delimiter depth,
and returns the bytes strictly between the outermost delimiters.

Brace blocks are matched by counting ``{`` and ``}`` only. Braces
inside quoted JSON strings are counted too, so a payload such as
``{"a": "}"}`` closes early and fails to decode.
"""

from __future__ import annotations

from page_frontmatter.core.delimiters import (
    YAML_DELIM_UNIX,
    DelimiterSpec,
    determine_delims,
)
from page_frontmatter.core.lead import is_space
from page_frontmatter.core.reader import PageReader
from page_frontmatter.errors import MalformedFrontMatter
from page_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)

_NEWLINE = ord("\n")


def _matches(reader: PageReader, rest: bytes) -> bool:
	"""Consume rest if it is next in the stream; leave it otherwise."""
	if not rest:
		return True
	if reader.peek(len(rest)) != rest:
		return False
	reader.skip(len(rest))
	return True


def _skip_line_ending(reader: PageReader) -> None:
	"""Consume a single ``\\n`` or ``\\r\\n`` if one comes next."""
	ahead = reader.peek(2)
	if ahead.startswith(b"\r\n"):
		reader.skip(2)
	elif ahead.startswith(b"\n"):
		reader.skip(1)


def extract_front_matter(reader: PageReader, spec: DelimiterSpec) -> bytes:
	"""
	Extract the front matter block opened at the current position.

	Symmetric delimiters toggle depth between 0 and 1 and only match at
	the start of a line. Asymmetric delimiters nest; inner pairs are
	kept in the result. Scanning stops once depth is back to 0 on a
	non-whitespace byte.

	Parameters:
		reader: Stream positioned on the opening delimiter.
		spec: Delimiter pair for the block.

	Returns:
		The bytes between the outermost delimiters.

	Raises:
		MalformedFrontMatter: If the block does not open here, or the
			stream ends before it closes.
	"""
	symmetric = spec.symmetric
	depth = 0
	opened = False
	line_start = True
	buf = bytearray()

	while True:
		c = reader.read_byte()
		if c is None:
			raise MalformedFrontMatter(
			    f"unterminated {spec.kind.value} front matter", spec.kind)

		matched = False
		if c == spec.open[0] and (line_start or not symmetric):
			if _matches(reader, spec.open[1:]):
				matched = True
				if symmetric:
					depth = 0 if depth else 1
				else:
					if depth > 0:
						buf += spec.open
					depth += 1
		elif not symmetric and c == spec.close[0]:
			if _matches(reader, spec.close[1:]):
				matched = True
				depth -= 1
				if depth > 0:
					buf += spec.close

		if matched:
			opened = True
		elif opened:
			buf.append(c)
		# symmetric delimiters carry their own terminator
		line_start = c == _NEWLINE or (matched and symmetric)

		if depth == 0 and not is_space(c):
			if not opened:
				raise MalformedFrontMatter(
				    f"expected {spec.open!r} to open front matter", spec.kind)
			break

	if not symmetric:
		_skip_line_ending(reader)

	logger.debug("extracted %s front matter (%d bytes)", spec.kind.value,
	             len(buf))
	return bytes(buf)


def extract_yaml_front_matter(reader: PageReader) -> bytes:
	"""Extract a Unix-style ``---`` block."""
	return extract_front_matter(reader, determine_delims(YAML_DELIM_UNIX))


__all__ = ["extract_front_matter", "extract_yaml_front_matter"]
