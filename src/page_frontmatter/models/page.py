"""
Page model.

Defines the Page Pydantic model returned by extraction, with
decode-once access to its front matter metadata.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from page_frontmatter.core.delimiters import DelimiterKind
from page_frontmatter.decoders import decode_front_matter


class Page(BaseModel):
	"""A document split into front matter and body."""

	model_config = ConfigDict(frozen=True)

	renderable: bool = Field(
	    description="False for already-rendered markup passed through as is")
	kind: DelimiterKind | None = Field(
	    default=None, description="Front matter convention, if any")
	front_matter: bytes | None = Field(
	    default=None, description="Bytes between the front matter delimiters")
	body: bytes = Field(default=b"", description="Content after front matter")

	_parsed: dict[str, Any] | None = PrivateAttr(default=None)

	@property
	def has_front_matter(self) -> bool:
		"""True when a closed front matter block was found."""
		return self.front_matter is not None

	def decode(self) -> dict[str, Any]:
		"""
		Decode the front matter once and cache the mapping.

		Returns:
			The decoded mapping; empty when there is no front matter.

		Raises:
			MalformedFrontMatter: If the front matter fails to decode.
		"""
		if self._parsed is not None:
			return self._parsed
		if self.front_matter is None or self.kind is None:
			parsed: dict[str, Any] = {}
		else:
			parsed = decode_front_matter(self.kind, self.front_matter)
		self._parsed = parsed
		return parsed

	@property
	def metadata(self) -> dict[str, Any]:
		"""Copy of the decoded front matter."""
		return dict(self.decode())

	def get(self, key: str, default: Any = None) -> Any:
		"""Return the decoded value for key, or default."""
		return self.decode().get(key, default)

	def property(self, key: str) -> tuple[str, bool]:
		"""
		Look up a front matter key as a string.

		Non-string values are rendered with ``str()``; a null value
		is an empty string.

		Parameters:
			key: Front matter key.

		Returns:
			Tuple of (value, found). Missing keys give ("", False).
		"""
		meta = self.decode()
		if key not in meta:
			return "", False
		value = meta[key]
		if value is None:
			return "", True
		if isinstance(value, str):
			return value, True
		return str(value), True


__all__ = ["Page"]
