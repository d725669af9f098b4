"""
Extraction errors.

Every expected failure of page extraction inherits from PageError so
callers can treat extraction as atomic: either a Page or one of these.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from page_frontmatter.core.delimiters import DelimiterKind


class PageError(Exception):
	"""Base class for all page extraction failures."""


class StreamError(PageError):
	"""The underlying stream failed while reading."""


class EmptyInput(StreamError):
	"""The stream ended before any non-whitespace byte was found."""

	def __init__(self, message: str = "empty document") -> None:
		super().__init__(message)


class MalformedFrontMatter(PageError):
	"""
	A front matter block could not be extracted or decoded.

	Raised when a delimiter is opened but never closed, when nesting
	never returns to zero, or when the closed block fails to decode.
	"""

	def __init__(self, message: str,
	             kind: DelimiterKind | None = None) -> None:
		super().__init__(message)
		self.kind = kind


__all__ = ["PageError", "StreamError", "EmptyInput", "MalformedFrontMatter"]
