"""Body collection."""

from __future__ import annotations

from page_frontmatter.core.reader import PageReader


def extract_content(reader: PageReader) -> bytes:
	"""Return the rest of the stream verbatim."""
	return reader.read_rest()


__all__ = ["extract_content"]
