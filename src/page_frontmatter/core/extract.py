"""
Page extraction entry point.

Skips leading whitespace, classifies the lead line, extracts the front
matter block if one opens there, then collects the body.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from page_frontmatter.core.body import extract_content
from page_frontmatter.core.delimiters import determine_delims
from page_frontmatter.core.lead import (
    classify_lead,
    peek_lead,
    should_render,
    skip_whitespace,
)
from page_frontmatter.core.reader import PageReader
from page_frontmatter.core.scanner import extract_front_matter
from page_frontmatter.models.page import Page
from page_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)


def read_from(stream: BinaryIO, *, eager_decode: bool = True) -> Page:
	"""
	Read a page from a binary stream.

	The stream is not closed; acquiring and releasing it is up to the
	caller.

	Parameters:
		stream: Binary stream positioned at the start of the document.
		eager_decode: Decode the front matter before returning, so a
			malformed payload fails here rather than on first access.

	Returns:
		Fully populated Page.

	Raises:
		EmptyInput: If the document is empty or whitespace only.
		StreamError: If reading the stream fails.
		MalformedFrontMatter: If the front matter is unterminated or
			fails to decode.
	"""
	reader = PageReader(stream)
	skip_whitespace(reader)

	lead = peek_lead(reader)
	renderable = should_render(lead)
	kind = classify_lead(lead) if renderable else None

	front_matter = None
	if kind is not None:
		spec = determine_delims(lead)
		front_matter = extract_front_matter(reader, spec)

	body = extract_content(reader)
	page = Page(renderable=renderable,
	            kind=kind,
	            front_matter=front_matter,
	            body=body)
	logger.debug("read page renderable=%s kind=%s body=%d bytes", renderable,
	             kind.value if kind else None, len(body))

	if eager_decode:
		page.decode()
	return page


def read_bytes(data: bytes, *, eager_decode: bool = True) -> Page:
	"""Read a page from an in-memory document."""
	if isinstance(data, str):
		raise TypeError("data must be bytes; encode text documents first")
	return read_from(io.BytesIO(data), eager_decode=eager_decode)


__all__ = ["read_from", "read_bytes"]
