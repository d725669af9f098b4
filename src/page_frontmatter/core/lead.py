"""
Whitespace skipping and lead classification.

The lead is the first line of the document (or the first LEAD_SIZE
bytes, whichever is shorter). It is peeked, never consumed, so the
scanner can re-read the opening delimiter.
"""

from __future__ import annotations

from page_frontmatter.core.delimiters import (
    BRACE_OPEN,
    HTML_LEAD,
    DelimiterKind,
    determine_delims,
)
from page_frontmatter.core.reader import PageReader
from page_frontmatter.errors import EmptyInput

# Longest delimiter (``+++\r\n``) fits exactly.
LEAD_SIZE = 5


def is_space(b: int) -> bool:
	"""Return True for ASCII whitespace bytes."""
	return bytes((b, )).isspace()


def _code_point_size(lead: int) -> int:
	"""Return the UTF-8 sequence length announced by a lead byte."""
	if 0xC0 <= lead < 0xE0:
		return 2
	if 0xE0 <= lead < 0xF0:
		return 3
	if 0xF0 <= lead < 0xF8:
		return 4
	return 1


def _is_space_sequence(seq: bytes) -> bool:
	"""Return True if seq is one whitespace code point."""
	if len(seq) == 1:
		return is_space(seq[0])
	try:
		return seq.decode("utf-8").isspace()
	except UnicodeDecodeError:
		return False


def skip_whitespace(reader: PageReader) -> None:
	"""
	Advance past leading whitespace.

	Whitespace is read one UTF-8 code point at a time, so NO-BREAK
	SPACE, NEXT LINE and IDEOGRAPHIC SPACE are skipped like ASCII
	blanks. The first non-whitespace code point is left unconsumed.

	Parameters:
		reader: Stream positioned at the start of the document.

	Raises:
		EmptyInput: If the stream ends before a non-whitespace byte.
	"""
	while True:
		head = reader.peek(1)
		if not head:
			raise EmptyInput()
		size = _code_point_size(head[0])
		if not _is_space_sequence(reader.peek(size)):
			return
		reader.skip(size)


def peek_lead(reader: PageReader) -> bytes:
	"""Peek the lead line, including its newline when within the window."""
	window = reader.peek(LEAD_SIZE)
	idx = window.find(b"\n")
	if idx == -1:
		return window
	return window[:idx + 1]


def should_render(lead: bytes) -> bool:
	"""Return False for empty leads and already-rendered markup."""
	if not lead:
		return False
	return not lead.startswith(HTML_LEAD)


def classify_lead(lead: bytes) -> DelimiterKind | None:
	"""
	Identify the front matter convention opened by the lead.

	Symmetric delimiters must match the whole line including its
	terminator; ``--``, ``----`` or ``---`` without a newline are not
	front matter. A brace lead needs no terminator.

	Parameters:
		lead: Bytes returned by peek_lead().

	Returns:
		The DelimiterKind, or None when no front matter opens here.
	"""
	if lead.startswith(BRACE_OPEN):
		return DelimiterKind.BRACE
	try:
		return determine_delims(lead).kind
	except ValueError:
		return None


def is_front_matter_delim(lead: bytes) -> bool:
	"""Return True if the lead opens a front matter block."""
	return classify_lead(lead) is not None


__all__ = [
    "LEAD_SIZE",
    "is_space",
    "skip_whitespace",
    "peek_lead",
    "should_render",
    "classify_lead",
    "is_front_matter_delim",
]
