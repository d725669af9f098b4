"""
Forward-only byte stream adapter.

Wraps any binary stream exposing ``read(n)`` with a small pushback
buffer so callers can peek a few bytes and un-read a single byte.
Read failures surface as StreamError.
"""

from __future__ import annotations

import http.client
from typing import BinaryIO

from page_frontmatter.errors import StreamError

_CHUNK_SIZE = 8192

# OSError for files and sockets, ValueError for closed files,
# HTTPException for truncated response bodies.
_READ_ERRORS = (OSError, ValueError, http.client.HTTPException)


class PageReader:
	"""Buffered reader over a binary stream with peek and pushback."""

	def __init__(self, stream: BinaryIO):
		if not hasattr(stream, "read"):
			raise TypeError("stream must provide read()")
		self._stream = stream
		self._buf = bytearray()
		self._eof = False

	def _read(self, n: int) -> bytes:
		"""Read one chunk from the stream; b"" marks end of input."""
		try:
			chunk = self._stream.read(n)
		except _READ_ERRORS as exc:
			raise StreamError(f"read failed: {exc!r}") from exc
		if isinstance(chunk, str):
			raise TypeError("stream must be opened in binary mode")
		if not chunk:
			self._eof = True
			return b""
		return bytes(chunk)

	def _fill(self, n: int) -> None:
		"""Buffer at least n bytes unless the stream ends first."""
		while len(self._buf) < n and not self._eof:
			self._buf.extend(self._read(max(n - len(self._buf), _CHUNK_SIZE)))

	def read_byte(self) -> int | None:
		"""Consume one byte; None at end of input."""
		self._fill(1)
		if not self._buf:
			return None
		b = self._buf[0]
		del self._buf[0]
		return b

	def unread_byte(self, b: int) -> None:
		"""Push a byte back to the front of the stream."""
		self._buf.insert(0, b)

	def peek(self, n: int) -> bytes:
		"""Return up to n bytes without consuming them."""
		self._fill(n)
		return bytes(self._buf[:n])

	def skip(self, n: int) -> None:
		"""Consume n bytes that were previously peeked."""
		self._fill(n)
		del self._buf[:n]

	def read_rest(self) -> bytes:
		"""Consume everything left in the stream."""
		chunks = [bytes(self._buf)]
		self._buf.clear()
		while not self._eof:
			chunks.append(self._read(_CHUNK_SIZE))
		return b"".join(chunks)


__all__ = ["PageReader"]
