"""Shared test fixtures for page extraction tests."""

from __future__ import annotations

import pytest

LINE_ENDINGS = ["\n", "\r\n"]


@pytest.fixture(params=LINE_ENDINGS, ids=["unix", "dos"])
def ending(request) -> str:
	"""Line ending substituted into every test document."""
	return request.param


@pytest.fixture
def endings(ending):
	"""Return a function converting a unix-style str to bytes with ending."""

	def convert(text: str) -> bytes:
		return text.replace("\n", ending).encode("utf-8")

	return convert
