"""
Page file loader.

Provides functions for loading pages from files on disk. Files are
opened in binary mode and closed before the Page is returned.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from page_frontmatter.core.extract import read_from
from page_frontmatter.models.config import Config
from page_frontmatter.models.page import Page
from page_frontmatter.errors import StreamError
from page_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)


def load_page(path: str | Path, config: Config | None = None) -> Page:
	"""
	Load a page from a file.

	Parameters:
		path: Path to the page file.
		config: Optional configuration; defaults to environment values.

	Returns:
		Page read from the file.

	Raises:
		StreamError: If the file cannot be opened or read.
		PageError: If extraction fails.
	"""
	config = config or Config()
	path = Path(path)
	try:
		fh = path.open("rb")
	except OSError as exc:
		raise StreamError(f"cannot open {path}: {exc}") from exc
	with fh:
		page = read_from(fh, eager_decode=config.eager_decode)
	logger.debug("loaded %s", path)
	return page


def iter_pages(root: str | Path,
               config: Config | None = None) -> Iterator[tuple[Path, Page]]:
	"""
	Yield pages under a directory.

	Files matching ``config.page_glob`` are read recursively in sorted
	order. The first failing file stops iteration with its error.

	Parameters:
		root: Directory to search.
		config: Optional configuration; defaults to environment values.

	Yields:
		Tuples of (path, Page).
	"""
	config = config or Config()
	base = Path(root)
	if not base.is_dir():
		raise ValueError(f"not a directory: {base}")
	for p in sorted(base.rglob(config.page_glob)):
		if p.is_file():
			yield p, load_page(p, config)


__all__ = ["load_page", "iter_pages"]
