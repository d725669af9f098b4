"""
Page Frontmatter - front matter extraction for static content pages.

This package splits a document into its front matter block (YAML, TOML
or brace-delimited JSON) and its body, and decodes the metadata.

Main entry points:
    - page_frontmatter.main: CLI entrypoint
    - page_frontmatter.core.extract: read_from() for a single stream
    - page_frontmatter.loaders.pages: load_page() and iter_pages() for files
    - page_frontmatter.models.config: Config and load_env()
"""

from .errors import PageError, StreamError, EmptyInput, MalformedFrontMatter
from .core.extract import read_from, read_bytes
from .models.page import Page

__all__ = [
    "PageError",
    "StreamError",
    "EmptyInput",
    "MalformedFrontMatter",
    "read_from",
    "read_bytes",
    "Page",
]
