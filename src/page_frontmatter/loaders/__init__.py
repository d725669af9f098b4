"""File loading utilities.

Key modules:
    - pages: Page loading from files and directories
"""

from .pages import load_page, iter_pages

__all__ = [
    "load_page",
    "iter_pages",
]
