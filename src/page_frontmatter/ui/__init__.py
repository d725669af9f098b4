"""Terminal rendering of pages.

Key modules:
    - reporting: Rich tables summarizing a parsed page
"""

from .reporting import render_page_table

__all__ = ["render_page_table"]
