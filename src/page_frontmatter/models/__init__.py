"""
Page Frontmatter models.

Key models:
    - Config: Application configuration loaded from environment
    - Page: Parsed page with front matter, body and decoded metadata
"""

from .config import Config, load_env
from .page import Page

__all__ = [
    "Config",
    "load_env",
    "Page",
]
