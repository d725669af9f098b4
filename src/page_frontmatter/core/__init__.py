"""Front matter detection and extraction engine.

Key modules:
    - reader: Forward-only byte stream adapter with pushback and peek
    - lead: Whitespace skipping and lead classification
    - delimiters: Delimiter table
    - scanner: Boundary scanning between delimiters
    - body: Body collection
    - extract: Top-level read_from() entry point
"""

from .reader import PageReader
from .lead import skip_whitespace, peek_lead, should_render, classify_lead
from .delimiters import DelimiterKind, DelimiterSpec, determine_delims
from .scanner import extract_front_matter, extract_yaml_front_matter
from .body import extract_content
from .extract import read_from, read_bytes

__all__ = [
    "PageReader",
    "skip_whitespace",
    "peek_lead",
    "should_render",
    "classify_lead",
    "DelimiterKind",
    "DelimiterSpec",
    "determine_delims",
    "extract_front_matter",
    "extract_yaml_front_matter",
    "extract_content",
    "read_from",
    "read_bytes",
]
