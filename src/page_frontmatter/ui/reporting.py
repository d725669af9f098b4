"""
Page summary rendering.

Provides a Rich table describing a parsed page and its metadata.
"""

from __future__ import annotations

from pathlib import Path

from rich import box
from rich.table import Table
from rich.text import Text

from page_frontmatter.models.page import Page

_MAX_VALUE_LEN = 80


def _format_value(value: object) -> str:
	"""Render a metadata value on one line, truncated for display."""
	text = str(value).replace("\n", " ")
	if len(text) > _MAX_VALUE_LEN:
		return text[:_MAX_VALUE_LEN] + "..."
	return text


def render_page_table(page: Page, path: Path | None = None) -> Table:
	"""
	Build a table summarizing a page.

	Parameters:
		page: The page to describe.
		path: Optional source path shown as the title.

	Returns:
		Rich Table with page facts followed by one row per metadata key.
	"""
	table = Table(title=str(path) if path else None,
	              show_header=True,
	              box=box.ROUNDED)
	table.add_column("Field", style="bold")
	table.add_column("Value")

	render_style = "green" if page.renderable else "yellow"
	table.add_row("renderable", Text(str(page.renderable), style=render_style))
	table.add_row("format", page.kind.value if page.kind else "-")
	if page.front_matter is None:
		table.add_row("front matter", Text("absent", style="dim"))
	else:
		table.add_row("front matter", f"{len(page.front_matter)} bytes")
	table.add_row("body", f"{len(page.body)} bytes")

	for key, value in page.metadata.items():
		table.add_row(Text(str(key), style="cyan"), _format_value(value))
	return table


__all__ = ["render_page_table"]
