from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from typer.main import get_command

from page_frontmatter.errors import PageError
from page_frontmatter.loaders.pages import load_page
from page_frontmatter.models.config import Config, load_env
from page_frontmatter.ui.reporting import render_page_table
from page_frontmatter.utils.logging import configure_logging, get_logger

cli = typer.Typer(add_completion=False, no_args_is_help=True)
logger = get_logger(__name__)


@cli.callback()
def root() -> None:
	"""
	Root callback for the page-frontmatter CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _load_config() -> Config:
	load_env()
	config = Config()
	configure_logging(config.log_level)
	return config


def show_impl(path: Path, lazy: bool = False) -> None:
	"""
	Print a summary of the page at path.

	Parameters:
		path: Page file to read.
		lazy: Defer decoding until the metadata is displayed.
	"""
	config = _load_config()
	if lazy:
		config.eager_decode = False
	try:
		page = load_page(path, config)
		table = render_page_table(page, path)
	except PageError as exc:
		logger.debug("failed to read %s", path, exc_info=True)
		typer.echo(f"error: {path}: {exc}", err=True)
		raise typer.Exit(code=2) from exc
	Console().print(table)


def get_impl(path: Path, key: str) -> None:
	"""
	Print the string value of a front matter key.

	Parameters:
		path: Page file to read.
		key: Front matter key to look up.
	"""
	config = _load_config()
	try:
		page = load_page(path, config)
		value, found = page.property(key)
	except PageError as exc:
		typer.echo(f"error: {path}: {exc}", err=True)
		raise typer.Exit(code=2) from exc
	if not found:
		typer.echo(f"{key}: not found", err=True)
		raise typer.Exit(code=1)
	typer.echo(value)


@cli.command()
def show(
    path: Path,
    lazy: bool = typer.Option(False,
                              "--lazy/--eager",
                              help="Decode front matter on first access"),
) -> None:
	"""Show renderability, front matter format and metadata of a page."""
	show_impl(path, lazy)


@cli.command()
def get(path: Path, key: str) -> None:
	"""Print one front matter value; exits 1 when the key is missing."""
	get_impl(path, key)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `show` when appropriate.

	Allows calling 'page-frontmatter page.md' without explicitly
	specifying the 'show' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["show"] + args
	return _click_app.main(
	    args=args,
	    prog_name="page-frontmatter",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
