"""
Logging configuration module.

Provides centralized logging setup for the application with
configurable log levels and consistent formatting.
"""

from __future__ import annotations

import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Control characters other than tab, which page paths and decoder
# messages may carry from the document being read.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def escape_control(text: str) -> str:
	"""Replace control characters in text with ``\\xNN`` escapes.

	Parameters:
		text: Raw text that may contain control characters.

	Returns:
		Text that stays on a single log line.
	"""
	return _CONTROL_RE.sub(lambda m: f"\\x{ord(m.group(0)):02x}", text)


class ControlEscapingFilter(logging.Filter):
	"""Logging filter that escapes control characters in records.

	Applied to the root logger so a malformed document cannot break
	up or forge log lines.
	"""

	def filter(self, record: logging.LogRecord) -> bool:
		"""Escape the log record message and args."""
		if isinstance(record.msg, str):
			record.msg = escape_control(record.msg)
		if record.args:
			if isinstance(record.args, dict):
				record.args = {
				    k: escape_control(v) if isinstance(v, str) else v
				    for k, v in record.args.items()
				}
			elif isinstance(record.args, tuple):
				record.args = tuple(
				    escape_control(a) if isinstance(a, str) else a
				    for a in record.args)
		return True


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level, format, and control escaping.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	root = logging.getLogger()
	# Avoid adding duplicate filters on repeated calls
	if not any(isinstance(f, ControlEscapingFilter) for f in root.filters):
		root.addFilter(ControlEscapingFilter())


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "escape_control",
    "ControlEscapingFilter",
]
