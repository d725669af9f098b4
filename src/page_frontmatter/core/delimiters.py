"""
Delimiter table.

Maps the lead line of a document to the pair of byte sequences that
open and close its front matter block.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

HTML_LEAD = b"<"
YAML_LEAD = b"-"
YAML_DELIM_UNIX = b"---\n"
YAML_DELIM_DOS = b"---\r\n"
TOML_LEAD = b"+"
TOML_DELIM_UNIX = b"+++\n"
TOML_DELIM_DOS = b"+++\r\n"
BRACE_OPEN = b"{"
BRACE_CLOSE = b"}"


class DelimiterKind(str, Enum):
	"""Front matter serialization, named after its decoder."""

	YAML = "yaml"
	TOML = "toml"
	BRACE = "json"


class DelimiterSpec(BaseModel):
	"""Open/close byte sequences for one front matter convention."""

	model_config = ConfigDict(frozen=True)

	kind: DelimiterKind = Field(description="Serialization format")
	open: bytes = Field(description="Opening delimiter sequence")
	close: bytes = Field(description="Closing delimiter sequence")

	@property
	def symmetric(self) -> bool:
		"""True when the same token opens and closes the block."""
		return self.open == self.close


_TABLE: dict[bytes, DelimiterSpec] = {
    YAML_DELIM_UNIX:
        DelimiterSpec(kind=DelimiterKind.YAML,
                      open=YAML_DELIM_UNIX,
                      close=YAML_DELIM_UNIX),
    YAML_DELIM_DOS:
        DelimiterSpec(kind=DelimiterKind.YAML,
                      open=YAML_DELIM_DOS,
                      close=YAML_DELIM_DOS),
    TOML_DELIM_UNIX:
        DelimiterSpec(kind=DelimiterKind.TOML,
                      open=TOML_DELIM_UNIX,
                      close=TOML_DELIM_UNIX),
    TOML_DELIM_DOS:
        DelimiterSpec(kind=DelimiterKind.TOML,
                      open=TOML_DELIM_DOS,
                      close=TOML_DELIM_DOS),
    BRACE_OPEN:
        DelimiterSpec(kind=DelimiterKind.BRACE,
                      open=BRACE_OPEN,
                      close=BRACE_CLOSE),
}


def determine_delims(lead: bytes) -> DelimiterSpec:
	"""
	Return the delimiter pair for a classified lead.

	Parameters:
		lead: The exact lead sequence (``---\\n``, ``+++\\r\\n``, ``{`` ...).

	Returns:
		DelimiterSpec carrying the observed line ending.

	Raises:
		ValueError: If the lead does not open a front matter block.
	"""
	if lead.startswith(BRACE_OPEN):
		# single-byte lead, whatever follows on the line
		return _TABLE[BRACE_OPEN]
	spec = _TABLE.get(lead)
	if spec is None:
		raise ValueError(f"not a front matter lead: {lead!r}")
	return spec


__all__ = [
    "DelimiterKind",
    "DelimiterSpec",
    "determine_delims",
    "HTML_LEAD",
    "YAML_LEAD",
    "TOML_LEAD",
    "YAML_DELIM_UNIX",
    "YAML_DELIM_DOS",
    "TOML_DELIM_UNIX",
    "TOML_DELIM_DOS",
    "BRACE_OPEN",
    "BRACE_CLOSE",
]
