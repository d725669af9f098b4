from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")
	eager_decode: bool = Field(
	    True,
	    alias="EAGER_DECODE",
	    description=
	    "Decode front matter while reading so malformed metadata fails early",
	)
	page_glob: str = Field("*.md", alias="PAGE_GLOB",
	                       description="Glob used to discover page files")

	@field_validator("page_glob")
	@classmethod
	def validate_glob(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("page_glob must not be empty")
		return v.strip()


__all__ = ["Config", "load_env"]
