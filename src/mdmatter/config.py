"""Application configuration: settings schema and mdmatter.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from mdmatter.core.models import MatterOptions


CONFIG_FILE = "mdmatter.yaml"


class Settings(BaseModel):
    language:          str = Field(default="yaml",  description="Default engine when no inline tag is present")
    delimiters:        str = Field(default="---",   description="Front matter delimiter used on both sides")
    close_delimiter:   Optional[str] = Field(default=None, description="Closing delimiter if it differs")
    excerpt:           bool = Field(default=False,  description="Extract an excerpt after the front matter")
    excerpt_separator: Optional[str] = Field(default=None, description="Excerpt separator; defaults to the delimiter")
    unsafe_eval:       bool = Field(default=False,  description="Allow the javascript engine to evaluate code")
    log_level:         str = Field(default="warning", pattern="^(debug|info|warning|error|critical)$")

    def to_options(self, language: Optional[str] = None) -> MatterOptions:
        """Build per-call MatterOptions; `language` is an explicit override of inline tags."""
        return MatterOptions(
            language=language,
            default_language=self.language,
            delimiters=(self.delimiters, self.close_delimiter or self.delimiters),
            excerpt=self.excerpt,
            excerpt_separator=self.excerpt_separator,
            unsafe_eval=self.unsafe_eval,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdmatter.yaml, then MDMATTER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDMATTER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
