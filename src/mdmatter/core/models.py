"""Document record and resolved extraction options"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, NamedTuple, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mdmatter.core.engines import builtin_engines, to_engine


DEFAULT_DELIMITER = "---"
DEFAULT_LANGUAGE = "yaml"


class LanguageTag(NamedTuple):
    """Inline language tag found right after the opening delimiter."""
    raw:  str
    name: str


@runtime_checkable
class ExcerptStrategy(Protocol):
    """Custom excerpt hook; responsible for setting `doc.excerpt` itself."""

    def apply(self, doc: "Document", options: "MatterOptions") -> Optional["Document"]:
        ...


@dataclass
class Document:
    """Result of front matter extraction; also the input to stringify."""
    content:  str = ""
    data:     dict[str, Any] = field(default_factory=dict)
    excerpt:  str = ""
    original: bytes = b""          # input bytes as received (BOM included)
    language: str = ""             # engine used; "" when no front matter
    matter:   str = ""             # raw block between the delimiters
    is_empty: bool = False
    empty:    Optional[str] = None # pre-extraction content when is_empty
    path:     Optional[Path] = None

    def stringify(self, data: Optional[Mapping[str, Any]] = None, options: Any = None) -> str:
        """Serialize this document back to text, merging `data` over `self.data`."""
        from mdmatter.core.stringify import stringify

        if options is not None:
            language = MatterOptions.resolve(options).language
            if language:
                self.language = language
        return stringify(self, data, options)


class MatterOptions(BaseModel):
    """Options for one extract/stringify call, with defaults applied.

    `engines` always holds the built-ins merged with caller entries
    (caller wins). `language` is the explicit per-call engine;
    `default_language` is what applies when neither it nor an inline
    tag is present.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    engines:           dict[str, Any] = Field(default_factory=dict)
    language:          Optional[str] = None
    default_language:  str = DEFAULT_LANGUAGE
    delimiters:        tuple[str, str] = (DEFAULT_DELIMITER, DEFAULT_DELIMITER)
    excerpt:           Any = False
    excerpt_separator: Optional[str] = None
    data:              Optional[dict[str, Any]] = None
    unsafe_eval:       bool = Field(default=False, description="Enable the code-evaluating javascript engine")

    @field_validator("delimiters", mode="before")
    @classmethod
    def _delimiter_pair(cls, value: Any) -> tuple[str, str]:
        """Accept one delimiter for both sides or an explicit (open, close) pair."""
        if value is None:
            return (DEFAULT_DELIMITER, DEFAULT_DELIMITER)
        items = [value] if isinstance(value, str) else list(value)
        if len(items) == 1:
            items.append(items[0])
        if len(items) != 2 or not all(isinstance(d, str) and d for d in items):
            raise ValueError("delimiters must be a non-empty string or an (open, close) pair")
        return (items[0], items[1])

    @field_validator("language", "default_language", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("excerpt", mode="before")
    @classmethod
    def _excerpt_mode(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, (bool, str)) or callable(value) or isinstance(value, ExcerptStrategy):
            return value
        raise ValueError("excerpt must be a bool, a separator string, a callable or an ExcerptStrategy")

    @model_validator(mode="after")
    def _merge_engines(self) -> "MatterOptions":
        custom = {name.lower(): to_engine(engine) for name, engine in self.engines.items()}
        self.engines = {**builtin_engines(self.unsafe_eval), **custom}
        return self

    @property
    def open(self) -> str:
        return self.delimiters[0]

    @property
    def close(self) -> str:
        return self.delimiters[1]

    @classmethod
    def resolve(cls, options: Any = None) -> "MatterOptions":
        """Return options as a MatterOptions: None, a mapping, or an instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        raise TypeError(f"expected options to be a mapping or MatterOptions, got {type(options).__name__}")
