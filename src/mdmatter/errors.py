"""Exception types raised by front matter extraction and stringification"""

from typing import Optional


class MatterError(Exception):
    """Base class for all mdmatter errors."""

    def __init__(self, message: str, language: Optional[str] = None) -> None:
        super().__init__(message)
        self.language = language


class InputTypeError(MatterError, TypeError):
    """Input is not text, bytes, or an object carrying `content`."""


class UnregisteredEngineError(MatterError, LookupError):
    """No engine is registered for the requested language (or its alias)."""

    def __init__(self, language: str) -> None:
        super().__init__(f'engine "{language}" is not registered', language=language)


class UnsupportedOperationError(MatterError):
    """The resolved engine lacks the requested capability."""


class MetadataSyntaxError(MatterError, ValueError):
    """The engine failed to parse the raw front matter block.

    Always raised `from` the engine's own exception so the original
    traceback and message are preserved on `__cause__`.
    """
