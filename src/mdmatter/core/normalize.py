"""Coerce text, bytes or document-like input into a Document"""

from collections.abc import Mapping
from typing import Any

from mdmatter.core.models import Document
from mdmatter.errors import InputTypeError


BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Remove a single leading byte-order mark."""
    return text[1:] if text.startswith(BOM) else text


def _to_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    raise InputTypeError(f"expected content to be a string or bytes, got {type(value).__name__}")


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return value.encode("utf-8", errors="surrogatepass")


def to_document(value: Any) -> Document:
    """Build a fresh Document from str, bytes, a Document, or a mapping/object with `content`.

    The returned Document never aliases the caller's `data` mapping.
    """
    if value is None:
        raise InputTypeError("expected input to be a string, bytes or an object with content, got None")

    if isinstance(value, (str, bytes, bytearray, memoryview)):
        fields: dict[str, Any] = {"content": value}
    elif isinstance(value, Mapping):
        fields = dict(value)
    elif hasattr(value, "content"):
        fields = {
            name: getattr(value, name)
            for name in ("content", "data", "language", "matter")
            if hasattr(value, name)
        }
    else:
        raise InputTypeError(
            f"expected input to be a string, bytes or an object with content, got {type(value).__name__}"
        )

    content = fields.get("content")
    if content is None:
        content = ""
    text = _to_text(content)
    data = fields.get("data")

    return Document(
        content=strip_bom(text),
        data=dict(data) if isinstance(data, Mapping) else {},
        original=_to_bytes(content),
        language=fields.get("language") or "",
        matter=fields.get("matter") or "",
    )
