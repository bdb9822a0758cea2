"""Serialize a Document (data, excerpt, content) back to delimited text"""

from typing import Any, Mapping, Optional

from mdmatter.core.engines import resolve_engine
from mdmatter.core.models import Document, MatterOptions
from mdmatter.errors import InputTypeError, UnsupportedOperationError


EMPTY_MATTER = "{}"


def newline(text: str) -> str:
    """Append a single '\\n' unless text already ends with one."""
    return text if text.endswith("\n") else text + "\n"


def stringify(
    doc: Document,
    data: Optional[Mapping[str, Any]] = None,
    options: Any = None,
    ) -> str:
    """Return doc as text with `{**doc.data, **data}` serialized as front matter.

    With neither data nor options, the document's own data is used. The
    block is omitted entirely when the engine renders the merged data as
    an empty object.
    """
    if not isinstance(doc, Document):
        raise InputTypeError(f"expected a Document, got {type(doc).__name__}")
    if data is None and options is None:
        data = doc.data

    content = doc.content
    opts = MatterOptions.resolve(options)
    if data is None:
        if not opts.data:
            return content
        data = opts.data

    language = doc.language or opts.language or opts.default_language
    engine = resolve_engine(language, opts.engines)
    if engine.stringify is None:
        raise UnsupportedOperationError(f"stringifying {language} front matter is not supported", language=language)

    merged = {**doc.data, **data}
    matter = engine.stringify(merged).strip()

    buf = ""
    if matter != EMPTY_MATTER:
        buf = newline(opts.open) + newline(matter) + newline(opts.close)

    if doc.excerpt and doc.excerpt.strip() not in content:
        buf += newline(doc.excerpt) + newline(opts.close)

    return buf + newline(content)
