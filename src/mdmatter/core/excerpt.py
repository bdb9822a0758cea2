"""Excerpt extraction from the content left after front matter"""

from mdmatter.core.models import Document, ExcerptStrategy, MatterOptions


def _separator(doc: Document, options: MatterOptions) -> str | None:
    """Resolve the separator: data field > excerpt_separator > excerpt string > open delimiter.

    Returns None when excerpts are disabled and no separator was supplied.
    """
    sep = doc.data.get("excerpt_separator")
    if sep is None:
        sep = options.excerpt_separator
    if sep is None and isinstance(options.excerpt, str):
        sep = options.excerpt
    if sep is None:
        if not options.excerpt:
            return None
        sep = options.open
    return str(sep)


def extract_excerpt(doc: Document, options: MatterOptions) -> Document:
    """Set `doc.excerpt` to the content preceding the first separator (not trimmed)."""
    if isinstance(options.excerpt, ExcerptStrategy):
        options.excerpt.apply(doc, options)
        return doc
    if callable(options.excerpt):
        options.excerpt(doc, options)
        return doc

    sep = _separator(doc, options)
    if not sep:
        return doc

    idx = doc.content.find(sep)
    if idx != -1:
        doc.excerpt = doc.content[:idx]
    return doc
