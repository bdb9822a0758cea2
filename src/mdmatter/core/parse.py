"""Front matter detection and extraction, plus file discovery"""

import re
from collections.abc import Mapping
from pathlib import Path

from mdmatter.core.engines import resolve_engine
from mdmatter.core.excerpt import extract_excerpt
from mdmatter.core.models import Document, LanguageTag, MatterOptions
from mdmatter.errors import MetadataSyntaxError
from mdmatter.util.logging import get_logger


logger = get_logger(__name__)

COMMENT_RE = re.compile(r'^\s*#[^\n]+', re.MULTILINE)
NEWLINE_RE = re.compile(r'\r?\n')
MD_EXTENSIONS = {'.md', '.mdx'}


def has_front_matter(text: str, options: MatterOptions) -> bool:
    """Return True if text starts with the opening delimiter (no parsing)."""
    return text.startswith(options.open)


def sniff_language(text: str) -> LanguageTag:
    """Return the tag on the first line of text (the whole text if it has no line break)."""
    m = NEWLINE_RE.search(text)
    raw = text[:m.start()] if m else text
    return LanguageTag(raw=raw, name=raw.strip())


def detect_language(text: str, options: MatterOptions) -> LanguageTag:
    """Detect the inline language tag following the opening delimiter, if any."""
    if has_front_matter(text, options):
        text = text[len(options.open):]
    return sniff_language(text)


def parse_block(language: str, matter: str, options: MatterOptions) -> dict:
    """Parse a raw front matter block with the engine registered for language."""
    engine = resolve_engine(language, options.engines)
    data = engine.parse(matter)
    if not isinstance(data, Mapping):
        raise MetadataSyntaxError(
            f"Invalid {language} front matter: expected a mapping, got {type(data).__name__}",
            language=language,
        )
    return dict(data)


def parse_matter(doc: Document, options: MatterOptions) -> Document:
    """Extract front matter from doc.content in place and return doc.

    Missing front matter, a delimiter collision ('----' for '---') and an
    unclosed block are not errors; engine parse errors propagate.
    """
    open_ = options.open
    close = '\n' + options.close
    text = doc.content

    if not text.startswith(open_):
        return extract_excerpt(doc, options)

    # '----' is not a '---' delimiter
    if text[len(open_):len(open_) + 1] == open_[-1]:
        logger.debug("Delimiter collision at document start; no front matter extracted")
        return doc

    text = text[len(open_):]
    tag = sniff_language(text)
    if tag.name:
        text = text[len(tag.raw):]
    doc.language = options.language or tag.name or options.default_language

    close_index = text.find(close)
    doc.matter = text if close_index == -1 else text[:close_index]

    if COMMENT_RE.sub('', doc.matter).strip() == '':
        doc.is_empty = True
        doc.empty = doc.content
        doc.data = {}
    else:
        doc.data = parse_block(doc.language, doc.matter, options)

    if close_index == -1:
        logger.debug("No closing delimiter; treating the remainder as front matter")
        doc.content = ''
    else:
        content = text[close_index + len(close):]
        if content.startswith('\r'):
            content = content[1:]
        if content.startswith('\n'):
            content = content[1:]
        doc.content = content

    logger.debug("Extracted %s front matter (%d keys, empty=%s)", doc.language, len(doc.data), doc.is_empty)
    return extract_excerpt(doc, options)


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)
