"""Public entry points: extract, stringify, read, and front matter detection

    >>> from mdmatter.matter import extract
    >>> doc = extract("---\\ntitle: Home\\n---\\nOther stuff")
    >>> doc.data, doc.content
    ({'title': 'Home'}, 'Other stuff')

Module-level functions share one default `Matter` client (and its cache);
construct a `Matter` to scope a cache explicitly.
"""

from os import PathLike
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from mdmatter.core.cache import MatterCache
from mdmatter.core.models import Document, LanguageTag, MatterOptions
from mdmatter.core.normalize import to_document
from mdmatter.core.parse import detect_language as _detect_language
from mdmatter.core.parse import has_front_matter as _has_front_matter
from mdmatter.core.parse import parse_matter
from mdmatter.core.stringify import stringify as _stringify
from mdmatter.util.logging import get_logger


logger = get_logger(__name__)


class Matter:
    """Front matter client; results for option-less calls are memoized in `cache`."""

    def __init__(self, cache: Optional[MatterCache] = None) -> None:
        self.cache = cache if cache is not None else MatterCache()

    def extract(self, value: Any, options: Any = None) -> Document:
        """Extract front matter from text, bytes or a document-like object.

        The cache is consulted and populated only when `options` is None;
        results with options differ from the unconfigured variant.
        """
        doc = to_document(value)
        key = doc.content

        if key == "":
            doc.is_empty = True
            return doc

        if options is None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %d-char document", len(key))
                cached.original = doc.original
                return cached

        doc = parse_matter(doc, MatterOptions.resolve(options))
        if options is None:
            self.cache.put(key, doc)
        return doc

    def stringify(
        self,
        value: Any,
        data: Optional[Mapping[str, Any]] = None,
        options: Any = None,
        ) -> str:
        """Serialize a Document (or text, extracted first) with `data` merged into its front matter.

        Plain text with neither data nor options is returned unchanged.
        """
        if isinstance(value, str):
            if data is None and options is None:
                return value
            value = self.extract(value, options)
        elif not isinstance(value, Document):
            value = to_document(value)
        return _stringify(value, data, options)

    def read(self, path: Union[str, PathLike], options: Any = None) -> Document:
        """Read a UTF-8 file and extract its front matter; sets `path` on the result."""
        path = Path(path)
        doc = self.extract(path.read_text(encoding="utf-8"), options)
        doc.path = path
        return doc

    def has_front_matter(self, text: str, options: Any = None) -> bool:
        return _has_front_matter(text, MatterOptions.resolve(options))

    def detect_language(self, text: str, options: Any = None) -> LanguageTag:
        return _detect_language(text, MatterOptions.resolve(options))

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_entries(self) -> Mapping[str, Document]:
        return self.cache.entries()


default_matter = Matter()

extract = default_matter.extract
stringify = default_matter.stringify
read = default_matter.read
has_front_matter = default_matter.has_front_matter
detect_language = default_matter.detect_language
clear_cache = default_matter.clear_cache
cache_entries = default_matter.cache_entries
