"""In-memory memoization of extraction results keyed by document text"""

import copy
import threading
from types import MappingProxyType
from typing import Mapping, Optional

from mdmatter.core.models import Document


class MatterCache:
    """Thread-safe map of content text to its extracted Document.

    Entries are copied on the way in and out so callers mutating a
    returned Document (e.g. setting `path`) never alter the cache.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Document] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Document]:
        with self._lock:
            cached = self._entries.get(key)
        return copy.deepcopy(cached) if cached is not None else None

    def put(self, key: str, doc: Document) -> None:
        snapshot = copy.deepcopy(doc)
        with self._lock:
            self._entries[key] = snapshot

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def entries(self) -> Mapping[str, Document]:
        """Read-only snapshot of the current entries."""
        with self._lock:
            entries = dict(self._entries)
        return MappingProxyType({key: copy.deepcopy(doc) for key, doc in entries.items()})

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
