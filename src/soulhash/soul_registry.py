"""Soul registry: index artifact paths by semantic hash.

A "soul" is the equivalence class of artifacts sharing one protein hash;
the paths in a soul are "soul siblings".  The registry is an in-memory,
process-lifetime multimap with no persistence, no removal and no capacity
bound.  Each instance is owned by whoever constructs it.

Public surface:

* :class:`SoulRegistry` — thread-safe ``semantic hash -> [path, ...]`` index
* :func:`find_soul_siblings` — free-function lookup over a registry
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from soulhash.core.types import DualHash
from soulhash.hasher.files import dual_hash_file

logger = logging.getLogger(__name__)


class SoulRegistry:
    """Multimap from semantic hash to the paths registered under it.

    Paths keep registration order and are never deduplicated: registering
    the same path twice yields two entries.

    All access goes through one lock, and lookups return copies, so
    registering from several threads while others read is safe.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._souls: dict[str, list[str]] = {}

    def register(self, semantic_hash: str, path: str) -> None:
        """Append *path* under *semantic_hash*."""
        with self._lock:
            self._souls.setdefault(semantic_hash, []).append(path)

    def register_file(self, path: Path | str) -> DualHash | None:
        """Dual-hash the file at *path* and register it under its semantic hash.

        Returns:
            The file's :class:`DualHash`, or ``None`` (nothing registered)
            if the file could not be read.
        """
        dual = dual_hash_file(path)
        if dual is None:
            logger.debug("Skipping unreadable file %s", path)
            return None
        self.register(dual.semantic, str(path))
        return dual

    def find_by_soul(self, semantic_hash: str) -> list[str]:
        """Paths registered under *semantic_hash*, oldest first; ``[]`` if unknown."""
        with self._lock:
            return list(self._souls.get(semantic_hash, ()))

    def souls(self) -> dict[str, list[str]]:
        """Snapshot of the whole index."""
        with self._lock:
            return {soul: list(paths) for soul, paths in self._souls.items()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._souls)

    def __contains__(self, semantic_hash: object) -> bool:
        with self._lock:
            return semantic_hash in self._souls


def find_soul_siblings(semantic_hash: str, registry: SoulRegistry) -> list[str]:
    """All paths in *registry* that share *semantic_hash*."""
    return registry.find_by_soul(semantic_hash)
