"""Hash files, string arrays, and mappings.

Unreadable files never raise: every file operation returns ``None`` so
callers can tell "could not hash" apart from the hash of an empty file.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Collection, Mapping, Sequence
from pathlib import Path
from typing import Any

from soulhash.core.defaults import ARRAY_SEPARATOR, CODE_EXTENSIONS
from soulhash.core.hashing import text_hash
from soulhash.core.logging import TRACE
from soulhash.core.types import DualHash
from soulhash.features.semantic import protein_hash

logger = logging.getLogger(__name__)


def _read(path: Path) -> bytes | None:
    logger.log(TRACE, "Reading %s to hash", path)
    try:
        return path.read_bytes()
    except OSError as exc:
        logger.debug("Failed to read %s: %s", path, exc)
        return None


def is_code_path(path: Path | str, code_extensions: Collection[str] = CODE_EXTENSIONS) -> bool:
    """True if the suffix of *path* (without the dot) is in *code_extensions*.

    Matching is case-sensitive; a file with no suffix is never code.
    """
    suffix = Path(path).suffix
    return bool(suffix) and suffix[1:] in code_extensions


def hash_file(
    path: Path | str,
    semantic: bool,
    *,
    code_extensions: Collection[str] = CODE_EXTENSIONS,
) -> str | None:
    """Hash the full contents of the file at *path*.

    When *semantic* is requested, only files whose extension is in
    *code_extensions* get a protein hash; everything else (JSON, images,
    lockfiles) falls back to the textual hash.

    Args:
        path: File to read.  Read exactly once, no retries.
        semantic: Request semantic hashing for code files.
        code_extensions: Extension allow-list, without leading dots.

    Returns:
        The hash string, or ``None`` if the file could not be read.
    """
    file_path = Path(path)
    content = _read(file_path)
    if content is None:
        return None

    use_semantic = semantic and is_code_path(file_path, code_extensions)
    logger.log(TRACE, "Hashing %s with mode: %s", file_path, "semantic" if use_semantic else "text")
    result = protein_hash(content) if use_semantic else text_hash(content)
    logger.log(TRACE, "Hashed %s - %s", file_path, result)
    return result


def dual_hash_file(path: Path | str) -> DualHash | None:
    """Semantic and textual hash of one file, computed from a single read.

    No extension gating: the caller asked for both identities explicitly.
    """
    content = _read(Path(path))
    if content is None:
        return None
    return DualHash(semantic=protein_hash(content), textual=text_hash(content))


def hash_array(items: Sequence[str | None], semantic: bool) -> str:
    """Join the non-``None`` entries of *items* with commas and hash the result.

    ``None`` entries are skipped (and logged at TRACE); order of the rest is
    kept.  An empty or all-``None`` input hashes the empty byte string.
    """
    present: list[str] = []
    for item in items:
        if item is None:
            logger.log(TRACE, "Encountered None value in hash_array input")
            continue
        present.append(item)

    # Lone surrogates are encoded as-is instead of failing.
    content = ARRAY_SEPARATOR.join(present).encode("utf-8", errors="surrogatepass")
    return protein_hash(content) if semantic else text_hash(content)


def hash_object(obj: Mapping[str, Any] | None, semantic: bool = False) -> str:
    """Order-independent hash of a mapping.

    Keys are visited in sorted order; each contributes itself and the
    compact JSON encoding of its value to :func:`hash_array`.  Nested
    mappings are encoded with sorted keys as well.

    Raises:
        TypeError: If a value is not JSON-serializable.
    """
    parts: list[str | None] = []
    for key in sorted(obj or {}):
        parts.append(key)
        parts.append(json.dumps(obj[key], separators=(",", ":"), sort_keys=True, ensure_ascii=False))
    return hash_array(parts, semantic)
