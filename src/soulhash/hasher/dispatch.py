"""Route content to the textual and/or semantic hasher by mode."""

from __future__ import annotations

from collections.abc import Sequence

from soulhash.core.defaults import AUTO_DETECT_MARKERS, DUAL_SEPARATOR, SEMANTIC_PREFIX
from soulhash.core.hashing import text_hash
from soulhash.core.types import DualHash, HashMode
from soulhash.features.semantic import decode_lossy, protein_hash


def hash_content(content: bytes, mode: HashMode) -> str:
    """Hash *content* under *mode*.

    ``DUAL`` yields ``"<semantic>:<textual>"``, semantic first.  Consumers
    must split on the first colon (see :func:`split_dual`).
    """
    match mode:
        case HashMode.TEXTUAL:
            return text_hash(content)
        case HashMode.SEMANTIC:
            return protein_hash(content)
        case HashMode.DUAL:
            return f"{protein_hash(content)}{DUAL_SEPARATOR}{text_hash(content)}"
    raise ValueError(f"Unknown hash mode: {mode!r}")


def detect_mode(content: bytes, markers: Sequence[str] = AUTO_DETECT_MARKERS) -> HashMode:
    """Guess whether *content* is code.

    Plain substring check, not a language detector: prose that mentions
    "class" routes to semantic hashing.  Callers needing precision should
    pass an explicit mode to :func:`hash_content`.
    """
    text = decode_lossy(content)
    if any(marker in text for marker in markers):
        return HashMode.SEMANTIC
    return HashMode.TEXTUAL


def auto_hash(content: bytes, markers: Sequence[str] = AUTO_DETECT_MARKERS) -> str:
    """Semantic hash for code-looking content, textual hash otherwise."""
    return hash_content(content, detect_mode(content, markers))


def split_dual(value: str) -> DualHash:
    """Parse a ``"<semantic>:<textual>"`` string back into a :class:`DualHash`.

    Raises:
        ValueError: If *value* has no separator or either half is malformed.
    """
    semantic, sep, textual = value.partition(DUAL_SEPARATOR)
    if not sep or not semantic.startswith(SEMANTIC_PREFIX):
        raise ValueError(f"Not a dual hash: {value!r}")
    return DualHash(semantic=semantic, textual=textual)
