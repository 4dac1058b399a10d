"""Core data contracts: hash modes, feature vectors, and dual hashes."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from soulhash.core.defaults import DUAL_SEPARATOR, SEMANTIC_DIGEST_WIDTH, SEMANTIC_PREFIX


class HashMode(StrEnum):
    """Which identity class a caller wants for a piece of content.

    ``DUAL`` is the composition of the other two, not a third algorithm.
    """

    TEXTUAL = "textual"
    SEMANTIC = "semantic"
    DUAL = "dual"


class FeatureVector(NamedTuple):
    """Marker counts for one piece of content.

    Field order is part of the protein-hash contract: the counts are folded
    into the digest in exactly this order.
    """

    declarations: int = 0
    control_flow: int = 0
    data_transforms: int = 0
    module_links: int = 0


@runtime_checkable
class FeatureExtractor(Protocol):
    """Anything that turns decoded text into a :class:`FeatureVector`.

    :func:`~soulhash.features.semantic.extract_features` is the built-in
    marker-counting heuristic; a structural analyzer can be dropped in by
    passing any callable with this shape.
    """

    def __call__(self, text: str) -> FeatureVector: ...


_SEMANTIC_PATTERN = rf"^{SEMANTIC_PREFIX}[0-9a-f]{{{SEMANTIC_DIGEST_WIDTH}}}$"


class DualHash(BaseModel, frozen=True):
    """Semantic and textual identity of the same bytes.

    Both fields are always populated; operations that cannot produce both
    return ``None`` instead of a half-filled instance.
    """

    semantic: str = Field(pattern=_SEMANTIC_PATTERN, description="Protein hash ('p' + 16 hex digits).")
    textual: str = Field(min_length=1, description="Byte-exact text hash.")

    def __str__(self) -> str:
        return f"{self.semantic}{DUAL_SEPARATOR}{self.textual}"
