"""Constants that define the soulhash hash formats and routing rules.

Functions and CLI options take their defaults from this module rather than
repeating literals.

Changing any of the hashing constants below changes every digest produced
downstream, so they are part of the cache-key contract.
"""

from __future__ import annotations

from typing import Final

# ── Hash string formats ──
SEMANTIC_PREFIX: Final[str] = "p"
SEMANTIC_DIGEST_WIDTH: Final[int] = 16
DUAL_SEPARATOR: Final[str] = ":"
ARRAY_SEPARATOR: Final[str] = ","

# ── Protein hash ──
PROTEIN_DOMAIN_TAG: Final[bytes] = b"PROTEIN:"
FEATURE_COUNT_MASK: Final[int] = 0xFFFFFFFF

DECLARATION_MARKERS: Final[tuple[str, ...]] = ("function", "=>", "async")
CONTROL_FLOW_MARKERS: Final[tuple[str, ...]] = ("if", "for", "while", "switch")
DATA_TRANSFORM_MARKERS: Final[tuple[str, ...]] = ("map", "filter", "reduce", "forEach")
MODULE_LINK_MARKERS: Final[tuple[str, ...]] = ("import", "export", "require")

# ── Mode detection ──
AUTO_DETECT_MARKERS: Final[tuple[str, ...]] = (
    "function",
    "class",
    "import",
    "const",
    "=>",
    "async",
)

# ── Files ──
CODE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"js", "ts", "jsx", "tsx", "rs", "go", "java", "py"}
)

# ── Logging ──
TRACE_LEVEL: Final[int] = 5
