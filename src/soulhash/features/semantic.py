"""Semantic ("protein") hashing via marker counting.

The extractor here is a stand-in for a real structural analyzer.  What any
replacement must keep is the observable contract of :func:`protein_hash`:
deterministic, total over arbitrary bytes, and a ``p``-prefixed 16-digit
hex string derived only from the feature vector.  Content whose features
agree hashes identically, which is how differently written but similarly
shaped code lands in the same soul.
"""

from __future__ import annotations

from soulhash.core.defaults import (
    CONTROL_FLOW_MARKERS,
    DATA_TRANSFORM_MARKERS,
    DECLARATION_MARKERS,
    MODULE_LINK_MARKERS,
)
from soulhash.core.hashing import fold_features
from soulhash.core.types import FeatureExtractor, FeatureVector


def decode_lossy(content: bytes) -> str:
    """Decode *content* as UTF-8, replacing invalid sequences with U+FFFD."""
    return content.decode("utf-8", errors="replace")


def _count_markers(text: str, markers: tuple[str, ...]) -> int:
    # Each marker is counted on its own; "async () =>" adds to both "async" and "=>".
    return sum(text.count(marker) for marker in markers)


def extract_features(text: str) -> FeatureVector:
    """Count declaration, control-flow, data-transform and module markers.

    Occurrences are literal, non-overlapping substring matches, so ``if``
    also matches inside ``elif`` and ``for`` inside ``forEach``.  That is
    accepted noise for a heuristic.

    Args:
        text: Decoded source text.

    Returns:
        The four bucket counts in contract order.
    """
    return FeatureVector(
        declarations=_count_markers(text, DECLARATION_MARKERS),
        control_flow=_count_markers(text, CONTROL_FLOW_MARKERS),
        data_transforms=_count_markers(text, DATA_TRANSFORM_MARKERS),
        module_links=_count_markers(text, MODULE_LINK_MARKERS),
    )


def protein_hash(content: bytes, extractor: FeatureExtractor = extract_features) -> str:
    """Semantic hash of *content*: ``"p"`` + 16 lowercase hex digits.

    Args:
        content: Arbitrary bytes; invalid UTF-8 is decoded lossily.
        extractor: Feature extractor to run on the decoded text.  Defaults
            to the marker-counting heuristic.

    Returns:
        The folded feature digest.  Empty content folds an all-zero
        vector like any other input.
    """
    return fold_features(extractor(decode_lossy(content)))
