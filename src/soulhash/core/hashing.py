"""Fast non-cryptographic hashing for byte-exact identity and feature folding."""

from __future__ import annotations

from collections.abc import Iterable

import xxhash

from soulhash.core.defaults import (
    FEATURE_COUNT_MASK,
    PROTEIN_DOMAIN_TAG,
    SEMANTIC_DIGEST_WIDTH,
    SEMANTIC_PREFIX,
)


def text_hash(content: bytes) -> str:
    """XXH3-64 digest of *content* as an unsigned decimal string.

    Sensitive to every byte of the input.  The decimal rendering can never
    start with the semantic prefix, so textual and semantic hashes are
    distinguishable from the string alone.

    Args:
        content: Arbitrary bytes; empty input is valid.

    Returns:
        The 64-bit digest formatted in base 10.
    """
    return str(xxhash.xxh3_64_intdigest(content))


def fold_features(counts: Iterable[int]) -> str:
    """Fold a feature vector into a prefixed fixed-width semantic digest.

    The domain tag is fed first, then each count as a 4-byte little-endian
    unsigned integer in the given order.  Counts wider than 32 bits are
    truncated to their low 32 bits.

    Args:
        counts: Non-negative feature counts, in bucket order.

    Returns:
        ``"p"`` followed by 16 lowercase hex digits.
    """
    hasher = xxhash.xxh3_64()
    hasher.update(PROTEIN_DOMAIN_TAG)
    for count in counts:
        hasher.update((count & FEATURE_COUNT_MASK).to_bytes(4, "little"))
    return f"{SEMANTIC_PREFIX}{hasher.intdigest():0{SEMANTIC_DIGEST_WIDTH}x}"
