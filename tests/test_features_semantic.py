"""Tests for the marker-counting protein hash (features/semantic.py)."""

from __future__ import annotations

import re

from soulhash.core.hashing import fold_features
from soulhash.core.types import FeatureExtractor, FeatureVector
from soulhash.features.semantic import decode_lossy, extract_features, protein_hash

ADD_FUNCTION = b"function add(a, b) { return a + b; }"
SUM_FUNCTION = b"function sum(x, y) { return x + y; }"
ARROW_MAP = b"const f = async () => x.map(y => y);"


class TestExtractFeatures:
    def test_empty_text_is_all_zero(self) -> None:
        assert extract_features("") == FeatureVector(0, 0, 0, 0)

    def test_arrow_and_data_markers(self) -> None:
        # "=>" twice, "async" once; "map" once
        assert extract_features(ARROW_MAP.decode()) == FeatureVector(3, 0, 1, 0)

    def test_module_and_control_markers(self) -> None:
        text = "import x from 'y'; export function f() { if (a) { for (;;) {} } }"
        assert extract_features(text) == FeatureVector(
            declarations=1, control_flow=2, data_transforms=0, module_links=2,
        )

    def test_markers_count_independently(self) -> None:
        features = extract_features("arr.forEach(f)")
        assert features.control_flow == 1
        assert features.data_transforms == 1

    def test_bucket_order(self) -> None:
        assert FeatureVector._fields == (
            "declarations", "control_flow", "data_transforms", "module_links",
        )

    def test_satisfies_extractor_protocol(self) -> None:
        assert isinstance(extract_features, FeatureExtractor)


class TestDecodeLossy:
    def test_invalid_bytes_replaced(self) -> None:
        assert decode_lossy(b"a\xffb") == "a\ufffdb"


class TestProteinHash:
    def test_format(self) -> None:
        for content in (b"", ADD_FUNCTION, b"\x00\x01\x02", "héllo".encode()):
            assert re.fullmatch(r"p[0-9a-f]{16}", protein_hash(content))

    def test_deterministic(self) -> None:
        assert protein_hash(ARROW_MAP) == protein_hash(ARROW_MAP)

    def test_empty_content_folds_zero_vector(self) -> None:
        assert protein_hash(b"") == fold_features(FeatureVector())

    def test_binary_content_never_fails(self) -> None:
        assert protein_hash(b"\xff\xfe function") == protein_hash(b"function")

    def test_same_shape_code_shares_soul(self) -> None:
        assert protein_hash(ADD_FUNCTION) == protein_hash(SUM_FUNCTION)

    def test_different_shape_code_differs(self) -> None:
        assert protein_hash(ADD_FUNCTION) != protein_hash(ARROW_MAP)

    def test_custom_extractor(self) -> None:
        def length_only(text: str) -> FeatureVector:
            return FeatureVector(len(text), 0, 0, 0)

        assert protein_hash(b"abc", extractor=length_only) == fold_features([3, 0, 0, 0])
