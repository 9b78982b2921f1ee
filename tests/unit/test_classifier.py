import pytest
from hypothesis import given, strategies as st

from idmatch.classification.classifier import (
    AADHAAR_KEYWORDS,
    NUMBER_PATTERN_BONUS,
    classify_document,
)


class TestClassifyDocument:
    def test_aadhaar_front(self, aadhaar_ocr_text: str) -> None:
        result = classify_document(aadhaar_ocr_text)
        assert result.is_expected_type is True
        assert result.keyword_matches == 3
        assert result.has_number_pattern is True
        assert result.confidence == pytest.approx(3 / 7 + NUMBER_PATTERN_BONUS)

    def test_empty_text(self) -> None:
        result = classify_document("")
        assert result.is_expected_type is False
        assert result.confidence == 0.0

    def test_number_alone_is_not_enough(self) -> None:
        result = classify_document("Ref 1234 5678 9012")
        assert result.confidence == pytest.approx(NUMBER_PATTERN_BONUS)
        assert result.is_expected_type is False

    def test_two_keywords_without_number(self) -> None:
        result = classify_document("Unique Identification ... Aadhaar")
        assert result.keyword_matches == 2
        assert result.is_expected_type is False

    def test_three_keywords_without_number(self) -> None:
        result = classify_document("UIDAI Unique Identification Authority - Aadhaar")
        assert result.confidence == pytest.approx(3 / 7)
        assert result.is_expected_type is True

    def test_devanagari_keyword_with_number(self) -> None:
        result = classify_document("आधार\n1234 5678 9012")
        assert result.keyword_matches == 1
        assert result.is_expected_type is True

    def test_number_glued_to_label(self) -> None:
        result = classify_document("Aadhaar\nUID123456789012")
        assert result.has_number_pattern is True
        assert result.is_expected_type is True

    def test_confidence_is_clamped(self) -> None:
        text = " ".join(AADHAAR_KEYWORDS) + " 1234 5678 9012"
        result = classify_document(text)
        assert result.keyword_matches == len(AADHAAR_KEYWORDS)
        assert result.confidence == 1.0

    def test_unrelated_document(self) -> None:
        result = classify_document("Electricity bill for March\nAmount due: 1,240.00")
        assert result.is_expected_type is False
        assert result.keyword_matches == 0

    @given(st.text(max_size=200))
    def test_confidence_in_unit_interval(self, text: str) -> None:
        assert 0.0 <= classify_document(text).confidence <= 1.0
