import pytest

from idmatch.matching.phone import match_phone


class TestExactPhone:
    @pytest.mark.parametrize(
        ("ocr_text", "extracted"),
        [
            ("Mobile: 9876543210", "9876543210"),
            ("Mob 98765-43210", "98765-43210"),
            ("Mob 98765 43210", "98765 43210"),
            ("Tel 987-654-3210", "987-654-3210"),
        ],
    )
    def test_printed_formats(self, ocr_text: str, extracted: str) -> None:
        result = match_phone("9876543210", ocr_text)
        assert result.found is True
        assert result.confidence == 1.0
        assert result.extracted == extracted

    def test_declared_with_country_code(self) -> None:
        result = match_phone("+91 98765 43210", "Mobile: 9876543210")
        assert result.found is True
        assert result.confidence == 1.0

    def test_printed_with_country_code(self) -> None:
        result = match_phone("9876543210", "Mobile: +919876543210")
        assert result.found is True
        assert result.confidence == 1.0
        assert result.extracted == "+919876543210"

    def test_exact_match_beats_earlier_near_match(self) -> None:
        result = match_phone("9876543210", "Alt 9876543219 Mobile 9876543210")
        assert result.confidence == 1.0
        assert result.extracted == "9876543210"


class TestNearPhone:
    def test_one_digit_misread(self) -> None:
        result = match_phone("9876543210", "Mobile: 9876543219")
        assert result.found is True
        assert result.confidence == pytest.approx(16 / 18)
        assert result.extracted == "9876543219"


class TestPhoneNotFound:
    def test_different_number(self) -> None:
        result = match_phone("9876543210", "Mobile: 9123456780")
        assert result.found is False
        assert result.confidence == 0.0
        assert result.extracted is None

    def test_no_numbers_in_text(self) -> None:
        result = match_phone("9876543210", "GOVERNMENT OF INDIA")
        assert result.found is False

    def test_empty_declared_phone(self) -> None:
        result = match_phone("", "Mobile: 9876543210")
        assert result.found is False
        assert result.confidence == 0.0

    def test_id_number_is_not_a_phone(self) -> None:
        result = match_phone("9876543210", "1234 5678 9012")
        assert result.found is False
