"""
Tests for part number normalization.

Run with: pytest storefront/product_match/tests/test_part_numbers.py -v
"""

import pytest

from storefront.product_match.models import CatalogRecord
from storefront.product_match.part_numbers import (
    INVALID_PART_NUMBER_MESSAGE,
    extract_numeric_core,
    is_part_query,
    normalize_part_number,
    normalize_part_number_raw,
    record_part_forms,
    validate_part_number_input,
    with_part_cache,
)


class TestNormalizePartNumberRaw:

    def test_hyphen_stripped(self):
        assert normalize_part_number_raw("90915-YZZD4") == "90915YZZD4"

    def test_case_and_separators(self):
        assert normalize_part_number_raw(" ab-12_34 ") == "AB1234"
        assert normalize_part_number_raw("90915 yzzd4") == "90915YZZD4"
        assert normalize_part_number_raw("04465.33450/A") == "0446533450A"

    def test_arabic_indic_digits_folded(self):
        assert normalize_part_number_raw("٩٠٩١٥-yz") == "90915YZ"
        assert normalize_part_number_raw("۱۲۳") == "123"

    @pytest.mark.parametrize("raw", ["", None, "---", "فلتر"])
    def test_garbage_gives_empty(self, raw):
        assert normalize_part_number_raw(raw) == ""


class TestExtractNumericCore:

    def test_letters_dropped(self):
        assert extract_numeric_core("90915-YZZD4") == "909154"
        assert extract_numeric_core("MG-10045") == "10045"

    def test_leading_zeros_kept(self):
        assert extract_numeric_core("04465-33450") == "0446533450"

    def test_arabic_indic_digits(self):
        assert extract_numeric_core("رقم ٥٥٥١٢") == "55512"

    @pytest.mark.parametrize("raw", ["", None, "ABC-XYZ"])
    def test_no_digits(self, raw):
        assert extract_numeric_core(raw) == ""


class TestNormalizePartNumber:

    def test_valid(self):
        assert normalize_part_number("  mg-10045 ") == "MG10045"

    @pytest.mark.parametrize("raw", ["", "   ", None, "A", "-7-"])
    def test_too_short_or_blank(self, raw):
        assert normalize_part_number(raw) is None

    def test_validation_ok(self):
        result = validate_part_number_input("90915-YZZD4")
        assert result.is_valid
        assert result.normalized == "90915YZZD4"
        assert result.error is None

    def test_validation_error_message(self):
        result = validate_part_number_input(" ")
        assert not result.is_valid
        assert result.normalized is None
        assert result.error == INVALID_PART_NUMBER_MESSAGE


class TestIsPartQuery:

    def test_ascii_digits(self):
        assert is_part_query("brake 123")

    def test_arabic_indic_digits(self):
        assert is_part_query("فلتر ٣")

    def test_text_only(self):
        assert not is_part_query("فلتر زيت")
        assert not is_part_query("")


class TestPartCache:

    def test_forms_computed_when_absent(self, oil_filter):
        assert record_part_forms(oil_filter) == ("90915YZZD4", "909154")

    def test_cached_forms_used(self):
        record = CatalogRecord(
            id="c1", part_number="90915-YZZD4", name="x",
            normalized_part_number="CACHED", numeric_part_core="42",
        )
        assert record_part_forms(record) == ("CACHED", "42")

    def test_empty_cache_recomputed(self):
        record = CatalogRecord(
            id="c1", part_number="MG-10045", name="x",
            normalized_part_number="", numeric_part_core="",
        )
        assert record_part_forms(record) == ("MG10045", "10045")

    def test_with_part_cache_returns_copy(self, oil_filter):
        cached = with_part_cache(oil_filter)

        assert cached is not oil_filter
        assert cached.normalized_part_number == "90915YZZD4"
        assert cached.numeric_part_core == "909154"
        assert oil_filter.normalized_part_number is None
        assert cached.id == oil_filter.id
