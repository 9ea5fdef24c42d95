"""
Tests for report generation.

Run with: pytest storefront/product_match/tests/test_report.py -v
"""

import csv
import io
import re

from storefront.product_match.matcher import rank_products
from storefront.product_match.models import CatalogRecord, MatchResult, PartLookupStatus, PartSearchResult
from storefront.product_match.report import (
    export_csv,
    format_console,
    format_part_result,
    generate_report_filename,
    summarize_results,
)


class TestFormatConsole:

    def test_empty(self):
        assert format_console([]) == "No matching products.\n"

    def test_lists_ranked_records(self, sample_catalog):
        results = rank_products("فلتر زيت", sample_catalog)
        output = format_console(results, query="فلتر زيت")

        assert "RESULTS FOR: فلتر زيت" in output
        assert "90915-YZZD4" in output
        assert "90915-10003" in output
        assert output.index("90915-YZZD4") < output.index("90915-10003")
        assert "Matches:   2" in output

    def test_summary(self, sample_catalog):
        results = rank_products("90915-YZZD4", sample_catalog)
        summary = summarize_results(results)
        assert summary["total"] == len(results)
        assert summary["top_score"] == 15
        assert summary["brands"] == 1

    def test_record_with_missing_fields(self):
        dirty = CatalogRecord(id="d", part_number=None, name=None, brand=None)
        output = format_console([MatchResult(record=dirty, score=5)])

        assert "Matches:   1" in output
        assert "Brands:    0" in output


class TestFormatPartResult:

    def test_available_shows_price(self, oil_filter):
        result = PartSearchResult(
            status=PartLookupStatus.FOUND_AVAILABLE, message="", show_price=True,
            normalized_query="90915YZZD4", record=oil_filter,
        )
        output = format_part_result(result)
        assert "FOUND_AVAILABLE" in output
        assert "Price:      35.00" in output

    def test_out_of_stock_hides_price(self, oil_filter):
        result = PartSearchResult(
            status=PartLookupStatus.FOUND_OUT_OF_STOCK, message="نفذت", show_price=False,
            record=oil_filter,
        )
        output = format_part_result(result)
        assert "90915-YZZD4" in output
        assert "Price" not in output
        assert "نفذت" in output

    def test_not_found(self):
        result = PartSearchResult(status=PartLookupStatus.NOT_FOUND, message="غير متوفرة", show_price=False)
        output = format_part_result(result)
        assert "Product" not in output
        assert "غير متوفرة" in output

    def test_record_with_missing_fields(self):
        dirty = CatalogRecord(id="d", part_number=None, name=None)
        result = PartSearchResult(
            status=PartLookupStatus.FOUND_AVAILABLE, message="", show_price=True, record=dirty,
        )
        assert "Product:     - " in format_part_result(result)


class TestExportCsv:

    def test_rows(self, sample_catalog):
        results = rank_products("فلتر زيت", sample_catalog)
        content = export_csv(results)

        rows = list(csv.reader(io.StringIO(content)))
        assert rows[0] == ["rank", "score", "id", "part_number", "name", "brand", "category"]
        assert rows[1] == ["1", "6", "p1", "90915-YZZD4", "فلتر زيت", "Toyota", "فلاتر"]
        assert rows[2][2] == "p2"
        assert rows[2][6] == ""

    def test_writes_to_output(self, sample_catalog):
        buffer = io.StringIO()
        content = export_csv(rank_products("spark", sample_catalog), output=buffer)
        assert buffer.getvalue() == content

    def test_record_with_missing_fields(self):
        dirty = CatalogRecord(id="d", part_number=None, name=None, brand=None)
        rows = list(csv.reader(io.StringIO(export_csv([MatchResult(record=dirty, score=4)]))))
        assert rows[1] == ["1", "4", "d", "", "", "", ""]

    def test_header_only_when_empty(self):
        assert export_csv([]).strip() == "rank,score,id,part_number,name,brand,category"


class TestGenerateReportFilename:

    def test_with_query(self):
        name = generate_report_filename("90915-YZZD4")
        assert re.fullmatch(r"product_match_90915YZZD4_\d{4}-\d{2}-\d{2}\.csv", name)

    def test_without_query(self):
        name = generate_report_filename(None, extension="txt")
        assert re.fullmatch(r"product_match_\d{4}-\d{2}-\d{2}\.txt", name)
