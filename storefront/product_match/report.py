"""
Report Generator - Format ranked results for human consumption.

Produces console output and CSV export for search results.
"""

import csv
import io
from datetime import datetime
from typing import TextIO

from .models import MatchResult, PartSearchResult
from .matcher import customer_view


def summarize_results(results: list[MatchResult]) -> dict:
    """Summary statistics for a ranked result list."""
    scores = [r.score for r in results]
    return {
        "total": len(results),
        "top_score": max(scores) if scores else 0,
        "brands": len({r.record.brand for r in results if r.record.brand}),
    }


def format_console(results: list[MatchResult], query: str = "") -> str:
    """
    Format ranked results for console display.

    Args:
        results: Ranked match results, best first
        query: The query, shown in the header when given

    Returns:
        Formatted string for console output
    """
    if not results:
        return "No matching products.\n"

    lines = []
    if query:
        lines.append(f"\nRESULTS FOR: {query}")
    lines.append("=" * 70)
    lines.append(f"{'#':>3} {'SCORE':>5}  {'PART NUMBER':<18} {'NAME':<28} {'BRAND':<12}")
    lines.append("-" * 70)

    for rank, r in enumerate(results, start=1):
        rec = r.record
        lines.append(
            f"{rank:>3} {r.score:>5}  {(rec.part_number or '')[:18]:<18} {(rec.name or '')[:28]:<28} {(rec.brand or '')[:12]:<12}"
        )

    summary = summarize_results(results)
    lines.append("\n" + "=" * 70)
    lines.append("SUMMARY")
    lines.append(f"  Matches:   {summary['total']}")
    lines.append(f"  Top score: {summary['top_score']}")
    lines.append(f"  Brands:    {summary['brands']}")
    lines.append("=" * 70)

    return "\n".join(lines)


def format_part_result(result: PartSearchResult) -> str:
    """One-block console rendering of a customer part search."""
    message, show_product, show_price = customer_view(result)

    lines = [f"STATUS: {result.status.value}"]
    if result.normalized_query:
        lines.append(f"  Normalized: {result.normalized_query}")
    if show_product and result.record is not None:
        rec = result.record
        lines.append(f"  Product:    {rec.part_number or ''} - {rec.name or ''}")
        if show_price and rec.price is not None:
            lines.append(f"  Price:      {rec.price}")
    if message:
        lines.append(f"  Message:    {message}")

    return "\n".join(lines)


def export_csv(results: list[MatchResult], output: TextIO | None = None) -> str:
    """
    Export ranked results to CSV format.

    Args:
        results: Ranked match results
        output: Optional file handle to write to

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(["rank", "score", "id", "part_number", "name", "brand", "category"])

    for rank, result in enumerate(results, start=1):
        rec = result.record
        writer.writerow([
            rank,
            result.score,
            rec.id,
            rec.part_number or "",
            rec.name or "",
            rec.brand or "",
            rec.category or "",
        ])

    csv_content = buffer.getvalue()

    if output:
        output.write(csv_content)

    return csv_content


def generate_report_filename(query: str | None = None, extension: str = "csv") -> str:
    """
    Generate a filename for the report.

    Returns:
        Filename like "product_match_90915YZZD4_2026-01-08.csv"
    """
    date_str = datetime.now().strftime("%Y-%m-%d")
    slug = "".join(c for c in (query or "") if c.isalnum())[:30]
    if slug:
        return f"product_match_{slug}_{date_str}.{extension}"
    return f"product_match_{date_str}.{extension}"
