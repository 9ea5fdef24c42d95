"""
Product Matcher - Core search engine.

Ranks catalog records for a shopper's query by combining two signals:
1. Part number evidence - only when the query contains digits
2. Free-text evidence - name, brand, category and description

Part number tiers (first match wins):
| Condition                                         | Points |
|---------------------------------------------------|--------|
| normalized part == normalized query               | 15     |
| numeric cores equal, query core longer than 3     | 10     |
| one numeric core contains the other               | 6 / 3 / 0 by query core length (>4 / >2 / else) |
| normalized part contains normalized query         | 4      |

Records scoring below the floor (3) are dropped; the rest are sorted by
score with ties kept in catalog order.
"""

import logging
from typing import Iterable, Optional

from .config import VisibilitySettings
from .models import (
    AvailabilityStatus,
    CatalogRecord,
    MatchResult,
    MissingPartEvent,
    PartLookupResult,
    PartLookupStatus,
    PartSearchResult,
    SearchContext,
    SearchSource,
)
from .part_numbers import (
    extract_numeric_core,
    is_part_query,
    normalize_part_number,
    normalize_part_number_raw,
    record_part_forms,
    validate_part_number_input,
)
from .scoring import score_match

logger = logging.getLogger(__name__)

MIN_SCORE = 3

# Normalized queries this short are stray digits, not part numbers
MIN_PART_QUERY_LENGTH = 3

EXACT_PART_SCORE = 15
CORE_PART_SCORE = 10
LONG_CORE_OVERLAP_SCORE = 6
SHORT_CORE_OVERLAP_SCORE = 3
PART_CONTAINS_SCORE = 4

# Part lookup scores (0-100) and the minimum for a hit
LOOKUP_EXACT = 100
LOOKUP_CORE = 80
LOOKUP_CONTAINS = 50
LOOKUP_CORE_OVERLAP = 40
LOOKUP_MIN_SCORE = 50

NOT_FOUND_MESSAGE = "القطعة غير متوفرة حاليًا."
OUT_OF_STOCK_MESSAGE = "الكمية نفذت حاليًا من هذه القطعة."
UNEXPECTED_MESSAGE = "حدث خطأ غير متوقع."


def _overlaps(a: str, b: str) -> bool:
    """Non-empty strings where one contains the other."""
    if not a or not b:
        return False
    return a in b or b in a


def part_number_score(query_clean: str, query_numeric: str, record: CatalogRecord) -> int:
    """Points a record earns from part number evidence alone."""
    normalized, numeric = record_part_forms(record)

    if normalized == query_clean:
        return EXACT_PART_SCORE
    if numeric == query_numeric and len(query_numeric) > 3:
        return CORE_PART_SCORE
    if _overlaps(numeric, query_numeric):
        if len(query_numeric) > 4:
            return LONG_CORE_OVERLAP_SCORE
        if len(query_numeric) > 2:
            return SHORT_CORE_OVERLAP_SCORE
        return 0
    if query_clean and query_clean in normalized:
        return PART_CONTAINS_SCORE
    return 0


def record_search_text(record: CatalogRecord) -> str:
    """Text the free-text scorer sees for a record."""
    return " ".join([
        record.name or "",
        record.brand or "",
        record.category or "",
        record.description or "",
    ])


def rank_products(
    query: str,
    catalog: Iterable[CatalogRecord],
    min_score: int = MIN_SCORE,
    limit: Optional[int] = None,
) -> list[MatchResult]:
    """
    Score every record for the query and return the ranked matches.

    Args:
        query: Raw shopper input (text, part number, or both)
        catalog: Records to rank; never modified
        min_score: Records below this score are dropped (zero always is)
        limit: Optional cap on the number of results

    Returns:
        MatchResult list, highest score first, ties in catalog order
    """
    if not query or not query.strip():
        return []

    query_clean = ""
    query_numeric = ""
    if is_part_query(query):
        query_clean = normalize_part_number_raw(query)
        query_numeric = extract_numeric_core(query)
    use_part_number = len(query_clean) >= MIN_PART_QUERY_LENGTH

    results = []
    scanned = 0
    for record in catalog:
        scanned += 1
        score = 0
        if use_part_number:
            score += part_number_score(query_clean, query_numeric, record)
        score += score_match(query, record_search_text(record))

        if score > 0 and score >= min_score:
            results.append(MatchResult(record=record, score=score))

    # list.sort is stable, also with reverse=True
    results.sort(key=lambda r: r.score, reverse=True)
    if limit is not None:
        results = results[:limit]

    logger.debug(
        "Query %r matched %d of %d records (part search: %s)",
        query, len(results), scanned, use_part_number,
    )
    return results


def search_products(query: str, catalog: Iterable[CatalogRecord]) -> list[CatalogRecord]:
    """Records relevant to the query, most relevant first."""
    return [r.record for r in rank_products(query, catalog)]


def filter_products_for_customer(
    catalog: Iterable[CatalogRecord],
    visibility: VisibilitySettings,
) -> list[CatalogRecord]:
    """Records with enough stock to be shown to customers."""
    return [r for r in catalog if r.quantity >= visibility.min_visible_qty]


def _lookup_score(normalized_query: str, numeric_query: str, record: CatalogRecord) -> int:
    normalized, numeric = record_part_forms(record)

    if normalized == normalized_query:
        return LOOKUP_EXACT
    if numeric == numeric_query and len(numeric_query) > 3:
        return LOOKUP_CORE
    if _overlaps(normalized, normalized_query):
        return LOOKUP_CONTAINS
    if _overlaps(numeric, numeric_query) and len(numeric_query) > 4:
        return LOOKUP_CORE_OVERLAP
    return 0


def find_part(
    part_number: str,
    catalog: Iterable[CatalogRecord],
    visibility: VisibilitySettings,
    apply_visibility_filter: bool = True,
) -> PartLookupResult:
    """
    Find the single best catalog record for a part number.

    The first record with the highest score wins; an exact match stops
    the scan. Hits below LOOKUP_MIN_SCORE count as not found.
    """
    normalized = normalize_part_number(part_number)
    if normalized is None:
        return PartLookupResult(status=PartLookupStatus.NOT_FOUND, normalized_query=part_number or "")

    numeric = extract_numeric_core(normalized)

    best_match = None
    best_score = 0
    for record in catalog:
        if apply_visibility_filter and record.quantity < visibility.min_visible_qty:
            continue

        score = _lookup_score(normalized, numeric, record)
        if score > best_score:
            best_score = score
            best_match = record
        if score == LOOKUP_EXACT:
            break

    if best_match is None or best_score < LOOKUP_MIN_SCORE:
        return PartLookupResult(status=PartLookupStatus.NOT_FOUND, normalized_query=normalized)

    if best_match.quantity <= visibility.stock_threshold:
        status = PartLookupStatus.FOUND_OUT_OF_STOCK
    else:
        status = PartLookupStatus.FOUND_AVAILABLE

    return PartLookupResult(status=status, normalized_query=normalized, record=best_match)


def _record_missing(recorder, event: MissingPartEvent) -> None:
    """Hand a missing-part event to the recorder; failures are only logged."""
    if recorder is None:
        return
    try:
        recorder.record(event)
    except Exception:
        logger.exception(
            "Failed to record missing part %s (%s)",
            event.part_number, event.availability.value,
        )


def handle_part_search(
    part_number_input: str,
    context: SearchContext,
    catalog: Iterable[CatalogRecord],
    visibility: VisibilitySettings,
    recorder=None,
    source: SearchSource = SearchSource.HERO_SEARCH,
) -> PartSearchResult:
    """
    Run a customer part search and decide what to show.

    Not found and out of stock outcomes are reported to the recorder
    (a MissingPartRecorder) so purchasing can follow up.
    """
    validation = validate_part_number_input(part_number_input)
    if not validation.is_valid:
        return PartSearchResult(
            status=PartLookupStatus.NOT_FOUND,
            message=validation.error,
            show_price=False,
        )

    result = find_part(part_number_input, catalog, visibility)

    if result.status == PartLookupStatus.NOT_FOUND:
        query = result.normalized_query or part_number_input
        _record_missing(recorder, MissingPartEvent(
            part_number=query,
            normalized_part_number=normalize_part_number(query) or query,
            availability=AvailabilityStatus.NOT_FOUND,
            source=source,
            context=context,
        ))
        return PartSearchResult(
            status=PartLookupStatus.NOT_FOUND,
            message=NOT_FOUND_MESSAGE,
            show_price=False,
            normalized_query=result.normalized_query,
        )

    if result.status == PartLookupStatus.FOUND_OUT_OF_STOCK:
        record = result.record
        _record_missing(recorder, MissingPartEvent(
            part_number=record.part_number,
            normalized_part_number=result.normalized_query or normalize_part_number_raw(record.part_number),
            availability=AvailabilityStatus.OUT_OF_STOCK,
            source=source,
            context=context,
            record_id=record.id,
            record_name=record.name,
            brand=record.brand,
        ))
        return PartSearchResult(
            status=PartLookupStatus.FOUND_OUT_OF_STOCK,
            message=OUT_OF_STOCK_MESSAGE,
            show_price=False,
            normalized_query=result.normalized_query,
            record=record,
        )

    return PartSearchResult(
        status=PartLookupStatus.FOUND_AVAILABLE,
        message="",
        show_price=True,
        normalized_query=result.normalized_query,
        record=result.record,
    )


def customer_view(result: PartSearchResult) -> tuple[str, bool, bool]:
    """(message, show_product, show_price) for rendering a part search result."""
    if result.status == PartLookupStatus.NOT_FOUND:
        return result.message, False, False
    if result.status == PartLookupStatus.FOUND_OUT_OF_STOCK:
        return result.message, True, False
    if result.status == PartLookupStatus.FOUND_AVAILABLE:
        return "", True, True
    return UNEXPECTED_MESSAGE, False, False
