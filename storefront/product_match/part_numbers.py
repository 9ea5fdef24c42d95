"""
Part number normalization.

Suppliers format the same part as "90915-YZZD4", "90915 YZZD4" or
"90915yzzd4". Two derived forms make those comparable:

- normalized: upper-case, separators stripped ("90915YZZD4")
- numeric core: digits only ("909154"), ignoring maker prefixes/suffixes
"""

import dataclasses
import re
from typing import Optional

from .models import CatalogRecord, PartValidation

# Arabic-Indic and Extended Arabic-Indic digits -> ASCII
_DIGIT_MAP = str.maketrans(
    "٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹",
    "01234567890123456789",
)

_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_PART_QUERY_RE = re.compile(r"[0-9٠-٩]")

MIN_PART_NUMBER_LENGTH = 2
INVALID_PART_NUMBER_MESSAGE = "الرجاء إدخال رقم القطعة بشكل صحيح."


def normalize_part_number_raw(raw: str) -> str:
    """Upper-case alphanumeric form of a part number; "" for empty input."""
    if not raw:
        return ""
    return _NON_ALNUM_RE.sub("", str(raw).translate(_DIGIT_MAP).upper())


def extract_numeric_core(raw: str) -> str:
    """All digits of a part number, in order; "" when there are none."""
    if not raw:
        return ""
    return _NON_DIGIT_RE.sub("", str(raw).translate(_DIGIT_MAP))


def normalize_part_number(raw: str) -> Optional[str]:
    """
    Normalize user input meant to be a part number.

    Returns None when the input is blank or too short to identify a part.
    """
    if not raw:
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None

    normalized = normalize_part_number_raw(trimmed)
    if len(normalized) < MIN_PART_NUMBER_LENGTH:
        return None
    return normalized


def validate_part_number_input(raw: str) -> PartValidation:
    normalized = normalize_part_number(raw)
    if normalized is None:
        return PartValidation(is_valid=False, error=INVALID_PART_NUMBER_MESSAGE)
    return PartValidation(is_valid=True, normalized=normalized)


def is_part_query(query: str) -> bool:
    """True if the query contains an ASCII or Arabic-Indic digit."""
    return bool(query) and _PART_QUERY_RE.search(query) is not None


def record_part_forms(record: CatalogRecord) -> tuple[str, str]:
    """
    (normalized, numeric core) for a record.

    Uses the record's cache fields when set, otherwise computes them.
    The record is left untouched.
    """
    normalized = record.normalized_part_number
    if normalized is None or normalized == "":
        normalized = normalize_part_number_raw(record.part_number)

    numeric = record.numeric_part_core
    if numeric is None or numeric == "":
        numeric = extract_numeric_core(record.part_number)

    return normalized, numeric


def with_part_cache(record: CatalogRecord) -> CatalogRecord:
    """Copy of the record with both part number cache fields filled in."""
    normalized, numeric = record_part_forms(record)
    return dataclasses.replace(
        record,
        normalized_part_number=normalized,
        numeric_part_core=numeric,
    )
