"""
Catalog Loader - Parse product spreadsheet exports into CatalogRecords.

Exports come from the ERP with Arabic headers ("رقم الصنف", "اسم الصنف", ...)
or from hand-made sheets with English ones. Multiple files are merged into
a single catalog in file order.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from openpyxl import load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from .models import CatalogRecord

logger = logging.getLogger(__name__)

HEADER_ROW = 1

COLUMN_PATTERNS = {
    "id": ["ID", "Product ID", "id", "المعرف"],
    "part_number": ["رقم الصنف", "Part Number", "PartNumber", "part_number", "SKU"],
    "name": ["اسم الصنف", "اسم المنتج", "Name", "Product Name", "name"],
    "brand": ["الماركة", "Brand", "brand"],
    "category": ["التصنيف العالمي", "Category", "category"],
    "description": ["المواصفات", "Description", "description"],
    "qty_total": ["الإجمالي", "الكمية", "Quantity", "Qty", "qty_total"],
    "stock": ["Stock", "stock"],
    "price": ["سعر الجملة", "Price", "price"],
}

REQUIRED_COLUMNS = ["part_number", "name"]


def _find_column_index(headers: list, patterns: list[str]) -> Optional[int]:
    """Find column index matching any of the patterns (case-insensitive)."""
    for i, header in enumerate(headers):
        if header is None:
            continue
        header_lower = str(header).lower().strip()
        for pattern in patterns:
            if pattern.lower() == header_lower:
                return i
    return None


def parse_decimal(value) -> Optional[Decimal]:
    """Parse a quantity/price cell to Decimal, None if blank or unparseable."""
    if value is None:
        return None

    if isinstance(value, (int, float)):
        return Decimal(str(value))

    str_value = str(value).strip()
    if not str_value:
        return None

    str_value = re.sub(r"[$,\s]", "", str_value)
    try:
        return Decimal(str_value)
    except InvalidOperation:
        return None


def _cell_text(value) -> str:
    if value is None:
        return ""
    # Part numbers typed as numbers come back as int/float
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def load_catalog_xlsx(
    file_paths: list[str | Path],
    header_row: int = HEADER_ROW,
) -> list[CatalogRecord]:
    """
    Load catalog records from one or more XLSX exports.

    Args:
        file_paths: Paths to XLSX files
        header_row: Row number containing headers (1-indexed)

    Returns:
        List of CatalogRecord objects from all files
    """
    all_records = []

    for file_path in file_paths:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        records = _load_single_file(path, header_row)
        logger.debug("Loaded %d catalog records from %s", len(records), path)
        all_records.extend(records)

    return all_records


def _load_single_file(path: Path, header_row: int) -> list[CatalogRecord]:
    """Load records from the first sheet of a single XLSX file."""
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        sheet: Worksheet = workbook.worksheets[0]

        headers = [cell.value for cell in sheet[header_row]]

        col_idx = {}
        for field, patterns in COLUMN_PATTERNS.items():
            col_idx[field] = _find_column_index(headers, patterns)

        missing = [f for f in REQUIRED_COLUMNS if col_idx.get(f) is None]
        if missing:
            raise ValueError(f"Missing required columns in {path}: {missing}")

        records = []
        for row_num, row in enumerate(sheet.iter_rows(min_row=header_row + 1), start=header_row + 1):
            def get_val(field):
                idx = col_idx.get(field)
                if idx is None or idx >= len(row):
                    return None
                return row[idx].value

            part_number = _cell_text(get_val("part_number"))
            name = _cell_text(get_val("name"))
            if not part_number or not name:
                continue

            records.append(CatalogRecord(
                id=_cell_text(get_val("id")) or f"{path.stem}-{row_num}",
                part_number=part_number,
                name=name,
                brand=_cell_text(get_val("brand")),
                category=_cell_text(get_val("category")) or None,
                description=_cell_text(get_val("description")) or None,
                qty_total=parse_decimal(get_val("qty_total")),
                stock=parse_decimal(get_val("stock")),
                price=parse_decimal(get_val("price")),
            ))
    finally:
        workbook.close()

    return records
