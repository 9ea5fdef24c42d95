"""
Adapters - Bridge to catalog sources and missing-part sinks.

The adapter pattern lets us swap implementations (in-memory for testing,
files or the storefront API in production) without changing matcher logic.
"""

import csv
import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path

from .catalog_loader import load_catalog_xlsx, parse_decimal
from .models import CatalogRecord, MissingPartEvent


class CatalogAdapter(ABC):
    """
    Abstract interface for catalog data access.

    The matcher doesn't know or care where the records actually live.
    """

    @abstractmethod
    def get_catalog(self) -> list[CatalogRecord]:
        """Fetch every catalog record, in catalog order."""
        pass


class FileCatalogAdapter(CatalogAdapter):
    """
    Loads the catalog from a CSV, JSON or XLSX file.

    CSV format expected:
        id,part_number,name,brand,category,description,qty_total,price
        p1,90915-YZZD4,فلتر زيت,Toyota,Filters,,12,35.00

    JSON format expected:
        [{"id": "p1", "part_number": "90915-YZZD4", "name": "...", ...}, ...]
    """

    def __init__(self, data_path: str | Path):
        self._data_path = Path(data_path)
        self._records: list[CatalogRecord] = []
        self._load_data()

    def _load_data(self):
        if not self._data_path.exists():
            raise FileNotFoundError(f"Catalog data file not found: {self._data_path}")

        suffix = self._data_path.suffix.lower()
        if suffix == ".csv":
            self._load_csv()
        elif suffix == ".json":
            self._load_json()
        elif suffix == ".xlsx":
            self._records = load_catalog_xlsx([self._data_path])
        else:
            raise ValueError(f"Unsupported file format: {suffix}")

    def _load_csv(self):
        with open(self._data_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                record = self._parse_row(row)
                if record:
                    self._records.append(record)

    def _load_json(self):
        with open(self._data_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        for row in data:
            record = self._parse_row(row)
            if record:
                self._records.append(record)

    def _parse_row(self, row: dict) -> CatalogRecord | None:
        """Parse a row dict into CatalogRecord; rows without id or part number are skipped."""
        record_id = row.get("id")
        part_number = row.get("part_number")
        if not record_id or not part_number:
            return None

        return CatalogRecord(
            id=str(record_id).strip(),
            part_number=str(part_number).strip(),
            name=str(row.get("name") or "").strip(),
            brand=str(row.get("brand") or "").strip(),
            category=str(row.get("category") or "").strip() or None,
            description=str(row.get("description") or "").strip() or None,
            qty_total=parse_decimal(row.get("qty_total")),
            stock=parse_decimal(row.get("stock")),
            price=parse_decimal(row.get("price")),
        )

    def get_catalog(self) -> list[CatalogRecord]:
        return list(self._records)


class InMemoryCatalogAdapter(CatalogAdapter):
    """In-memory adapter for programmatic test setup."""

    def __init__(self, records: list[CatalogRecord] | None = None):
        self._records = list(records or [])

    def add_record(self, record: CatalogRecord):
        self._records.append(record)

    def clear(self):
        self._records = []

    def get_catalog(self) -> list[CatalogRecord]:
        return list(self._records)


class MissingPartRecorder(ABC):
    """Sink for parts customers searched for but could not buy."""

    @abstractmethod
    def record(self, event: MissingPartEvent) -> None:
        pass


class InMemoryMissingPartRecorder(MissingPartRecorder):
    """Keeps events in a list. Useful for unit tests."""

    def __init__(self):
        self.events: list[MissingPartEvent] = []

    def record(self, event: MissingPartEvent) -> None:
        self.events.append(event)


class JsonlMissingPartRecorder(MissingPartRecorder):
    """Appends each event as one JSON object per line."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    def record(self, event: MissingPartEvent) -> None:
        line = json.dumps(event.to_dict(), ensure_ascii=False)
        with self._lock:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

    def read_events(self) -> list[dict]:
        """All recorded events as dicts, oldest first."""
        if not self._path.exists():
            return []
        with open(self._path, "r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
