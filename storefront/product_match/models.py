"""
Data models for Product Match.

All structured data uses dataclasses for type hints, __eq__, and __repr__.
Quantities and prices use Decimal for precision.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class CatalogRecord:
    """
    A single product from the storefront catalog.

    Records are owned by the caller. The engine only reads them; the two
    cache fields are filled by the caller (see part_numbers.with_part_cache).
    """
    id: str
    part_number: str            # Raw part number as imported ("رقم الصنف")
    name: str                   # Display name ("اسم الصنف")
    brand: str = ""
    category: Optional[str] = None
    description: Optional[str] = None
    qty_total: Optional[Decimal] = None
    stock: Optional[Decimal] = None  # Legacy quantity field
    price: Optional[Decimal] = None

    # Read-through caches, never required for correctness
    normalized_part_number: Optional[str] = None
    numeric_part_core: Optional[str] = None

    @property
    def quantity(self) -> Decimal:
        """Visible quantity: qty_total, then legacy stock, then zero."""
        if self.qty_total is not None:
            return self.qty_total
        if self.stock is not None:
            return self.stock
        return Decimal("0")


@dataclass
class MatchResult:
    """A catalog record and the relevance score it earned for one query."""
    record: CatalogRecord
    score: int


class PartLookupStatus(Enum):
    """Outcome of looking up a single part number."""
    NOT_FOUND = "NOT_FOUND"
    FOUND_OUT_OF_STOCK = "FOUND_OUT_OF_STOCK"
    FOUND_AVAILABLE = "FOUND_AVAILABLE"


class SearchSource(Enum):
    """Where in the storefront a part search was started."""
    HERO_SEARCH = "heroSearch"
    CATALOG_SEARCH = "catalogSearch"
    QUOTE_REQUEST = "quoteRequest"


class AvailabilityStatus(Enum):
    """Why a searched part could not be bought."""
    NOT_FOUND = "not_found"
    OUT_OF_STOCK = "out_of_stock"


@dataclass
class PartValidation:
    is_valid: bool
    normalized: Optional[str] = None
    error: Optional[str] = None


@dataclass
class PartLookupResult:
    """Best catalog hit for a part number, if any."""
    status: PartLookupStatus
    normalized_query: str
    record: Optional[CatalogRecord] = None


@dataclass
class PartSearchResult:
    """
    Customer-facing outcome of a part search.

    Adds the message to show and whether the price may be displayed.
    """
    status: PartLookupStatus
    message: str
    show_price: bool
    normalized_query: Optional[str] = None
    record: Optional[CatalogRecord] = None


@dataclass
class SearchContext:
    """Who is searching. All fields are optional for anonymous visitors."""
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    car_info: Optional[str] = None
    branch_id: Optional[str] = None


def create_search_context(user: Optional[dict] = None) -> SearchContext:
    """
    Build the search context for a signed-in user, or an anonymous one.

    `user` is a user record mapping with optional `id`, `name`, `branch_id`
    (or `branchId`) and `car_info` keys. Blank ids count as anonymous.
    """
    if not user:
        return SearchContext()
    return SearchContext(
        customer_id=user.get("id") or None,
        customer_name=user.get("name"),
        car_info=user.get("car_info"),
        branch_id=user.get("branch_id", user.get("branchId")),
    )


@dataclass
class MissingPartEvent:
    """A part a customer searched for and could not buy."""
    part_number: str
    normalized_part_number: str
    availability: AvailabilityStatus
    source: SearchSource
    context: SearchContext
    record_id: Optional[str] = None
    record_name: Optional[str] = None
    brand: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "part_number": self.part_number,
            "normalized_part_number": self.normalized_part_number,
            "availability_status": self.availability.value,
            "search_source": self.source.value,
            "customer_id": self.context.customer_id,
            "customer_name": self.context.customer_name,
            "car_info": self.context.car_info,
            "branch_id": self.context.branch_id,
            "product_id": self.record_id,
            "product_name": self.record_name,
            "brand": self.brand,
        }
