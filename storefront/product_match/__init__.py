# Product Match: ranks storefront catalog products for free-text and part number queries
# Pure functions over (query, catalog) - no I/O outside the loaders and adapters

from .models import (
    CatalogRecord,
    MatchResult,
    PartLookupStatus,
    PartLookupResult,
    PartSearchResult,
    SearchContext,
    SearchSource,
    MissingPartEvent,
    create_search_context,
)
from .config import load_config, Config, SearchSettings, VisibilitySettings
from .text import normalize, tokenize
from .distance import levenshtein
from .part_numbers import (
    normalize_part_number_raw,
    extract_numeric_core,
    normalize_part_number,
    validate_part_number_input,
    with_part_cache,
)
from .scoring import score_match
from .matcher import (
    search_products,
    rank_products,
    find_part,
    handle_part_search,
    filter_products_for_customer,
    customer_view,
)
from .catalog_loader import load_catalog_xlsx
from .adapters import (
    CatalogAdapter,
    FileCatalogAdapter,
    InMemoryCatalogAdapter,
    MissingPartRecorder,
    InMemoryMissingPartRecorder,
    JsonlMissingPartRecorder,
)
from .report import format_console, export_csv

__version__ = "1.0.0"

__all__ = [
    # Models
    "CatalogRecord",
    "MatchResult",
    "PartLookupStatus",
    "PartLookupResult",
    "PartSearchResult",
    "SearchContext",
    "create_search_context",
    "SearchSource",
    "MissingPartEvent",
    # Config
    "Config",
    "SearchSettings",
    "VisibilitySettings",
    "load_config",
    # Text
    "normalize",
    "tokenize",
    "levenshtein",
    "score_match",
    # Part numbers
    "normalize_part_number_raw",
    "extract_numeric_core",
    "normalize_part_number",
    "validate_part_number_input",
    "with_part_cache",
    # Matcher
    "search_products",
    "rank_products",
    "find_part",
    "handle_part_search",
    "filter_products_for_customer",
    "customer_view",
    # Catalog sources
    "load_catalog_xlsx",
    "CatalogAdapter",
    "FileCatalogAdapter",
    "InMemoryCatalogAdapter",
    "MissingPartRecorder",
    "InMemoryMissingPartRecorder",
    "JsonlMissingPartRecorder",
    # Report
    "format_console",
    "export_csv",
]
