"""
Configuration for Product Match.

Holds the result floor and the stock visibility rules.
Config is declarative JSON - edit the file, not the code.
"""

import json
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_PATH = Path(__file__).parent / "search_config.json"


@dataclass
class SearchSettings:
    """Settings for free-text/part-number ranking."""
    min_score: int = 3
    result_limit: Optional[int] = None  # None = return every match


@dataclass
class VisibilitySettings:
    """Stock rules applied when showing a looked-up part to customers."""
    min_visible_qty: Decimal = Decimal("1")   # Below this a product is hidden
    stock_threshold: Decimal = Decimal("0")   # At or below this it is "out of stock"


@dataclass
class Config:
    """Full configuration for product match."""
    search: SearchSettings = field(default_factory=SearchSettings)
    visibility: VisibilitySettings = field(default_factory=VisibilitySettings)


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to search_config.json

    Returns:
        Config object; keys missing from the file keep their defaults
    """
    path = Path(config_path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    search_data = data.get("search", {})
    limit = search_data.get("result_limit")
    search = SearchSettings(
        min_score=int(search_data.get("min_score", 3)),
        result_limit=int(limit) if limit is not None else None,
    )
    if search.min_score < 0:
        raise ValueError(f"min_score must be >= 0, got {search.min_score}")

    visibility_data = data.get("visibility", {})
    visibility = VisibilitySettings(
        min_visible_qty=Decimal(str(visibility_data.get("min_visible_qty", 1))),
        stock_threshold=Decimal(str(visibility_data.get("stock_threshold", 0))),
    )

    return Config(search=search, visibility=visibility)
