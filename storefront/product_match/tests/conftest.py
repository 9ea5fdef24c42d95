"""
Shared fixtures for the product match test suite.

Provides a small Toyota/MG/Changan parts catalog used across modules.
"""
from decimal import Decimal

import pytest

from storefront.product_match.models import CatalogRecord


@pytest.fixture
def oil_filter():
    return CatalogRecord(
        id="p1", part_number="90915-YZZD4", name="فلتر زيت", brand="Toyota",
        category="فلاتر", qty_total=Decimal("10"), price=Decimal("35.00"),
    )


@pytest.fixture
def oil_filter_alt():
    return CatalogRecord(
        id="p2", part_number="90915-10003", name="فلتر زيت", brand="Toyota",
        qty_total=Decimal("5"), price=Decimal("28.50"),
    )


@pytest.fixture
def brake_pads_ar():
    return CatalogRecord(
        id="p3", part_number="04465-33450", name="فحمات فرامل أمامية", brand="Toyota",
        category="فرامل", qty_total=Decimal("0"),
    )


@pytest.fixture
def brake_pads_en():
    return CatalogRecord(
        id="p4", part_number="MG-10045", name="Brake Pad Front", brand="MG",
        category="Brakes", description="Ceramic front brake pads", qty_total=Decimal("3"),
    )


@pytest.fixture
def spark_plug():
    return CatalogRecord(
        id="p5", part_number="CH-55512", name="Spark Plug", brand="Changan",
        stock=Decimal("20"),
    )


@pytest.fixture
def sample_catalog(oil_filter, oil_filter_alt, brake_pads_ar, brake_pads_en, spark_plug):
    return [oil_filter, oil_filter_alt, brake_pads_ar, brake_pads_en, spark_plug]
