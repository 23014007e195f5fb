"""Shared pytest fixtures for the ISRO Data Filter test suite."""

from __future__ import annotations

import pytest

from isro_data_filter.models.aoi import Point2D
from isro_data_filter.models.filter_state import FilterStateStore
from isro_data_filter.models.products import Product

# ---------------------------------------------------------------------------
# Drawn points
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_points() -> list[Point2D]:
    """Four corners of a 10° square, as (lat, lon) 10..20."""
    return [
        Point2D(latitude=10.0, longitude=10.0),
        Point2D(latitude=10.0, longitude=20.0),
        Point2D(latitude=20.0, longitude=20.0),
        Point2D(latitude=20.0, longitude=10.0),
    ]


# ---------------------------------------------------------------------------
# Filter state
# ---------------------------------------------------------------------------


@pytest.fixture()
def paris_state() -> FilterStateStore:
    """Complete AOI over central Paris with tmc1 and ohrc selected."""
    state = FilterStateStore(selected=[Product.TMC1, Product.OHRC])
    state.set_field("top", "48.9")
    state.set_field("bottom", "48.8")
    state.set_field("left", "2.33")
    state.set_field("right", "2.35")
    return state


@pytest.fixture()
def empty_collection() -> dict[str, object]:
    """An empty GeoJSON FeatureCollection."""
    return {"type": "FeatureCollection", "features": []}
