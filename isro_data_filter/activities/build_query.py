"""Query construction: filter state → WFS spatial query.

Validates the current ``FilterStateStore`` and builds a polygon-intersects
query over the selected products' feature types.

Validation is deliberately shallow:
- every coordinate field must be non-empty;
- at least one product must be selected.

Numeric ranges are not checked; out-of-range degrees are passed to the
service as typed.  The function is pure: unchanged state always yields
an identical query.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isro_data_filter.core.constants import COORDINATE_FIELDS
from isro_data_filter.core.exceptions import ValidationError
from isro_data_filter.models.query import SpatialQuery

if TYPE_CHECKING:
    from isro_data_filter.models.filter_state import FilterStateStore

logger = logging.getLogger("isro_data_filter.activities.build_query")

AOI_INCOMPLETE = "AOI incomplete"
NO_PRODUCT_SELECTED = "no product selected"


class QueryValidationError(ValidationError):
    """Raised when the filter state cannot be turned into a query."""

    default_stage = "build_query"


def build_query(state: FilterStateStore) -> SpatialQuery:
    """Build the spatial query for the current filter state.

    Args:
        state: The current AOI fields and product selection.

    Returns:
        An immutable ``SpatialQuery``.

    Raises:
        QueryValidationError: If any coordinate field is empty
            (``"AOI incomplete"``) or no product is selected
            (``"no product selected"``).
    """
    fields = {name: state.field(name).strip() for name in COORDINATE_FIELDS}
    if not all(fields.values()):
        raise QueryValidationError(
            AOI_INCOMPLETE,
            code="AOI_INCOMPLETE",
            user_message="Please provide all coordinate values for the area of interest.",
        )

    products = state.selected_products()
    if not products:
        raise QueryValidationError(
            NO_PRODUCT_SELECTED,
            code="NO_PRODUCT_SELECTED",
            user_message="Please select at least one data product.",
        )

    query = SpatialQuery(
        geometry_wkt=rectangle_wkt(**fields),
        type_names=tuple(p.type_name for p in products),
    )
    logger.debug("Query built | typeName=%s | geometry=%s", query.type_name, query.geometry_wkt)
    return query


def rectangle_wkt(*, top: str, bottom: str, left: str, right: str) -> str:
    """Return a closed rectangular WKT polygon from edge values.

    Ring order: (left, bottom) → (right, bottom) → (right, top) →
    (left, top) → (left, bottom).  Coordinates are ``lon lat``.
    """
    ring = [
        (left, bottom),
        (right, bottom),
        (right, top),
        (left, top),
        (left, bottom),
    ]
    return "POLYGON((" + ", ".join(f"{lon} {lat}" for lon, lat in ring) + "))"
