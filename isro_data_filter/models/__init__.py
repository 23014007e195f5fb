"""Data models.

Defines the data structures used throughout the filter:
- Point2D, BoundingBox: AOI geometry in degrees
- Product: The fixed set of queryable data products
- FilterStateStore: Current AOI text fields and product selection
- SpatialQuery: A built WFS spatial query
- LoadableLayerRecord: A query result ready for the host catalog
"""

from isro_data_filter.models.aoi import (
    BoundingBox,
    Point2D,
    point_from_cartesian,
    points_from_cartesian,
)
from isro_data_filter.models.filter_state import FilterStateStore
from isro_data_filter.models.layer import LayerKind, LoadableLayerRecord
from isro_data_filter.models.products import Product
from isro_data_filter.models.query import ModelValidationError, ProviderConfig, SpatialQuery

__all__ = [
    "BoundingBox",
    "FilterStateStore",
    "LayerKind",
    "LoadableLayerRecord",
    "ModelValidationError",
    "Point2D",
    "Product",
    "ProviderConfig",
    "SpatialQuery",
    "point_from_cartesian",
    "points_from_cartesian",
]
