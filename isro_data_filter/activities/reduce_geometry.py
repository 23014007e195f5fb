"""Geometry reduction: drawn polygon vertices → bounding box.

The reduction is an axis-aligned bounding box over all vertices, so it
is independent of vertex order and polygon concavity.  Degenerate input
(collinear or coincident points) passes through as a zero-height or
zero-width box.

Fewer than three points is not an error: the polygon is simply not
closed yet, and the reducer returns ``None``.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from isro_data_filter.core.constants import MIN_POINTS_FOR_AREA
from isro_data_filter.models.aoi import BoundingBox

if TYPE_CHECKING:
    from collections.abc import Sequence

    from isro_data_filter.models.aoi import Point2D

logger = logging.getLogger("isro_data_filter.activities.reduce_geometry")


def reduce_points(points: Sequence[Point2D]) -> BoundingBox | None:
    """Reduce drawn points to their bounding box.

    Points with a non-finite latitude or longitude (positions the map
    could not resolve) are skipped.

    Args:
        points: Polygon vertices in degrees.

    Returns:
        The bounding box, or ``None`` when fewer than three usable points
        have been drawn.
    """
    usable = [
        p for p in points if math.isfinite(p.latitude) and math.isfinite(p.longitude)
    ]
    if len(usable) != len(points):
        logger.debug("Skipped unresolved points | skipped=%d", len(points) - len(usable))
    if len(usable) < MIN_POINTS_FOR_AREA:
        return None

    from shapely.geometry import MultiPoint

    min_lon, min_lat, max_lon, max_lat = MultiPoint(
        [(p.longitude, p.latitude) for p in usable]
    ).bounds

    box = BoundingBox(top=max_lat, bottom=min_lat, left=min_lon, right=max_lon)
    logger.debug(
        "AOI reduced | points=%d | top=%.6f | bottom=%.6f | left=%.6f | right=%.6f",
        len(usable),
        box.top,
        box.bottom,
        box.left,
        box.right,
    )
    return box
