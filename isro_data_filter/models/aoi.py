"""Data models for an Area of Interest (AOI).

A drawn AOI starts life as a set of map-surface positions (Earth-centred,
Earth-fixed metres), which are projected onto the WGS 84 ellipsoid to
give ``Point2D`` values and then reduced to a ``BoundingBox``.

All angles are degrees.  Longitudes/latitudes are WGS 84 (EPSG:4326).
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from isro_data_filter.core.constants import COORDINATE_PRECISION

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pyproj import Transformer

# Geocentric (ECEF) and geographic 3D CRS used by the map surface.
ECEF_CRS = "EPSG:4978"
GEOGRAPHIC_3D_CRS = "EPSG:4979"


@dataclass(frozen=True, slots=True)
class Point2D:
    """A position on the ellipsoid in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned rectangle in latitude/longitude degrees.

    Reducer output always satisfies ``top >= bottom`` and
    ``right >= left``.  Boxes crossing the antimeridian are not wrapped.

    Attributes:
        top: Maximum latitude.
        bottom: Minimum latitude.
        left: Minimum longitude.
        right: Maximum longitude.
    """

    top: float
    bottom: float
    left: float
    right: float

    def as_text(self, precision: int = COORDINATE_PRECISION) -> dict[str, str]:
        """Return the four edges as fixed-precision decimal text."""
        return {
            "top": f"{self.top:.{precision}f}",
            "bottom": f"{self.bottom:.{precision}f}",
            "left": f"{self.left:.{precision}f}",
            "right": f"{self.right:.{precision}f}",
        }


@functools.lru_cache(maxsize=1)
def ecef_to_geographic() -> Transformer:
    """Return the shared ECEF to WGS 84 transformer, built on first use."""
    from pyproj import Transformer

    return Transformer.from_crs(ECEF_CRS, GEOGRAPHIC_3D_CRS, always_xy=True)


def point_from_cartesian(x: float, y: float, z: float) -> Point2D:
    """Project an ECEF map-surface position onto the WGS 84 ellipsoid.

    Args:
        x: Geocentric X in metres.
        y: Geocentric Y in metres.
        z: Geocentric Z in metres.

    Returns:
        The geodetic latitude/longitude of the position in degrees
        (ellipsoidal height is discarded).
    """
    lon, lat, _height = ecef_to_geographic().transform(x, y, z)
    return Point2D(latitude=lat, longitude=lon)


def points_from_cartesian(
    positions: Sequence[tuple[float, float, float]],
) -> list[Point2D]:
    """Project many ECEF positions with a single transformer call."""
    if not positions:
        return []
    xs, ys, zs = (list(axis) for axis in zip(*positions, strict=True))
    lons, lats, _heights = ecef_to_geographic().transform(xs, ys, zs)
    return [
        Point2D(latitude=lat, longitude=lon)
        for lon, lat in zip(lons, lats, strict=True)
    ]
