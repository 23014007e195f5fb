"""Shared constants: single source of truth for the WFS wire contract.

The values here are part of the GeoServer request contract and must stay
bit-exact: the remote service matches on them literally.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# WFS GetFeature request
# ---------------------------------------------------------------------------

WFS_SERVICE: str = "WFS"
WFS_VERSION: str = "1.1.0"
WFS_REQUEST: str = "GetFeature"

OUTPUT_FORMAT_GEOJSON: str = "application/json"
"""GeoServer output format that yields a GeoJSON FeatureCollection."""

GEOMETRY_FIELD: str = "geom"
"""Geometry attribute name used in the CQL spatial predicate."""

FEATURE_TYPE_SUFFIX: str = "datapoints"
"""Every product workspace publishes its features under this layer name."""

TYPE_NAME_SEPARATOR: str = ","

ENCODE_URI_COMPONENT_SAFE: str = "!*'()"
"""Characters left unescaped by ``encodeURIComponent`` beyond ``quote``'s defaults."""

# ---------------------------------------------------------------------------
# AOI
# ---------------------------------------------------------------------------

COORDINATE_FIELDS: tuple[str, str, str, str] = ("top", "bottom", "left", "right")

COORDINATE_PRECISION: int = 6
"""Decimal places kept when a coordinate is exposed as text (~0.1 m)."""

MIN_POINTS_FOR_AREA: int = 3

# ---------------------------------------------------------------------------
# Result layer
# ---------------------------------------------------------------------------

RESULT_LAYER_NAME: str = "Filtered Data"

DEFAULT_WFS_ENDPOINT: str = "http://localhost:8080/geoserver/wfs"
