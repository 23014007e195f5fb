"""Typed models for the spatial query and the feature-service adapter layer.

- ``SpatialQuery``: an immutable WFS GetFeature query (geometry, type names,
  output format) built from the current filter state.
- ``ProviderConfig``: configuration for a specific feature service.

Design notes:
- All models are frozen dataclasses; a query is never mutated after build.
- Invalid field values raise ``ModelValidationError`` at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from isro_data_filter.core.constants import (
    GEOMETRY_FIELD,
    OUTPUT_FORMAT_GEOJSON,
    TYPE_NAME_SEPARATOR,
)
from isro_data_filter.core.exceptions import FilterError

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ModelValidationError(ValueError, FilterError):
    """Raised when a model is constructed with invalid field values.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
        value: The invalid value.
    """

    default_stage = "model_validation"
    default_code = "MODEL_VALIDATION_FAILED"

    def __init__(self, model: str, field_name: str, value: object, message: str) -> None:
        self.model = model
        self.field_name = field_name
        self.value = value
        formatted = f"{model}.{field_name}={value!r}: {message}"
        FilterError.__init__(self, formatted)


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SpatialQuery:
    """A polygon-intersects query over a set of named feature collections.

    Attributes:
        geometry_wkt: Closed rectangular ``POLYGON((...))`` in WKT.
        type_names: Feature type names in selection order.
        output_format: WFS output format.
    """

    geometry_wkt: str
    type_names: tuple[str, ...]
    output_format: str = OUTPUT_FORMAT_GEOJSON

    def __post_init__(self) -> None:
        _check_non_empty("SpatialQuery", "geometry_wkt", self.geometry_wkt)
        _check_non_empty("SpatialQuery", "output_format", self.output_format)
        if not self.type_names:
            raise ModelValidationError(
                "SpatialQuery", "type_names", self.type_names, "must not be empty"
            )

    @property
    def type_name(self) -> str:
        """Comma-separated type names, as sent in the ``typeName`` parameter."""
        return TYPE_NAME_SEPARATOR.join(self.type_names)

    @property
    def cql_filter(self) -> str:
        """The un-encoded CQL predicate, e.g. ``INTERSECTS(geom, POLYGON(...))``."""
        return f"INTERSECTS({GEOMETRY_FIELD}, {self.geometry_wkt})"


# ---------------------------------------------------------------------------
# Provider configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Configuration for a specific feature service.

    Attributes:
        name: Provider identifier (e.g. ``"geoserver"``).
        api_base_url: Default service endpoint.
    """

    name: str
    api_base_url: str = ""

    def __post_init__(self) -> None:
        _check_non_empty("ProviderConfig", "name", self.name)


# ---------------------------------------------------------------------------
# Validation helpers (module-private)
# ---------------------------------------------------------------------------


def _check_non_empty(model: str, field_name: str, value: str) -> None:
    """Raise `ModelValidationError` if *value* is empty or blank."""
    if not value or not value.strip():
        raise ModelValidationError(model, field_name, value, "must not be empty")
