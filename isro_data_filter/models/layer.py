"""Loadable layer record handed to the host catalog.

The record wraps a query result (a GeoJSON document, passed through
unmodified) with the metadata the host needs to display it.  Its
rendering and removal are the host's concern.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, TypedDict


class LayerKind(enum.Enum):
    """Data format of a loadable layer."""

    GEOJSON = "geojson"


class LayerRecordDict(TypedDict):
    """Serialised ``LoadableLayerRecord`` (see ``to_dict``)."""

    name: str
    kind: str
    payload: Any
    enabled: bool


class CatalogItemDict(TypedDict):
    """Shape accepted by the host catalog's ``addModel`` call."""

    name: str
    type: str
    data: Any
    isEnabled: bool  # noqa: N815


@dataclass(frozen=True, slots=True)
class LoadableLayerRecord:
    """A query result ready to be added to the host catalog.

    Attributes:
        name: Display name of the layer.
        kind: Data format tag.
        payload: The query result document.
        enabled: Whether the layer is shown when added.
    """

    name: str
    kind: LayerKind
    payload: Any
    enabled: bool = True

    def to_dict(self) -> LayerRecordDict:
        """Serialise to a plain dict with stable keys."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "payload": self.payload,
            "enabled": self.enabled,
        }

    def to_catalog_item(self) -> CatalogItemDict:
        """Return the item shape the host catalog's ``addModel`` expects."""
        return {
            "name": self.name,
            "type": self.kind.value,
            "data": self.payload,
            "isEnabled": self.enabled,
        }
