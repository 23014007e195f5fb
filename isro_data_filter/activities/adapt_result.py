"""Result adaptation: GeoJSON document → loadable layer record."""

from __future__ import annotations

from typing import Any

from isro_data_filter.core.constants import RESULT_LAYER_NAME
from isro_data_filter.models.layer import LayerKind, LoadableLayerRecord


def adapt_result(result: Any) -> LoadableLayerRecord:
    """Wrap a query result for the host catalog.

    The result is not inspected; a malformed document surfaces later,
    when the host renders the layer.
    """
    return LoadableLayerRecord(
        name=RESULT_LAYER_NAME,
        kind=LayerKind.GEOJSON,
        payload=result,
        enabled=True,
    )
