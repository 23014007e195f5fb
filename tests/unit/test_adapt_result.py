"""Tests for result adaptation and the loadable layer record."""

from __future__ import annotations

import pytest

from isro_data_filter.activities.adapt_result import adapt_result
from isro_data_filter.models.layer import LayerKind, LoadableLayerRecord


class TestAdaptResult:
    def test_empty_collection(self, empty_collection: dict[str, object]) -> None:
        record = adapt_result(empty_collection)
        assert record.to_dict() == {
            "name": "Filtered Data",
            "kind": "geojson",
            "payload": {"type": "FeatureCollection", "features": []},
            "enabled": True,
        }

    def test_payload_is_passed_through(self, empty_collection: dict[str, object]) -> None:
        record = adapt_result(empty_collection)
        assert record.payload is empty_collection
        assert record.kind is LayerKind.GEOJSON

    def test_malformed_payload_is_not_checked(self) -> None:
        record = adapt_result("not geojson")
        assert record.payload == "not geojson"
        assert record.enabled is True


class TestLoadableLayerRecord:
    def test_catalog_item_shape(self, empty_collection: dict[str, object]) -> None:
        item = adapt_result(empty_collection).to_catalog_item()
        assert item == {
            "name": "Filtered Data",
            "type": "geojson",
            "data": empty_collection,
            "isEnabled": True,
        }

    def test_frozen(self) -> None:
        record = LoadableLayerRecord(name="x", kind=LayerKind.GEOJSON, payload={})
        with pytest.raises(AttributeError):
            record.enabled = False  # type: ignore[misc]
