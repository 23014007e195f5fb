"""Tests for the GeoServer WFS adapter.

Uses ``httpx.MockTransport`` so no real network calls are made.

Covers: bit-exact GetFeature URL, request parameters as decoded by the
server, success pass-through, and transport/status/parse failures.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from isro_data_filter.models.query import ProviderConfig, SpatialQuery
from isro_data_filter.providers import geoserver
from isro_data_filter.providers.base import (
    ProviderError,
    QueryExecutionError,
    TransientQueryExecutionError,
)
from isro_data_filter.providers.geoserver import GeoServerWfsAdapter, build_getfeature_url

ENDPOINT = "http://geo.example/geoserver/wfs"
PARIS_WKT = "POLYGON((2.33 48.8, 2.35 48.8, 2.35 48.9, 2.33 48.9, 2.33 48.8))"

PARIS_QUERY = SpatialQuery(
    geometry_wkt=PARIS_WKT,
    type_names=("tmc1:datapoints", "ohrc:datapoints"),
)

PARIS_URL = (
    "http://geo.example/geoserver/wfs?service=WFS&version=1.1.0&request=GetFeature"
    "&typeName=tmc1:datapoints,ohrc:datapoints"
    "&cql_filter=INTERSECTS(geom%2C%20POLYGON((2.33%2048.8%2C%202.35%2048.8%2C%20"
    "2.35%2048.9%2C%202.33%2048.9%2C%202.33%2048.8)))"
    "&outputFormat=application/json"
)

FEATURES: dict[str, Any] = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [2.34, 48.85]},
            "properties": {"id": 7},
        }
    ],
}


def _adapter(handler: Any, **config: Any) -> GeoServerWfsAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeoServerWfsAdapter(ProviderConfig(name="geoserver", **config), client=client)


class TestBuildGetFeatureUrl:
    def test_bit_exact(self) -> None:
        assert build_getfeature_url(PARIS_QUERY, ENDPOINT) == PARIS_URL

    def test_encodes_like_encode_uri_component(self) -> None:
        query = SpatialQuery(geometry_wkt="POLYGON((-1 -2, 3/4 5))", type_names=("a:b",))
        url = build_getfeature_url(query, ENDPOINT)
        assert "cql_filter=INTERSECTS(geom%2C%20POLYGON((-1%20-2%2C%203%2F4%205)))" in url

    def test_endpoint_with_query_string(self) -> None:
        url = build_getfeature_url(PARIS_QUERY, f"{ENDPOINT}?authkey=abc")
        assert url.startswith(f"{ENDPOINT}?authkey=abc&service=WFS&version=1.1.0")


class TestExecuteSuccess:
    @pytest.mark.asyncio()
    async def test_returns_document_unmodified(self) -> None:
        adapter = _adapter(lambda request: httpx.Response(200, json=FEATURES))
        result = await adapter.execute(PARIS_QUERY, ENDPOINT)
        assert result == FEATURES

    @pytest.mark.asyncio()
    async def test_request_parameters(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"type": "FeatureCollection", "features": []})

        await _adapter(handler).execute(PARIS_QUERY, ENDPOINT, request_token=3)

        (request,) = seen
        assert request.method == "GET"
        assert request.url.host == "geo.example"
        assert request.url.path == "/geoserver/wfs"
        params = request.url.params
        assert params["service"] == "WFS"
        assert params["version"] == "1.1.0"
        assert params["request"] == "GetFeature"
        assert params["typeName"] == "tmc1:datapoints,ohrc:datapoints"
        assert params["cql_filter"] == f"INTERSECTS(geom, {PARIS_WKT})"
        assert params["outputFormat"] == "application/json"

    @pytest.mark.asyncio()
    async def test_endpoint_defaults_to_config(self) -> None:
        hosts: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            return httpx.Response(200, json=FEATURES)

        adapter = _adapter(handler, api_base_url="https://other.example/wfs")
        await adapter.execute(PARIS_QUERY)
        assert hosts == ["other.example"]

    @pytest.mark.asyncio()
    async def test_opens_own_client_when_none_injected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        real_client = httpx.AsyncClient
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=FEATURES))
        monkeypatch.setattr(
            geoserver.httpx,
            "AsyncClient",
            lambda **kwargs: real_client(transport=transport, **kwargs),
        )
        adapter = GeoServerWfsAdapter(ProviderConfig(name="geoserver"))
        assert await adapter.execute(PARIS_QUERY, ENDPOINT) == FEATURES


class TestExecuteFailure:
    @pytest.mark.asyncio()
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransientQueryExecutionError) as exc_info:
            await _adapter(handler).execute(PARIS_QUERY, ENDPOINT, request_token=3)

        err = exc_info.value
        assert isinstance(err.cause, httpx.ConnectError)
        assert err.__cause__ is err.cause
        assert err.retryable is True
        assert err.code == "QUERY_EXECUTION_FAILED"
        assert "[geoserver]" in str(err)
        assert err.category == "transient"
        assert err.correlation_id == "3"

    @pytest.mark.asyncio()
    async def test_server_error_is_retryable(self) -> None:
        adapter = _adapter(lambda request: httpx.Response(503, text="busy"))
        with pytest.raises(TransientQueryExecutionError, match="HTTP 503") as exc_info:
            await adapter.execute(PARIS_QUERY, ENDPOINT)
        assert exc_info.value.retryable is True
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)

    @pytest.mark.asyncio()
    async def test_client_error_is_not_retryable(self) -> None:
        adapter = _adapter(lambda request: httpx.Response(400, text="bad CQL"))
        with pytest.raises(QueryExecutionError, match="HTTP 400") as exc_info:
            await adapter.execute(PARIS_QUERY, ENDPOINT, request_token=5)
        err = exc_info.value
        assert not isinstance(err, TransientQueryExecutionError)
        assert err.retryable is False
        assert err.category == "permanent"
        assert err.correlation_id == "5"

    @pytest.mark.asyncio()
    async def test_invalid_json(self) -> None:
        adapter = _adapter(
            lambda request: httpx.Response(200, text="<ServiceExceptionReport/>")
        )
        with pytest.raises(QueryExecutionError, match="not valid JSON") as exc_info:
            await adapter.execute(PARIS_QUERY, ENDPOINT)
        assert isinstance(exc_info.value.cause, ValueError)
        assert not isinstance(exc_info.value, TransientQueryExecutionError)

    @pytest.mark.asyncio()
    async def test_no_endpoint(self) -> None:
        adapter = _adapter(lambda request: httpx.Response(200, json=FEATURES))
        with pytest.raises(QueryExecutionError, match="No WFS endpoint"):
            await adapter.execute(PARIS_QUERY)

    def test_execution_error_is_provider_error(self) -> None:
        err = QueryExecutionError("geoserver", "boom")
        assert isinstance(err, ProviderError)
        assert err.cause is None
        assert err.stage == "execute_query"
        assert err.correlation_id == ""
