"""GeoServer WFS adapter.

Concrete ``FeatureService`` that issues a single WFS 1.1.0 ``GetFeature``
GET request with a CQL spatial filter and parses the GeoJSON response.

Wire contract (bit-exact)::

    <endpoint>?service=WFS&version=1.1.0&request=GetFeature
        &typeName=<csv of "<product>:datapoints">
        &cql_filter=<encodeURIComponent("INTERSECTS(geom, POLYGON((...)))")>
        &outputFormat=application/json

Only ``cql_filter`` is percent-encoded; ``typeName`` and ``outputFormat``
are sent literally.

No retry and no timeout beyond the ``httpx`` client defaults.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from isro_data_filter.core.constants import (
    ENCODE_URI_COMPONENT_SAFE,
    WFS_REQUEST,
    WFS_SERVICE,
    WFS_VERSION,
)
from isro_data_filter.providers.base import (
    FeatureService,
    QueryExecutionError,
    TransientQueryExecutionError,
)

if TYPE_CHECKING:
    from isro_data_filter.models.query import ProviderConfig, SpatialQuery

logger = logging.getLogger(__name__)


class GeoServerWfsAdapter(FeatureService):
    """GeoServer WFS adapter using ``httpx.AsyncClient``.

    Args:
        config: Provider configuration; ``api_base_url`` is the default
            WFS endpoint.
        client: Optional shared client.  When omitted, a client is
            opened and closed around each request.
    """

    def __init__(
        self,
        config: ProviderConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(config)
        self._client = client

    async def execute(
        self,
        query: SpatialQuery,
        service_endpoint: str | None = None,
        *,
        request_token: int | None = None,
    ) -> Any:
        """Run *query* against the WFS endpoint and return the GeoJSON document.

        Raises:
            TransientQueryExecutionError: On transport failure or a 5xx status.
            QueryExecutionError: On any other non-success status, a body that
                is not valid JSON, or a missing endpoint.
        """
        correlation_id = "" if request_token is None else str(request_token)
        endpoint = service_endpoint or self.config.api_base_url
        if not endpoint:
            msg = "No WFS endpoint configured"
            raise QueryExecutionError(
                provider=self.name, message=msg, correlation_id=correlation_id
            )

        url = build_getfeature_url(query, endpoint)
        logger.info(
            "WFS query dispatched | token=%s | typeName=%s | endpoint=%s",
            request_token,
            query.type_name,
            endpoint,
        )

        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            msg = f"WFS request failed with HTTP {status}"
            error_cls = (
                TransientQueryExecutionError if status >= 500 else QueryExecutionError
            )
            raise error_cls(
                provider=self.name, message=msg, cause=exc, correlation_id=correlation_id
            ) from exc
        except httpx.HTTPError as exc:
            msg = f"WFS request failed: {exc}"
            raise TransientQueryExecutionError(
                provider=self.name, message=msg, cause=exc, correlation_id=correlation_id
            ) from exc

        try:
            result = response.json()
        except ValueError as exc:
            msg = f"WFS response is not valid JSON: {exc}"
            raise QueryExecutionError(
                provider=self.name, message=msg, cause=exc, correlation_id=correlation_id
            ) from exc

        logger.info(
            "WFS query completed | token=%s | status=%d | features=%s",
            request_token,
            response.status_code,
            _feature_count(result),
        )
        return result


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


def build_getfeature_url(query: SpatialQuery, endpoint: str) -> str:
    """Build the WFS ``GetFeature`` URL for *query*.

    The CQL filter is encoded with ``encodeURIComponent`` semantics so the
    URL matches what browser clients of the same service send.
    """
    cql = quote(query.cql_filter, safe=ENCODE_URI_COMPONENT_SAFE)
    separator = "&" if "?" in endpoint else "?"
    return (
        f"{endpoint}{separator}service={WFS_SERVICE}&version={WFS_VERSION}"
        f"&request={WFS_REQUEST}&typeName={query.type_name}"
        f"&cql_filter={cql}&outputFormat={query.output_format}"
    )


def _feature_count(result: Any) -> int | str:
    """Return the number of features in a FeatureCollection, for logging."""
    if isinstance(result, dict) and isinstance(result.get("features"), list):
        return len(result["features"])
    return "?"
