"""FeatureService abstract base class.

Defines the contract every feature-service adapter must implement.  The
controller interacts exclusively with this interface; it never knows
which concrete service is behind it.

Lifecycle:
    ``execute(query, endpoint)``: send one spatial query and return the
    parsed result document.  No retry, no cancellation.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from isro_data_filter.core.exceptions import FilterError, TransientError

if TYPE_CHECKING:
    from isro_data_filter.models.query import ProviderConfig, SpatialQuery


class FeatureService(abc.ABC):
    """Abstract base class for feature-service adapters.

    The constructor receives a ``ProviderConfig`` which carries the
    default endpoint and provider-specific parameters.

    Example usage::

        service = service_for(filter_config)
        result = await service.execute(query)
    """

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config

    @property
    def name(self) -> str:
        """Return the provider name from configuration."""
        return self._config.name

    @property
    def config(self) -> ProviderConfig:
        """Return the provider configuration (read-only)."""
        return self._config

    @abc.abstractmethod
    async def execute(
        self,
        query: SpatialQuery,
        service_endpoint: str | None = None,
        *,
        request_token: int | None = None,
    ) -> Any:
        """Send *query* to the service and return the parsed response.

        Args:
            query: The spatial query to run.
            service_endpoint: Endpoint URL.  Defaults to
                ``config.api_base_url``.
            request_token: Sequencing token of the dispatching request,
                used for log correlation.

        Returns:
            The parsed result document, unmodified.

        Raises:
            QueryExecutionError: On transport, HTTP status or parse failure.
        """


# ---------------------------------------------------------------------------
# Provider exceptions
# ---------------------------------------------------------------------------


class ProviderError(FilterError):
    """Base exception for feature-service adapter errors.

    Attributes:
        provider: Name of the provider that raised the error.
        message: Human-readable error description.
        retryable: Whether the user may simply try again.
        correlation_id: Request token of the failed dispatch, as text.
    """

    default_stage = "provider"
    default_code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.provider = provider
        super().__init__(
            message,
            retryable=retryable,
            code=self.default_code,
            stage=self.default_stage,
            correlation_id=correlation_id,
        )

    def __str__(self) -> str:
        return f"[{self.provider}] {self.message}"


class QueryExecutionError(ProviderError):
    """The query could not be executed or its response could not be parsed.

    Raised as-is for failures a retry will not fix (4xx status, malformed
    body, missing endpoint).

    Attributes:
        cause: The underlying exception, if any.
    """

    default_stage = "execute_query"
    default_code = "QUERY_EXECUTION_FAILED"

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        cause: BaseException | None = None,
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.cause = cause
        super().__init__(
            provider, message, retryable=retryable, correlation_id=correlation_id
        )


class TransientQueryExecutionError(QueryExecutionError, TransientError):
    """Transport failure or 5xx status; the same query may succeed later."""

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        cause: BaseException | None = None,
        correlation_id: str = "",
    ) -> None:
        super().__init__(
            provider,
            message,
            cause=cause,
            retryable=True,
            correlation_id=correlation_id,
        )
