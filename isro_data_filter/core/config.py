"""Filter configuration loaded from environment variables.

The core components never read the environment themselves; the host
loads a ``FilterConfig`` once at start-up and threads the endpoint and
provider configuration into the controller.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, so a bad endpoint is caught at start-up rather
    than on the first query.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from isro_data_filter.core.constants import COORDINATE_PRECISION, DEFAULT_WFS_ENDPOINT
from isro_data_filter.core.exceptions import FilterError
from isro_data_filter.models.query import ProviderConfig

MAX_COORDINATE_PRECISION = 15


class ConfigValidationError(FilterError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Immutable filter configuration.

    Attributes:
        wfs_endpoint: GeoServer WFS endpoint URL.
        feature_service: Feature-service adapter name, e.g. ``"geoserver"``.
        coordinate_precision: Decimal places used when a reduced
            bounding box is written back as text.
    """

    wfs_endpoint: str = DEFAULT_WFS_ENDPOINT
    feature_service: str = "geoserver"
    coordinate_precision: int = COORDINATE_PRECISION

    @classmethod
    def from_env(cls) -> FilterConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or empty.
            ValueError: If ``ISRO_COORDINATE_PRECISION`` is not an integer.
        """
        config = cls(
            wfs_endpoint=os.getenv("ISRO_WFS_ENDPOINT", DEFAULT_WFS_ENDPOINT),
            feature_service=os.getenv("ISRO_FEATURE_SERVICE", "geoserver"),
            coordinate_precision=int(
                os.getenv("ISRO_COORDINATE_PRECISION", str(COORDINATE_PRECISION))
            ),
        )
        _validate(config)
        return config

    def provider_config(self) -> ProviderConfig:
        """Return the ``ProviderConfig`` for the configured feature service."""
        return ProviderConfig(name=self.feature_service, api_base_url=self.wfs_endpoint)


def _validate(config: FilterConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.wfs_endpoint.startswith(("http://", "https://")):
        raise ConfigValidationError(
            "ISRO_WFS_ENDPOINT",
            config.wfs_endpoint,
            "must be an http:// or https:// URL",
        )

    if not config.feature_service:
        raise ConfigValidationError(
            "ISRO_FEATURE_SERVICE",
            config.feature_service,
            "must not be empty",
        )

    if not 0 <= config.coordinate_precision <= MAX_COORDINATE_PRECISION:
        raise ConfigValidationError(
            "ISRO_COORDINATE_PRECISION",
            config.coordinate_precision,
            f"must be between 0 and {MAX_COORDINATE_PRECISION} (decimal places)",
        )
