"""Feature-service adapters.

Implements the adapter pattern:
- FeatureService: Abstract base class defining the interface
- GeoServerWfsAdapter: GeoServer WFS GetFeature with a CQL spatial filter

The active service is selected via configuration.
"""

from isro_data_filter.providers.base import (
    FeatureService,
    ProviderError,
    QueryExecutionError,
    TransientQueryExecutionError,
)
from isro_data_filter.providers.factory import (
    GEOSERVER,
    SUPPORTED_SERVICES,
    service_for,
)

__all__ = [
    "GEOSERVER",
    "SUPPORTED_SERVICES",
    "FeatureService",
    "ProviderError",
    "QueryExecutionError",
    "TransientQueryExecutionError",
    "service_for",
]
