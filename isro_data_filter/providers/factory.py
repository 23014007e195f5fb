"""Feature-service selection from configuration.

``service_for`` resolves ``FilterConfig.feature_service`` (read from
``ISRO_FEATURE_SERVICE``) to an adapter bound to the configured WFS
endpoint::

    service = service_for(FilterConfig.from_env())
    result = await service.execute(query)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isro_data_filter.providers.base import ProviderError

if TYPE_CHECKING:
    from isro_data_filter.core.config import FilterConfig
    from isro_data_filter.providers.base import FeatureService

logger = logging.getLogger(__name__)

GEOSERVER = "geoserver"

SUPPORTED_SERVICES: tuple[str, ...] = (GEOSERVER,)


def service_for(config: FilterConfig) -> FeatureService:
    """Return the adapter named by *config*, using its WFS endpoint by default.

    Raises:
        ProviderError: If ``config.feature_service`` is not supported.
    """
    name = config.feature_service
    if name == GEOSERVER:
        # httpx is imported only once a GeoServer service is selected.
        from isro_data_filter.providers.geoserver import GeoServerWfsAdapter

        service: FeatureService = GeoServerWfsAdapter(config.provider_config())
    else:
        supported = ", ".join(SUPPORTED_SERVICES)
        msg = f"Unknown feature service: {name!r}. Supported: {supported}"
        raise ProviderError(provider=name, message=msg)

    logger.info(
        "Feature service selected | service=%s | endpoint=%s",
        name,
        config.wfs_endpoint,
    )
    return service
