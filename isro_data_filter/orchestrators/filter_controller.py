"""Controller wiring the filter pipeline to its UI collaborators.

Coordinates the pipeline steps in response to user actions:

1. Drawing updates: reduce drawn points and write the box into the store
2. Query trigger: build the query, execute it, adapt the result
3. Layer load: hand the record to the host catalog

Collaborators are injected:
    ``DrawingSession``  begins/ends the map drawing interaction.
    ``LayerCatalog``    accepts loadable layer records.
    ``notify``          presents a ``ValidationError`` to the user.

Every call runs on a single event loop.  Queries are not cancelled; each
dispatch takes a new token from a ``RequestSequencer`` and a completion
whose token is no longer the latest is discarded.
"""

from __future__ import annotations

import contextlib
import itertools
import logging
from typing import TYPE_CHECKING, Protocol

from isro_data_filter.activities.adapt_result import adapt_result
from isro_data_filter.activities.build_query import build_query
from isro_data_filter.activities.reduce_geometry import reduce_points
from isro_data_filter.core.constants import COORDINATE_FIELDS
from isro_data_filter.core.exceptions import ValidationError
from isro_data_filter.models.aoi import points_from_cartesian
from isro_data_filter.models.filter_state import FilterStateStore
from isro_data_filter.providers.base import QueryExecutionError
from isro_data_filter.providers.factory import service_for

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from isro_data_filter.core.config import FilterConfig
    from isro_data_filter.models.aoi import BoundingBox, Point2D
    from isro_data_filter.models.layer import LoadableLayerRecord
    from isro_data_filter.providers.base import FeatureService

logger = logging.getLogger("isro_data_filter.orchestrators.filter_controller")


class DrawingSession(Protocol):
    """Map drawing interaction owned by the host."""

    def begin_drawing(self) -> None: ...

    def end_drawing(self) -> None: ...


class LayerCatalog(Protocol):
    """Host catalog group that accepts new layers."""

    def add_model(self, record: LoadableLayerRecord) -> None: ...


class RequestSequencer:
    """Monotonically increasing request tokens."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        """Issue a new token; it becomes the latest."""
        self._latest = next(self._counter)
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest


def _log_validation_error(error: ValidationError) -> None:
    logger.warning("Query not sent | code=%s | %s", error.code, error.user_message)


class FilterController:
    """Drives the filter pipeline from discrete user actions.

    Args:
        state: The filter state store.
        drawing: The drawing session collaborator.
        catalog: The host catalog collaborator.
        service: Feature service used to run queries.
        service_endpoint: WFS endpoint; defaults to the service config.
        notify: Presents validation errors to the user.  Defaults to a
            logged warning.
    """

    def __init__(
        self,
        state: FilterStateStore,
        drawing: DrawingSession,
        catalog: LayerCatalog,
        service: FeatureService,
        *,
        service_endpoint: str | None = None,
        notify: Callable[[ValidationError], None] | None = None,
    ) -> None:
        self.state = state
        self._drawing = drawing
        self._catalog = catalog
        self._service = service
        self._endpoint = service_endpoint
        self._notify = notify or _log_validation_error
        self._sequencer = RequestSequencer()

    @classmethod
    def from_config(
        cls,
        config: FilterConfig,
        drawing: DrawingSession,
        catalog: LayerCatalog,
        *,
        notify: Callable[[ValidationError], None] | None = None,
    ) -> FilterController:
        """Build a controller with a fresh store and the configured service."""
        service = service_for(config)
        return cls(
            FilterStateStore(precision=config.coordinate_precision),
            drawing,
            catalog,
            service,
            service_endpoint=config.wfs_endpoint,
            notify=notify,
        )

    @property
    def sequencer(self) -> RequestSequencer:
        return self._sequencer

    # ------------------------------------------------------------------
    # Drawing lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """Tool activated: enter drawing mode."""
        self.start_drawing()

    def deactivate(self) -> None:
        """Tool deactivated: always end the drawing interaction."""
        self._end_drawing()

    def start_drawing(self) -> None:
        """The "draw on map" trigger."""
        self.state.drawing_mode = True
        self._drawing.begin_drawing()

    @contextlib.contextmanager
    def drawing(self) -> Iterator[FilterController]:
        """Scope a drawing interaction; it is ended on exit, even on error."""
        self.start_drawing()
        try:
            yield self
        finally:
            self._end_drawing()

    def on_points_changed(
        self,
        points: Sequence[Point2D],
        *,
        loop_closed: bool = True,
    ) -> BoundingBox | None:
        """Point added or moved.

        Once the loop is closed and at least three points exist, the
        bounding box replaces the AOI fields and drawing ends.
        """
        if not loop_closed:
            return None
        box = reduce_points(points)
        if box is None:
            return None
        self.state.apply_bounding_box(box)
        self._end_drawing()
        logger.info(
            "AOI set from drawing | top=%s | bottom=%s | left=%s | right=%s",
            *(self.state.field(name) for name in COORDINATE_FIELDS),
        )
        return box

    def on_positions_changed(
        self,
        positions: Sequence[tuple[float, float, float]],
        *,
        loop_closed: bool = True,
    ) -> BoundingBox | None:
        """Same as ``on_points_changed`` for ECEF map-surface positions."""
        points = points_from_cartesian(positions)
        return self.on_points_changed(points, loop_closed=loop_closed)

    def on_drawing_cleanup(self) -> None:
        self.state.drawing_mode = False

    def _end_drawing(self) -> None:
        self.state.drawing_mode = False
        self._drawing.end_drawing()

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    async def run_query(self) -> LoadableLayerRecord | None:
        """The "query" trigger.

        Returns:
            The record added to the catalog, or ``None`` when validation
            failed, execution failed, or a newer query superseded this one.
        """
        try:
            query = build_query(self.state)
        except ValidationError as exc:
            self._notify(exc)
            return None

        token = self._sequencer.issue()
        try:
            result = await self._service.execute(
                query, self._endpoint, request_token=token
            )
        except QueryExecutionError:
            logger.exception("Error querying feature service | token=%d", token)
            return None

        if not self._sequencer.is_current(token):
            logger.warning(
                "Discarding stale query result | token=%d | latest=%d",
                token,
                self._sequencer.latest,
            )
            return None

        record = adapt_result(result)
        self._catalog.add_model(record)
        logger.info("Layer added to catalog | token=%d | name=%s", token, record.name)
        return record
