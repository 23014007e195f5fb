"""In-memory filter state: the AOI text fields and the product selection.

Coordinates are kept as raw text until query-build time so that partial
or invalid typed input (``"-"``, ``"48."``) never raises while the user
is still typing.  Exactly one AOI and one selection exist at a time;
every write overwrites, nothing is versioned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isro_data_filter.core.constants import COORDINATE_FIELDS, COORDINATE_PRECISION
from isro_data_filter.models.products import Product

if TYPE_CHECKING:
    from collections.abc import Iterable

    from isro_data_filter.models.aoi import BoundingBox

logger = logging.getLogger("isro_data_filter.models.filter_state")


class FilterStateStore:
    """Mutable record of the current AOI and product selection.

    Args:
        selected: Products initially selected.  Defaults to every product.
        precision: Decimal places used by ``apply_bounding_box``.
    """

    def __init__(
        self,
        selected: Iterable[Product] | None = None,
        *,
        precision: int = COORDINATE_PRECISION,
    ) -> None:
        initial = set(Product) if selected is None else set(selected)
        self._fields: dict[str, str] = dict.fromkeys(COORDINATE_FIELDS, "")
        self._selection: dict[Product, bool] = {p: p in initial for p in Product}
        self._precision = precision
        self.drawing_mode = False

    # ------------------------------------------------------------------
    # Coordinate fields
    # ------------------------------------------------------------------

    def set_field(self, name: str, value: str) -> None:
        """Overwrite one coordinate field with raw, unvalidated text.

        Raises:
            ValueError: If *name* is not one of top/bottom/left/right.
        """
        if name not in self._fields:
            msg = f"Unknown coordinate field {name!r}; expected one of {', '.join(COORDINATE_FIELDS)}"
            raise ValueError(msg)
        self._fields[name] = value

    def field(self, name: str) -> str:
        """Return the raw text of one coordinate field."""
        return self._fields[name]

    @property
    def fields(self) -> dict[str, str]:
        """Return a copy of all four coordinate fields."""
        return dict(self._fields)

    def apply_bounding_box(self, box: BoundingBox) -> None:
        """Overwrite all four coordinate fields from a reduced box.

        Values are written as fixed-precision decimal text.  Applying a
        box also ends drawing mode.
        """
        self._fields.update(box.as_text(self._precision))
        self.drawing_mode = False

    # ------------------------------------------------------------------
    # Product selection
    # ------------------------------------------------------------------

    def set_product(self, product: Product | str, selected: bool) -> bool:
        """Set the selected flag for one product.

        Unknown product identifiers are ignored.

        Returns:
            ``True`` if the flag was stored, ``False`` if *product* is unknown.
        """
        member = Product.parse(product)
        if member is None:
            logger.warning("Ignoring unknown product id | product=%r", product)
            return False
        self._selection[member] = bool(selected)
        return True

    def is_selected(self, product: Product) -> bool:
        return self._selection[product]

    @property
    def selection(self) -> dict[Product, bool]:
        """Return a copy of the selection map in iteration order."""
        return dict(self._selection)

    def selected_products(self) -> list[Product]:
        """Return the selected products, preserving selection-map order."""
        return [p for p, on in self._selection.items() if on]
