"""Data products that can be queried.

Each product is a GeoServer workspace publishing a ``datapoints`` feature
type.  The set is fixed at build time; unknown identifiers coming from a
UI are rejected at the store boundary rather than silently accepted.
"""

from __future__ import annotations

import enum

from isro_data_filter.core.constants import FEATURE_TYPE_SUFFIX


class Product(enum.Enum):
    """Lunar imaging products.

    Values:
        TMC1: Terrain Mapping Camera.
        TMC2: Terrain Mapping Camera 2.
        OHRC: Orbiter High Resolution Camera.
    """

    TMC1 = "tmc1"
    TMC2 = "tmc2"
    OHRC = "ohrc"

    @property
    def type_name(self) -> str:
        """Return the WFS feature type name, e.g. ``"tmc1:datapoints"``."""
        return f"{self.value}:{FEATURE_TYPE_SUFFIX}"

    @classmethod
    def parse(cls, value: Product | str) -> Product | None:
        """Return the member for *value*, or ``None`` if it is unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
