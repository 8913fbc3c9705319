from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from compareseries.series import Orientation, Point


ReferenceLookup = dict[Any, Any]


def extract_key_value(point: Point, orientation: Orientation) -> tuple[Any, Any]:
    """Split a point into `(key, value)`: `(x, y)` vertically, `(y, x)` horizontally."""

    if orientation == "horizontal":
        return point[1], point[0]
    return point[0], point[1]


def build_reference_lookup(points: Iterable[Point], orientation: Orientation) -> ReferenceLookup:
    lookup: ReferenceLookup = {}
    for point in points:
        key, value = extract_key_value(point, orientation)
        # later points overwrite earlier ones with the same key
        lookup[key] = value
    return lookup
