from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable

from compareseries.adapters import normalize_points
from compareseries.colors import parse_color
from compareseries.options import deep_merge, parse_compare_config
from compareseries.plugin import PLUGIN, PluginSpec
from compareseries.series import (
    DEFAULT_SERIES_COLOR,
    BarsStyle,
    DataPoints,
    FieldFormat,
    LinesStyle,
    Point,
    PointsStyle,
    Series,
)


LOGGER = logging.getLogger(__name__)

ProcessRawDataHook = Callable[["Plot", Series, list[Any], DataPoints, int], None]

_SERIES_KEYS = frozenset({"data", "label", "color", "bars", "lines", "points", "compare"})


@dataclass
class PlotHooks:
    process_raw_data: list[ProcessRawDataHook] = field(default_factory=list)


class Plot:
    """Series container that runs plugin hooks over its data before drawing.

    Each hook is called once per series, in position order, with that
    series' position. Series appended by a hook are processed in turn.
    """

    def __init__(
        self,
        series: Iterable[Any],
        options: Mapping[str, Any] | None = None,
        *,
        plugins: Iterable[PluginSpec] = (PLUGIN,),
    ) -> None:
        self.hooks = PlotHooks()
        self.plugins = tuple(plugins)
        merged: dict[str, Any] = {}
        for plugin in self.plugins:
            merged = deep_merge(merged, plugin.options)
        self.options = deep_merge(merged, options)
        for plugin in self.plugins:
            LOGGER.debug("initializing plugin %s %s", plugin.name, plugin.version)
            plugin.init(self)

        self._series: list[Series] = [self._parse_series(entry) for entry in series]
        self._process_data()

    def get_data(self) -> list[Series]:
        return self._series

    def visible_series(self) -> list[Series]:
        return [s for s in self._series if s.visible]

    def _parse_series(self, entry: Any) -> Series:
        if isinstance(entry, Mapping):
            raw = dict(entry)
        else:
            raw = {"data": entry}
        data = raw.pop("data", None)
        raw = deep_merge(self.options.get("series", {}), raw)

        bars_raw = raw.get("bars", {})
        lines_raw = raw.get("lines", {})
        points_raw = raw.get("points", {})
        bars = BarsStyle(
            show=bool(bars_raw.get("show", False)),
            horizontal=bool(bars_raw.get("horizontal", False)),
            bar_width=float(bars_raw.get("barWidth", 0.8)),
            fill=bool(bars_raw.get("fill", True)),
        )
        lines = LinesStyle(
            show=bool(lines_raw.get("show", False)),
            line_width=int(lines_raw.get("lineWidth", 1)),
            fill=bool(lines_raw.get("fill", False)),
        )
        points = PointsStyle(
            show=bool(points_raw.get("show", False)),
            radius=int(points_raw.get("radius", 3)),
        )
        if not ("show" in bars_raw or "show" in lines_raw or "show" in points_raw):
            lines.show = True

        color = raw.get("color")
        pointsize, fmt = describe_point_format(bars)
        return Series(
            data=raw_rows(data),
            datapoints=DataPoints(points=[], pointsize=pointsize, format=fmt),
            color=DEFAULT_SERIES_COLOR if color is None else parse_color(color),
            label=raw.get("label"),
            bars=bars,
            lines=lines,
            points=points,
            compare=parse_compare_config(raw.get("compare")),
            extras={k: v for k, v in raw.items() if k not in _SERIES_KEYS},
        )

    def _process_data(self) -> None:
        position = 0
        # hooks may append series; re-check the length every step
        while position < len(self._series):
            series = self._series[position]
            for hook in self.hooks.process_raw_data:
                LOGGER.debug("running %s on series %d", _hook_name(hook), position)
                hook(self, series, series.data, series.datapoints, position)
            position += 1
        LOGGER.debug("processed %d series", len(self._series))

        for series in self._series:
            if not series.datapoints.points:
                series.datapoints.points = fill_datapoints(series.data, series.datapoints)


def raw_rows(data: Any) -> list[Any]:
    """Keep list or tuple rows as given; convert arrays, tensors and frames to float tuples."""

    if data is None:
        return []
    points = normalize_points(data)
    if isinstance(data, Sequence) and all(isinstance(row, (list, tuple)) for row in data):
        return list(data)
    return points


def describe_point_format(bars: BarsStyle) -> tuple[int, tuple[FieldFormat, ...]]:
    fmt = [FieldFormat(axis="x"), FieldFormat(axis="y")]
    if bars.show:
        fmt.append(
            FieldFormat(
                axis="x" if bars.horizontal else "y",
                required=False,
                default=0.0,
            )
        )
    return len(fmt), tuple(fmt)


def fill_datapoints(data: list[Any], datapoints: DataPoints) -> list[Point]:
    """Coerce raw rows to floats, padded or trimmed to `pointsize` with the field defaults."""

    out: list[Point] = []
    size = datapoints.pointsize
    for point in normalize_points(data):
        row = list(point[:size])
        for fmt in datapoints.format[len(row):size]:
            row.append(math.nan if fmt.default is None else fmt.default)
        out.append(tuple(row))
    return out


def _hook_name(hook: Any) -> str:
    return getattr(hook, "__name__", type(hook).__name__)
