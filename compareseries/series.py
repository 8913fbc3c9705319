from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from compareseries.colors import RGBA


Point = tuple[float, ...]
Orientation = Literal["vertical", "horizontal"]

DEFAULT_COLOR_ABOVE: RGBA = (255, 0, 0, 255)
DEFAULT_COLOR_BELOW: RGBA = (0, 255, 0, 255)
DEFAULT_SERIES_COLOR: RGBA = (62, 149, 255, 255)


@dataclass
class BarsStyle:
    show: bool = False
    horizontal: bool = False
    bar_width: float = 0.8
    fill: bool = True


@dataclass
class LinesStyle:
    show: bool = False
    line_width: int = 1
    fill: bool = False


@dataclass
class PointsStyle:
    show: bool = False
    radius: int = 3


@dataclass(frozen=True)
class FieldFormat:
    """Layout of one field in a point tuple."""

    axis: Literal["x", "y"] | None = None
    required: bool = True
    default: float | None = None


@dataclass
class DataPoints:
    points: list[Point] = field(default_factory=list)
    pointsize: int = 2
    format: tuple[FieldFormat, ...] = (FieldFormat(axis="x"), FieldFormat(axis="y"))


@dataclass(frozen=True)
class CompareConfig:
    enabled: bool = False
    series_index: int = 0
    color_above: RGBA = DEFAULT_COLOR_ABOVE
    color_below: RGBA = DEFAULT_COLOR_BELOW


@dataclass(eq=False)
class Series:
    """One plotted series: raw points plus the display attributes a renderer reads.

    `origin_series` is set on series derived from another one and is never
    read by the comparator. `extras` holds any other host attribute and is
    carried over by shallow copy.
    """

    data: list[Any] = field(default_factory=list)
    datapoints: DataPoints = field(default_factory=DataPoints)
    color: RGBA = DEFAULT_SERIES_COLOR
    label: str | None = None
    bars: BarsStyle = field(default_factory=BarsStyle)
    lines: LinesStyle = field(default_factory=LinesStyle)
    points: PointsStyle = field(default_factory=PointsStyle)
    compare: CompareConfig = field(default_factory=CompareConfig)
    origin_series: Series | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    @property
    def orientation(self) -> Orientation:
        if self.bars.show and self.bars.horizontal:
            return "horizontal"
        return "vertical"

    @property
    def visible(self) -> bool:
        return self.bars.show or self.lines.show or self.points.show

    def hide(self) -> None:
        self.bars.show = False
        self.lines.show = False
        self.points.show = False
