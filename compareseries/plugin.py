from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from compareseries.comparator import SeriesComparator
from compareseries.options import DEFAULT_OPTIONS

if TYPE_CHECKING:
    from compareseries.plot import Plot


@dataclass(frozen=True)
class PluginSpec:
    name: str
    version: str
    init: Callable[[Plot], None]
    options: dict[str, Any] = field(default_factory=dict)


def init(plot: Plot) -> None:
    plot.hooks.process_raw_data.append(SeriesComparator())


PLUGIN = PluginSpec(
    name="compareseries",
    version="1.0",
    init=init,
    options=DEFAULT_OPTIONS,
)
