from compareseries.adapters import normalize_points
from compareseries.clone import clone_series
from compareseries.comparator import SeriesComparator, partition
from compareseries.errors import CompareConfigError, CompareSeriesError, SeriesDataError
from compareseries.lookup import build_reference_lookup, extract_key_value
from compareseries.options import parse_compare_config
from compareseries.plot import Plot
from compareseries.plugin import PLUGIN, PluginSpec
from compareseries.series import (
    BarsStyle,
    CompareConfig,
    DataPoints,
    FieldFormat,
    LinesStyle,
    PointsStyle,
    Series,
)

__all__ = [
    "BarsStyle",
    "CompareConfig",
    "CompareConfigError",
    "CompareSeriesError",
    "DataPoints",
    "FieldFormat",
    "LinesStyle",
    "PLUGIN",
    "Plot",
    "PluginSpec",
    "PointsStyle",
    "Series",
    "SeriesComparator",
    "SeriesDataError",
    "build_reference_lookup",
    "clone_series",
    "extract_key_value",
    "normalize_points",
    "parse_compare_config",
    "partition",
]
