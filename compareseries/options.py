from __future__ import annotations

import copy
from typing import Any, Mapping

from compareseries.colors import parse_color
from compareseries.errors import CompareConfigError
from compareseries.series import CompareConfig


DEFAULT_COMPARE_OPTIONS: dict[str, Any] = {
    "enabled": False,
    "seriesIndex": 0,
    "colorAbove": "#FF0000",
    "colorBelow": "#00FF00",
}

DEFAULT_OPTIONS: dict[str, Any] = {"series": {"compare": dict(DEFAULT_COMPARE_OPTIONS)}}


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return `base` updated by `override`, merging nested mappings key by key."""

    out = copy.deepcopy(dict(base))
    if not override:
        return out
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(out.get(key), Mapping):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = copy.deepcopy(value)
    return out


def parse_compare_config(overrides: Mapping[str, Any] | None = None) -> CompareConfig:
    """Validate a `compare` option block and merge it over the defaults."""

    raw: dict[str, Any] = dict(DEFAULT_COMPARE_OPTIONS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise CompareConfigError(f"Unknown compare option: {key}")
            raw[key] = value

    if not isinstance(raw["enabled"], bool):
        raise CompareConfigError("Option `enabled` must be a boolean")

    index = raw["seriesIndex"]
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise CompareConfigError("Option `seriesIndex` must be an integer >= 0")

    return CompareConfig(
        enabled=raw["enabled"],
        series_index=index,
        color_above=parse_color(raw["colorAbove"]),
        color_below=parse_color(raw["colorBelow"]),
    )
