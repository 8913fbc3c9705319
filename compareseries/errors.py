from __future__ import annotations


class CompareSeriesError(Exception):
    """Base error for compareseries input and option handling."""


class SeriesDataError(CompareSeriesError):
    """Raised when raw point data cannot be coerced into series points."""


class CompareConfigError(CompareSeriesError, ValueError):
    """Raised when a `compare` option block is malformed."""
