from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from compareseries.clone import clone_series
from compareseries.colors import rgba_to_hex
from compareseries.lookup import ReferenceLookup, build_reference_lookup, extract_key_value
from compareseries.series import DataPoints, Series

if TYPE_CHECKING:
    from compareseries.plot import Plot


LOGGER = logging.getLogger(__name__)


def is_above(key: Any, value: Any, lookup: ReferenceLookup) -> bool:
    """Points with no reference at their key count as above."""

    if key not in lookup:
        return True
    try:
        return bool(value >= lookup[key])
    except TypeError:
        # None or other incomparable values fail the comparison like NaN does
        return False


def partition(all_series: list[Series], subject_position: int) -> None:
    """Split the series at `subject_position` into above/below series.

    On success the subject is hidden and the two derived series are appended
    to `all_series`, above first. Disabled comparison, a self reference and
    a reference position outside the list leave everything untouched.
    """

    if not 0 <= subject_position < len(all_series):
        LOGGER.debug("compare skipped: subject position %d out of range", subject_position)
        return
    subject = all_series[subject_position]
    config = subject.compare
    if not config.enabled:
        LOGGER.debug("compare skipped: series %d has compare disabled", subject_position)
        return
    if config.series_index == subject_position:
        LOGGER.debug("compare skipped: series %d references itself", subject_position)
        return
    if not 0 <= config.series_index < len(all_series):
        LOGGER.debug(
            "compare skipped: series %d references missing series %d",
            subject_position,
            config.series_index,
        )
        return
    reference = all_series[config.series_index]

    # the reference is read with the subject's orientation, not its own
    orientation = subject.orientation
    lookup = build_reference_lookup(reference.data, orientation)

    above = clone_series(subject, config.color_above)
    below = clone_series(subject, config.color_below)
    for point in subject.data:
        key, value = extract_key_value(point, orientation)
        if is_above(key, value, lookup):
            above.data.append(point)
        else:
            below.data.append(point)

    subject.hide()
    all_series.append(above)
    all_series.append(below)
    LOGGER.debug(
        "compared series %d to series %d (%s): %d above in %s, %d below in %s",
        subject_position,
        config.series_index,
        orientation,
        len(above.data),
        rgba_to_hex(above.color),
        len(below.data),
        rgba_to_hex(below.color),
    )


class SeriesComparator:
    """`process_raw_data` hook that partitions each opted-in series."""

    def __call__(
        self,
        plot: Plot,
        series: Series,
        data: list[Any],
        datapoints: DataPoints,
        position: int,
    ) -> None:
        self.partition(plot.get_data(), position)

    def partition(self, all_series: list[Series], subject_position: int) -> None:
        partition(all_series, subject_position)
