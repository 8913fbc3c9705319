from __future__ import annotations

import dataclasses

from compareseries.colors import RGBA
from compareseries.series import CompareConfig, DataPoints, Series


def clone_series(subject: Series, color: RGBA) -> Series:
    """Copy `subject` into a new empty series drawn in `color`.

    Style groups are copied one by one so hiding or restyling the copy never
    touches the subject or a sibling copy. Point-format metadata is kept so
    the copy accepts the same tuple shape as the subject.
    """

    return Series(
        data=[],
        datapoints=DataPoints(
            points=[],
            pointsize=subject.datapoints.pointsize,
            format=subject.datapoints.format,
        ),
        color=color,
        label=None,
        bars=dataclasses.replace(subject.bars),
        lines=dataclasses.replace(subject.lines),
        points=dataclasses.replace(subject.points),
        # a split series is never split again
        compare=CompareConfig(enabled=False),
        origin_series=subject,
        extras=dict(subject.extras),
    )
