#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/segmenter.py
# AI-SUMMARY: Turns a time range or an even split count into sample-accurate frame ranges.
"""Segment boundary computation.

Pure functions only: no audio data is touched here, just frame counts and
the sample rate. Two request modes exist:

* :class:`TimeRange` -- one explicit ``[start, end)`` window in seconds.
* :class:`EvenSplit` -- ``count`` equally long parts covering the whole track.

Seconds are converted to frames with round-half-up, so ``x.5`` always moves
to the later frame.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import List, Union

from .errors import InvalidParameters

logger = logging.getLogger(__name__)

INVALID_TIME_MESSAGE = "Invalid start or end time."
INVALID_RANGE_MESSAGE = "Invalid segment range."
INVALID_COUNT_MESSAGE = "Number of segments must be greater than 0."


@dataclass(frozen=True)
class TimeRange:
    start: float
    end: float


@dataclass(frozen=True)
class EvenSplit:
    count: int


SplitMode = Union[TimeRange, EvenSplit]


@dataclass(frozen=True)
class SegmentRange:
    """Half-open frame range ``[start_frame, end_frame)`` with its ordinal."""

    start_frame: int
    end_frame: int
    index: int = 0

    def __post_init__(self) -> None:
        if self.start_frame < 0:
            raise ValueError(f"start_frame must be >= 0, got {self.start_frame}")
        if self.end_frame <= self.start_frame:
            raise ValueError(f"end_frame ({self.end_frame}) must exceed start_frame ({self.start_frame})")
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")

    @property
    def frame_count(self) -> int:
        return self.end_frame - self.start_frame


def seconds_to_frame(seconds: float, sample_rate: int) -> int:
    """Round-half-up conversion from seconds to a frame index."""
    return int(math.floor(float(seconds) * sample_rate + 0.5))


def compute_ranges(frame_count: int, sample_rate: int, mode: SplitMode) -> List[SegmentRange]:
    """Return the ordered frame ranges for ``mode``.

    Raises:
        InvalidParameters: the mode cannot be satisfied by a track of
            ``frame_count`` frames. ``reason`` is ``"range"`` for negative or
            out-of-order times, ``"bounds"`` when the range runs past the end
            of the audio and ``"count"`` for an unusable segment count.
    """
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    if frame_count < 0:
        raise ValueError(f"frame_count must be >= 0, got {frame_count}")

    if isinstance(mode, TimeRange):
        ranges = [_time_range(frame_count, sample_rate, mode)]
    elif isinstance(mode, EvenSplit):
        ranges = _even_split(frame_count, sample_rate, mode)
    else:
        raise TypeError(f"unsupported split mode: {type(mode).__name__}")

    logger.debug("computed %d range(s) for %s over %d frames", len(ranges), mode, frame_count)
    return ranges


def _time_range(frame_count: int, sample_rate: int, mode: TimeRange) -> SegmentRange:
    start, end = float(mode.start), float(mode.end)
    if not (math.isfinite(start) and math.isfinite(end)) or start < 0 or end <= start:
        raise InvalidParameters(INVALID_TIME_MESSAGE, reason="range")

    start_frame = seconds_to_frame(start, sample_rate)
    end_frame = seconds_to_frame(end, sample_rate)
    if end_frame > frame_count or end_frame <= start_frame:
        raise InvalidParameters(INVALID_RANGE_MESSAGE, reason="bounds")
    return SegmentRange(start_frame, end_frame, 0)


def _even_split(frame_count: int, sample_rate: int, mode: EvenSplit) -> List[SegmentRange]:
    count = mode.count
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count <= 0:
        raise InvalidParameters(INVALID_COUNT_MESSAGE, reason="count")
    count = int(count)
    if count > frame_count:
        raise InvalidParameters(
            f"Cannot split {frame_count} audio frames into {count} segments: more segments than audio frames.",
            reason="count",
        )

    segment_duration = (frame_count / float(sample_rate)) / count
    # Each boundary is computed once and shared by the neighbouring ranges.
    boundaries = [seconds_to_frame(i * segment_duration, sample_rate) for i in range(count)]
    boundaries.append(frame_count)

    ranges: List[SegmentRange] = []
    for index in range(count):
        start_frame, end_frame = boundaries[index], boundaries[index + 1]
        if end_frame <= start_frame:
            raise InvalidParameters(
                f"Segment {index + 1} of {count} would be empty; use fewer segments.",
                reason="count",
            )
        ranges.append(SegmentRange(start_frame, end_frame, index))
    return ranges


__all__ = [
    "TimeRange",
    "EvenSplit",
    "SplitMode",
    "SegmentRange",
    "seconds_to_frame",
    "compute_ranges",
    "INVALID_TIME_MESSAGE",
    "INVALID_RANGE_MESSAGE",
    "INVALID_COUNT_MESSAGE",
]
