#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/pipeline.py
# AI-SUMMARY: Split orchestrator: validate -> decode -> segment -> parallel slice/encode -> archive.
"""Request orchestration.

One :class:`SplitPipeline` serves one request and walks the states::

    IDLE -> VALIDATING -> DECODING -> SEGMENTING -> ENCODING -> ARCHIVING -> DONE

Any error moves it to ``FAILED`` and is re-raised unchanged; an archive is
only returned once every segment has been encoded.
"""

from __future__ import annotations

import logging
import math
import numbers
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .archive import Archive, EncodedFile, base_name_of, build_archive, entry_name
from .buffer import SampleBuffer
from .config import SplitContext
from .encoder import EXTENSION, encode
from .errors import DecodeError, InvalidParameters
from .extractor import extract
from .segmenter import (
    INVALID_COUNT_MESSAGE,
    INVALID_TIME_MESSAGE,
    EvenSplit,
    SegmentRange,
    SplitMode,
    TimeRange,
    compute_ranges,
)

logger = logging.getLogger(__name__)

MISSING_AUDIO_MESSAGE = "Please upload an audio file."
MISSING_PARAMETERS_MESSAGE = "Please provide either start/end times or number of segments."
CONFLICTING_PARAMETERS_MESSAGE = "Please provide either start/end times or number of segments, not both."
INCOMPLETE_RANGE_MESSAGE = "Please provide both start and end times."


class SplitState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    DECODING = "decoding"
    SEGMENTING = "segmenting"
    ENCODING = "encoding"
    ARCHIVING = "archiving"
    DONE = "done"
    FAILED = "failed"


_TERMINAL = (SplitState.DONE, SplitState.FAILED)


@dataclass(frozen=True)
class SplitRequest:
    """Validated user input for one split."""

    data: bytes
    base_name: str
    mode: SplitMode


def _present(value) -> bool:
    # NaN behaves like an empty form field.
    if value is None:
        return False
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return math.isfinite(float(value))
    return True


def validate_request(
    data: Optional[bytes],
    file_name: Optional[str] = None,
    *,
    start: Optional[float] = None,
    end: Optional[float] = None,
    count: Optional[int] = None,
    fallback_base_name: str = "audio",
) -> SplitRequest:
    """Check the raw inputs and pick the split mode.

    Raises:
        InvalidParameters: missing audio, no mode, both modes, a malformed
            time range or a non-positive count.
    """
    if not data:
        raise InvalidParameters(MISSING_AUDIO_MESSAGE, reason="audio")

    has_start, has_end, has_count = _present(start), _present(end), _present(count)
    if not (has_start or has_end or has_count):
        raise InvalidParameters(MISSING_PARAMETERS_MESSAGE, reason="missing")
    if (has_start or has_end) and has_count:
        raise InvalidParameters(CONFLICTING_PARAMETERS_MESSAGE, reason="conflict")

    base_name = base_name_of(file_name, fallback_base_name)
    if has_count:
        if (isinstance(count, bool) or not isinstance(count, numbers.Real)
                or float(count) != int(count) or int(count) <= 0):
            raise InvalidParameters(INVALID_COUNT_MESSAGE, reason="count")
        return SplitRequest(bytes(data), base_name, EvenSplit(int(count)))

    if not (has_start and has_end):
        raise InvalidParameters(INCOMPLETE_RANGE_MESSAGE, reason="range")
    try:
        start_s, end_s = float(start), float(end)
    except (TypeError, ValueError) as exc:
        raise InvalidParameters(INVALID_TIME_MESSAGE, reason="range") from exc
    if start_s < 0 or end_s <= start_s:
        raise InvalidParameters(INVALID_TIME_MESSAGE, reason="range")
    return SplitRequest(bytes(data), base_name, TimeRange(start_s, end_s))


def name_entries(base_name: str, mode: SplitMode, ranges: List[SegmentRange]) -> List[str]:
    if isinstance(mode, TimeRange):
        return [entry_name(base_name, EXTENSION, start=mode.start, end=mode.end)]
    return [entry_name(base_name, EXTENSION, ordinal=rng.index + 1) for rng in ranges]


def render_segment(source: SampleBuffer, segment: SegmentRange, name: str) -> EncodedFile:
    """Slice and encode one range. Safe to run concurrently on a shared source."""
    piece = extract(source, segment)
    data = encode(piece)
    logger.debug("segment %d [%d, %d) -> %s (%d bytes)",
                 segment.index, segment.start_frame, segment.end_frame, name, len(data))
    return EncodedFile(name=name, data=data)


class SplitPipeline:
    """Runs a single split request through every stage."""

    def __init__(self, context: Optional[SplitContext] = None) -> None:
        self.context = context or SplitContext()
        self.state = SplitState.IDLE
        self.history: List[SplitState] = [SplitState.IDLE]
        self.ranges: List[SegmentRange] = []
        self.processing_time: Optional[float] = None

    def _transition(self, state: SplitState) -> None:
        logger.debug("split state %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def run(
        self,
        data: Optional[bytes],
        file_name: Optional[str] = None,
        *,
        start: Optional[float] = None,
        end: Optional[float] = None,
        count: Optional[int] = None,
    ) -> Archive:
        if self.state is not SplitState.IDLE:
            raise RuntimeError(f"pipeline already used (state={self.state.value})")

        started = time.perf_counter()
        try:
            self._transition(SplitState.VALIDATING)
            request = validate_request(
                data, file_name, start=start, end=end, count=count,
                fallback_base_name=self.context.fallback_base_name,
            )

            self._transition(SplitState.DECODING)
            source = self._decode(request.data)
            logger.info("decoded %s: %.2fs, %d channel(s) @ %d Hz",
                        request.base_name, source.duration, source.channel_count, source.sample_rate)

            self._transition(SplitState.SEGMENTING)
            self.ranges = compute_ranges(source.frame_count, source.sample_rate, request.mode)
            names = name_entries(request.base_name, request.mode, self.ranges)
            logger.info("split into %d segment(s)", len(self.ranges))

            self._transition(SplitState.ENCODING)
            files = self._render_all(source, list(zip(self.ranges, names)))

            self._transition(SplitState.ARCHIVING)
            archive = build_archive(
                files,
                name=self.context.archive_name,
                compression=self.context.compression,
            )
        except Exception as exc:
            self._transition(SplitState.FAILED)
            logger.error("split failed: %s", exc)
            raise

        self._transition(SplitState.DONE)
        self.processing_time = time.perf_counter() - started
        logger.info("archive %s ready: %d entries, %d bytes in %.2fs",
                    archive.name, len(archive.entry_names), archive.size, self.processing_time)
        return archive

    def _decode(self, data: bytes) -> SampleBuffer:
        buffer = self.context.decoder(data)
        if not isinstance(buffer, SampleBuffer):
            raise DecodeError(f"decoder returned {type(buffer).__name__}, expected SampleBuffer")
        return buffer

    def _render_all(self, source: SampleBuffer, jobs: List[Tuple[SegmentRange, str]]) -> List[EncodedFile]:
        workers = self.context.resolved_workers(len(jobs))
        if workers == 1:
            return [render_segment(source, segment, name) for segment, name in jobs]

        logger.debug("encoding %d segment(s) on %d worker(s)", len(jobs), workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="audio-split") as pool:
            futures = [pool.submit(render_segment, source, segment, name) for segment, name in jobs]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()
            for future in futures:
                if future in done and future.exception() is not None:
                    raise future.exception()
            # Results are collected in submission order so entry order matches range order.
            return [future.result() for future in futures]

    @property
    def finished(self) -> bool:
        return self.state in _TERMINAL


__all__ = [
    "SplitState",
    "SplitRequest",
    "SplitPipeline",
    "validate_request",
    "name_entries",
    "render_segment",
    "MISSING_AUDIO_MESSAGE",
    "MISSING_PARAMETERS_MESSAGE",
    "CONFLICTING_PARAMETERS_MESSAGE",
    "INCOMPLETE_RANGE_MESSAGE",
]
