#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/extractor.py
# AI-SUMMARY: Copies one frame range out of a source buffer (hard cut, no fades).

from __future__ import annotations

from .buffer import SampleBuffer
from .segmenter import SegmentRange


def extract(source: SampleBuffer, segment: SegmentRange) -> SampleBuffer:
    """Return a new buffer holding ``source`` frames ``[start_frame, end_frame)``.

    Sample rate and channel layout are preserved; samples are copied verbatim.
    """
    if segment.end_frame > source.frame_count:
        raise ValueError(
            f"range [{segment.start_frame}, {segment.end_frame}) exceeds buffer of {source.frame_count} frames"
        )
    return SampleBuffer(source.channels[:, segment.start_frame:segment.end_frame], source.sample_rate)


__all__ = ["extract"]
