#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/buffer.py
# AI-SUMMARY: Immutable multi-channel PCM buffer shared by decode, slicing and encoding.

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True, eq=False)
class SampleBuffer:
    """Multi-channel float PCM audio.

    ``channels`` has shape ``(channel_count, frame_count)`` and dtype float32.
    The array is flagged read-only on construction, so a buffer can be handed
    to several worker threads without copying or locking.
    """

    channels: np.ndarray
    sample_rate: int

    def __post_init__(self) -> None:
        array = np.array(self.channels, dtype=np.float32, order="C")
        if array.ndim == 1:
            array = array.reshape(1, -1)
        if array.ndim != 2:
            raise ValueError(f"channels must be 2-D (channels, frames), got {array.ndim}-D")
        if array.shape[0] < 1:
            raise ValueError("a buffer needs at least one channel")
        if int(self.sample_rate) < 1:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        array.setflags(write=False)
        object.__setattr__(self, "channels", array)
        object.__setattr__(self, "sample_rate", int(self.sample_rate))

    @classmethod
    def from_channels(cls, channels: Sequence[Sequence[float]], sample_rate: int) -> "SampleBuffer":
        lengths = {len(channel) for channel in channels}
        if len(lengths) > 1:
            raise ValueError(f"channel lengths differ: {sorted(lengths)}")
        return cls(np.asarray([list(channel) for channel in channels], dtype=np.float32), sample_rate)

    @classmethod
    def from_interleaved(cls, frames: np.ndarray, sample_rate: int) -> "SampleBuffer":
        """Build from a ``(frames, channels)`` array, the layout soundfile returns."""
        array = np.asarray(frames, dtype=np.float32)
        if array.ndim == 1:
            array = array.reshape(-1, 1)
        return cls(array.T, sample_rate)

    @property
    def channel_count(self) -> int:
        return int(self.channels.shape[0])

    @property
    def frame_count(self) -> int:
        return int(self.channels.shape[1])

    @property
    def duration(self) -> float:
        return self.frame_count / float(self.sample_rate)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleBuffer):
            return NotImplemented
        return self.sample_rate == other.sample_rate and np.array_equal(self.channels, other.channels)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"SampleBuffer(channels={self.channel_count}, frames={self.frame_count}, "
            f"sample_rate={self.sample_rate})"
        )


__all__ = ["SampleBuffer"]
