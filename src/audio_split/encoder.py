#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/encoder.py
# AI-SUMMARY: Serializes a SampleBuffer into a canonical 44-byte-header 16-bit PCM WAV container.
"""Canonical WAV container writer.

Layout (all integers little-endian)::

    offset  size  field
    0       4     "RIFF"
    4       4     36 + data_size
    8       4     "WAVE"
    12      4     "fmt "
    16      4     16               (fmt chunk size)
    20      2     1                (linear PCM)
    22      2     channel count
    24      4     sample rate
    28      4     byte rate        (sample_rate * channels * 2)
    32      2     block align      (channels * 2)
    34      2     16               (bits per sample)
    36      4     "data"
    40      4     data_size        (frames * channels * 2)
    44      ...   interleaved int16 samples
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

import numpy as np

from .buffer import SampleBuffer

HEADER_SIZE = 44
BITS_PER_SAMPLE = 16
BYTES_PER_SAMPLE = BITS_PER_SAMPLE // 8
PCM_FORMAT_TAG = 1
FMT_CHUNK_SIZE = 16

EXTENSION = "wav"
MEDIA_TYPE = "audio/wav"


@dataclass(frozen=True)
class WavHeader:
    chunk_id: bytes
    chunk_size: int
    format: bytes
    subchunk1_id: bytes
    subchunk1_size: int
    audio_format: int
    channel_count: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: bytes
    data_size: int

    @property
    def frame_count(self) -> int:
        return self.data_size // self.block_align if self.block_align else 0


def to_pcm16(channels: np.ndarray) -> np.ndarray:
    """Clamp float samples to [-1, 1] and scale them to int16.

    Negative values scale by 32768 and the rest by 32767; the cast truncates
    toward zero.
    """
    clipped = np.clip(np.asarray(channels, dtype=np.float64), -1.0, 1.0)
    scaled = np.where(clipped < 0, clipped * 32768.0, clipped * 32767.0)
    return scaled.astype(np.int16)


def encode(buffer: SampleBuffer) -> bytes:
    """Return the complete WAV file for ``buffer``."""
    channel_count = buffer.channel_count
    block_align = channel_count * BYTES_PER_SAMPLE
    data_size = buffer.frame_count * block_align

    out = bytearray(HEADER_SIZE + data_size)
    struct.pack_into("<4s", out, 0, b"RIFF")
    struct.pack_into("<I", out, 4, 36 + data_size)
    struct.pack_into("<4s", out, 8, b"WAVE")
    struct.pack_into("<4s", out, 12, b"fmt ")
    struct.pack_into("<I", out, 16, FMT_CHUNK_SIZE)
    struct.pack_into("<H", out, 20, PCM_FORMAT_TAG)
    struct.pack_into("<H", out, 22, channel_count)
    struct.pack_into("<I", out, 24, buffer.sample_rate)
    struct.pack_into("<I", out, 28, buffer.sample_rate * block_align)
    struct.pack_into("<H", out, 32, block_align)
    struct.pack_into("<H", out, 34, BITS_PER_SAMPLE)
    struct.pack_into("<4s", out, 36, b"data")
    struct.pack_into("<I", out, 40, data_size)

    # (channels, frames) -> frames x channels, flattened row-major = interleaved.
    interleaved = to_pcm16(buffer.channels).T.astype("<i2")
    out[HEADER_SIZE:] = interleaved.tobytes(order="C")
    return bytes(out)


def parse_header(data: bytes) -> WavHeader:
    """Decode the fixed 44-byte header written by :func:`encode`."""
    if len(data) < HEADER_SIZE:
        raise ValueError(f"need at least {HEADER_SIZE} bytes, got {len(data)}")
    fields = struct.unpack_from("<4sI4s4sIHHIIHH4sI", data, 0)
    header = WavHeader(*fields)
    if header.chunk_id != b"RIFF" or header.format != b"WAVE":
        raise ValueError("not a RIFF/WAVE container")
    return header


__all__ = [
    "WavHeader",
    "encode",
    "parse_header",
    "to_pcm16",
    "HEADER_SIZE",
    "EXTENSION",
    "MEDIA_TYPE",
]
