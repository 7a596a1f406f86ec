#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/decoder.py
# AI-SUMMARY: Default bytes -> SampleBuffer decode capability (soundfile first, pydub/FFmpeg fallback).

from __future__ import annotations

import io
import logging
from typing import Callable

import numpy as np
import soundfile as sf
from pydub import AudioSegment
from pydub.exceptions import CouldntDecodeError

from .buffer import SampleBuffer
from .errors import DecodeError

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], SampleBuffer]


def decode_audio(data: bytes) -> SampleBuffer:
    """Decode an in-memory audio file to float PCM.

    libsndfile handles WAV/FLAC/OGG/AIFF directly; anything it rejects
    (MP3, M4A, ...) is retried through pydub, which needs FFmpeg on PATH.

    Raises:
        DecodeError: neither backend could read the bytes.
    """
    if not data:
        raise DecodeError("Error processing audio: input is empty.")

    try:
        return _decode_with_soundfile(data)
    except (RuntimeError, TypeError) as exc:
        logger.debug("soundfile could not decode input (%s), trying pydub", exc)

    try:
        return _decode_with_pydub(data)
    except (CouldntDecodeError, OSError, ValueError, IndexError, KeyError) as exc:
        raise DecodeError(f"Error processing audio: unable to decode input ({exc})") from exc


def _decode_with_soundfile(data: bytes) -> SampleBuffer:
    frames, sample_rate = sf.read(io.BytesIO(data), dtype="float32", always_2d=True)
    logger.debug("decoded with soundfile: %s frames x %s channels @ %s Hz", frames.shape[0], frames.shape[1], sample_rate)
    return SampleBuffer.from_interleaved(frames, sample_rate)


def _decode_with_pydub(data: bytes) -> SampleBuffer:
    segment = AudioSegment.from_file(io.BytesIO(data))
    channels = int(segment.channels)
    full_scale = float(1 << (8 * segment.sample_width - 1))
    samples = np.asarray(segment.get_array_of_samples(), dtype=np.float64)
    frames = (samples / full_scale).reshape(-1, channels)
    logger.debug("decoded with pydub: %d frames x %d channels @ %d Hz", frames.shape[0], channels, segment.frame_rate)
    return SampleBuffer.from_interleaved(frames, int(segment.frame_rate))


__all__ = ["Decoder", "decode_audio"]
