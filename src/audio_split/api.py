#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/api.py
# AI-SUMMARY: Public audio-split API: split raw bytes or a file into a ZIP archive of WAV segments.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .archive import Archive
from .config import SplitContext
from .pipeline import SplitPipeline

logger = logging.getLogger(__name__)


def split_audio(
    data: Optional[bytes],
    file_name: Optional[str] = None,
    *,
    start: Optional[float] = None,
    end: Optional[float] = None,
    count: Optional[int] = None,
    context: Optional[SplitContext] = None,
) -> Archive:
    """
    Split one encoded recording into segments bundled as a ZIP archive.

    Args:
        data: Raw bytes of the input audio file.
        file_name: Original file name; the part before the first ``.`` names
            the archive entries.
        start: Range start in seconds (use together with ``end``).
        end: Range end in seconds.
        count: Number of equally long segments (instead of start/end).
        context: Archive/worker/decoder settings; defaults to
            ``SplitContext.from_config()``.

    Returns:
        The archive holding one WAV file per segment.

    Raises:
        InvalidParameters: bad, missing or conflicting parameters.
        DecodeError: ``data`` is not decodable audio.
        ArchiveError: the archive could not be serialized.
    """
    pipeline = SplitPipeline(context or SplitContext.from_config())
    return pipeline.run(data, file_name, start=start, end=end, count=count)


def split_file(
    input_path: Union[str, Path],
    *,
    start: Optional[float] = None,
    end: Optional[float] = None,
    count: Optional[int] = None,
    context: Optional[SplitContext] = None,
) -> Archive:
    """Read ``input_path`` and run :func:`split_audio` on its contents."""
    path = Path(input_path).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(f"input audio not found: {path}")
    logger.info("splitting %s", path)
    return split_audio(path.read_bytes(), path.name, start=start, end=end, count=count, context=context)


__all__ = ['split_audio', 'split_file']
