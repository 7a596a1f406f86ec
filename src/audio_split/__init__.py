#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/__init__.py
# AI-SUMMARY: Package entry; exposes the split API, data types and error kinds.
"""
audio-split
===========

Cut one recording into time-bounded WAV segments and bundle them into a
single ZIP archive.

Typical use::

    from audio_split import split_file

    archive = split_file('talk.mp3', count=4)
    archive.write_to('out/')
"""

__version__ = "1.0.0"

from .api import split_audio, split_file
from .archive import Archive, EncodedFile, build_archive
from .buffer import SampleBuffer
from .config import ConfigManager, SplitContext
from .encoder import encode, parse_header
from .errors import ArchiveError, DecodeError, InvalidParameters, SplitError
from .extractor import extract
from .pipeline import SplitPipeline, SplitState
from .segmenter import EvenSplit, SegmentRange, TimeRange, compute_ranges

__all__ = [
    'split_audio',
    'split_file',
    'Archive',
    'EncodedFile',
    'build_archive',
    'SampleBuffer',
    'ConfigManager',
    'SplitContext',
    'encode',
    'parse_header',
    'SplitError',
    'InvalidParameters',
    'DecodeError',
    'ArchiveError',
    'extract',
    'SplitPipeline',
    'SplitState',
    'EvenSplit',
    'SegmentRange',
    'TimeRange',
    'compute_ranges',
]
