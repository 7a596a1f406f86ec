#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/config/context.py
# AI-SUMMARY: Per-call SplitContext (archive naming, compression, workers, decoder) built from ConfigManager.

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from ..archive import DEFAULT_ARCHIVE_NAME, DEFAULT_BASE_NAME
from ..decoder import Decoder, decode_audio
from .config_manager import ConfigManager


@dataclass(frozen=True)
class SplitContext:
    """Everything a split request needs besides its input and parameters."""

    archive_name: str = DEFAULT_ARCHIVE_NAME
    fallback_base_name: str = DEFAULT_BASE_NAME
    compression: str = "deflated"
    max_workers: int = 0
    decoder: Decoder = field(default=decode_audio, compare=False)

    @classmethod
    def from_config(cls, manager: Optional[ConfigManager] = None, *,
                    decoder: Optional[Decoder] = None) -> "SplitContext":
        manager = manager or ConfigManager()
        return cls(
            archive_name=str(manager.get('output.archive_name', DEFAULT_ARCHIVE_NAME)),
            fallback_base_name=str(manager.get('output.fallback_base_name', DEFAULT_BASE_NAME)),
            compression=str(manager.get('archive.compression', 'deflated')).lower(),
            max_workers=int(manager.get('processing.max_workers', 0)),
            decoder=decoder or decode_audio,
        )

    def resolved_workers(self, task_count: int) -> int:
        limit = self.max_workers if self.max_workers > 0 else (os.cpu_count() or 1)
        return max(1, min(limit, task_count))
