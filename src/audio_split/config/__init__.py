#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/config/__init__.py
# AI-SUMMARY: Configuration entry: YAML/env ConfigManager and the per-call SplitContext.

"""Configuration helpers for audio-split."""

from .config_manager import ConfigManager
from .context import SplitContext

__all__ = [
    "ConfigManager",
    "SplitContext",
]
