#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/errors.py
# AI-SUMMARY: Error kinds surfaced by the split pipeline (parameters / decode / archive).

from __future__ import annotations

from typing import Dict, Optional


class SplitError(Exception):
    """Base class for every failure a split request can report."""

    kind = "split_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "message": self.message}


class InvalidParameters(SplitError):
    """Missing, conflicting or out-of-range user input. The user can fix and retry."""

    kind = "invalid_parameters"

    def __init__(self, message: str, *, reason: Optional[str] = None) -> None:
        super().__init__(message)
        self.reason = reason


class DecodeError(SplitError):
    """Input bytes could not be decoded as audio."""

    kind = "decode_error"


class ArchiveError(SplitError):
    """Fatal fault while serializing the output archive."""

    kind = "archive_error"


__all__ = ["SplitError", "InvalidParameters", "DecodeError", "ArchiveError"]
