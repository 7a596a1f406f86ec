#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/archive.py
# AI-SUMMARY: Bundles encoded segment files into one deterministic ZIP archive and owns entry naming.

from __future__ import annotations

import io
import logging
import math
import os
import zipfile
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Iterable, List, Optional, Tuple, Union

from .errors import ArchiveError

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_NAME = "segments.zip"
DEFAULT_BASE_NAME = "audio"

# Earliest timestamp ZIP can store; fixed so identical input gives identical bytes.
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
_ENTRY_MODE = 0o644 << 16

_COMPRESSION = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


@dataclass(frozen=True)
class EncodedFile:
    name: str
    data: bytes


@dataclass(frozen=True)
class Archive:
    """The final downloadable artifact."""

    data: bytes
    name: str = DEFAULT_ARCHIVE_NAME
    entry_names: Tuple[str, ...] = field(default_factory=tuple)
    media_type: str = "application/zip"

    @property
    def size(self) -> int:
        return len(self.data)

    def write_to(self, target: Union[str, Path]) -> Path:
        """Write the archive to ``target``; a directory (existing, or ending in ``/``) receives ``self.name``."""
        path = Path(target).expanduser()
        if path.is_dir() or str(target).endswith(("/", os.sep)):
            path = path / self.name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.data)
        logger.info("archive written: %s (%d bytes)", path, self.size)
        return path


def compression_from_name(name: str) -> int:
    key = str(name).lower()
    if key not in _COMPRESSION:
        raise ValueError(f"unsupported archive compression: {name}")
    return _COMPRESSION[key]


def base_name_of(file_name: Optional[str], fallback: str = DEFAULT_BASE_NAME) -> str:
    """File name without directories, cut at its first ``.``."""
    if not file_name:
        return fallback
    name = PurePath(str(file_name).replace("\\", "/")).name
    base = name.split(".", 1)[0]
    return base or fallback


def format_seconds(value: float) -> str:
    """Print seconds the way they are typed: ``1``, ``2.5``, ``0.125``."""
    number = float(value)
    if math.isfinite(number) and number == int(number):
        return str(int(number))
    return repr(number)


def entry_name(base_name: str, extension: str, *, ordinal: Optional[int] = None,
               start: Optional[float] = None, end: Optional[float] = None) -> str:
    """Build an archive entry name.

    Even splits are numbered (``name_1.wav``); a single time range carries its
    bounds (``name_1.5-3.wav``).
    """
    if ordinal is not None:
        return f"{base_name}_{int(ordinal)}.{extension}"
    if start is None or end is None:
        raise ValueError("entry_name needs an ordinal or both start and end")
    return f"{base_name}_{format_seconds(start)}-{format_seconds(end)}.{extension}"


def build_archive(
    files: Iterable[EncodedFile],
    *,
    name: str = DEFAULT_ARCHIVE_NAME,
    compression: str = "deflated",
) -> Archive:
    """Write ``files`` into a ZIP archive, in the order given.

    Raises:
        ArchiveError: duplicate entry names or any serialization fault.
    """
    try:
        method = compression_from_name(compression)
    except ValueError as exc:
        raise ArchiveError(str(exc)) from exc

    names: List[str] = []
    sink = io.BytesIO()
    try:
        with zipfile.ZipFile(sink, mode="w", compression=method) as bundle:
            for encoded in files:
                if encoded.name in names:
                    raise ArchiveError(f"duplicate archive entry: {encoded.name}")
                info = zipfile.ZipInfo(encoded.name, date_time=_ZIP_EPOCH)
                info.compress_type = method
                info.external_attr = _ENTRY_MODE
                info.create_system = 3
                bundle.writestr(info, encoded.data)
                names.append(encoded.name)
    except ArchiveError:
        raise
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, ValueError, MemoryError) as exc:
        logger.error("archive serialization failed: %s", exc)
        raise ArchiveError(f"Could not build archive: {exc}") from exc

    archive = Archive(data=sink.getvalue(), name=name, entry_names=tuple(names))
    logger.debug("archive %s built with %d entries (%d bytes)", name, len(names), archive.size)
    return archive


__all__ = [
    "EncodedFile",
    "Archive",
    "build_archive",
    "entry_name",
    "base_name_of",
    "format_seconds",
    "compression_from_name",
    "DEFAULT_ARCHIVE_NAME",
    "DEFAULT_BASE_NAME",
]
