#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/cli.py
# AI-SUMMARY: Command line front end: split one audio file and write the segment archive to disk.

"""
audio-split command line

- Two modes (pick exactly one):
  1. `--start S --end E` -- export one time range
  2. `--count N` -- split the whole file into N equal parts
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

import yaml

from .api import split_file
from .config import ConfigManager, SplitContext
from .errors import ArchiveError, DecodeError, InvalidParameters, SplitError

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_PARAMETERS = 2
EXIT_DECODE_ERROR = 3
EXIT_ARCHIVE_ERROR = 4

_EXIT_CODES = {
    InvalidParameters: EXIT_INVALID_PARAMETERS,
    DecodeError: EXIT_DECODE_ERROR,
    ArchiveError: EXIT_ARCHIVE_ERROR,
}


def setup_logging(config_manager: Optional[ConfigManager], verbose: bool = False) -> None:
    """Configure the root logger from the ``logging`` config section (built-in defaults if None)."""
    if config_manager is None:
        log_config = {'level': logging.INFO, 'format': DEFAULT_LOG_FORMAT}
    else:
        log_config = config_manager.get_logging_config()
    level = logging.DEBUG if verbose else log_config['level']
    logging.basicConfig(
        level=level,
        format=log_config['format'],
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='audio-split',
        description="Split an audio file into WAV segments bundled in one ZIP archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  audio-split talk.mp3 --count 4
  audio-split talk.mp3 --start 12.5 --end 40 -o clips/
        """,
    )

    parser.add_argument('input_file', help='input audio file')
    parser.add_argument('--start', type=float, default=None, help='range start in seconds')
    parser.add_argument('--end', type=float, default=None, help='range end in seconds')
    parser.add_argument('--count', type=int, default=None, help='number of equal segments')
    parser.add_argument(
        '--output', '-o',
        default=None,
        help='archive path or directory (default: ./<output.archive_name>)',
    )
    parser.add_argument('--config', default=None, help='extra YAML config merged over the defaults')
    parser.add_argument('--workers', type=int, default=None, help='encoding worker count (0 = CPU count)')
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='debug logging',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        config_manager = ConfigManager(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        setup_logging(None, verbose=args.verbose)
        logger.error("config error: %s", exc)
        return EXIT_FAILURE
    if args.workers is not None:
        config_manager.set('processing.max_workers', max(0, args.workers))
    setup_logging(config_manager, verbose=args.verbose)

    input_path = Path(args.input_file)
    if not input_path.is_file():
        logger.error("input file not found: %s", input_path)
        return EXIT_FAILURE

    context = SplitContext.from_config(config_manager)
    try:
        archive = split_file(input_path, start=args.start, end=args.end, count=args.count, context=context)
    except SplitError as exc:
        # The pipeline already logged the failure.
        return _EXIT_CODES.get(type(exc), EXIT_FAILURE)

    target = Path(args.output) if args.output else Path.cwd() / archive.name
    try:
        archive_path = archive.write_to(target)
    except OSError as exc:
        logger.error("cannot write archive to %s: %s", target, exc)
        return EXIT_FAILURE

    logger.info("=" * 50)
    logger.info("archive: %s", archive_path)
    for idx, name in enumerate(archive.entry_names, 1):
        logger.info("  %d. %s", idx, name)
    logger.info("=" * 50)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
