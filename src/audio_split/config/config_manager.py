#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: src/audio_split/config/config_manager.py
# AI-SUMMARY: Loads packaged YAML defaults, merges external YAML and AUDIO_SPLIT__ env overrides.

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

_UNSET = object()

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config.yaml'
ENV_PREFIX = 'AUDIO_SPLIT__'
ENV_CONFIG_PATH = 'AUDIO_SPLIT_CONFIG_PATH'


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config file must contain a mapping: {path}")
    return data


def _deep_merge_dict(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    result = dict(base)
    if not override:
        return result
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def _parse_env_value(raw: str) -> Any:
    value = raw.strip()
    lower = value.lower()
    if lower in {'true', 'false'}:
        return lower == 'true'
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except ValueError:
        return raw


def _apply_env_overrides(config: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    result = _deep_merge_dict({}, config)
    source = os.environ if environ is None else environ
    for key, raw in source.items():
        if not key.startswith(ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(ENV_PREFIX):].split('__') if part]
        if not parts:
            continue
        value = _parse_env_value(raw)
        cursor = result
        for part in parts[:-1]:
            if part not in cursor or not isinstance(cursor[part], dict):
                cursor[part] = {}
            else:
                cursor[part] = dict(cursor[part])
            cursor = cursor[part]
        cursor[parts[-1]] = value
    return result


class ConfigManager:
    """Configuration for audio-split.

    Precedence, lowest first: packaged ``config.yaml``, the file named by
    ``AUDIO_SPLIT_CONFIG_PATH``, an explicit ``config_path``, then
    ``AUDIO_SPLIT__SECTION__KEY`` environment variables.
    """

    REQUIRED_SECTIONS = ('output', 'archive', 'processing', 'logging')
    COMPRESSIONS = ('deflated', 'stored')

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._environ = environ
        self.config = self._load_config()
        self._validate_config()

        logger.debug("config loaded from %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        config = _load_yaml_file(DEFAULT_CONFIG_PATH)

        external_path = environ.get(ENV_CONFIG_PATH)
        if external_path:
            config = _deep_merge_dict(config, _load_yaml_file(Path(external_path)))

        if self.config_path.resolve() != DEFAULT_CONFIG_PATH.resolve():
            config = _deep_merge_dict(config, _load_yaml_file(self.config_path))

        return _apply_env_overrides(config, environ)

    def _validate_config(self):
        for section in self.REQUIRED_SECTIONS:
            if not isinstance(self.config.get(section), dict):
                raise ValueError(f"config is missing required section: {section}")

        compression = str(self.get('archive.compression')).lower()
        if compression not in self.COMPRESSIONS:
            raise ValueError(f"unsupported archive.compression: {compression}")

        workers = self.get('processing.max_workers')
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 0:
            raise ValueError(f"processing.max_workers must be an integer >= 0, got {workers!r}")

        if not str(self.get('output.archive_name', '')).strip():
            raise ValueError("output.archive_name must not be empty")

    def get(self, key_path: str, default: Any = _UNSET) -> Any:
        """Look up a dotted key such as ``'archive.compression'``."""
        value = self.config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            if default is not _UNSET:
                return default
            raise KeyError(f"config key not found: {key_path}")

    def set(self, key_path: str, value: Any):
        keys = key_path.split('.')
        config = self.config
        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]
        config[keys[-1]] = value
        logger.debug("config override: %s = %r", key_path, value)

    def get_section(self, section: str) -> Dict[str, Any]:
        if section not in self.config:
            raise KeyError(f"config section not found: {section}")
        return self.config[section].copy()

    def get_logging_config(self) -> Dict[str, Any]:
        log_config = self.get_section('logging')
        level_name = str(log_config.get('level', 'INFO')).upper()
        log_config['level'] = logging.getLevelName(level_name) if level_name in (
            'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL') else logging.INFO
        log_config.setdefault('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        return log_config

    def __repr__(self) -> str:
        return f"ConfigManager(config_path={self.config_path})"
