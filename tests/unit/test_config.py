# File: tests/unit/test_config.py
# AI-SUMMARY: ConfigManager layering (defaults / YAML / env) and SplitContext derivation.

import logging

import pytest
import yaml

from audio_split.config import ConfigManager, SplitContext
from audio_split.decoder import decode_audio


def test_defaults():
    manager = ConfigManager(environ={})
    assert manager.get('output.archive_name') == 'segments.zip'
    assert manager.get('archive.compression') == 'deflated'
    assert manager.get('processing.max_workers') == 0
    assert manager.get('missing.key', 'fallback') == 'fallback'
    with pytest.raises(KeyError):
        manager.get('missing.key')


def test_env_overrides_are_typed():
    manager = ConfigManager(environ={
        'AUDIO_SPLIT__PROCESSING__MAX_WORKERS': '3',
        'AUDIO_SPLIT__ARCHIVE__COMPRESSION': 'stored',
        'OTHER__PROCESSING__MAX_WORKERS': '9',
    })
    assert manager.get('processing.max_workers') == 3
    assert manager.get('archive.compression') == 'stored'


def test_explicit_yaml_is_merged(tmp_path):
    path = tmp_path / 'extra.yaml'
    path.write_text(yaml.safe_dump({'output': {'archive_name': 'parts.zip'}}), encoding='utf-8')
    manager = ConfigManager(str(path), environ={})
    assert manager.get('output.archive_name') == 'parts.zip'
    assert manager.get('output.fallback_base_name') == 'audio'


def test_external_path_from_environment(tmp_path):
    path = tmp_path / 'ext.yaml'
    path.write_text("processing:\n  max_workers: 5\n", encoding='utf-8')
    manager = ConfigManager(environ={'AUDIO_SPLIT_CONFIG_PATH': str(path)})
    assert manager.get('processing.max_workers') == 5


@pytest.mark.parametrize(
    "override",
    [
        {'archive': {'compression': 'bzip9'}},
        {'processing': {'max_workers': -1}},
        {'output': {'archive_name': ''}},
        {'logging': 'loud'},
    ],
)
def test_invalid_config_rejected(tmp_path, override):
    path = tmp_path / 'bad.yaml'
    path.write_text(yaml.safe_dump(override), encoding='utf-8')
    with pytest.raises(ValueError):
        ConfigManager(str(path), environ={})


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path / 'nope.yaml'), environ={})


def test_logging_config_level():
    manager = ConfigManager(environ={'AUDIO_SPLIT__LOGGING__LEVEL': 'debug'})
    assert manager.get_logging_config()['level'] == logging.DEBUG


def test_split_context_from_config():
    manager = ConfigManager(environ={'AUDIO_SPLIT__PROCESSING__MAX_WORKERS': '2'})
    context = SplitContext.from_config(manager)
    assert context.archive_name == 'segments.zip'
    assert context.compression == 'deflated'
    assert context.max_workers == 2
    assert context.decoder is decode_audio
    assert context.resolved_workers(10) == 2
    assert context.resolved_workers(1) == 1


def test_split_context_auto_workers():
    context = SplitContext(max_workers=0)
    assert 1 <= context.resolved_workers(64) <= 64
