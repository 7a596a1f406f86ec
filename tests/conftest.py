# File: tests/conftest.py
# AI-SUMMARY: pytest setup: src/ on sys.path, slow-marker toggle, shared sine / WAV byte fixtures.

import io
import os
import pytest
import numpy as np
import soundfile as sf
from pathlib import Path

# Make the package importable from src/
import sys
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from audio_split.buffer import SampleBuffer  # noqa: E402


def _env_true(name: str) -> bool:
    return os.environ.get(name, '').strip() in {'1', 'true', 'True', 'YES', 'yes'}


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup('capability toggles')
    group.addoption('--runslow', action='store_true', default=False, help='run tests marked as slow')


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line('markers', 'slow: long-running test, enable with --runslow')


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    run_slow = config.getoption('--runslow') or _env_true('AUDIO_SPLIT_RUN_SLOW')
    skip_slow = pytest.mark.skip(reason='slow test skipped; enable with --runslow or AUDIO_SPLIT_RUN_SLOW=1')
    for item in items:
        if 'slow' in item.keywords and not run_slow:
            item.add_marker(skip_slow)


def make_sine(sr: int, dur_s: float, freq: float = 220.0, amp: float = 0.5) -> np.ndarray:
    t = np.linspace(0, dur_s, int(round(sr * dur_s)), endpoint=False)
    return (amp * np.sin(2 * np.pi * freq * t)).astype(np.float32)


@pytest.fixture
def stereo_buffer() -> SampleBuffer:
    sr = 8000
    left = make_sine(sr, 2.0, 220.0)
    right = make_sine(sr, 2.0, 330.0, amp=0.25)
    return SampleBuffer(np.stack([left, right]), sr)


@pytest.fixture
def wav_bytes() -> bytes:
    """Two seconds of 16 kHz mono PCM_16 WAV."""
    sr = 16000
    sink = io.BytesIO()
    sf.write(sink, make_sine(sr, 2.0), sr, format='WAV', subtype='PCM_16')
    return sink.getvalue()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith('AUDIO_SPLIT__') or key == 'AUDIO_SPLIT_CONFIG_PATH':
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def tone():
    """Factory fixture: ``tone(sr, dur_s, freq=220.0, amp=0.5)`` -> float32 sine."""
    return make_sine
