# File: tests/unit/test_buffer_extract.py
# AI-SUMMARY: SampleBuffer invariants and hard-cut slice extraction.

import numpy as np
import pytest

from audio_split.buffer import SampleBuffer
from audio_split.extractor import extract
from audio_split.segmenter import SegmentRange


def test_buffer_shape_and_duration(stereo_buffer):
    assert stereo_buffer.channel_count == 2
    assert stereo_buffer.frame_count == 16000
    assert stereo_buffer.sample_rate == 8000
    assert stereo_buffer.duration == pytest.approx(2.0)


def test_buffer_is_read_only():
    source = np.zeros((1, 4), dtype=np.float32)
    buffer = SampleBuffer(source, 100)
    with pytest.raises(ValueError):
        buffer.channels[0, 0] = 1.0
    # The caller's array is copied, not frozen.
    source[0, 0] = 0.5
    assert buffer.channels[0, 0] == 0.0


def test_buffer_mono_vector_becomes_one_channel():
    buffer = SampleBuffer(np.ones(10), 44100)
    assert buffer.channels.shape == (1, 10)


def test_buffer_rejects_ragged_channels():
    with pytest.raises(ValueError):
        SampleBuffer.from_channels([[0.0, 0.1], [0.2]], 8000)


def test_buffer_rejects_bad_sample_rate():
    with pytest.raises(ValueError):
        SampleBuffer(np.zeros((1, 4)), 0)


def test_from_interleaved_transposes():
    frames = np.array([[0.1, -0.1], [0.2, -0.2], [0.3, -0.3]], dtype=np.float32)
    buffer = SampleBuffer.from_interleaved(frames, 8000)
    np.testing.assert_array_equal(buffer.channels[0], frames[:, 0])
    np.testing.assert_array_equal(buffer.channels[1], frames[:, 1])


def test_extract_copies_exact_frames(stereo_buffer):
    piece = extract(stereo_buffer, SegmentRange(1000, 3500, 0))
    assert piece.frame_count == 2500
    assert piece.channel_count == 2
    assert piece.sample_rate == stereo_buffer.sample_rate
    np.testing.assert_array_equal(piece.channels, stereo_buffer.channels[:, 1000:3500])


def test_extract_does_not_share_memory(stereo_buffer):
    piece = extract(stereo_buffer, SegmentRange(0, 100, 0))
    assert not np.shares_memory(piece.channels, stereo_buffer.channels)


def test_adjacent_extracts_reassemble_source(stereo_buffer):
    first = extract(stereo_buffer, SegmentRange(0, 7001, 0))
    second = extract(stereo_buffer, SegmentRange(7001, stereo_buffer.frame_count, 1))
    np.testing.assert_array_equal(
        np.concatenate([first.channels, second.channels], axis=1),
        stereo_buffer.channels,
    )


def test_extract_rejects_range_past_end(stereo_buffer):
    with pytest.raises(ValueError):
        extract(stereo_buffer, SegmentRange(0, stereo_buffer.frame_count + 1, 0))


def test_buffer_equality_compares_samples_and_rate():
    a = SampleBuffer(np.zeros((1, 4)), 100)
    assert a == SampleBuffer(np.zeros((1, 4)), 100)
    assert a != SampleBuffer(np.zeros((1, 4)), 200)
    assert a != SampleBuffer(np.ones((1, 4)), 100)
    assert a != SampleBuffer(np.zeros((2, 4)), 100)
    assert a != "not a buffer"
