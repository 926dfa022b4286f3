from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from chunked_asr.audio import file_to_pcm16, iter_pcm16_chunks, pcm16_duration_seconds


def test_iter_pcm16_chunks_keeps_short_tail() -> None:
    chunks = list(iter_pcm16_chunks(b"\x00" * 1000, chunk_bytes=240))
    assert [len(c) for c in chunks] == [240, 240, 240, 240, 40]


def test_iter_pcm16_chunks_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        list(iter_pcm16_chunks(b"\x00", chunk_bytes=0))


def test_raw_pcm_is_passed_through(tmp_path: Path) -> None:
    path = tmp_path / "capture.pcm"
    path.write_bytes(b"\x01\x02\x03\x04")
    assert file_to_pcm16(path, sample_rate=16000) == b"\x01\x02\x03\x04"


def test_wav_at_target_rate(tmp_path: Path) -> None:
    path = tmp_path / "tone.wav"
    t = np.arange(1600, dtype=np.float32) / 16000.0
    sf.write(str(path), 0.5 * np.sin(2 * np.pi * 440.0 * t), 16000, subtype="PCM_16")

    pcm = file_to_pcm16(path, sample_rate=16000)
    assert len(pcm) == 1600 * 2
    samples = np.frombuffer(pcm, dtype=np.int16)
    assert np.abs(samples).max() <= 16384 + 2


def test_stereo_wav_is_resampled_to_mono(tmp_path: Path) -> None:
    path = tmp_path / "stereo.wav"
    sf.write(str(path), np.zeros((4800, 2), dtype=np.float32), 48000, subtype="PCM_16")

    pcm = file_to_pcm16(path, sample_rate=16000)
    assert abs(len(pcm) // 2 - 1600) <= 2


def test_duration() -> None:
    assert pcm16_duration_seconds(b"\x00" * 32000, sample_rate=16000) == 1.0
    assert pcm16_duration_seconds(b"\x00" * 32000, sample_rate=0) == 0.0


def test_undecodable_file_is_a_value_error(tmp_path: Path) -> None:
    path = tmp_path / "notes.wav"
    path.write_text("not audio")
    with pytest.raises(ValueError):
        file_to_pcm16(path, sample_rate=16000)
