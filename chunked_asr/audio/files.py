"""Audio file loading into the PCM16 stream the recognizer uploads."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import soxr
import soundfile as sf

# Extensions read as headerless PCM16 (already at the target rate and layout).
RAW_PCM_EXTS = {".pcm", ".raw"}


def _to_mono(x: np.ndarray) -> np.ndarray:
    if x.ndim > 1:
        return x.mean(axis=1)
    return x


def _resample(x: np.ndarray, sr: int, target_sr: int) -> np.ndarray:
    if sr == target_sr:
        return x
    y = soxr.resample(x.astype(np.float32, copy=False), sr, target_sr)
    return y.astype(np.float32, copy=False)


def file_to_pcm16(path: str | Path, *, sample_rate: int) -> bytes:
    """Load an audio file and return PCM16 mono bytes at ``sample_rate``.

    Raises ValueError when the file is not audio soundfile can decode.
    """
    p = Path(path)
    if p.suffix.lower() in RAW_PCM_EXTS:
        return p.read_bytes()

    try:
        x, sr = sf.read(str(p), dtype="float32", always_2d=False)
    except sf.LibsndfileError as exc:
        raise ValueError(f"cannot decode audio file {p}: {exc}") from exc
    x = _resample(_to_mono(np.asarray(x, dtype=np.float32)), int(sr), int(sample_rate))
    x = np.clip(x, -1.0, 1.0)
    return (x * 32767.0).astype(np.int16).tobytes()


def pcm16_duration_seconds(pcm_bytes: bytes, *, sample_rate: int, channel: int = 1) -> float:
    bytes_per_second = int(sample_rate) * int(channel) * 2
    if bytes_per_second <= 0:
        return 0.0
    return float(len(pcm_bytes)) / float(bytes_per_second)


__all__ = ["RAW_PCM_EXTS", "file_to_pcm16", "pcm16_duration_seconds"]
