"""Fixed-size framing of a PCM16 byte stream."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator, AsyncIterator, Iterable


def iter_pcm16_chunks(pcm_bytes: bytes, *, chunk_bytes: int) -> Iterator[bytes]:
    if chunk_bytes <= 0:
        raise ValueError("chunk_bytes must be > 0")
    for i in range(0, len(pcm_bytes), chunk_bytes):
        yield pcm_bytes[i : i + chunk_bytes]


async def aiter_frames(frames: Iterable[bytes], *, interval_s: float = 0.0) -> AsyncIterator[bytes]:
    """Yield frames asynchronously, optionally paced like a live capture."""
    for frame in frames:
        yield frame
        if interval_s > 0:
            await asyncio.sleep(interval_s)


__all__ = ["aiter_frames", "iter_pcm16_chunks"]
