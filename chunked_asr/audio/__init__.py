from .files import file_to_pcm16, pcm16_duration_seconds
from .chunks import aiter_frames, iter_pcm16_chunks

__all__ = ["aiter_frames", "file_to_pcm16", "iter_pcm16_chunks", "pcm16_duration_seconds"]
