#!/usr/bin/env python3
"""Command-line client: transcribe an audio file over one chunked upload."""

from __future__ import annotations

import os
import asyncio
import logging
import argparse
from pathlib import Path
from dataclasses import replace

from chunked_asr.errors import AsrError
from chunked_asr.session import RecognitionSession
from chunked_asr.runtime import StreamingRecognizer, load_settings, configure_logging
from chunked_asr.config.secrets import ENV_ASR_ACCESS_KEY, ENV_ASR_SECRET_KEY
from chunked_asr.audio import aiter_frames, file_to_pcm16, iter_pcm16_chunks, pcm16_duration_seconds

logger = logging.getLogger(__name__)


def apply_key_overrides(access_key: str | None, secret_key: str | None) -> None:
    if access_key:
        os.environ[ENV_ASR_ACCESS_KEY] = access_key
    if secret_key:
        os.environ[ENV_ASR_SECRET_KEY] = secret_key


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Stream an audio file to the speech recognition endpoint")
    parser.add_argument("file", type=str, help="Audio file (wav/flac/ogg, or headerless .pcm/.raw PCM16)")
    parser.add_argument(
        "--frame-bytes", type=int, default=None, help="Raw bytes per streamed frame (default: ASR_FRAME_BYTES or 640)"
    )
    parser.add_argument("--realtime", action="store_true", help="Pace frames at the audio's real-time rate")
    parser.add_argument("--access-key", type=str, default=None, help=f"Overrides {ENV_ASR_ACCESS_KEY}")
    parser.add_argument("--secret-key", type=str, default=None, help=f"Overrides {ENV_ASR_SECRET_KEY}")
    parser.add_argument("--endpoint", type=str, default=None, help="Recognition endpoint URL")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def _on_begin(session: RecognitionSession) -> None:
    logger.warning("start speaking now (rate=%d, dev_pid=%d)", session.audio.sample_rate, session.audio.dev_pid)


async def run(args: argparse.Namespace) -> int:
    apply_key_overrides(args.access_key, args.secret_key)
    settings = load_settings()
    if args.endpoint:
        settings = replace(settings, http=replace(settings.http, endpoint=args.endpoint))

    if not settings.auth.access_key or not settings.auth.secret_key:
        logger.error("credentials missing: use --access-key/--secret-key or set %s/%s", ENV_ASR_ACCESS_KEY, ENV_ASR_SECRET_KEY)
        return 2

    path = Path(args.file)
    if not path.is_file():
        logger.error("file not found: %s", path)
        return 2

    frame_bytes = settings.buffers.frame_bytes if args.frame_bytes is None else args.frame_bytes
    if frame_bytes <= 0:
        logger.error("--frame-bytes must be > 0, got %d", frame_bytes)
        return 2

    try:
        pcm = file_to_pcm16(path, sample_rate=settings.audio.sample_rate)
    except (OSError, ValueError) as exc:
        logger.error("cannot read audio: %s", exc)
        return 2
    frames = list(iter_pcm16_chunks(pcm, chunk_bytes=frame_bytes))
    duration = pcm16_duration_seconds(pcm, sample_rate=settings.audio.sample_rate, channel=settings.audio.channel)
    interval_s = duration / len(frames) if args.realtime and frames else 0.0
    logger.info("streaming %s: %.2fs in %d frames", path.name, duration, len(frames))

    async with StreamingRecognizer(settings, on_begin=_on_begin) as recognizer:
        try:
            text = await recognizer.transcribe_async(aiter_frames(frames, interval_s=interval_s))
        except AsrError as exc:
            logger.error("recognition failed: %s", exc)
            return 1

    if text is None:
        print("(no recognized text)")
        return 0
    print(text)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
