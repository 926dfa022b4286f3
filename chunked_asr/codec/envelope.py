"""JSON envelope around the streamed base64 ``speech`` field.

The body is one JSON object whose ``speech`` string is left open by the
preamble and closed by the trailer. The base64 alphabet needs no JSON escaping,
so encoded audio chunks are spliced in between verbatim.
"""

from __future__ import annotations

import orjson

from chunked_asr.errors import MissingCredential
from chunked_asr.state.settings import AudioSettings


def _json_str(value: str) -> str:
    return orjson.dumps(value).decode("utf-8")


def build_preamble(audio: AudioSettings) -> str:
    return f'{{"dev_pid":{int(audio.dev_pid)},"rate":{int(audio.sample_rate)},"speech":"'


def build_trailer(audio: AudioSettings, *, raw_bytes: int, token: str | None) -> str:
    # "len" is the decoded audio size, not the base64 or framed size.
    if not token:
        raise MissingCredential()
    return (
        f'","len":{int(raw_bytes)}'
        f',"format":{_json_str(audio.format)}'
        f',"cuid":{_json_str(audio.cuid)}'
        f',"token":{_json_str(token)}'
        f',"channel":{int(audio.channel)}}}'
    )


__all__ = ["build_preamble", "build_trailer"]
