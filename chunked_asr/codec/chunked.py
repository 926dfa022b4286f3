"""HTTP/1.1 chunked transfer-encoding framer."""

from __future__ import annotations

import logging

from chunked_asr.errors import TransportError
from chunked_asr.transport.base import ByteSink
from chunked_asr.config.http import CRLF, CHUNK_TERMINATOR

logger = logging.getLogger(__name__)


def chunk_header(length: int) -> bytes:
    return f"{int(length):x}".encode("ascii") + CRLF


def _write_all(sink: ByteSink, data: bytes, what: str) -> None:
    try:
        written = sink.write(data)
    except OSError as exc:
        raise TransportError(operation="write", detail=f"{what}: {exc}") from exc

    if written is None or written <= 0:
        raise TransportError(operation="write", detail=f"{what}: sink reported {written}")
    if written != len(data):
        raise TransportError(operation="write", detail=f"{what}: short write {written}/{len(data)}")


def write_chunk(sink: ByteSink, payload: bytes) -> int:
    """Write one framed chunk and return the payload length.

    An empty payload is not written: on the wire it is the terminator.
    """
    if not payload:
        logger.debug("skipping empty chunk")
        return 0
    _write_all(sink, chunk_header(len(payload)), "chunk header")
    _write_all(sink, payload, "chunk payload")
    _write_all(sink, CRLF, "chunk trailer")
    return len(payload)


def write_terminator(sink: ByteSink) -> None:
    _write_all(sink, CHUNK_TERMINATOR, "terminator")


__all__ = ["chunk_header", "write_chunk", "write_terminator"]
