"""Recognition session: drives one streaming turn over a chunked POST body.

A turn is driven by the transport through a fixed sequence of events::

    request_headers()   headers for the POST (pre-request)
    begin_turn(sink)    token, reset, preamble chunk
    feed(sink, frame)   base64 audio chunks, any number of times
    end_turn(sink)      carry flush, trailer chunk, terminator
    receive_response(source)

Events must not overlap for one session. Out-of-order events raise
``InvalidState`` and leave the session untouched; every other error fails the
turn and resets its counters so the session can start a new one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chunked_asr.state import TurnPhase, TurnState
from chunked_asr.state.settings import AudioSettings, AuthSettings, BufferSettings
from chunked_asr.config.http import CONTENT_TYPE_JSON
from chunked_asr.config.asr import (
    ASR_ERROR_CODE_FIELD,
    ASR_ERROR_MESSAGE_FIELD,
    DEFAULT_ASR_RESULT_FIELD,
)
from chunked_asr.state.phase import STREAM_PHASES, RESPONSE_PHASES, TURN_START_PHASES
from chunked_asr.errors import AsrError, CapacityError, InvalidState, TransportError, CredentialError
from chunked_asr.transport.base import ByteSink, ByteSource, TokenProvider
from chunked_asr.codec import (
    build_trailer,
    build_preamble,
    encode_final,
    encode_step,
    encoded_size,
    extract_field,
    write_chunk,
    write_terminator,
)

logger = logging.getLogger(__name__)

BeginObserver = Callable[["RecognitionSession"], None]


class RecognitionSession:
    def __init__(
        self,
        *,
        auth: AuthSettings,
        token_provider: TokenProvider,
        audio: AudioSettings | None = None,
        buffers: BufferSettings | None = None,
        result_field: str = DEFAULT_ASR_RESULT_FIELD,
        on_begin: BeginObserver | None = None,
    ) -> None:
        buffers = buffers or BufferSettings()
        if buffers.staging_capacity <= 0:
            raise ValueError("staging_capacity must be > 0")
        min_b64 = encoded_size(buffers.staging_capacity)
        if buffers.b64_capacity and buffers.b64_capacity < min_b64:
            raise ValueError(f"b64_capacity must be 0 (derived) or >= {min_b64}")

        self._auth = auth
        self._token_provider = token_provider
        self._audio = audio or AudioSettings()
        self._staging_capacity = int(buffers.staging_capacity)
        self._b64_capacity = int(buffers.b64_capacity) or min_b64
        self._result_field = result_field
        self._on_begin = on_begin

        self._token: str | None = None
        self._turn = TurnState()
        self._phase = TurnPhase.IDLE
        self._closed = False

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def audio(self) -> AudioSettings:
        return self._audio

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def result(self) -> str | None:
        return self._turn.result

    @property
    def raw_bytes(self) -> int:
        return self._turn.raw_bytes

    @property
    def first_chunk(self) -> bool:
        """True until this turn's preamble chunk has been written."""
        return self._turn.first_chunk

    @property
    def written_bytes(self) -> int:
        return self._turn.written_bytes

    @property
    def carry_len(self) -> int:
        return len(self._turn.carry)

    @property
    def staging_capacity(self) -> int:
        return self._staging_capacity

    @property
    def b64_capacity(self) -> int:
        return self._b64_capacity

    def _require(self, event: str, allowed: frozenset[TurnPhase]) -> None:
        if self._closed:
            raise InvalidState(event=event, phase="closed")
        if self._phase not in allowed:
            raise InvalidState(event=event, phase=self._phase.value)

    def _set_phase(self, phase: TurnPhase) -> None:
        logger.debug("session: %s -> %s", self._phase.value, phase.value)
        self._phase = phase

    def _fail(self, exc: AsrError) -> None:
        logger.error("session: turn failed in phase %s: %s", self._phase.value, exc)
        self._turn.reset()
        self._phase = TurnPhase.FAILED

    def _resolve_token(self) -> str:
        if self._token:
            return self._token
        try:
            token = self._token_provider.get_token(self._auth.access_key, self._auth.secret_key)
        except CredentialError:
            raise
        except Exception as exc:
            raise CredentialError(reason=f"token provider failed: {exc}") from exc
        if not isinstance(token, str) or not token:
            raise CredentialError(reason="token provider returned an empty token")
        self._token = token
        return token

    def request_headers(self) -> dict[str, str]:
        return {
            "Content-Type": CONTENT_TYPE_JSON,
            "Transfer-Encoding": "chunked",
        }

    def begin_turn(self, sink: ByteSink) -> None:
        self._require("begin_turn", TURN_START_PHASES)

        try:
            self._resolve_token()
        except CredentialError as exc:
            self._fail(exc)
            raise

        self._turn.reset()
        if self._on_begin is not None:
            self._on_begin(self)

        preamble = build_preamble(self._audio).encode("utf-8")
        logger.info("session: turn started, preamble=%s", preamble.decode("utf-8"))
        try:
            write_chunk(sink, preamble)
        except TransportError as exc:
            self._fail(exc)
            raise
        self._turn.first_chunk = False
        self._set_phase(TurnPhase.PREAMBLE_SENT)

    def feed(self, sink: ByteSink, frame: bytes) -> int:
        """Stream one raw audio frame; return the base64 bytes written."""
        self._require("feed", STREAM_PHASES)

        turn = self._turn
        staged = len(turn.carry) + len(frame)
        if staged > self._staging_capacity:
            error = CapacityError(required=staged, capacity=self._staging_capacity, what="audio staging")
            self._fail(error)
            raise error

        try:
            block = encode_step(turn.carry, frame, self._b64_capacity)
            turn.carry = block.carry
            turn.raw_bytes += len(frame)
            written = write_chunk(sink, block.chunk)
        except (CapacityError, TransportError) as exc:
            self._fail(exc)
            raise

        turn.written_bytes += written
        self._set_phase(TurnPhase.STREAMING)
        logger.debug("session: total bytes written %d (raw %d)", turn.written_bytes, turn.raw_bytes)
        return written

    def end_turn(self, sink: ByteSink) -> None:
        self._require("end_turn", STREAM_PHASES)

        turn = self._turn
        try:
            # Built first: a missing token must not leave a half-written tail.
            trailer = build_trailer(self._audio, raw_bytes=turn.raw_bytes, token=self._token).encode("utf-8")
            tail = encode_final(turn.carry, self._b64_capacity)
            turn.carry = b""
            turn.written_bytes += write_chunk(sink, tail)
            write_chunk(sink, trailer)
            write_terminator(sink)
        except AsrError as exc:
            self._fail(exc)
            raise

        logger.info("session: trailer sent, len=%d written=%d", turn.raw_bytes, turn.written_bytes)
        self._set_phase(TurnPhase.TRAILER_SENT)

    def await_response(self) -> None:
        self._require("await_response", RESPONSE_PHASES)
        self._set_phase(TurnPhase.AWAITING_RESPONSE)

    def _read_body(self, source: ByteSource) -> bytes:
        # One extra byte tells a full buffer apart from a truncated body.
        limit = self._staging_capacity + 1
        parts: list[bytes] = []
        received = 0
        while received < limit:
            try:
                data = source.read(limit - received)
            except OSError as exc:
                raise TransportError(operation="read", detail=str(exc)) from exc
            if not data:
                break
            parts.append(data)
            received += len(data)

        if received == 0:
            raise TransportError(operation="read", detail="empty response")
        body = b"".join(parts)
        if len(body) > self._staging_capacity:
            logger.warning("session: response exceeds %d bytes, truncating", self._staging_capacity)
            body = body[: self._staging_capacity]
        return body

    def receive_response(self, source: ByteSource) -> str | None:
        """Read the response body and return the extracted result field."""
        self._require("receive_response", RESPONSE_PHASES)
        self._set_phase(TurnPhase.AWAITING_RESPONSE)

        try:
            body = self._read_body(source)
        except TransportError as exc:
            self._fail(exc)
            raise

        text = body.decode("utf-8", errors="replace")
        logger.info("session: got response %s", text)
        result = extract_field(text, self._result_field)
        if result is None:
            logger.warning(
                "session: no %r in response (err_no=%s, err_msg=%s)",
                self._result_field,
                extract_field(text, ASR_ERROR_CODE_FIELD),
                extract_field(text, ASR_ERROR_MESSAGE_FIELD),
            )
        self._turn.result = result
        self._set_phase(TurnPhase.COMPLETED)
        return result

    def cancel(self, sink: ByteSink) -> bool:
        """Close an in-flight body so it stays well-formed.

        Returns False when nothing was closed; if the turn was streaming, the
        caller must then abort the connection.
        """
        if self._closed or self._phase not in STREAM_PHASES:
            return False
        try:
            self.end_turn(sink)
        except AsrError:
            logger.warning("session: cancel could not close the body; connection must be aborted")
            return False
        return True

    def abort(self) -> None:
        """Abandon an unsettled turn without writing; the caller drops the connection."""
        if self._closed or self._phase in TURN_START_PHASES:
            return
        logger.warning("session: turn aborted in phase %s", self._phase.value)
        self._turn.reset()
        self._phase = TurnPhase.FAILED

    def invalidate_token(self) -> None:
        self._token = None

    def close(self) -> None:
        self._token = None
        self._turn.reset()
        self._phase = TurnPhase.IDLE
        self._closed = True

    def __enter__(self) -> RecognitionSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["BeginObserver", "RecognitionSession"]
