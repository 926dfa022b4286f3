"""Turn driver: runs a recognition session over one HTTP exchange."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Any, TypeVar
from concurrent.futures import ThreadPoolExecutor
from collections.abc import Callable, Iterable, AsyncIterable

from chunked_asr.state.settings import AppSettings
from chunked_asr.session import BeginObserver, RecognitionSession
from chunked_asr.transport import HttpChunkedTransport, OAuthTokenProvider
from chunked_asr.transport.base import TokenProvider, RequestTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")
TransportFactory = Callable[[], RequestTransport]


class StreamingRecognizer:
    """Stream frames from an iterable through one chunked POST and return the result text.

    Each call to ``transcribe``/``transcribe_async`` is one turn on one fresh
    transport. A failed turn closes the transport so a half-sent body is
    aborted rather than left dangling.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        token_provider: TokenProvider | None = None,
        transport_factory: TransportFactory | None = None,
        on_begin: BeginObserver | None = None,
    ) -> None:
        self._settings = settings
        if token_provider is None:
            token_provider = OAuthTokenProvider(settings.http.token_url, timeout_s=settings.http.timeout_s)
        if transport_factory is None:
            transport_factory = partial(
                HttpChunkedTransport, settings.http.endpoint, timeout_s=settings.http.timeout_s
            )
        self._transport_factory = transport_factory
        self._session = RecognitionSession(
            auth=settings.auth,
            token_provider=token_provider,
            audio=settings.audio,
            buffers=settings.buffers,
            result_field=settings.result_field,
            on_begin=on_begin,
        )
        # One worker keeps async lifecycle events strictly sequential.
        self._executor: ThreadPoolExecutor | None = None

    @property
    def session(self) -> RecognitionSession:
        return self._session

    def transcribe(self, frames: Iterable[bytes]) -> str | None:
        session = self._session
        transport = self._transport_factory()
        started = False
        try:
            transport.open(session.request_headers())
            session.begin_turn(transport)
            started = True
            for frame in frames:
                session.feed(transport, frame)
            session.end_turn(transport)
            result = session.receive_response(transport)
            logger.info("recognizer: turn completed, result=%r", result)
            return result
        except BaseException:
            # A rejected begin_turn belongs to another turn; leave it alone.
            if started:
                session.abort()
            raise
        finally:
            transport.close()

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="asr-session")
        return self._executor

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._get_executor(), partial(fn, *args))

    async def transcribe_async(self, frames: AsyncIterable[bytes]) -> str | None:
        session = self._session
        transport = self._transport_factory()
        executor = self._get_executor()
        started = completed = False

        def begin() -> None:
            nonlocal started
            session.begin_turn(transport)
            started = True

        def abort_unfinished() -> None:
            # A rejected begin_turn belongs to another turn; leave it alone.
            if started and not completed:
                session.abort()

        try:
            await self._run(transport.open, session.request_headers())
            await self._run(begin)
            async for frame in frames:
                await self._run(session.feed, transport, frame)
            await self._run(session.end_turn, transport)
            result = await self._run(session.receive_response, transport)
            completed = True
            logger.info("recognizer: turn completed, result=%r", result)
            return result
        finally:
            # Queued behind any event still running in the worker.
            executor.submit(abort_unfinished)
            await asyncio.wrap_future(executor.submit(transport.close))

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._session.close()

    def __enter__(self) -> StreamingRecognizer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> StreamingRecognizer:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await asyncio.to_thread(self.close)


__all__ = ["StreamingRecognizer", "TransportFactory"]
