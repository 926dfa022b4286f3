from __future__ import annotations

import socket
import threading

import pytest

from chunked_asr.errors import TransportError
from chunked_asr.transport import HttpChunkedTransport
from chunked_asr.codec import write_chunk, write_terminator

REPLY = b'{"err_no":0,"result":["hello"]}'


class OneShotServer:
    """Accept one connection, read a chunked request, answer with ``REPLY``."""

    def __init__(self) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(1)
        self.port = self._sock.getsockname()[1]
        self.request = b""
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        conn, _ = self._sock.accept()
        with conn:
            conn.settimeout(5.0)
            data = b""
            while not data.endswith(b"\r\n0\r\n\r\n"):
                piece = conn.recv(4096)
                if not piece:
                    break
                data += piece
            self.request = data
            conn.sendall(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                + f"Content-Length: {len(REPLY)}\r\n".encode("ascii")
                + b"Connection: close\r\n\r\n"
                + REPLY
            )
        self._sock.close()

    def join(self) -> None:
        self._thread.join(timeout=5.0)


def test_chunked_body_passes_through_unframed() -> None:
    server = OneShotServer()
    transport = HttpChunkedTransport(f"http://127.0.0.1:{server.port}/server_api?dev=1", timeout_s=5.0)
    with transport:
        transport.open({"Content-Type": "application/json", "Transfer-Encoding": "chunked"})
        write_chunk(transport, b'{"speech":"')
        write_chunk(transport, b'"}')
        write_terminator(transport)
        body = transport.read(1024)
        assert transport.status == 200
    server.join()

    assert body == REPLY
    head, _, sent_body = server.request.partition(b"\r\n\r\n")
    assert head.startswith(b"POST /server_api?dev=1 HTTP/1.1")
    assert b"Transfer-Encoding: chunked" in head
    assert sent_body == b'b\r\n{"speech":"\r\n2\r\n"}\r\n0\r\n\r\n'


def test_write_before_open_is_a_transport_error() -> None:
    transport = HttpChunkedTransport("http://127.0.0.1:9/")
    with pytest.raises(TransportError):
        transport.write(b"x")


def test_connection_refused_is_a_transport_error() -> None:
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    transport = HttpChunkedTransport(f"http://127.0.0.1:{port}/", timeout_s=2.0)
    with pytest.raises(TransportError):
        transport.open({"Transfer-Encoding": "chunked"})


@pytest.mark.parametrize("url", ["ftp://example.test/", "not a url", "http:///path"])
def test_rejects_unsupported_urls(url: str) -> None:
    with pytest.raises(ValueError):
        HttpChunkedTransport(url)
