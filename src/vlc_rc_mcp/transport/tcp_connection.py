"""TCP connection to VLC's rc interface (``vlc --rc-host HOST:PORT``).

The rc console is a REPL: one command goes out, one reply comes back,
then a prompt. This module owns the socket and the receive buffer and
turns the byte stream into line reads and prompt-delimited block reads.
"""

from __future__ import annotations

import logging
import socket

from ..errors import TransportError
from ..protocol.framing import (
    LINE_TERMINATOR,
    PROMPT,
    decode,
    encode_command,
    is_artifact,
    trim_output,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9090
DEFAULT_TIMEOUT = 1.0
RECV_SIZE = 4096


def parse_address(address: tuple[str, int] | str) -> tuple[str, int]:
    """Normalize ``(host, port)`` or ``"host:port"`` into a tuple.

    A string without a port uses ``DEFAULT_PORT``. IPv6 hosts may be
    written in brackets: ``"[::1]:9090"``.
    """
    if isinstance(address, tuple):
        host, port = address
        try:
            return str(host), int(port)
        except ValueError:
            raise ValueError(f"Invalid port in address {address!r}") from None

    host, sep, port = address.rpartition(":")
    if not sep or "]" in port:
        host, port = address, str(DEFAULT_PORT)
    host = host.strip("[]")
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"Invalid port in address {address!r}") from None


class TCPConnection:
    """A framed session with one VLC player.

    Exactly one command may be outstanding: after :meth:`write_command`
    the caller issues at most one read before writing again.

    Usage::

        conn = TCPConnection.connect("127.0.0.1:9090")
        conn.write_command("volume")
        level = conn.read_line()
        conn.close()
    """

    def __init__(self, sock: socket.socket) -> None:
        self._sock: socket.socket | None = sock
        self._buffer = bytearray()

    @classmethod
    def connect(
        cls,
        address: tuple[str, int] | str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> TCPConnection:
        """Connect to the rc interface and consume its greeting.

        Args:
            address: ``(host, port)`` or ``"host:port"``.
            timeout: Seconds any single read or write may block.

        Raises:
            TransportError: If the connection or the greeting read fails.
        """
        try:
            host, port = parse_address(address)
        except ValueError as e:
            raise TransportError(f"Invalid VLC address {address!r}: {e}") from e
        try:
            sock = socket.create_connection((host, port), timeout=timeout)
            sock.settimeout(timeout)
        except OSError as e:
            raise TransportError(
                f"Could not connect to VLC at {host}:{port}: {e}"
            ) from e

        conn = cls(sock)
        try:
            greeting = conn._read_until(PROMPT)
        except TransportError:
            conn.close()
            raise

        logger.info("Connected to VLC rc interface at %s:%d", host, port)
        logger.debug("Greeting: %r", decode(greeting))
        return conn

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def write_command(self, text: str) -> None:
        """Send one command line; the terminator is appended here.

        Raises:
            TransportError: If not connected or the send fails.
        """
        sock = self._require_socket()
        logger.debug("-> %s", text)
        try:
            sock.sendall(encode_command(text))
        except OSError as e:
            raise TransportError(f"Write to VLC failed: {e}") from e

    def read_line(self) -> str:
        """Read one reply line with leading prompt artifacts removed.

        The line terminator is kept; callers strip it when parsing.
        """
        line = trim_output(decode(self._read_until(LINE_TERMINATOR)))
        logger.debug("<- %r", line)
        return line

    def read_block(self) -> str:
        """Read a listing up to and including the next prompt.

        A stale prompt left by an earlier reply is skipped so the block
        always holds the listing itself.
        """
        data = self._read_until(PROMPT)
        while is_artifact(decode(data)):
            data += self._read_until(PROMPT)
        block = decode(data)
        logger.debug("<- %d bytes of listing", len(data))
        return block

    def close(self) -> None:
        """Half-close both directions and release the socket.

        Safe to call more than once. Failures are logged, never raised.
        """
        if self._sock is None:
            return

        sock, self._sock = self._sock, None
        self._buffer.clear()
        for how in (socket.SHUT_RD, socket.SHUT_WR):
            try:
                sock.shutdown(how)
            except OSError as e:
                logger.warning("Error shutting down VLC connection: %s", e)
        try:
            sock.close()
        except OSError as e:
            logger.warning("Error closing VLC connection: %s", e)
        logger.info("Disconnected")

    def __enter__(self) -> TCPConnection:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise TransportError("Not connected to VLC")
        return self._sock

    def _read_until(self, delimiter: bytes) -> bytes:
        """Return buffered bytes through ``delimiter``, receiving as needed."""
        while True:
            end = self._buffer.find(delimiter)
            if end != -1:
                end += len(delimiter)
                data = bytes(self._buffer[:end])
                del self._buffer[:end]
                return data
            self._buffer += self._recv()

    def _recv(self) -> bytes:
        sock = self._require_socket()
        try:
            chunk = sock.recv(RECV_SIZE)
        except OSError as e:
            raise TransportError(f"Read from VLC failed: {e}") from e
        if not chunk:
            self.close()
            raise TransportError("Connection closed by VLC")
        return chunk
