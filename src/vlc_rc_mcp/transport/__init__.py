"""Transport layer: the framed TCP session with the rc interface."""

from .tcp_connection import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT, TCPConnection
