"""Exceptions raised while talking to the VLC rc interface."""

from __future__ import annotations


class VlcError(Exception):
    """Base class for every error raised by this package."""


class TransportError(VlcError, ConnectionError):
    """The socket failed: refused, timed out, reset or closed."""


class ParseError(VlcError, ValueError):
    """A reply that must carry a value did not match its expected format."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class ConvergenceError(VlcError, RuntimeError):
    """The player never reached the requested state."""

    def __init__(self, command: str, attempts: int) -> None:
        super().__init__(
            f"player did not converge after {attempts} attempts of {command!r}"
        )
        self.command = command
        self.attempts = attempts
