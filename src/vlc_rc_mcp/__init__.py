"""Client and MCP server for VLC's rc (remote control) TCP interface."""

from .client import Client, ConvergencePolicy
from .errors import ConvergenceError, ParseError, TransportError, VlcError
from .models.media import MAX_VOLUME, MIN_VOLUME, Playlist, Subtitle, Subtitles, Track
