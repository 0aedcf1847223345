"""MCP server entry point for VLC's rc interface.

Exposes player controls as tools, player state as resources, and a
prompt via the Model Context Protocol using the official Python MCP SDK
with stdio transport.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .client import Client
from .errors import VlcError
from .models.media import MIN_VOLUME, clamp_volume
from .transport.tcp_connection import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "vlc-rc",
    instructions="MCP server for controlling a VLC player through its rc interface",
)

# Global connection state
_client: Client | None = None


def _get_client() -> Client:
    """Get the active client, raising if not connected."""
    if _client is None or not _client.connected:
        raise RuntimeError(
            "Not connected to VLC. Use the 'connect' tool first."
        )
    return _client


# ─── CONNECTION TOOLS ─────────────────────────────────────────────────

@mcp.tool()
def connect(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> dict[str, Any]:
    """Connect to a VLC player started with ``--rc-host HOST:PORT``.

    Args:
        host: Host name or IP address of the player.
        port: TCP port of the rc interface.
    """
    global _client
    if _client is not None and _client.connected:
        return {"connected": True, "message": "Already connected"}

    _client = Client.connect((host, port))
    return {"connected": True, "host": host, "port": port}


@mcp.tool()
def disconnect() -> dict[str, bool]:
    """Close the connection to the player."""
    global _client
    if _client is None:
        return {"disconnected": True}
    _client.close()
    _client = None
    return {"disconnected": True}


# ─── LISTING TOOLS ────────────────────────────────────────────────────

@mcp.tool()
def get_playlist() -> dict[str, Any]:
    """List the tracks in the player's playlist, in playlist order."""
    tracks = _get_client().playlist()
    return {
        "tracks": [track.to_dict() for track in tracks],
        "count": len(tracks),
    }


@mcp.tool()
def get_subtitles() -> dict[str, Any]:
    """List the subtitle tracks of the current media.

    Index -1 is the "Disable" entry.
    """
    subtitles = _get_client().subtitles()
    return {
        "subtitles": [subtitle.to_dict() for subtitle in subtitles],
        "count": len(subtitles),
    }


# ─── VOLUME TOOLS ─────────────────────────────────────────────────────

@mcp.tool()
def get_volume() -> dict[str, Any]:
    """Read the current volume level (0-200)."""
    return {"volume": _get_client().get_volume()}


@mcp.tool()
def set_volume(volume: int) -> dict[str, Any]:
    """Set the volume level and wait until the player reports it.

    Args:
        volume: Volume level (0-200). Higher values are clamped to 200.
    """
    if volume < MIN_VOLUME:
        return {"error": "Volume must be non-negative"}

    _get_client().set_volume(volume)
    return {"volume": clamp_volume(volume)}


# ─── PLAYBACK TOOLS ───────────────────────────────────────────────────

@mcp.tool()
def is_playing() -> dict[str, bool]:
    """Report whether a track is playing. A paused track counts as playing."""
    return {"playing": _get_client().is_playing()}


@mcp.tool()
def play() -> dict[str, Any]:
    """Start playback. Does nothing when the playlist is empty."""
    player = _get_client()
    player.play()
    return {"playing": player.is_playing()}


@mcp.tool()
def stop() -> dict[str, bool]:
    """Stop playback."""
    _get_client().stop()
    return {"playing": False}


@mcp.tool()
def pause() -> dict[str, bool]:
    """Pause playback. Does nothing if the player is stopped."""
    return {"paused": _get_client().pause()}


@mcp.tool()
def get_time() -> dict[str, Any]:
    """Seconds elapsed in the current track (null when stopped)."""
    return {"time": _get_client().get_time()}


@mcp.tool()
def get_title() -> dict[str, Any]:
    """Title of the current track (null when nothing is loaded)."""
    return {"title": _get_client().get_title()}


@mcp.tool()
def forward(seconds: int = 10) -> dict[str, Any]:
    """Seek forward in the current track.

    Args:
        seconds: How far to seek, in seconds.
    """
    if seconds < 0:
        return {"error": "Seconds must be non-negative"}
    _get_client().forward(seconds)
    return {"seek": seconds}


@mcp.tool()
def rewind(seconds: int = 10) -> dict[str, Any]:
    """Seek backward in the current track.

    Args:
        seconds: How far to seek, in seconds.
    """
    if seconds < 0:
        return {"error": "Seconds must be non-negative"}
    _get_client().rewind(seconds)
    return {"seek": -seconds}


@mcp.tool()
def next_track() -> dict[str, bool]:
    """Skip to the next track in the playlist."""
    _get_client().next()
    return {"skipped": True}


@mcp.tool()
def prev_track() -> dict[str, bool]:
    """Go back to the previous track in the playlist."""
    _get_client().prev()
    return {"skipped": True}


@mcp.tool()
def fullscreen(enabled: bool) -> dict[str, bool]:
    """Turn fullscreen mode on or off.

    Args:
        enabled: True for fullscreen, False for windowed.
    """
    _get_client().fullscreen(enabled)
    return {"fullscreen": enabled}


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("vlc://player/status")
def resource_player_status() -> str:
    """Connection state, playback state, current title, position and volume."""
    if _client is None or not _client.connected:
        return json.dumps({"connected": False})

    try:
        status = {
            "connected": True,
            "playing": _client.is_playing(),
            "title": _client.get_title(),
            "time": _client.get_time(),
            "volume": _client.get_volume(),
        }
    except VlcError as e:
        logger.warning("Failed to read player status: %s", e)
        return json.dumps({"connected": True, "error": str(e)})
    return json.dumps(status)


@mcp.resource("vlc://playlist")
def resource_playlist() -> str:
    """Tracks in the playlist."""
    if _client is None or not _client.connected:
        return json.dumps({"tracks": []})
    try:
        tracks = _client.playlist()
    except VlcError as e:
        logger.warning("Failed to read playlist: %s", e)
        return json.dumps({"tracks": [], "error": str(e)})
    return json.dumps({"tracks": [track.to_dict() for track in tracks]})


# ─── MCP PROMPTS ─────────────────────────────────────────────────────

@mcp.prompt()
def build_queue(mood: str) -> str:
    """Guide the AI to pick and play tracks from the playlist for a mood.

    Args:
        mood: Mood, genre, or occasion (e.g., "focus", "dinner party").
    """
    return f"""Read the playlist using the get_playlist tool and pick the
tracks that best fit this mood: {mood}

Consider:
- Track titles and what they suggest about genre and energy
- Track lengths, preferring a varied but coherent sequence
- A comfortable volume for the mood (set_volume, 0-200, 100 is normal)

Use play, next_track and prev_track to move through the playlist,
and get_title to confirm what is playing."""


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
