"""Data models for playlist tracks and subtitle tracks."""

from .media import (
    MAX_VOLUME,
    MIN_VOLUME,
    Playlist,
    Subtitle,
    Subtitles,
    Track,
    clamp_volume,
)
