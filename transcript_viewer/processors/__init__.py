"""Transcript formatting, player sync and page composition"""

from .time_codec import TimestampStyle, encode, decode, sanitize_seconds
from .transcript_exporter import TranscriptExporter
from .player_sync import PlayerSync, EmbedCommandQueue, seek_message
from .page_controller import PageController

__all__ = [
    "TimestampStyle",
    "encode",
    "decode",
    "sanitize_seconds",
    "TranscriptExporter",
    "PlayerSync",
    "EmbedCommandQueue",
    "seek_message",
    "PageController",
]
