"""Clients for the external transcript backend"""

from .backend_client import BackendClient, BackendResponse
from .transcript_fetcher import TranscriptFetcher
from .youtube_urls import extract_video_id, watch_url, embed_url

__all__ = [
    "BackendClient",
    "BackendResponse",
    "TranscriptFetcher",
    "extract_video_id",
    "watch_url",
    "embed_url",
]
