"""YouTube URL helpers"""

import re

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
EMBED_URL = "https://www.youtube.com/embed/{video_id}?enablejsapi=1"


def extract_video_id(video_input: str) -> str:
    """Extract video ID from various input formats

    Args:
        video_input: Video ID or URL

    Returns:
        Video ID (11 characters)

    Raises:
        ValueError: If video ID cannot be extracted
    """
    video_input = (video_input or "").strip()

    # Already a video ID (11 characters, alphanumeric + - and _)
    if re.match(r'^[a-zA-Z0-9_-]{11}$', video_input):
        return video_input

    patterns = [
        r'(?:youtube\.com/watch\?(?:.*&)?v=|youtu\.be/)([a-zA-Z0-9_-]{11})',  # Standard and short URLs
        r'youtube\.com/embed/([a-zA-Z0-9_-]{11})',  # Embed URLs
        r'youtube\.com/shorts/([a-zA-Z0-9_-]{11})',  # Shorts
        r'youtube\.com/v/([a-zA-Z0-9_-]{11})',  # Old style URLs
    ]

    for pattern in patterns:
        match = re.search(pattern, video_input)
        if match:
            return match.group(1)

    raise ValueError(
        f"Invalid video input: {video_input}. "
        "Please provide a video ID or valid YouTube video URL."
    )


def watch_url(video_id: str) -> str:
    """Canonical watch URL the backend expects"""
    return WATCH_URL.format(video_id=video_id)


def embed_url(video_id: str) -> str:
    """Embed URL with the JS API enabled so the page can send seek commands"""
    return EMBED_URL.format(video_id=video_id)
