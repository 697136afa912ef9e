"""Shared fixtures for all tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from transcript_viewer.models import TranscriptDocument, TranscriptEntry


# ── Sample data factories ──────────────────────────────────────────


@pytest.fixture
def sample_entries():
    """Raw entry dicts as the backend returns them."""
    return [
        {"text": "Hello world.", "start": 0.0, "duration": 2.5},
        {"text": "This is a test.", "start": 2.5, "duration": 3.0},
        {"text": "Goodbye.", "start": 65.0, "duration": 1.5},
    ]


@pytest.fixture
def transcript_payload(sample_entries):
    """Backend /transcript success body."""
    return {
        "video_id": "dQw4w9WgXcQ",
        "title": "Test Video Title",
        "transcript": sample_entries,
    }


@pytest.fixture
def document(transcript_payload):
    return TranscriptDocument.from_payload(transcript_payload)


@pytest.fixture
def make_document():
    """Build a document from (text, start, duration) tuples."""

    def _make(*entries, video_id="vid12345678", title=None):
        return TranscriptDocument(
            video_id=video_id,
            title=title,
            entries=[TranscriptEntry(text=t, start=s, duration=d) for t, s, d in entries],
        )

    return _make


@pytest.fixture
def mock_response():
    """Build a fake requests.Response."""

    def _make(status_code=200, payload=None, json_error=False):
        resp = MagicMock()
        resp.status_code = status_code
        if json_error:
            resp.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            resp.json.return_value = payload if payload is not None else {}
        return resp

    return _make
