"""Transcript, summary and quiz retrieval through the backend"""

import logging
from typing import Optional
from pydantic import ValidationError

from ..errors import NetworkError, UpstreamError
from ..models import ErrorInfo, FetchResult, Quiz, SummaryData, TranscriptDocument
from .backend_client import BackendClient
from .youtube_urls import watch_url

logger = logging.getLogger(__name__)

TRANSCRIPT_TOO_LONG = "transcript_too_long"


class TranscriptFetcher:
    """Fetcher for transcripts and derived content

    Every method resolves to a FetchResult; errors are captured, never raised,
    and nothing is retried.
    """

    def __init__(self, backend: Optional[BackendClient] = None):
        """Initialize transcript fetcher

        Args:
            backend: Backend client. A default one is created if not provided.
        """
        self.backend = backend or BackendClient()

    def fetch(self, video_id: str) -> FetchResult:
        """Fetch the transcript of a video

        Args:
            video_id: YouTube video ID

        Returns:
            FetchResult with a document or an error
        """
        return self.fetch_url(watch_url(video_id))

    def fetch_url(self, url: str) -> FetchResult:
        """Fetch the transcript for a YouTube URL as the user typed it"""
        try:
            payload = self.backend.get_json("transcript", {"url": url})
            document = TranscriptDocument.from_payload(payload)
        except ValidationError as e:
            logger.error(f"Malformed transcript payload for {url}: {e}")
            return self._failure(UpstreamError("Received a malformed transcript", status_code=502))
        except (UpstreamError, NetworkError) as e:
            return self._failure(e)

        logger.info(f"Fetched {len(document.entries)} entries for {document.video_id}")
        return FetchResult(document=document)

    def fetch_summary(self, video_id: str) -> FetchResult:
        """Fetch the summary of a video

        A `transcript_too_long` answer is not an error: it is reported through
        `too_long_message` so the page can explain it.
        """
        try:
            payload = self.backend.get_json("summary", {"url": watch_url(video_id)})
        except (UpstreamError, NetworkError) as e:
            return self._failure(e)

        if payload.get("error") == TRANSCRIPT_TOO_LONG:
            return FetchResult(
                too_long_message=payload.get("message") or "Transcript is too long to summarize"
            )
        if payload.get("error"):
            return self._failure(UpstreamError(str(payload["error"])))

        try:
            return FetchResult(
                summary=SummaryData(summary=payload.get("summary"), title=payload.get("title"))
            )
        except ValidationError as e:
            logger.error(f"Malformed summary payload for {video_id}: {e}")
            return self._failure(UpstreamError("Received a malformed summary", status_code=502))

    def fetch_quiz(self, video_id: str) -> FetchResult:
        """Fetch a generated quiz for a video"""
        try:
            payload = self.backend.get_json("quiz", {"url": watch_url(video_id)})
            quiz = Quiz(questions=payload.get("questions") or [])
        except ValidationError as e:
            logger.error(f"Malformed quiz payload for {video_id}: {e}")
            return self._failure(UpstreamError("Received a malformed quiz", status_code=502))
        except (UpstreamError, NetworkError) as e:
            return self._failure(e)

        return FetchResult(quiz=quiz)

    @staticmethod
    def _failure(exc) -> FetchResult:
        return FetchResult(error=ErrorInfo.from_exception(exc))
