"""Page controller: wires fetches, player sync and view snapshots together"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..api.transcript_fetcher import TranscriptFetcher
from ..config import config
from ..models import (
    FetchResult,
    QuizState,
    SummaryState,
    TranscriptState,
    ViewState,
)
from .player_sync import PlayerSync

logger = logging.getLogger(__name__)


def transcript_state(result: FetchResult) -> TranscriptState:
    if result.error is not None:
        return TranscriptState(status="error", error=result.error)
    return TranscriptState(status="ready", document=result.document)


def summary_state(result: Optional[FetchResult]) -> SummaryState:
    if result is None:
        return SummaryState()
    if result.error is not None:
        return SummaryState(status="error", message=result.error.message)
    if result.too_long_message is not None:
        return SummaryState(status="too_long", message=result.too_long_message)
    return SummaryState(status="ready", summary=result.summary.summary if result.summary else None)


def quiz_state(result: FetchResult) -> QuizState:
    if result.error is not None:
        return QuizState(status="error", message=result.error.message)
    return QuizState(status="ready", quiz=result.quiz)


class PageController:
    """Owns the ViewState of one transcript page

    The state is a frozen snapshot that is replaced wholesale. A load that was
    issued earlier but finishes later still replaces a newer snapshot; the
    `generation` field records the issue order so callers can see this.
    """

    def __init__(
        self,
        fetcher: Optional[TranscriptFetcher] = None,
        player_sync: Optional[PlayerSync] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize page controller

        Args:
            fetcher: Transcript fetcher
            player_sync: Player sync for seek and highlight
            max_workers: Thread pool size for the joined fetches
        """
        self.fetcher = fetcher or TranscriptFetcher()
        self.player_sync = player_sync or PlayerSync()
        self.max_workers = max_workers or config.fetch_workers
        self.state = ViewState()
        self._generation = 0
        self._lock = threading.Lock()

    def load(self, video_id: str, include_summary: bool = True) -> ViewState:
        """Fetch transcript and summary concurrently and publish a new snapshot

        Both fetches are joined before the snapshot is built. Each branch
        carries its own error, so one failing never hides the other.

        Args:
            video_id: YouTube video ID
            include_summary: Whether to fetch the summary alongside

        Returns:
            The new ViewState
        """
        with self._lock:
            self._generation += 1
            generation = self._generation

        self.player_sync.reset()
        self._publish(ViewState(video_id=video_id, generation=generation))

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            transcript_future = pool.submit(self.fetcher.fetch, video_id)
            summary_future = (
                pool.submit(self.fetcher.fetch_summary, video_id) if include_summary else None
            )
            transcript_result = transcript_future.result()
            summary_result = summary_future.result() if summary_future else None

        transcript = transcript_state(transcript_result)
        document = transcript.document
        if (
            document is not None
            and not document.title
            and summary_result is not None
            and summary_result.summary is not None
            and summary_result.summary.title
        ):
            transcript = transcript.model_copy(
                update={"document": document.with_title(summary_result.summary.title)}
            )

        return self._publish(
            ViewState(
                video_id=video_id,
                generation=generation,
                transcript=transcript,
                summary=summary_state(summary_result),
                playback=self.player_sync.state,
            )
        )

    def load_quiz(self) -> ViewState:
        """Fetch the quiz for the current video and publish a new snapshot"""
        if self.state.video_id is None:
            return self.state

        result = self.fetcher.fetch_quiz(self.state.video_id)
        return self._publish(self.state.model_copy(update={"quiz": quiz_state(result)}))

    def select(self, start: float) -> ViewState:
        """Seek to the entry starting at `start` and highlight it"""
        document = self.state.transcript.document
        if document is None:
            return self.state

        playback = self.player_sync.select_start(document, start)
        return self._publish(self.state.model_copy(update={"playback": playback}))

    def _publish(self, state: ViewState) -> ViewState:
        if state.generation < self.state.generation:
            logger.warning(
                f"Stale load (generation {state.generation}) replaced "
                f"generation {self.state.generation} for {state.video_id}"
            )
        self.state = state
        return state
