"""Render tree for the transcript page

`build_page` is a pure function of the view snapshot; templates only walk
the tree it returns.
"""

from typing import List, Literal, Optional, Sequence
from pydantic import BaseModel, Field

from ..api.youtube_urls import embed_url
from ..models import ExportFormat, ViewState
from .player_sync import seek_message
from .time_codec import TimestampStyle, encode, sanitize_seconds
from .transcript_exporter import TranscriptExporter

DEFAULT_TITLE = "Video Transcript"


class Banner(BaseModel):
    kind: Literal["error", "info"] = "error"
    message: str


class EntryRow(BaseModel):
    index: int
    text: str
    start: float
    label: str = Field(..., description="M:SS display timestamp")
    active: bool = False
    seek_command: str


class DownloadLink(BaseModel):
    label: str
    format: ExportFormat
    include_timestamps: bool = True


class TranscriptPanel(BaseModel):
    status: Literal["loading", "ready", "error", "empty"]
    video_id: Optional[str] = None
    title: str = DEFAULT_TITLE
    embed_url: Optional[str] = None
    active_start: Optional[float] = Field(None, description="Start of the selected entry, for no-script links")
    rows: List[EntryRow] = Field(default_factory=list)
    clipboard_text: str = ""
    downloads: List[DownloadLink] = Field(default_factory=list)


class SummaryPanel(BaseModel):
    status: Literal["idle", "ready", "too_long", "error"]
    text: Optional[str] = None
    message: Optional[str] = None


class QuizQuestionView(BaseModel):
    number: int
    question: str
    options: List[str] = Field(default_factory=list)


class QuizPanel(BaseModel):
    status: Literal["hidden", "loading", "ready", "error"]
    questions: List[QuizQuestionView] = Field(default_factory=list)
    message: Optional[str] = None


class PageView(BaseModel):
    banner: Optional[Banner] = None
    transcript: TranscriptPanel
    summary: SummaryPanel
    quiz: QuizPanel
    seek_commands: List[str] = Field(default_factory=list)


def download_links(include_timestamps: bool) -> List[DownloadLink]:
    return [
        DownloadLink(label="TXT", format=ExportFormat.PLAIN_TEXT, include_timestamps=include_timestamps),
        DownloadLink(label="SRT", format=ExportFormat.SUBTITLE_RIP),
    ]


def build_transcript_panel(state: ViewState, include_timestamps: bool = True) -> TranscriptPanel:
    transcript = state.transcript
    if transcript.status != "ready":
        return TranscriptPanel(status=transcript.status, video_id=state.video_id)

    document = transcript.document
    if document.is_empty:
        return TranscriptPanel(
            status="empty",
            video_id=document.video_id,
            title=document.title or DEFAULT_TITLE,
            embed_url=embed_url(document.video_id),
        )

    rows = [
        EntryRow(
            index=index,
            text=entry.text,
            start=entry.start,
            label=encode(sanitize_seconds(entry.start), TimestampStyle.DISPLAY),
            active=state.playback.is_active(entry),
            seek_command=seek_message(entry.start),
        )
        for index, entry in enumerate(document.entries)
    ]

    return TranscriptPanel(
        status="ready",
        video_id=document.video_id,
        title=document.title or DEFAULT_TITLE,
        embed_url=embed_url(document.video_id),
        rows=rows,
        active_start=state.playback.active_start,
        clipboard_text=TranscriptExporter.clipboard_text(document),
        downloads=download_links(include_timestamps),
    )


def build_summary_panel(state: ViewState) -> SummaryPanel:
    summary = state.summary
    return SummaryPanel(status=summary.status, text=summary.summary, message=summary.message)


def build_quiz_panel(state: ViewState) -> QuizPanel:
    quiz = state.quiz
    questions = []
    if quiz.status == "ready" and quiz.quiz is not None:
        questions = [
            QuizQuestionView(number=number, question=q.question, options=list(q.options))
            for number, q in enumerate(quiz.quiz.questions, 1)
        ]
    return QuizPanel(status=quiz.status, questions=questions, message=quiz.message)


def build_page(
    state: ViewState,
    seek_commands: Sequence[str] = (),
    include_timestamps: bool = True,
) -> PageView:
    """Map a view snapshot to the render tree of the transcript page

    Args:
        state: Current view snapshot
        seek_commands: Player commands queued during this request
        include_timestamps: Current setting of the TXT timestamp toggle

    Returns:
        PageView
    """
    banner = None
    if state.transcript.status == "error" and state.transcript.error is not None:
        banner = Banner(message=state.transcript.error.message)

    return PageView(
        banner=banner,
        transcript=build_transcript_panel(state, include_timestamps),
        summary=build_summary_panel(state),
        quiz=build_quiz_panel(state),
        seek_commands=list(seek_commands),
    )
