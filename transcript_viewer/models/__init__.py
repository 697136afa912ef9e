"""Data models for the transcript viewer"""

from .transcript import TranscriptEntry, TranscriptDocument, PlaybackState
from .export import ExportFormat, ExportConfig, ExportArtifact
from .content import SummaryData, QuizQuestion, Quiz
from .view_state import (
    ErrorInfo,
    FetchResult,
    TranscriptState,
    SummaryState,
    QuizState,
    ViewState,
)

__all__ = [
    "TranscriptEntry",
    "TranscriptDocument",
    "PlaybackState",
    "ExportFormat",
    "ExportConfig",
    "ExportArtifact",
    "SummaryData",
    "QuizQuestion",
    "Quiz",
    "ErrorInfo",
    "FetchResult",
    "TranscriptState",
    "SummaryState",
    "QuizState",
    "ViewState",
]
