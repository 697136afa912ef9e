"""Immutable view snapshots owned by the page controller"""

from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..errors import NetworkError, UpstreamError
from .content import Quiz, SummaryData
from .transcript import PlaybackState, TranscriptDocument


class ErrorInfo(BaseModel):
    """A failure reported to the user as an inline banner"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["upstream", "network", "input"] = Field(..., description="Where the failure came from")
    message: str = Field(..., description="Human-readable message")
    status_code: Optional[int] = Field(None, description="HTTP status, when there was a response")

    @classmethod
    def from_exception(cls, exc: Union[UpstreamError, NetworkError]) -> "ErrorInfo":
        if isinstance(exc, UpstreamError):
            return cls(kind="upstream", message=exc.message, status_code=exc.status_code)
        return cls(kind="network", message=exc.message)


class FetchResult(BaseModel):
    """Outcome of a fetch: a value or an error, never both"""

    model_config = ConfigDict(frozen=True)

    document: Optional[TranscriptDocument] = None
    summary: Optional[SummaryData] = None
    quiz: Optional[Quiz] = None
    too_long_message: Optional[str] = None
    error: Optional[ErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TranscriptState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading", "ready", "error"] = "loading"
    document: Optional[TranscriptDocument] = None
    error: Optional[ErrorInfo] = None


class SummaryState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle", "ready", "too_long", "error"] = "idle"
    summary: Optional[str] = None
    message: Optional[str] = None


class QuizState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["hidden", "loading", "ready", "error"] = "hidden"
    quiz: Optional[Quiz] = None
    message: Optional[str] = None


class ViewState(BaseModel):
    """Everything the transcript page renders, replaced wholesale on each load"""

    model_config = ConfigDict(frozen=True)

    video_id: Optional[str] = None
    generation: int = Field(0, description="Load counter; higher means issued later")
    transcript: TranscriptState = Field(default_factory=TranscriptState)
    summary: SummaryState = Field(default_factory=SummaryState)
    quiz: QuizState = Field(default_factory=QuizState)
    playback: PlaybackState = Field(default_factory=PlaybackState)
