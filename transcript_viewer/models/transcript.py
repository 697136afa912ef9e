"""Transcript data models"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


class TranscriptEntry(BaseModel):
    """A single timed caption unit"""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The text content of this entry")
    start: float = Field(..., description="Start time in seconds")
    duration: float = Field(0.0, description="Duration in seconds")

    @computed_field
    @property
    def end(self) -> float:
        """End time calculated from start + duration"""
        return self.start + self.duration


class TranscriptDocument(BaseModel):
    """Transcript for one video, in the order the backend returned it"""

    model_config = ConfigDict(frozen=True)

    video_id: str = Field(..., description="YouTube video ID")
    title: Optional[str] = Field(None, description="Video title, when the backend knows it")
    entries: List[TranscriptEntry] = Field(default_factory=list, description="Ordered transcript entries")

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "TranscriptDocument":
        """Build a document from the backend's `{video_id, title?, transcript}` shape

        Raises:
            pydantic.ValidationError: If the payload does not match
        """
        return cls(
            video_id=payload.get("video_id"),
            title=payload.get("title"),
            entries=payload.get("transcript") or [],
        )

    @computed_field
    @property
    def full_text(self) -> str:
        """Entry texts joined by a single space"""
        return " ".join(entry.text for entry in self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def with_title(self, title: Optional[str]) -> "TranscriptDocument":
        """Return a copy with the title replaced"""
        return self.model_copy(update={"title": title})


class PlaybackState(BaseModel):
    """Most recently selected entry start, used for highlighting"""

    model_config = ConfigDict(frozen=True)

    active_start: Optional[float] = Field(None, description="Start of the last selected entry")

    def is_active(self, entry: TranscriptEntry) -> bool:
        """Exact match on the last selected start, not a time-range match"""
        return self.active_start is not None and entry.start == self.active_start
