"""Export configuration and artifact models"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class ExportFormat(str, Enum):
    """Supported export formats; the value doubles as the file extension"""

    PLAIN_TEXT = "txt"
    SUBTITLE_RIP = "srt"

    @property
    def extension(self) -> str:
        return self.value


class ExportConfig(BaseModel):
    """How a transcript should be serialized"""

    model_config = ConfigDict(frozen=True)

    format: ExportFormat = Field(ExportFormat.PLAIN_TEXT, description="Output format")
    include_timestamps: bool = Field(
        True, description="Prefix plain-text lines with [M:SS]; ignored for SRT"
    )


class ExportArtifact(BaseModel):
    """In-memory export, ready to be offered as a download"""

    filename: str = Field(..., description="Suggested filename")
    content: str = Field(..., description="Serialized transcript")
    mimetype: str = Field("text/plain", description="MIME type of the content")
