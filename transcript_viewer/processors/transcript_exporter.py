"""Serialize transcripts to plain text and SRT"""

from typing import List, Optional

from ..errors import EmptyDocument
from ..models import ExportArtifact, ExportConfig, ExportFormat, TranscriptDocument, TranscriptEntry
from .time_codec import TimestampStyle, encode, sanitize_seconds


class TranscriptExporter:
    """Turn a TranscriptDocument into downloadable text

    Pure formatting: no network or filesystem access. An empty entry list
    exports as an empty string in every format; a missing document raises
    EmptyDocument.
    """

    @staticmethod
    def export(document: Optional[TranscriptDocument], config: ExportConfig) -> str:
        """Serialize a document according to config

        Args:
            document: Transcript to serialize
            config: Output format and timestamp option

        Returns:
            Serialized transcript text

        Raises:
            EmptyDocument: If no document was loaded
        """
        if document is None:
            raise EmptyDocument("No transcript loaded to export")

        if config.format == ExportFormat.SUBTITLE_RIP:
            return TranscriptExporter._to_srt(document.entries)
        return TranscriptExporter._to_text(document.entries, config.include_timestamps)

    @staticmethod
    def export_artifact(
        document: Optional[TranscriptDocument], config: ExportConfig
    ) -> ExportArtifact:
        """Serialize a document and attach its suggested filename"""
        content = TranscriptExporter.export(document, config)
        return ExportArtifact(
            filename=TranscriptExporter.filename(document.video_id, config.format),
            content=content,
        )

    @staticmethod
    def clipboard_text(document: Optional[TranscriptDocument]) -> str:
        """Entry texts joined by single spaces, for copy-to-clipboard"""
        if document is None:
            raise EmptyDocument("No transcript loaded to copy")
        return document.full_text

    @staticmethod
    def filename(video_id: str, export_format: ExportFormat) -> str:
        return f"transcript_{video_id}.{export_format.extension}"

    @staticmethod
    def _to_text(entries: List[TranscriptEntry], include_timestamps: bool) -> str:
        if not include_timestamps:
            return "\n".join(entry.text for entry in entries)

        lines = []
        for entry in entries:
            stamp = encode(sanitize_seconds(entry.start), TimestampStyle.DISPLAY)
            lines.append(f"[{stamp}] {entry.text}")
        return "\n".join(lines)

    @staticmethod
    def _to_srt(entries: List[TranscriptEntry]) -> str:
        if not entries:
            return ""

        blocks = []
        # Index is the entry's position, independent of its timing
        for index, entry in enumerate(entries, 1):
            start = sanitize_seconds(entry.start)
            end = start + sanitize_seconds(entry.duration)
            blocks.append(
                f"{index}\n"
                f"{encode(start, TimestampStyle.SUBTITLE)} --> {encode(end, TimestampStyle.SUBTITLE)}\n"
                f"{entry.text}"
            )
        return "\n\n".join(blocks) + "\n"
