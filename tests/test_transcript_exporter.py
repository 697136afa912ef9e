"""Tests for transcript_viewer/processors/transcript_exporter.py."""

import math

import pytest

from transcript_viewer.errors import EmptyDocument
from transcript_viewer.models import ExportConfig, ExportFormat
from transcript_viewer.processors.transcript_exporter import TranscriptExporter

TXT = ExportConfig(format=ExportFormat.PLAIN_TEXT, include_timestamps=False)
TXT_STAMPED = ExportConfig(format=ExportFormat.PLAIN_TEXT, include_timestamps=True)
SRT = ExportConfig(format=ExportFormat.SUBTITLE_RIP)


class TestPlainText:
    def test_newline_joined(self, make_document):
        doc = make_document(("hi", 0, 1), ("there", 1, 1))
        assert TranscriptExporter.export(doc, TXT) == "hi\nthere"

    def test_with_timestamps(self, make_document):
        doc = make_document(("hi", 0, 1), ("later", 65, 2))
        assert TranscriptExporter.export(doc, TXT_STAMPED) == "[0:00] hi\n[1:05] later"

    def test_timestamps_default_on(self, make_document):
        doc = make_document(("hi", 3, 1))
        assert TranscriptExporter.export(doc, ExportConfig()) == "[0:03] hi"

    def test_invalid_start_rendered_as_zero(self, make_document):
        doc = make_document(("neg", -4, 1), ("nan", math.nan, 1))
        assert TranscriptExporter.export(doc, TXT_STAMPED) == "[0:00] neg\n[0:00] nan"


class TestSubtitle:
    def test_blocks(self, make_document):
        doc = make_document(("hi", 0, 1.5), ("there", 3661.5, 2))
        assert TranscriptExporter.export(doc, SRT) == (
            "1\n"
            "00:00:00,000 --> 00:00:01,500\n"
            "hi\n"
            "\n"
            "2\n"
            "01:01:01,500 --> 01:01:03,500\n"
            "there\n"
        )

    def test_index_follows_position_not_time(self, make_document):
        doc = make_document(("a", 5, 1), ("b", 2, 1))
        blocks = TranscriptExporter.export(doc, SRT).strip().split("\n\n")
        assert blocks[0].splitlines()[0] == "1"
        assert blocks[0].splitlines()[2] == "a"
        assert blocks[1].splitlines()[0] == "2"
        assert blocks[1].splitlines()[2] == "b"

    def test_overlapping_entries(self, make_document):
        doc = make_document(("a", 0, 5), ("b", 1, 5), ("c", 1, 0))
        blocks = TranscriptExporter.export(doc, SRT).strip().split("\n\n")
        assert [b.splitlines()[0] for b in blocks] == ["1", "2", "3"]

    def test_zero_duration(self, make_document):
        doc = make_document(("blip", 2, 0))
        assert "00:00:02,000 --> 00:00:02,000" in TranscriptExporter.export(doc, SRT)

    def test_invalid_timing_sanitized(self, make_document):
        doc = make_document(("bad", -1, math.nan))
        assert "00:00:00,000 --> 00:00:00,000" in TranscriptExporter.export(doc, SRT)

    def test_timestamps_flag_ignored(self, make_document):
        doc = make_document(("hi", 0, 1))
        no_stamps = ExportConfig(format=ExportFormat.SUBTITLE_RIP, include_timestamps=False)
        assert TranscriptExporter.export(doc, no_stamps) == TranscriptExporter.export(doc, SRT)


class TestEmpty:
    @pytest.mark.parametrize("config", [TXT, TXT_STAMPED, SRT])
    def test_empty_entries_export_empty_string(self, make_document, config):
        assert TranscriptExporter.export(make_document(), config) == ""

    def test_missing_document_raises(self):
        with pytest.raises(EmptyDocument):
            TranscriptExporter.export(None, TXT)

    def test_missing_document_clipboard_raises(self):
        with pytest.raises(EmptyDocument):
            TranscriptExporter.clipboard_text(None)


class TestClipboardAndArtifact:
    def test_clipboard_space_joined(self, make_document):
        doc = make_document(("hi", 0, 1), ("there", 1, 1))
        assert TranscriptExporter.clipboard_text(doc) == "hi there"

    def test_clipboard_matches_full_text(self, document):
        assert TranscriptExporter.clipboard_text(document) == document.full_text

    def test_artifact_txt(self, make_document):
        doc = make_document(("hi", 0, 1), video_id="abc")
        artifact = TranscriptExporter.export_artifact(doc, TXT)
        assert artifact.filename == "transcript_abc.txt"
        assert artifact.content == "hi"
        assert artifact.mimetype == "text/plain"

    def test_artifact_srt(self, make_document):
        doc = make_document(("hi", 0, 1), video_id="abc")
        artifact = TranscriptExporter.export_artifact(doc, SRT)
        assert artifact.filename == "transcript_abc.srt"
        assert artifact.content.startswith("1\n00:00:00,000 --> 00:00:01,000\nhi")
