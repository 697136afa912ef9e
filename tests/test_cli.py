"""Tests for the typer CLI in transcript_viewer/main.py."""

from unittest.mock import patch

from typer.testing import CliRunner

from transcript_viewer.main import app
from transcript_viewer.models import ErrorInfo, FetchResult

runner = CliRunner()


def _fetch_ok(document):
    def _fetch(self, video_id):
        return FetchResult(document=document.model_copy(update={"video_id": video_id}))

    return _fetch


class TestExport:
    def test_writes_srt(self, tmp_path, document):
        with patch("transcript_viewer.main.TranscriptFetcher.fetch", _fetch_ok(document)):
            result = runner.invoke(
                app, ["export", "dQw4w9WgXcQ", "--format", "srt", "--output-dir", str(tmp_path)]
            )

        assert result.exit_code == 0, result.output
        content = (tmp_path / "transcript_dQw4w9WgXcQ.srt").read_text(encoding="utf-8")
        assert content.startswith("1\n00:00:00,000 --> 00:00:02,500\nHello world.")

    def test_accepts_urls_and_plain_text(self, tmp_path, document):
        with patch("transcript_viewer.main.TranscriptFetcher.fetch", _fetch_ok(document)):
            result = runner.invoke(
                app,
                [
                    "export",
                    "https://youtu.be/dQw4w9WgXcQ",
                    "--no-timestamps",
                    "-o",
                    str(tmp_path),
                ],
            )

        assert result.exit_code == 0, result.output
        content = (tmp_path / "transcript_dQw4w9WgXcQ.txt").read_text(encoding="utf-8")
        assert content == "Hello world.\nThis is a test.\nGoodbye."

    def test_multiple_videos(self, tmp_path, document):
        with patch("transcript_viewer.main.TranscriptFetcher.fetch", _fetch_ok(document)):
            result = runner.invoke(
                app, ["export", "aaaaaaaaaaa", "bbbbbbbbbbb", "-o", str(tmp_path)]
            )

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "transcript_aaaaaaaaaaa.txt",
            "transcript_bbbbbbbbbbb.txt",
        ]

    def test_invalid_video(self, tmp_path):
        result = runner.invoke(app, ["export", "not a video", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid video input" in result.output

    def test_fetch_failure_exit_code(self, tmp_path):
        failure = FetchResult(error=ErrorInfo(kind="upstream", message="Video unavailable", status_code=404))
        with patch("transcript_viewer.main.TranscriptFetcher.fetch", return_value=failure):
            result = runner.invoke(app, ["export", "dQw4w9WgXcQ", "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "Video unavailable" in result.output
        assert list(tmp_path.iterdir()) == []


class TestServe:
    def test_runs_server(self):
        with patch("transcript_viewer.server.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9000"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(host=None, port=9000)

    def test_invalid_config(self):
        with patch("transcript_viewer.server.run", side_effect=ValueError("BACKEND_URL must be an http(s) URL")):
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 1
        assert "BACKEND_URL" in result.output
