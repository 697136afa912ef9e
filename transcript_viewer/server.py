"""Transcript Viewer - Flask web application and backend proxy."""

import logging
from typing import Optional
from flask import Flask, render_template, request, jsonify, Response, redirect, url_for

from .api.backend_client import BackendClient, error_message
from .api.transcript_fetcher import TranscriptFetcher
from .api.youtube_urls import extract_video_id, watch_url
from .config import config, configure_logging
from .errors import MissingParameter, NetworkError
from .models import ErrorInfo, ExportConfig, ExportFormat, TranscriptState, ViewState
from .processors.page_controller import PageController
from .processors.player_sync import EmbedCommandQueue, PlayerSync
from .processors.transcript_exporter import TranscriptExporter
from .processors.view_builder import build_page

logger = logging.getLogger(__name__)

app = Flask(__name__, template_folder="templates")


def _require_param(name: str, message: str) -> str:
    value = request.args.get(name, "").strip()
    if not value:
        raise MissingParameter(message, parameter=name)
    return value


def _parse_flag(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.lower() not in ("0", "false", "no", "off")


@app.errorhandler(MissingParameter)
def missing_parameter(e):
    return jsonify({"error": e.message}), 400


# ============================================
# PAGE ROUTES
# ============================================

@app.route("/")
def index():
    """Serve the URL form."""
    return render_template("index.html", url="", error=None)


@app.route("/lookup")
def lookup():
    """Fetch a transcript for the submitted URL and open its page."""
    url = request.args.get("url", "").strip()
    if not url:
        return render_template("index.html", url="", error="Please enter a YouTube URL"), 400

    result = TranscriptFetcher().fetch_url(url)
    if result.error is not None:
        return render_template("index.html", url=url, error=result.error.message)

    return redirect(url_for("transcripts", videoId=result.document.video_id))


@app.route("/transcripts")
def transcripts():
    """Transcript page: player, transcript, summary and optional quiz."""
    video_id = request.args.get("videoId", "").strip()
    include_timestamps = _parse_flag(request.args.get("timestamps"))

    if not video_id:
        state = ViewState(
            transcript=TranscriptState(
                status="error",
                error=ErrorInfo(kind="input", message="No video ID provided"),
            )
        )
        view = build_page(state, include_timestamps=include_timestamps)
        return render_template("transcript.html", view=view, include_timestamps=include_timestamps), 400

    queue = EmbedCommandQueue()
    controller = PageController(player_sync=PlayerSync(queue))
    controller.load(video_id)

    selected = request.args.get("t")
    if selected is not None:
        try:
            controller.select(float(selected))
        except ValueError:
            logger.debug(f"Ignoring invalid selection {selected!r}")

    if _parse_flag(request.args.get("quiz"), default=False):
        controller.load_quiz()

    view = build_page(controller.state, queue.drain(), include_timestamps)
    return render_template("transcript.html", view=view, include_timestamps=include_timestamps)


@app.route("/transcripts/<video_id>/download")
def download_transcript(video_id):
    """Download a transcript as TXT or SRT."""
    try:
        video_id = extract_video_id(video_id)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        export_format = ExportFormat(request.args.get("format", ExportFormat.PLAIN_TEXT.value))
    except ValueError:
        return jsonify({"error": "Format must be 'txt' or 'srt'"}), 400

    export_config = ExportConfig(
        format=export_format,
        include_timestamps=_parse_flag(request.args.get("timestamps")),
    )

    result = TranscriptFetcher().fetch(video_id)
    if result.error is not None:
        return jsonify({"error": result.error.message}), result.error.status_code or 500

    artifact = TranscriptExporter.export_artifact(result.document, export_config)
    return Response(
        artifact.content,
        mimetype=artifact.mimetype,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "healthy"})


# ============================================
# BACKEND PROXY
# ============================================

def _proxy(endpoint: str, params: dict, fallback: str, failure: str):
    """Forward to the backend, passing the status through and mapping `detail` to `error`."""
    try:
        response = BackendClient().forward(endpoint, params)
    except NetworkError as e:
        logger.error(f"Error fetching {endpoint}: {e}")
        return jsonify({"error": failure}), 500

    if not response.ok:
        return jsonify({"error": error_message(response.payload, fallback)}), response.status_code

    return jsonify(response.payload)


@app.route("/api/transcript", methods=["GET"])
def api_transcript():
    url = _require_param("url", "URL parameter is required")
    return _proxy("transcript", {"url": url}, "Failed to fetch transcript", "Internal server error")


@app.route("/api/summary", methods=["GET"])
def api_summary():
    url = _require_param("url", "URL parameter is required")
    return _proxy("summary", {"url": url}, "Failed to fetch summary", "Internal server error")


@app.route("/api/quiz", methods=["GET"])
def api_quiz():
    video_id = _require_param("videoId", "Video ID is required")
    return _proxy("quiz", {"url": watch_url(video_id)}, "Failed to fetch quiz", "Failed to generate quiz")


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the development server."""
    configure_logging()
    config.validate()
    app.run(host=host or config.host, port=port or config.port, debug=config.debug)


if __name__ == "__main__":
    run()
