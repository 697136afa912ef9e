"""CLI interface for the transcript viewer"""

from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from tqdm import tqdm

from .api.transcript_fetcher import TranscriptFetcher
from .api.youtube_urls import extract_video_id
from .config import config, configure_logging
from .models import ExportConfig, ExportFormat
from .processors.transcript_exporter import TranscriptExporter
from .storage.artifact_writer import ArtifactWriter

app = typer.Typer(
    name="transcript-viewer",
    help="Export YouTube transcripts as TXT or SRT and serve the transcript viewer",
)
console = Console()


@app.command()
def export(
    videos: List[str] = typer.Argument(..., help="YouTube video IDs or URLs"),
    export_format: ExportFormat = typer.Option(
        ExportFormat.PLAIN_TEXT, "--format", "-f", help="Output format (txt or srt)"
    ),
    timestamps: bool = typer.Option(
        True, "--timestamps/--no-timestamps", help="Prefix TXT lines with [M:SS]"
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for transcript_<ID>.<ext> files (default: OUTPUT_DIR)",
    ),
):
    """Export transcripts of one or more videos

    Examples:
        transcript-viewer export DIC-E6W4QBw
        transcript-viewer export "https://www.youtube.com/watch?v=DIC-E6W4QBw" -f srt
        transcript-viewer export ID1 ID2 --no-timestamps -o exports/
    """
    configure_logging("WARNING")

    try:
        video_ids = [extract_video_id(video) for video in videos]
    except ValueError as e:
        console.print(f"[red]Error:[/red] {str(e)}", style="bold")
        raise typer.Exit(1)

    if output_dir is None:
        output_dir = config.output_dir

    export_config = ExportConfig(format=export_format, include_timestamps=timestamps)
    fetcher = TranscriptFetcher()

    console.print("\n[bold cyan]YouTube Transcript Export[/bold cyan]")
    console.print(f"Videos: {len(video_ids)}")
    console.print(f"Format: {export_format.value}")
    console.print(f"Output: {output_dir.absolute()}")
    console.print("")

    failures = []
    for video_id in tqdm(video_ids, desc="Exporting", disable=len(video_ids) < 2):
        result = fetcher.fetch(video_id)
        if result.error is not None:
            failures.append((video_id, result.error.message))
            continue

        artifact = TranscriptExporter.export_artifact(result.document, export_config)
        try:
            path = ArtifactWriter.write(artifact, output_dir)
        except IOError as e:
            failures.append((video_id, str(e)))
            continue
        console.print(f"[green]Saved:[/green] {path}")

    if failures:
        console.print(f"\n[red]Failed ({len(failures)}):[/red]")
        for video_id, message in failures:
            console.print(f"  {video_id}: {message}")
        raise typer.Exit(1)

    console.print("\n[bold green]✓ Export completed successfully![/bold green]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: PORT)"),
):
    """Run the web application"""
    from .server import run

    try:
        run(host=host, port=port)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {str(e)}", style="bold")
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
