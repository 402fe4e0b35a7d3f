"""Display functions for tagging commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...hashtag import METADATA_FIELDS, VideoMetadata, metadata_to_tags
from ...services import TaggingStatus, TaggingSummary, VideoTaggingResult
from ...twelvelabs import video_title
from ..core.types import IndexTarget

_STATUS_STYLES = {
    TaggingStatus.TAGGED: ("green", "tagged"),
    TaggingStatus.DRY_RUN: ("yellow", "would tag"),
    TaggingStatus.SKIPPED: ("dim", "skipped (already tagged)"),
    TaggingStatus.NO_HASHTAGS: ("yellow", "no hashtags generated"),
    TaggingStatus.FAILED: ("red", "failed"),
}


def show_metadata_table(console: Console, metadata: VideoMetadata, title: str = "Video Metadata") -> None:
    """Display all six metadata fields, empty ones dimmed."""
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    values = metadata.to_dict()
    for field_name in METADATA_FIELDS:
        value = values[field_name]
        table.add_row(field_name, value if value else "[dim]-[/dim]")

    console.print(table)


def show_batch_header(console: Console, target: IndexTarget, dry_run: bool, force: bool) -> None:
    """Display batch tagging configuration panel."""
    mode = "[yellow]Dry run (nothing saved)[/yellow]" if dry_run else "[green]Save metadata[/green]"
    retag = "[yellow]Yes[/yellow]" if force else "[dim]No[/dim]"
    console.print(Panel(
        f"Index: [cyan]{target.index_id}[/cyan] ({target.library})\n"
        f"Mode: {mode}\n"
        f"Re-tag existing: {retag}",
        title="Generate Tags",
        border_style="cyan",
    ))


def show_video_progress(console: Console, result: VideoTaggingResult, summary: TaggingSummary) -> None:
    """Display one line per processed video."""
    style, label = _STATUS_STYLES[result.status]
    line = f"  [{summary.processed}/{summary.total}] [dim]{result.video_id}[/dim]: [{style}]{label}[/{style}]"
    if result.metadata is not None:
        tags = ", ".join(tag.value for tag in metadata_to_tags(result.metadata.to_dict()))
        line += f" [dim]{tags}[/dim]"
    if result.error:
        line += f" [red]{result.error}[/red]"
    console.print(line)


def show_batch_summary(console: Console, summary: TaggingSummary, dry_run: bool) -> None:
    """Display batch totals."""
    border = "red" if summary.failed else "green"
    tagged_label = "Would tag" if dry_run else "Tagged"
    console.print(Panel(
        f"Total: {summary.total}\n"
        f"{tagged_label}: [green]{summary.tagged}[/green]\n"
        f"Skipped: [dim]{summary.skipped}[/dim]\n"
        f"No hashtags: [yellow]{summary.no_hashtags}[/yellow]\n"
        f"Failed: [red]{summary.failed}[/red]",
        title=f"Index {summary.index_id}",
        border_style=border,
    ))


def show_video_result(console: Console, result: VideoTaggingResult) -> None:
    """Display a single-video tagging result."""
    style, label = _STATUS_STYLES[result.status]
    console.print(f"[{style}]{result.video_id}: {label}[/{style}]")
    if result.hashtags:
        console.print(f"[dim]Hashtags:[/dim] {result.hashtags}")
    if result.metadata is not None:
        show_metadata_table(console, result.metadata)
    if result.existing_metadata:
        show_video_tags(console, {"_id": result.video_id, "user_metadata": result.existing_metadata})
    if result.error:
        console.print(f"[red]{result.error}[/red]")


def show_video_tags(console: Console, video: dict[str, Any]) -> None:
    """Display a video's stored user_metadata as tags."""
    tags = metadata_to_tags(video.get("user_metadata"))
    title = video_title(video)

    if not tags:
        console.print(f"[yellow]{title}: no tags[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Category", style="cyan")
    table.add_column("Value")
    for tag in tags:
        table.add_row(tag.category, tag.value)
    console.print(table)


def show_metadata_saved(console: Console, video_id: str, metadata: VideoMetadata) -> None:
    """Display metadata update confirmation."""
    console.print(f"[green]Video metadata updated successfully for {video_id}[/green]")
    show_metadata_table(console, metadata)


def show_no_videos(console: Console, index_id: Optional[str]) -> None:
    console.print(f"[yellow]No videos found in index {index_id}.[/yellow]")
