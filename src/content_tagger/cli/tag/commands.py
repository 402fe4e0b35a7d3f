"""Tagging CLI commands - classify hashtags and manage video metadata."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import typer

from ...config import load_tagger_config
from ...hashtag import classify_hashtags
from ...services import TaggingStatus, TaggingSummary, VideoTaggingResult
from ...twelvelabs import TwelveLabsSettings
from ..core.console import console, print_error
from ..core.types import Failure, IndexTarget
from .display import (
    show_batch_header,
    show_batch_summary,
    show_metadata_saved,
    show_metadata_table,
    show_no_videos,
    show_video_progress,
    show_video_result,
    show_video_tags,
)
from .service import fetch_video, resolve_target, run_batch, run_single, save_metadata


def _get_settings() -> TwelveLabsSettings:
    return TwelveLabsSettings()


def _require_target(index_id: Optional[str], ads: bool = False) -> tuple[TwelveLabsSettings, IndexTarget]:
    settings = _get_settings()
    result = resolve_target(settings, index_id, ads=ads)
    if isinstance(result, Failure):
        print_error(result.error)
        raise typer.Exit(1)
    return settings, result.value


def classify(
    text: Optional[str] = typer.Argument(None, help="Hashtag text, e.g. '#female #beauty #seoul'"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read hashtag text from a file"),
    as_json: bool = typer.Option(False, "--json", help="Print metadata as JSON"),
) -> None:
    """Classify hashtag text into video metadata.

    Reads from TEXT, from --file, or from stdin when neither is given.
    """
    if file is not None:
        if not file.exists():
            print_error(f"File not found: {file}")
            raise typer.Exit(1)
        text = file.read_text(encoding="utf-8")
    elif text is None:
        text = sys.stdin.read()

    metadata = classify_hashtags(text)

    if as_json:
        console.print_json(json.dumps(metadata.to_dict()))
        return

    show_metadata_table(console, metadata)


def generate_tags(
    index_id: Optional[str] = typer.Option(None, "--index-id", "-i", help="Index to tag (defaults to the content index)"),
    ads: bool = typer.Option(False, "--ads", help="Tag the ads index instead of the content index"),
    force: bool = typer.Option(False, "--force", help="Re-tag videos that already have tags"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Generate and classify without saving"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Stop after N videos"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to tagger.yaml"),
) -> None:
    """Generate hashtag metadata for every video in an index.

    Videos that already have a sector or emotions are skipped unless --force.
    """
    settings, target = _require_target(index_id, ads=ads)
    config = load_tagger_config(config_path)

    show_batch_header(console, target, dry_run, force)

    async def on_progress(result: VideoTaggingResult, summary: TaggingSummary) -> None:
        show_video_progress(console, result, summary)

    summary = asyncio.run(run_batch(
        settings,
        target,
        config,
        force=force,
        dry_run=dry_run,
        limit=limit,
        on_progress=on_progress,
    ))

    if summary.total == 0:
        show_no_videos(console, target.index_id)
        return

    console.print()
    show_batch_summary(console, summary, dry_run)

    if summary.failed:
        raise typer.Exit(1)


def tag_video(
    video_id: str = typer.Argument(..., help="Video ID"),
    index_id: Optional[str] = typer.Option(None, "--index-id", "-i", help="Index the video belongs to"),
    ads: bool = typer.Option(False, "--ads", help="Video is in the ads index"),
    force: bool = typer.Option(False, "--force", help="Re-tag even if the video has tags"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Generate and classify without saving"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to tagger.yaml"),
) -> None:
    """Generate hashtag metadata for a single video."""
    settings, target = _require_target(index_id, ads=ads)
    config = load_tagger_config(config_path)

    result = asyncio.run(run_single(settings, target, video_id, config, force=force, dry_run=dry_run))
    show_video_result(console, result)

    if result.status == TaggingStatus.FAILED:
        raise typer.Exit(1)


def update_metadata(
    video_id: str = typer.Argument(..., help="Video ID"),
    index_id: Optional[str] = typer.Option(None, "--index-id", "-i", help="Index the video belongs to"),
    ads: bool = typer.Option(False, "--ads", help="Video is in the ads index"),
    source: Optional[str] = typer.Option(None, "--source", help="Source"),
    sector: Optional[str] = typer.Option(None, "--sector", help="Sector (Beauty, Fashion, Tech, ...)"),
    emotions: Optional[str] = typer.Option(None, "--emotions", help="Emotions (exciting, calm, ...)"),
    brands: Optional[str] = typer.Option(None, "--brands", help="Brands, comma separated"),
    locations: Optional[str] = typer.Option(None, "--locations", help="Locations, comma separated"),
    demographics: Optional[str] = typer.Option(None, "--demographics", help="Demographics, comma separated"),
) -> None:
    """Set a video's metadata by hand.

    Sector, emotions and demographics are checked against the allowed options.
    Fields not given are stored empty.
    """
    settings, target = _require_target(index_id, ads=ads)
    fields = {
        "source": source,
        "sector": sector,
        "emotions": emotions,
        "brands": brands,
        "locations": locations,
        "demographics": demographics,
    }

    result = asyncio.run(save_metadata(settings, target, video_id, fields))
    if isinstance(result, Failure):
        print_error(result.error, result.details)
        raise typer.Exit(1)

    show_metadata_saved(console, video_id, result.value)


def show(
    video_id: str = typer.Argument(..., help="Video ID"),
    index_id: Optional[str] = typer.Option(None, "--index-id", "-i", help="Index the video belongs to"),
    ads: bool = typer.Option(False, "--ads", help="Video is in the ads index"),
) -> None:
    """Show a video's stored tags."""
    settings, target = _require_target(index_id, ads=ads)

    result = asyncio.run(fetch_video(settings, target, video_id))
    if isinstance(result, Failure):
        print_error(result.error, result.details)
        raise typer.Exit(1)

    show_video_tags(console, result.value)
