"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="tagger",
    help="Hashtag metadata for content and ads video libraries",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .tag.commands import classify, generate_tags, show, tag_video, update_metadata

    app.command(name="classify")(classify)
    app.command(name="generate-tags")(generate_tags)
    app.command(name="tag-video")(tag_video)
    app.command(name="update-metadata")(update_metadata)
    app.command(name="show")(show)


def setup_logging(log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sends API and tagging logs to logs/tagger.log
    """
    if log_dir is None:
        log_dir = Path(__file__).parent.parent.parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    file_handler = logging.FileHandler(log_dir / "tagger.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    )

    for logger_name in ["twelvelabs_api", "content_tagger", "hashtag_classifier", "hashtag_validator"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        logger.handlers = []  # Clear any existing handlers
        logger.addHandler(file_handler)


# Initialize logging on module import
setup_logging()

# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
