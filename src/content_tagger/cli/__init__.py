"""CLI package - feature-based, stateless commands.

- core/: Shared types and console
- tag/: Hashtag classification and video metadata commands

Usage:
    python -m content_tagger --help
    python -m content_tagger classify "#female #beauty #seoul"
    python -m content_tagger generate-tags --dry-run
"""

from .app import app, main

__all__ = ["app", "main"]
