"""Core utilities for CLI - shared types and console."""

from .console import console, print_error
from .types import Failure, IndexTarget, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "IndexTarget",
    "console",
    "print_error",
]
