"""CLI layer for prof-rag.

Developer commands for inspecting each stage of professor resolution,
built on Typer with Rich formatting.

Usage:
    prof-rag patterns "Prof. Dr. Müller stats"
    prof-rag match "stats professor muller"
    prof-rag resolve --mock "who teaches robotics?"
"""

from prof_rag.cli.app import app, main
from prof_rag.cli.options import (
    FormatChoice,
    FormatOption,
    MockOption,
    ThresholdOption,
    VerboseOption,
)

__all__ = [
    # App
    "app",
    "main",
    # Options
    "FormatChoice",
    "FormatOption",
    "MockOption",
    "ThresholdOption",
    "VerboseOption",
]
