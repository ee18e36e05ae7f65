"""Shared CLI options for prof-rag commands."""

from enum import Enum
from typing import Annotated

import typer


class FormatChoice(str, Enum):
    """How command results are printed."""

    RICH = "rich"
    JSON = "json"


FormatOption = Annotated[
    FormatChoice,
    typer.Option(
        "--format",
        "-f",
        help="Output format (rich, json).",
        case_sensitive=False,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
]

ThresholdOption = Annotated[
    float | None,
    typer.Option(
        "--threshold",
        "-t",
        min=0.0,
        max=1.0,
        help="Fuzzy edit tolerance in [0, 1]. Defaults to config setting.",
    ),
]

MockOption = Annotated[
    bool,
    typer.Option(
        "--mock",
        help="Use mock embeddings and an in-memory review store built from the faculty list.",
    ),
]
