"""CLI subcommand implementations."""

from . import (
    transcribe,
    revcomp,
    stats,
    table,
    align,
    search,
)

__all__ = [
    "transcribe",
    "revcomp",
    "stats",
    "table",
    "align",
    "search",
]

