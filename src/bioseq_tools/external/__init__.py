"""External bioinformatics tool wrappers."""

from .biotools import (
    ALIGNMENT_MODES,
    AlignmentBackend,
    AlignmentConfig,
    BiotoolsBackend,
    ExternalToolError,
    build_command,
    find_biotools,
)

__all__ = [
    "ALIGNMENT_MODES",
    "AlignmentBackend",
    "AlignmentConfig",
    "BiotoolsBackend",
    "ExternalToolError",
    "build_command",
    "find_biotools",
]
