"""Nucleotide sequence utilities with a pairwise alignment wrapper."""

__version__ = "0.1.0"

from .utils import (
    dna_to_rna,
    rna_to_dna,
    reverse_complement,
    sequence_length,
    gc_content,
)
from .external import AlignmentBackend, AlignmentConfig, BiotoolsBackend, ExternalToolError
from .session import Session, align

__all__ = [
    "dna_to_rna",
    "rna_to_dna",
    "reverse_complement",
    "sequence_length",
    "gc_content",
    "AlignmentBackend",
    "AlignmentConfig",
    "BiotoolsBackend",
    "ExternalToolError",
    "Session",
    "align",
]
