"""Shared utility functions."""

from .sequences import (
    dna_to_rna,
    rna_to_dna,
    reverse_complement,
    clean_sequence,
    sequence_length,
    gc_content,
)
from .params import parse_params, parse_flag, get_alignment_params

__all__ = [
    "dna_to_rna",
    "rna_to_dna",
    "reverse_complement",
    "clean_sequence",
    "sequence_length",
    "gc_content",
    "parse_params",
    "parse_flag",
    "get_alignment_params",
]
