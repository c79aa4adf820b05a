"""Sequence manipulation utilities.

Sequence length (`length`) is `sequence_length`, which ignores whitespace and gaps.
"""

import re

from Bio.Seq import Seq
from Bio.SeqUtils import gc_fraction

# Whitespace and alignment gaps are not bases
GAP_PATTERN = re.compile(r"[\s\-]+")

# Watson-Crick pairs only; U, IUPAC codes and gaps pass through
COMPLEMENT_TABLE = str.maketrans({
    'A': 'T', 'T': 'A', 'C': 'G', 'G': 'C',
    'a': 't', 't': 'a', 'c': 'g', 'g': 'c',
})


def dna_to_rna(seq: str) -> str:
    """Transcribe DNA to RNA (T -> U, t -> u)."""
    return str(Seq(seq).transcribe())


def rna_to_dna(seq: str) -> str:
    """Back-transcribe RNA to DNA (U -> T, u -> t)."""
    return str(Seq(seq).back_transcribe())


def reverse_complement(seq: str) -> str:
    """Return reverse-complement of a DNA sequence using translation table."""
    return seq.translate(COMPLEMENT_TABLE)[::-1]


def clean_sequence(seq: str) -> str:
    """Strip whitespace and gap characters from a sequence."""
    return GAP_PATTERN.sub("", seq)


def sequence_length(seq: str) -> int:
    """Count bases, ignoring whitespace and gaps."""
    return len(clean_sequence(seq))


def gc_content(seq: str) -> float:
    """
    Calculate GC content as a fraction (0-1).

    Whitespace and gaps are removed first. Every other character counts
    towards the length, so RNA input works the same as DNA. Only G and C
    count as GC; the ambiguity code S does not. An empty sequence has a
    GC content of 0.

    Args:
        seq: DNA or RNA sequence, any case

    Returns:
        Fraction of G/C bases
    """
    cleaned = clean_sequence(seq).upper()
    if not cleaned:
        return 0.0
    # gc_fraction counts S (G or C) towards GC
    return gc_fraction(cleaned.replace("S", "N"), ambiguous="ignore")
