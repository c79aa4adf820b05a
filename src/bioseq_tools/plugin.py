"""Editor commands built on the sequence utilities and the alignment session."""

from bioseq_tools.external import AlignmentBackend, AlignmentConfig, ExternalToolError
from bioseq_tools.session import Session, align
from bioseq_tools.utils import (
    dna_to_rna,
    rna_to_dna,
    reverse_complement,
    sequence_length,
    gc_content,
)
from bioseq_tools.host import escape_search_pattern


class BioPlugin:
    """
    Glue between a host editor and the sequence tools.

    `host` must provide get_selection(), search(pattern), show(lines) and
    error(message); see bioseq_tools.host for the interfaces.
    """

    def __init__(
        self,
        host,
        session: Session | None = None,
        backend: AlignmentBackend | None = None,
        config: AlignmentConfig | None = None,
    ):
        self.host = host
        self.session = session if session is not None else Session()
        self.backend = backend
        self.config = config or AlignmentConfig()

    def transcribe_selection(self) -> str:
        rna = dna_to_rna(self.host.get_selection())
        self.host.show([rna])
        return rna

    def back_transcribe_selection(self) -> str:
        dna = rna_to_dna(self.host.get_selection())
        self.host.show([dna])
        return dna

    def reverse_complement_selection(self) -> str:
        rc = reverse_complement(self.host.get_selection())
        self.host.show([rc])
        return rc

    def selection_stats(self) -> tuple[int, float]:
        seq = self.host.get_selection()
        length, gc = sequence_length(seq), gc_content(seq)
        self.host.show([f"Length: {length}", f"GC content: {gc:.2%}"])
        return length, gc

    def search_reverse_complement(self) -> str:
        """Search the buffer for the reverse complement of the selection."""
        pattern = escape_search_pattern(reverse_complement(self.host.get_selection()))
        self.host.search(pattern)
        return pattern

    def set_query_from_selection(self) -> str:
        seq = self.host.get_selection()
        self.session.set_query(seq)
        return seq

    def set_subject_from_selection(self) -> str:
        seq = self.host.get_selection()
        self.session.set_subject(seq)
        return seq

    def pairwise_align(self) -> list[str] | None:
        """
        Align the stored query against the stored subject and show the result.

        Failures are reported through the host and not retried.

        Returns:
            Alignment lines, or None if the alignment could not be run
        """
        try:
            lines = align(self.session, self.config, self.backend)
        except (ExternalToolError, ValueError, FileNotFoundError) as e:
            self.host.error(f"Alignment failed: {e}")
            return None
        self.host.show(lines)
        return lines
