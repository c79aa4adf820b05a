"""Query/subject slots for pairwise comparison."""

from bioseq_tools.external import AlignmentBackend, AlignmentConfig, BiotoolsBackend


class Session:
    """
    The sequences last picked for comparison.

    Both slots start unset and are only ever changed by an explicit write.
    A session is owned by its caller and is not safe to share between threads.
    """

    def __init__(self, query_sequence: str | None = None, subject_sequence: str | None = None):
        self.query_sequence = query_sequence
        self.subject_sequence = subject_sequence

    def set_query(self, seq: str) -> None:
        self.query_sequence = seq

    def set_subject(self, seq: str) -> None:
        self.subject_sequence = seq

    def is_ready(self) -> bool:
        """True when both query and subject have been set."""
        return self.query_sequence is not None and self.subject_sequence is not None

    def clear(self) -> None:
        self.query_sequence = None
        self.subject_sequence = None

    def __repr__(self):
        return (
            f"{type(self).__name__}(query_sequence={self.query_sequence!r}, "
            f"subject_sequence={self.subject_sequence!r})"
        )


def align(
    session: Session,
    config: AlignmentConfig | None = None,
    backend: AlignmentBackend | None = None,
) -> list[str]:
    """
    Align the session's query against its subject.

    Args:
        session: Session holding both sequences
        config: Alignment flags (default: AlignmentConfig())
        backend: Aligner to use (default: BiotoolsBackend())

    Returns:
        Alignment output lines, unparsed

    Raises:
        ValueError: If the query or subject has not been set
            or starts with '-'
        ExternalToolError: If the backend tool fails
    """
    if session.query_sequence is None:
        raise ValueError("Query sequence has not been set")
    if session.subject_sequence is None:
        raise ValueError("Subject sequence has not been set")
    for name, seq in (("Query", session.query_sequence), ("Subject", session.subject_sequence)):
        # biotools would parse a leading "-" as an option
        if seq.startswith("-"):
            raise ValueError(f"{name} sequence must not start with '-': {seq!r}")

    config = config or AlignmentConfig()
    backend = backend or BiotoolsBackend()
    return backend.run(config, session.query_sequence, session.subject_sequence)
