"""Report length and GC content of a sequence."""

from bioseq_tools.host import read_sequence
from bioseq_tools.utils import sequence_length, gc_content


def register(subparsers):
    """Register the stats subcommand."""
    parser = subparsers.add_parser(
        "stats",
        help="Sequence length and GC content",
        description="""
Count bases (whitespace and '-' gaps are ignored) and compute the
fraction of G/C bases, case-insensitively.
""",
    )
    parser.add_argument("seq", help="Sequence, or '-' to read from stdin")
    parser.set_defaults(func=run)


def run(args):
    """Run the stats command."""
    seq = read_sequence(args.seq)
    print(f"Length: {sequence_length(seq)}")
    print(f"GC content: {gc_content(seq):.4f}")
