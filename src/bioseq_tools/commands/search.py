"""Print a literal search pattern for a sequence."""

from bioseq_tools.host import TerminalHost, escape_search_pattern, read_sequence
from bioseq_tools.utils import reverse_complement


def register(subparsers):
    """Register the search subcommand."""
    parser = subparsers.add_parser(
        "search",
        help="Escaped search pattern for a sequence",
        description="Print a very-nomagic (\\V) pattern that matches the sequence literally.",
    )
    parser.add_argument("seq", help="Sequence, or '-' to read from stdin")
    parser.add_argument("--revcomp", action="store_true", help="Search for the reverse complement instead")
    parser.set_defaults(func=run)


def run(args):
    """Run the search command."""
    seq = read_sequence(args.seq)
    if args.revcomp:
        seq = reverse_complement(seq)
    TerminalHost().search(escape_search_pattern(seq))
