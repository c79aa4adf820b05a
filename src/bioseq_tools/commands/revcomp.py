"""Reverse-complement a DNA sequence."""

from bioseq_tools.host import read_sequence
from bioseq_tools.utils import reverse_complement


def register(subparsers):
    """Register the revcomp subcommand."""
    parser = subparsers.add_parser(
        "revcomp",
        help="Reverse complement a DNA sequence",
    )
    parser.add_argument("seq", help="Sequence, or '-' to read from stdin")
    parser.set_defaults(func=run)


def run(args):
    """Run the revcomp command."""
    print(reverse_complement(read_sequence(args.seq)))
