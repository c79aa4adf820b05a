"""Transcribe DNA to RNA or back."""

from bioseq_tools.host import read_sequence
from bioseq_tools.utils import dna_to_rna, rna_to_dna


def register(subparsers):
    """Register the transcribe subcommand."""
    parser = subparsers.add_parser(
        "transcribe",
        help="Transcribe DNA to RNA (or RNA to DNA)",
        description="Replace T with U, or U with T when --reverse is given.",
    )
    parser.add_argument("seq", help="Sequence, or '-' to read from stdin")
    parser.add_argument("--reverse", action="store_true", help="Back-transcribe RNA to DNA")
    parser.set_defaults(func=run)


def run(args):
    """Run the transcribe command."""
    seq = read_sequence(args.seq)
    print(rna_to_dna(seq) if args.reverse else dna_to_rna(seq))
