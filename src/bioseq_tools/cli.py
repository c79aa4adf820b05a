#!/usr/bin/env python
"""bioseq - nucleotide sequence utilities CLI."""

import argparse
import sys

from bioseq_tools import __version__
from bioseq_tools.external import ExternalToolError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="bioseq",
        description="Transcription, reverse complement, GC content and pairwise alignment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bioseq transcribe ATCG
  bioseq revcomp ATCG
  echo "ACGC" | bioseq stats -
  bioseq table --in seqs.fa --out stats.csv
  bioseq align ACGTACGT ACGAACGT --mode local --params params.txt
  bioseq search ATCG --revcomp

For more information on a specific command:
  bioseq <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from bioseq_tools.commands import (
        transcribe,
        revcomp,
        stats,
        table,
        align,
        search,
    )

    transcribe.register(subparsers)
    revcomp.register(subparsers)
    stats.register(subparsers)
    table.register(subparsers)
    align.register(subparsers)
    search.register(subparsers)

    return parser


def main(argv=None):
    """Main entry point for the bioseq CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    try:
        args.func(args)
    except (ExternalToolError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
