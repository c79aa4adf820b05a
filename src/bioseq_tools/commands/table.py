"""Tabulate length, GC content and reverse complement for a FASTA file."""

import time
from pathlib import Path

import pandas as pd
from Bio import SeqIO

from bioseq_tools.utils import sequence_length, gc_content, reverse_complement

TABLE_COLUMNS = ["id", "length", "GC", "revcomp"]


def register(subparsers):
    """Register the table subcommand."""
    parser = subparsers.add_parser(
        "table",
        help="Per-record statistics for a FASTA file",
        description="""
Read every record of a FASTA file and write a CSV with its length,
GC content and reverse complement.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input FASTA")
    parser.add_argument("--out", dest="output", required=True, help="Output CSV")
    parser.set_defaults(func=run)


def build_table(records) -> pd.DataFrame:
    """Build the statistics table from (id, sequence) pairs."""
    rows = [
        {
            "id": rid,
            "length": sequence_length(seq),
            "GC": round(gc_content(seq), 4),
            "revcomp": reverse_complement(seq),
        }
        for rid, seq in records
    ]
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    return pd.DataFrame(rows)[TABLE_COLUMNS]


def run(args):
    """Run the table command."""
    if not Path(args.input).exists():
        raise FileNotFoundError(f"Input FASTA file not found: {args.input}")

    print(f"Reading sequences from {args.input}...")
    start_time = time.time()

    records = [(rec.id, str(rec.seq)) for rec in SeqIO.parse(args.input, "fasta")]
    print(f">> Records: {len(records)}")

    df = build_table(records)
    df.to_csv(args.output, index=False)

    runtime = time.time() - start_time
    print(f"Wrote {len(df)} rows to {args.output} ({runtime:.1f} sec)")
