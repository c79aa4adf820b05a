"""Pairwise alignment of two sequences with biotools."""

from bioseq_tools.external import ALIGNMENT_MODES, AlignmentConfig, BiotoolsBackend
from bioseq_tools.host import TerminalHost, read_sequence
from bioseq_tools.session import Session, align
from bioseq_tools.utils import parse_params, get_alignment_params


def register(subparsers):
    """Register the align subcommand."""
    parser = subparsers.add_parser(
        "align",
        help="Pairwise alignment with biotools",
        description="""
Align QUERY against SUBJECT by running `biotools pairwise-<mode>` and print
its output unchanged. Settings are read from --params (ALIGN_MODE, TRY_RC,
HIDE_COORDS, GAP_OPEN, GAP_EXTEND, LINE_WIDTH, ZERO_BASED); flags given on
the command line take precedence.
""",
    )
    parser.add_argument("query", help="Query sequence, or '-' to read from stdin")
    parser.add_argument("subject", help="Subject sequence")
    parser.add_argument("--params", dest="param_file", help="Parameters file (params.txt)")
    parser.add_argument("--mode", choices=ALIGNMENT_MODES, help="Alignment mode (default: semiglobal)")
    parser.add_argument("--no-try-rc", dest="try_rc", action="store_false", default=None,
                        help="Do not retry with the reverse complement")
    parser.add_argument("--hide-coords", action="store_true", default=None, help="Hide alignment coordinates")
    parser.add_argument("--gap-open", type=int, help="Gap open penalty (default: 2)")
    parser.add_argument("--gap-extend", type=int, help="Gap extend penalty (default: 1)")
    parser.add_argument("--line-width", type=int, help="Output line width (default: 60)")
    parser.add_argument("--zero-based", action="store_true", default=None, help="Use 0-based coordinates")
    parser.add_argument("--executable", default="biotools", help="biotools executable")
    parser.add_argument("--timeout", type=float, default=300, help="Seconds to wait for biotools")
    parser.add_argument("--popup", action="store_true", help="Show the alignment in a box sized to fit it")
    parser.set_defaults(func=run)


def build_config(args) -> AlignmentConfig:
    """Merge params file values and command-line overrides."""
    params = parse_params(args.param_file) if args.param_file else {}
    settings = get_alignment_params(params)

    overrides = {
        "mode": args.mode,
        "try_reverse_complement": args.try_rc,
        "hide_coordinates": args.hide_coords,
        "gap_open_penalty": args.gap_open,
        "gap_extend_penalty": args.gap_extend,
        "line_width": args.line_width,
        "use_zero_based_coordinates": args.zero_based,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return AlignmentConfig(**settings)


def run(args):
    """Run the align command."""
    config = build_config(args)

    session = Session()
    session.set_query(read_sequence(args.query))
    session.set_subject(args.subject)

    backend = BiotoolsBackend(executable=args.executable, timeout=args.timeout)
    lines = align(session, config, backend)
    if args.popup:
        TerminalHost().show(lines)
    else:
        for line in lines:
            print(line)
