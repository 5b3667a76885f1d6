"""Command-line entry point for tabchart."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import pydantic

from tabchart import __version__
from tabchart.core.enums import ChartKind, OutputFormat, Side
from tabchart.core.errors import TabchartError, ValidationError
from tabchart.core.models import ErrorDetail, PlotOptions
from tabchart.infra.logging import configure_logging, get_logger
from tabchart.orchestration import PlotCoordinator

logger = get_logger(__name__)

EPILOG = """
Examples:
  # chromosomes of a VCF as a pie chart
  gunzip -c in.vcf.gz | grep -v "^#" | cut -f 1 | sort | uniq -c | tabchart -t PIE -su -o chroms.png

  # header plus rows as stacked bars
  printf 'Year\\tX\\tY\\n2018\\t1\\t2\\n2019\\t3\\t4\\n' | tabchart -t STACKED_HISTOGRAM -o years.svg

  # per-position depth along the genome
  samtools depth in.bam | tabchart -t BEDGRAPH -chrompos -R ref.fa -o depth.png

Without -o the Vega-Lite JSON specification is written to stdout.
Logging output goes to stderr.
""".strip()


def _side(value: str) -> Side:
    return Side(value.lower())


def _kind(value: str) -> ChartKind:
    return ChartKind(value.upper())


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tabchart",
        description="Plot tabular text (pie, bars, stacked bars, bubbles, genome-wide scatter).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("--version", action="version", version=f"tabchart {__version__}")
    parser.add_argument("input", nargs="?", type=Path, default=None, help="input file (default: stdin)")
    parser.add_argument(
        "-t",
        "--type",
        dest="kind",
        type=_kind,
        required=True,
        metavar="{" + ",".join(kind.value for kind in ChartKind) + "}",
        help="chart type",
    )
    parser.add_argument(
        "-su",
        "--sort-unique",
        action="store_true",
        help="input is the output of a `sort | uniq -c` pipeline",
    )
    parser.add_argument(
        "-chrompos",
        "--chrom-position",
        action="store_true",
        help="genomic input is CHROM<tab>POS<tab>VALUE (e.g. `samtools depth`) rather than BED",
    )
    parser.add_argument("-R", "--reference", type=Path, help="reference: .dict, .fai, indexed FASTA or VCF")
    parser.add_argument(
        "--min-reference-size",
        dest="min_contig_size",
        type=int,
        default=-1,
        help="discard contigs shorter than this (e.g. chrM); -1 keeps all",
    )
    parser.add_argument("-o", "--out", dest="output", type=Path, help="output file (.png, .svg or .json)")
    parser.add_argument(
        "--format",
        type=OutputFormat,
        choices=list(OutputFormat),
        metavar="{png,svg,json}",
        help="force the output format",
    )
    parser.add_argument("--title", default="", help="chart title")
    parser.add_argument(
        "--title-side", type=_side, default=Side.TOP, choices=list(Side), metavar="SIDE", help="title side"
    )
    parser.add_argument(
        "--legend-side", type=_side, default=Side.RIGHT, choices=list(Side), metavar="SIDE", help="legend side"
    )
    parser.add_argument("--hide-legend", action="store_true", help="hide the legend")
    parser.add_argument("-xlab", "-xlabel", "--xlabel", dest="xlabel", help="X axis label")
    parser.add_argument("-ylab", "-ylabel", "--ylabel", dest="ylabel", help="Y axis label")
    parser.add_argument(
        "--bubble-columns",
        type=int,
        default=2,
        help="numeric columns per BUBBLE record; a third column sizes the bubble",
    )
    parser.add_argument("--width", type=int, help="chart width in pixels")
    parser.add_argument("--height", type=int, help="chart height in pixels")
    parser.add_argument("--dpi", type=int, help="PNG resolution")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> PlotOptions:
    """Validate parsed arguments into plot options.

    Raises:
        ValidationError: If an option value is rejected.
    """
    output_format = args.format
    if output_format is None and args.output is None:
        output_format = OutputFormat.JSON
    try:
        return PlotOptions(
            kind=args.kind,
            input_path=args.input,
            sort_unique=args.sort_unique,
            chrom_position=args.chrom_position,
            xlabel=args.xlabel,
            ylabel=args.ylabel,
            title=args.title,
            title_side=args.title_side,
            legend_side=args.legend_side,
            hide_legend=args.hide_legend,
            reference=args.reference,
            min_contig_size=args.min_contig_size,
            bubble_columns=args.bubble_columns,
            output=args.output,
            format=output_format,
            width=args.width,
            height=args.height,
            dpi=args.dpi,
        )
    except pydantic.ValidationError as e:
        details = [
            ErrorDetail(field=".".join(str(loc) for loc in err["loc"]), reason=err["msg"]) for err in e.errors()
        ]
        raise ValidationError("Invalid options", details=details) from e


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line.

    Returns:
        Process exit status: 0 on success, 1 on failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else None, stream=sys.stderr)

    try:
        options = options_from_args(args)
        result = PlotCoordinator().run(options)
    except TabchartError as e:
        logger.error(e.message, **e.to_error_response().model_dump(exclude={"message"}, exclude_none=True))
        return 1

    if result.content is not None:
        if isinstance(result.content, bytes):
            sys.stdout.buffer.write(result.content)
        else:
            sys.stdout.write(result.content)
            sys.stdout.write("\n")
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
