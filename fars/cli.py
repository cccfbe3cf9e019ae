"""
Command line entry point.

    python -m fars --data-dir data/ summary 2013 2014 2015
    python -m fars --data-dir data/ map 6 2014 --output ca_2014.png

``summary`` prints the month x year table (``--chart FILE`` also writes the
monthly line chart); ``map`` renders one state's accidents to ``--output``,
over the bundled US state outlines or a local ``--boundaries`` GeoJSON file.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .errors import FarsError
from .mapping import map_state
from .render import AltairRenderer, check_output, save_chart
from .summary import summarize_years, summary_chart


def _output_path(value: str):
    try:
        return check_output(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fars", description="FARS accident summaries and state maps")
    parser.add_argument("--data-dir", default=None, help="directory holding accident_<year>.csv.bz2 files")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    sub = parser.add_subparsers(dest="command", required=True)

    summary = sub.add_parser("summary", help="count accidents per month for each year")
    summary.add_argument("years", nargs="+")
    summary.add_argument("--chart", type=_output_path, default=None, help="also write a line chart (.png/.svg/.html/.json)")

    state_map = sub.add_parser("map", help="plot one state's accidents for one year")
    state_map.add_argument("state")
    state_map.add_argument("year")
    state_map.add_argument("--output", type=_output_path, default="fars_map.png", help="chart file (.png/.svg/.html/.json)")
    state_map.add_argument("--boundaries", default=None, help="local GeoJSON file of outlines (default: US states)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "summary":
            table = summarize_years(args.years, data_dir=args.data_dir)
            print(table.to_string())
            if args.chart:
                save_chart(summary_chart(table), args.chart)
        else:
            renderer = AltairRenderer(output=args.output, boundaries=args.boundaries)
            map_state(args.state, args.year, data_dir=args.data_dir, renderer=renderer)
    except (FarsError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
