"""Command line interface for quick division checks."""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Sequence

from compass_playground.division import DivisionPoint, divide_line_segment, divide_radius_points
from compass_playground.errors import ConstructionError
from compass_playground.logging_config import LEVEL_NAMES, setup_logging
from compass_playground.primitives import CompassArc, Line
from compass_playground.settings import load_settings


def _emit(points: List[DivisionPoint], as_json: bool) -> None:
    if as_json:
        print(json.dumps([{"x": p.x, "y": p.y} for p in points]))
        return
    if not points:
        print("(no interior points)")
        return
    for idx, p in enumerate(points, start=1):
        print(f"{idx}: ({p.x:g}, {p.y:g})")


def _cmd_divide(args: argparse.Namespace) -> List[DivisionPoint]:
    line = Line()
    line.set_first_point(args.x1, args.y1)
    line.set_second_point(args.x2, args.y2)
    return divide_line_segment(line, args.divisions)


def _cmd_divide_radius(args: argparse.Namespace) -> List[DivisionPoint]:
    arc = CompassArc()
    arc.set_center(args.cx, args.cy)
    arc.set_radius(args.rx, args.ry)
    return divide_radius_points(arc, args.divisions)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="compass-playground", description="Compass and straightedge helpers")
    parser.add_argument("--config", help="Path to a JSON settings file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVEL_NAMES,
        help="Override the configured log level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    divide = sub.add_parser("divide", help="Divide a segment into equal parts")
    for name in ("x1", "y1", "x2", "y2"):
        divide.add_argument(name, type=float)
    divide.add_argument("-n", "--divisions", type=int, default=2)
    divide.add_argument("--json", action="store_true", help="Print points as JSON")
    divide.set_defaults(func=_cmd_divide)

    radius = sub.add_parser("divide-radius", help="Divide a compass radius into equal parts")
    for name in ("cx", "cy", "rx", "ry"):
        radius.add_argument(name, type=float)
    radius.add_argument("-n", "--divisions", type=int, default=2)
    radius.add_argument("--json", action="store_true", help="Print points as JSON")
    radius.set_defaults(func=_cmd_divide_radius)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.config)
    log = setup_logging(args.log_level or settings.log_level)
    try:
        points = args.func(args)
    except ConstructionError as exc:
        log.debug("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    log.debug("%s: %d interior points", args.command, len(points))
    _emit(points, args.json)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
