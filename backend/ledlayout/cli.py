"""
ledlayout-place — lay out LED modules for the glyphs in an SVG file.

Usage:
  ledlayout-place letters.svg --density 2.5                    # prints JSON report
  ledlayout-place letters.svg --density 2.5 -o report.json     # saves report
  ledlayout-place letters.svg --density 2.5 --columns 2 --orientation vertical --watts 0.5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ledlayout.engine import Orientation, PlacementConfig, Placer
from ledlayout.engine.context import MAX_COLUMNS
from ledlayout.engineering.power import ModuleSpec, calculate_power_load, power_supplies_needed
from ledlayout.svg.parser import parse_svg

logger = logging.getLogger(__name__)


def build_report(svg_text: str, args: argparse.Namespace) -> dict:
    doc = parse_svg(svg_text, args.samples)
    placer = Placer()
    glyphs = []
    for glyph in doc.glyphs:
        ctx = placer.run(glyph.shape, PlacementConfig(
            density_hint=args.density,
            target_count=args.target,
            column_count=args.columns,
            orientation=Orientation(args.orientation),
        ))
        glyphs.append({
            "id": glyph.id,
            "module_count": len(ctx.positions),
            "positions": [
                {"x": round(p.x, 3), "y": round(p.y, 3), "rotation": round(p.rotation, 2)}
                for p in ctx.positions
            ],
        })

    total = sum(g["module_count"] for g in glyphs)
    report: dict = {"glyphs": glyphs, "total_modules": total, "skipped_elements": doc.skipped}

    if args.watts is not None:
        module = ModuleSpec(
            watts_per_module=args.watts,
            voltage=args.voltage,
            modules_per_foot=args.density,
            max_run_length=args.run_length,
        )
        load = calculate_power_load(total, module)
        report["power"] = {
            "total_watts": round(load.total_watts, 3),
            "total_amps": round(load.total_amps, 3),
            "circuits": load.circuits,
        }
        if args.supply is not None:
            report["power"]["power_supplies"] = power_supplies_needed(load.total_watts, args.supply)

    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="LED module placement for channel letters")
    parser.add_argument("input", help="SVG file, one filled element per glyph")
    parser.add_argument("-o", "--output", help="Write the JSON report here instead of stdout")
    parser.add_argument("--density", type=float, required=True, help="Module density, modules per foot")
    parser.add_argument("--target", type=int, default=None, help="Exact module count per glyph")
    parser.add_argument("--columns", type=int, default=1, choices=range(1, MAX_COLUMNS + 1), help="Parallel rows")
    parser.add_argument(
        "--orientation",
        default=Orientation.FOLLOW_OUTLINE.value,
        choices=[o.value for o in Orientation],
    )
    parser.add_argument("--samples", type=int, default=16, help="Flattening samples per curve")
    parser.add_argument("--watts", type=float, default=None, help="Watts per module (enables power estimate)")
    parser.add_argument("--voltage", type=float, default=24.0)
    parser.add_argument("--run-length", type=int, default=None, help="Modules per circuit")
    parser.add_argument("--supply", type=float, default=None, help="Power supply rating in watts")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    path = Path(args.input)
    if not path.is_file():
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        report = build_report(path.read_text(encoding="utf-8"), args)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    text = json.dumps(report, indent=2)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
