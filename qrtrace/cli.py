"""qrtrace command line — render a QR code to a styled SVG file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from qrtrace.config import settings
from qrtrace.models.options import RenderOptions
from qrtrace.outline.errors import OutlineError
from qrtrace.svg.builder import build_svg
from qrtrace.symbol.encoder import EncodingError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qrtrace", description="Render data as a styled QR code SVG")
    parser.add_argument("data", help="Payload to encode")
    parser.add_argument("-o", "--output", help="Output SVG file (default: stdout)")
    parser.add_argument("--style", default=settings.default_style, help="Module style")
    parser.add_argument("--shape", default="square", choices=["square", "circle"])
    parser.add_argument("--ecl", default="Q", choices=["L", "M", "Q", "H"], help="Error correction level")
    parser.add_argument("--size", type=float, default=300, help="Width and height")
    parser.add_argument("--margin", type=float, default=0)
    parser.add_argument("--color", default="#000", help="Module color")
    parser.add_argument("--background", default="#fff", help="Background color, 'none' for transparent")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.qrtrace_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        options = RenderOptions(
            data=args.data,
            width=args.size,
            height=args.size,
            margin=args.margin,
            shape=args.shape,
            qr_options={"error_correction_level": args.ecl},
            dots_options={"type": args.style, "color": args.color},
            background_options={"color": None if args.background == "none" else args.background},
        )
        result = build_svg(options)
    except (ValidationError, OutlineError, EncodingError) as e:
        print(f"qrtrace: {e}", file=sys.stderr)
        return 2

    if args.output:
        Path(args.output).write_text(result.svg, encoding="utf-8")
        logger.info("Wrote %s (%d bytes)", args.output, len(result.svg))
    else:
        sys.stdout.write(result.svg + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
