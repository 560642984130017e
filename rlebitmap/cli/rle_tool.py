import os
import sys
import logging
import argparse
from typing import List

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..exceptions import RleBitmapError
from ..models.boolean_op import BooleanOp
from ..pipeline.boolean_pipeline import apply_operation, run_self_check
from ..services.compressed_image_service import CompressedImageService
from ..services.grid_service import GridService

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=os.getenv("RLE_LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rlebitmap",
        description="Run-length compressed two-color images with boolean algebra",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p_render = sub.add_parser("render", help="print the compressed form of a grid")
    p_render.add_argument("grid", help="text grid (.txt/.grid) or bitmap file")

    p_invert = sub.add_parser("invert", help="swap black and white")
    p_invert.add_argument("grid")
    p_invert.add_argument("-o", "--output", help="write the result here")

    p_combine = sub.add_parser("combine", help="pixelwise AND/OR/XOR of two grids")
    p_combine.add_argument("op", choices=[op.value for op in BooleanOp])
    p_combine.add_argument("first")
    p_combine.add_argument("second")
    p_combine.add_argument("-o", "--output", help="write the result here")

    p_demo = sub.add_parser("demo", help="invert / XOR / AND self-check")
    p_demo.add_argument("grid", nargs="?", help="defaults to the built-in 16x16 sample")
    return ap


def main(argv: List[str] = None) -> int:
    _configure_logging()
    args = build_parser().parse_args(argv)

    image_service = CompressedImageService()
    grid_service = GridService()

    try:
        if args.command == "demo":
            if args.grid:
                report = run_self_check(grid_service.load(args.grid), image_service=image_service)
            else:
                report = run_self_check(image_service=image_service)
            print(f"Original:   {report.original}")
            print(f"Inverted:   {report.inverted}")
            print(f"After XOR:  {report.after_xor}")
            print(f"After AND:  {report.after_and}")
            return 0 if report.passed else 1

        source = args.first if args.command == "combine" else args.grid
        image = image_service.from_grid(grid_service.load(source))
        if args.command == "invert":
            image_service.invert(image)
        elif args.command == "combine":
            other = image_service.from_grid(grid_service.load(args.second))
            apply_operation(image, other, args.op, image_service=image_service)

        print(image_service.render(image))
        if getattr(args, "output", None):
            grid_service.save(image_service.to_grid(image), args.output)
            logger.info(f"Saved result to {args.output}")
    except (RleBitmapError, FileNotFoundError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
