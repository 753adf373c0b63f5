"""
tracepaint CLI - Main entry point.

Inspect a shape catalog, classify points and measure coverage of painted
images from the command line.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import cv2
import supervision as sv

from tracepaint_zone.analytics.classifier import ZoneClassifier
from tracepaint_zone.analytics.coverage import compute_coverage
from tracepaint_zone.catalog import ShapeCatalog
from tracepaint_zone.config import ExerciseConfig
from tracepaint_zone.geometry.scaler import scale_to_canvas
from tracepaint_zone.logging import LogEvent, create_logger
from tracepaint_zone.raster.sources import CanvasRaster, PaintLayer


logger = create_logger("cli")


def load_config(config_path: Optional[str]) -> ExerciseConfig:
    """Load YAML configuration, or defaults when no path is given."""
    if config_path is None:
        return ExerciseConfig()

    try:
        config = ExerciseConfig.from_yaml(Path(config_path))
    except (ValueError, OSError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load config",
            metadata={"path": str(config_path)},
            exc_info=e,
        )
        raise

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Config loaded",
        metadata={"path": str(config_path), "catalog_path": config.catalog_path},
    )
    return config


def load_catalog(catalog_path: Optional[str], config: ExerciseConfig) -> ShapeCatalog:
    """
    Load the catalog from --catalog, falling back to config.catalog_path.

    Raises:
        ValueError: If neither is set
    """
    path = catalog_path or config.catalog_path
    if path is None:
        raise ValueError("No shape catalog given (use --catalog or set catalog_path in config)")
    return ShapeCatalog.from_file(Path(path))


def cmd_shapes(args: argparse.Namespace, config: ExerciseConfig) -> None:
    catalog = load_catalog(args.catalog, config)
    for target in catalog:
        print(f"{target.shape_id}\t{target.shape_type.value}\t{target.name}")


def cmd_classify(args: argparse.Namespace, config: ExerciseConfig) -> None:
    catalog = load_catalog(args.catalog, config)
    shape = catalog.get(args.shape_id).shape
    if args.canvas is not None:
        shape = scale_to_canvas(shape, tuple(args.canvas), config.canvas.reference_wh)

    point = sv.Point(x=args.x, y=args.y)
    zone = ZoneClassifier.classify(point, shape, config.proximity)
    distance_mm = ZoneClassifier.distance_mm(point, shape, config.proximity)
    print(f"{zone.value}\tdistance={distance_mm:.2f}mm")


def cmd_coverage(args: argparse.Namespace, config: ExerciseConfig) -> None:
    catalog = load_catalog(args.catalog, config)
    target = catalog.get(args.shape_id)

    image = cv2.imread(str(args.image), cv2.IMREAD_UNCHANGED)
    if image is None:
        logger.error(
            event=LogEvent.RASTER_ERROR,
            message="Failed to read image",
            metadata={"path": str(args.image)},
        )
        raise ValueError(f"Could not read image: {args.image}")

    if args.layer:
        source = PaintLayer.from_image(image)
    else:
        source = CanvasRaster.from_image(image, white_tolerance=config.coverage.white_tolerance)

    shape = scale_to_canvas(target.shape, (source.width, source.height), config.canvas.reference_wh)
    coverage = compute_coverage(source, shape, config=config.coverage)
    print(f"{target.shape_id}\tcoverage={coverage}%")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tracepaint",
        description="tracepaint CLI - Inspect shapes, classify points, measure coverage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List shapes
  tracepaint --catalog config/shapes.yaml shapes

  # Classify a point (reference canvas coordinates)
  tracepaint --catalog config/shapes.yaml classify square 520 250

  # Same, on a 350x250 canvas
  tracepaint --catalog config/shapes.yaml classify square 260 125 --canvas 350 250

  # Coverage of a composited canvas screenshot
  tracepaint --config config/exercise.yaml coverage circle painted.png

  # Coverage of a transparent paint-only layer
  tracepaint --config config/exercise.yaml coverage circle layer.png --layer
"""
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Exercise config YAML (default: built-in defaults)"
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Shape catalog JSON/YAML (default: catalog_path from config)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('shapes', help='List catalog shapes')

    classify = subparsers.add_parser('classify', help='Classify a point against a shape')
    classify.add_argument('shape_id', help='Shape ID')
    classify.add_argument('x', type=float, help='Point x')
    classify.add_argument('y', type=float, help='Point y')
    classify.add_argument(
        '--canvas',
        type=int,
        nargs=2,
        metavar=('W', 'H'),
        default=None,
        help='Live canvas size; the shape is scaled from the reference canvas'
    )

    coverage = subparsers.add_parser('coverage', help='Measure painted coverage of an image')
    coverage.add_argument('shape_id', help='Shape ID')
    coverage.add_argument('image', help='Image path (PNG recommended)')
    coverage.add_argument(
        '--layer',
        action='store_true',
        help='Image is a transparent paint-only layer (alpha decides paint)'
    )

    return parser


COMMANDS = {
    'shapes': cmd_shapes,
    'classify': cmd_classify,
    'coverage': cmd_coverage,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        COMMANDS[args.command](args, config)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
