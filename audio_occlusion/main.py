"""Command-line entry point: query occluded distances on an SVG map."""

import argparse
import logging
import math
import sys

from .audio import OcclusionRouter
from .common.constants import DEFAULT_SPEAKING_RADIUS
from .config import MapConfig
from .errors import MapFormatError
from .map import ZonedMap, load_svg_file

logger = logging.getLogger(__name__)


def setup_logging(log_file: str | None, verbose: bool = False) -> None:
    """Configure logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Occlusion-aware audio distances")
    parser.add_argument("map", help="SVG map file")
    parser.add_argument(
        "--radius",
        type=float,
        default=DEFAULT_SPEAKING_RADIUS,
        help=f"Speaking radius (default: {DEFAULT_SPEAKING_RADIUS})",
    )
    parser.add_argument(
        "--full-volume",
        type=float,
        default=None,
        help="Distance heard at full volume (default: 20%% of radius)",
    )
    parser.add_argument(
        "--source", type=float, nargs=2, metavar=("X", "Y"), required=True
    )
    parser.add_argument(
        "--dest",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Destination point; without it all recipients are listed",
    )
    parser.add_argument(
        "--exact-walls",
        action="store_true",
        help="Select zone walls by distance to the segment, not its line",
    )
    parser.add_argument("--log-file", help="Log file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)

    try:
        config = MapConfig(
            speaking_radius=args.radius,
            full_volume_distance=args.full_volume,
            clamp_wall_test=args.exact_walls,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        source_map = load_svg_file(args.map)
    except (OSError, MapFormatError) as e:
        logger.error(f"Failed to load map {args.map}: {e}")
        return 1

    zoned_map = ZonedMap(config.speaking_radius, source_map, config.clamp_wall_test)
    router = OcclusionRouter(zoned_map, config)
    source = (args.source[0], args.source[1])

    if args.dest is not None:
        dest = (args.dest[0], args.dest[1])
        path = router.path_between(source, dest)
        distance = router.distance_between(source, dest)
        if math.isinf(distance):
            print(f"No route from {source} to {dest}")
            return 0
        print(f"Distance: {distance:.3f}")
        # Destination is the source itself
        if path is None:
            path = []
        route = [source, *reversed(path)]
        print("Path: " + " -> ".join(f"({x:g}, {y:g})" for x, y in route))
        return 0

    recipients = router.get_audio_recipients(source, source_map.nodes)
    if not recipients:
        print(f"No listeners hear {source}")
    for (x, y), volume in sorted(recipients, key=lambda r: -r[1]):
        print(f"({x:g}, {y:g})  volume {volume:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
