"""
Main entry point for the Subway Router application.

This module sets up logging, loads the configuration and subway data, and
prints the shortest route between two stations.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from subway_router import __version__
from subway_router.core.services.service_factory import ServiceFactory
from subway_router.managers.config_manager import ConfigData, ConfigManager, ConfigurationError
from subway_router.ui.state.subway_data_state import SubwayDataState

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def get_log_directory() -> Path:
    """Get the per-user log directory."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / "SubwayRouter"
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home())) / "SubwayRouter" / "logs"
    return Path.home() / ".local" / "share" / "subway-router" / "logs"


def setup_logging(config: ConfigData):
    """Setup application logging with file and console output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if config.logging.log_to_file:
        log_dir = get_log_directory()
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_dir / "subway_router.log")))

    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subway-router",
        description="Find the shortest route between two subway stations.",
    )
    parser.add_argument("start", help="Id of the starting station")
    parser.add_argument("end", help="Id of the destination station")
    parser.add_argument("--data", help="Subway data JSON file (overrides the configured file)")
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument("--priority-queue", action="store_true",
                        help="Select nodes with a binary heap instead of a linear scan")
    parser.add_argument("--json", action="store_true", help="Print the route as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config).load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.data:
        config.data.data_file = args.data
    if args.priority_queue:
        config.routing.use_priority_queue = True

    setup_logging(config)
    logger = logging.getLogger(__name__)

    factory = ServiceFactory(config)
    state = SubwayDataState(factory.get_data_repository(), factory.get_route_service())

    if not state.load_subway_data():
        print(f"Failed to load subway data: {state.error}", file=sys.stderr)
        return EXIT_ERROR

    result = state.get_shortest_path(args.start, args.end)
    if result is None:
        logger.info(f"No route between '{args.start}' and '{args.end}'")
        print(f"No route found from '{args.start}' to '{args.end}'")
        return EXIT_NOT_FOUND

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(" -> ".join(station.get_display_name() for station in result.stations))
        print(f"Total distance: {result.total_distance:.2f}")
        print(f"Lines: {', '.join(sorted(result.lines)) or '-'}")

    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
