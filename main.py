#!/usr/bin/env python3
"""
gridroute - Main Entry Point
Routes a character map from its start cell (S) to its goal cell (E)
"""

import sys
import json
import logging
import argparse
from contextlib import ExitStack
from typing import List, Optional

from gridroute import __version__
from gridroute.algorithms import AStarPathfinder, CharGrid, demo_grid
from gridroute.domain.models import SearchResult, SearchStatus
from gridroute.shared.configuration import initialize_config, ConfigManager
from gridroute.shared.exceptions import ValidationError
from gridroute.shared.utils import setup_logging, timing_context, memory_profiler

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID_GRID = 2


def setup_environment(config_path: Optional[str] = None, log_level: Optional[str] = None) -> ConfigManager:
    """Load configuration and set up logging.

    Any settings category that fails validation falls back to its defaults.
    """
    config = initialize_config(config_path)
    for category, errors in config.validate().items():
        if errors:
            logging.warning(f"Invalid {category} settings, using defaults: {'; '.join(errors)}")
            config.reset_category_to_defaults(category)

    if log_level:
        config.update_logging_settings(level=log_level)

    setup_logging(config.get_settings().logging)
    return config


def load_grid(map_file: Optional[str]) -> CharGrid:
    if map_file is None:
        logging.info("No map file given, using the built-in demo map")
        return demo_grid()
    return CharGrid.from_file(map_file)


def report(result: SearchResult, grid: CharGrid, config: ConfigManager, as_json: bool):
    """Print the search outcome."""
    display = config.get_settings().display

    if as_json:
        payload = result.to_dict()
        payload["map"] = grid.rows()
        print(json.dumps(payload, indent=2))
        return

    if display.print_map:
        print(grid.render())
        print()

    if result.status == SearchStatus.FOUND:
        print(f"Path found: {len(result.path)} cells, cost {result.path_cost}")
        if display.print_path:
            print(" -> ".join(str(p) for p in result.path) or "(start touches goal)")
    elif result.status == SearchStatus.NO_PATH:
        print("No path between start and goal")
    else:
        print(f"Invalid grid: {result.error}")


def run(map_file: Optional[str] = None, config_path: Optional[str] = None,
        log_level: Optional[str] = None, insert_from: Optional[str] = None,
        trace: bool = False, profile: bool = False, as_json: bool = False) -> int:
    """Route one map and return the process exit code."""
    config = setup_environment(config_path, log_level)
    if insert_from:
        config.update_search_settings(insert_from=insert_from)
    if trace:
        config.update_search_settings(trace_frontier=True)

    try:
        grid = load_grid(map_file)
    except (OSError, ValidationError) as e:
        logging.error(f"Failed to load map: {e}")
        return EXIT_INVALID_GRID

    pathfinder = AStarPathfinder(grid, config.get_settings().search)
    with ExitStack() as stack:
        if profile:
            stack.enter_context(timing_context("Search"))
            stack.enter_context(memory_profiler("Search"))
        result = pathfinder.find_path()

    report(result, grid, config, as_json)

    if result.status == SearchStatus.FOUND:
        return EXIT_FOUND
    if result.status == SearchStatus.NO_PATH:
        return EXIT_NO_PATH
    return EXIT_INVALID_GRID


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="gridroute - best-first grid router",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Route the built-in demo map
  %(prog)s maze.txt                 # Route a map file (W wall, S start, E goal)
  %(prog)s maze.txt --json          # Print a JSON summary instead of the map
  %(prog)s --trace --log-level DEBUG
        """
    )
    parser.add_argument(
        'map_file', nargs='?',
        help='Map file, one row per line (default: built-in demo map)'
    )
    parser.add_argument(
        '-c', '--config',
        help='Configuration file path'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )
    parser.add_argument(
        '--insert-from',
        choices=['front', 'back'],
        help='End of the frontier that sorted insertion scans from'
    )
    parser.add_argument(
        '--trace', action='store_true',
        help='Log the frontier contents on every iteration (DEBUG level)'
    )
    parser.add_argument(
        '--profile', action='store_true',
        help='Log search time and memory use'
    )
    parser.add_argument(
        '--json', action='store_true',
        help='Print a JSON summary of the result'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    try:
        return run(
            args.map_file,
            config_path=args.config,
            log_level=args.log_level,
            insert_from=args.insert_from,
            trace=args.trace,
            profile=args.profile,
            as_json=args.json,
        )
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user")
        return 130


if __name__ == '__main__':
    sys.exit(main())
