"""Main application entry point."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .cli.menu import MenuSession
from .config import AppConfig, LoggingConfig, LotConfig, get_config_path, load_config
from .state.spot_registry import SpotRegistry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="parking-lot",
        description="Interactive parking lot spot allocation and reservations",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML configuration file (default: {get_config_path()} if present)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Number of parking spots (overrides lot.capacity)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides logging.level)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> AppConfig:
    """
    Load configuration and apply command line overrides.

    Args:
        args: Parsed command line arguments

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config or overrides are invalid
    """
    if args.config is not None:
        config = load_config(args.config)
    elif get_config_path().exists():
        config = load_config(get_config_path())
    else:
        config = AppConfig()

    updates = {}
    if args.capacity is not None:
        updates["lot"] = LotConfig(capacity=args.capacity)
    if args.log_level is not None:
        updates["logging"] = LoggingConfig(level=args.log_level)

    return config.model_copy(update=updates) if updates else config


def main(argv: Optional[list[str]] = None) -> int:
    """Run the application."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Configure logging
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    registry = SpotRegistry(config.lot.capacity)
    logger.info(f"Parking lot ready with {registry.capacity} spots")

    return MenuSession(registry).run()


if __name__ == "__main__":
    sys.exit(main())
