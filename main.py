#!/usr/bin/env python
"""CLI for citysearch: suggest cities for a partial name, then look one up."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from citysearch.config import create_from_config, get_default_config_path, load_config
from citysearch.data import AggregatedResult

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str
    config: Path
    pick: int = Field(default=0, ge=0)
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def log_result(result: AggregatedResult) -> None:
    """Log the aggregated view for a city."""
    if result.weather:
        weather = result.weather
        logger.info(f"\nWeather in {weather.location_name}")
        logger.info(f"   Temperature: {weather.temperature_c}°C")
        logger.info(f"   Condition: {weather.condition_text}")
        logger.info(f"   Local time: {weather.local_time}")
        logger.info(f"   Coordinates: {weather.latitude}, {weather.longitude}")

    if result.events:
        logger.info("\nEvents this weekend")
        for i, event in enumerate(result.events, 1):
            logger.info(f"{i}. {event.name} - {event.start_date or 'date TBA'}")
            if event.ticket_url:
                logger.info(f"   Tickets: {event.ticket_url}")
    else:
        logger.info("\nNo events found this weekend.")

    if result.summary:
        logger.info("\nAbout the city")
        logger.info(result.summary)

    if result.photo_url:
        logger.info(f"\nBackground photo: {result.photo_url}")


async def run(args: CLIArgs) -> int:
    """Suggest cities for the query, pick one, and search it.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    controller, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    async with controller:
        controller.on_input_change(args.query)
        await controller.flush_suggestions()

        suggestions = controller.state.suggestions
        if not suggestions:
            logger.error(f"No cities found for: {args.query}")
            return 1

        logger.info(f"Found {len(suggestions)} matching cities:\n")
        for i, suggestion in enumerate(suggestions):
            logger.info(f"{i}. {suggestion.full_name}")

        if args.pick >= len(suggestions):
            logger.error(f"--pick {args.pick} is out of range (0-{len(suggestions) - 1})")
            return 1

        chosen = suggestions[args.pick]
        controller.on_suggestion_pick(chosen)
        logger.info(f"\nSearching: {chosen.full_name}")

        result = await controller.on_search_trigger()
        if result is None:
            logger.error(controller.state.error or "Search failed.")
            return 1

    log_result(result)

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Look up weather, events, a photo and a summary for a city."
    )
    parser.add_argument(
        "query",
        help="Partial city name (at least 3 characters)",
    )
    parser.add_argument(
        "--pick",
        "-p",
        type=int,
        default=0,
        help="Index of the suggestion to search (default: 0)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON run log for the search",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            config=config_path,
            pick=ns.pick,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
