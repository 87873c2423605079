"""CLI entry point for the tide and weather forecast aggregator."""

import argparse
import logging
import sys
from datetime import datetime

from tidecast.config.loader import ConfigError, config_to_json, load_config
from tidecast.pipeline.aggregator import ForecastAggregator
from tidecast.reporting.formatters import format_record_json, format_record_text

EXIT_CONFIG_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tidecast",
        description="Aggregate tide predictions and weather into one forecast",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # run
    run_p = sub.add_parser("run", help="Run one aggregation")
    run_p.add_argument(
        "--format", choices=["json", "text"], default="json", help="Output format"
    )
    run_p.add_argument(
        "--now", default=None, help="Override current time (ISO 8601, UTC if naive)"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "run":
        return _cmd_run(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_run(config, args) -> int:
    now = None
    if args.now:
        try:
            now = datetime.fromisoformat(args.now)
        except ValueError:
            print(f"Error: --now must be ISO 8601, got {args.now!r}", file=sys.stderr)
            return 1

    record = ForecastAggregator(config).run(now)
    if args.format == "text":
        print(format_record_text(record))
    else:
        print(format_record_json(record))
    return 0 if record.ok else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config_to_json(config))
        return 0
    print("Use: config show")
    return 1
