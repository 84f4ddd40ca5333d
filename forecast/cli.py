"""CLI entry point for the forecast aggregation engine."""

import argparse
import logging
import sys

from forecast.config.loader import get_config_value, load_config, set_config_value
from forecast.config.schema import OutputFormat
from forecast.ingest.decoder import load_response_file, to_domain
from forecast.models.errors import ForecastError
from forecast.pipeline.forecast_pipeline import ForecastPipeline
from forecast.reporting.report import format_result_json, format_result_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="forecast",
        description="Summarize a 3-hourly weather forecast into daily views",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # summarize
    sum_p = sub.add_parser("summarize", help="Summarize a forecast response file")
    sum_p.add_argument("response", help="Path to the forecast response JSON")
    sum_p.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (overrides config)",
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "summarize":
        return _cmd_summarize(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_summarize(config, args) -> int:
    output = OutputFormat(args.format) if args.format else config.output.format
    pipeline = ForecastPipeline(config)
    try:
        samples, city = to_domain(load_response_file(args.response))
        result = pipeline.run(samples, city)
        hourly = pipeline.hourly(samples, city)
    except ForecastError as e:
        logger.warning("Forecast unavailable: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output == OutputFormat.JSON:
        print(format_result_json(result, hourly))
    else:
        print(format_result_text(result, config.conversion.kelvin_offset, hourly))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    sys.exit(main())
