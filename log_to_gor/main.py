#!/usr/bin/env python3
"""log-to-gor — convert Apache Combined Log Format access logs to GoReplay files."""

import sys
import argparse
import logging

from log_to_gor.config import load_config, load_yaml_config
from log_to_gor.converter import LogRecordConverter
from log_to_gor.errors import ConversionError
from log_to_gor.stats import format_summary, save_stats

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [log-to-gor] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="log-to-gor",
        description="Convert an Apache Combined Log Format access log to a .gor replay file.",
        epilog="Example: log-to-gor access.log requests.gor",
    )
    parser.add_argument("input_file", help="Access log to read")
    parser.add_argument("output_file", help=".gor file to create (overwritten)")
    parser.add_argument(
        "--strict", action="store_true", default=False,
        help="Skip lines that are not complete Combined Log Format entries",
    )
    parser.add_argument(
        "--encoding", default=None,
        help="Input file encoding (default: utf-8)",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--stats-output", default=None,
        help="Write a JSON summary of the run to this path",
    )
    return parser


def run(argv=None) -> int:
    args = build_cli_parser().parse_args(argv)

    try:
        config = load_config(args, load_yaml_config(args.config))
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    logging.getLogger().setLevel(config.log_level)

    logger.info("Starting conversion from %s to %s", config.input_file, config.output_file)

    try:
        src = open(config.input_file, "r", encoding=config.input_encoding, errors="surrogateescape")
    except (OSError, LookupError) as exc:
        logger.error("Error opening input file %s: %s", config.input_file, exc)
        return 1

    with src:
        try:
            dst = open(config.output_file, "w", encoding="utf-8", errors="surrogateescape", newline="")
        except OSError as exc:
            logger.error("Error creating output file %s: %s", config.output_file, exc)
            return 1

        converter = LogRecordConverter(strict=config.strict_format)
        try:
            with dst:
                count = converter.convert(src, dst)
        except ConversionError as exc:
            logger.error("Error during processing after %d entries: %s", exc.count, exc)
            return 1
        except OSError as exc:
            # buffered output failing on flush/close
            logger.error("Error writing output file %s: %s", config.output_file, exc)
            return 1

    logger.info("Summary: %s", format_summary(converter.stats))
    if config.stats_output:
        try:
            save_stats(converter.stats, config.stats_output, config.input_file, config.output_file)
            logger.info("Stats saved to %s", config.stats_output)
        except OSError as exc:
            logger.warning("Could not write stats to %s: %s", config.stats_output, exc)

    logger.info("Success! Converted %d log entries.", count)
    logger.info("Output saved to %s", config.output_file)
    return 0


def main():
    try:
        code = run()
    except KeyboardInterrupt:
        code = 130
    except BrokenPipeError:
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
