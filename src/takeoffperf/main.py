"""TakeoffPerf - A380-842 takeoff performance calculator.

Command line entry point. Loads a takeoff case from YAML, runs the
performance engine for one configuration or for all of them, and prints
the result as YAML.

Typical usage:
    takeoffperf config/example_case.yaml
    takeoffperf config/example_case.yaml --conf 3 --set takeoff.oat=30
    takeoffperf config/example_case.yaml --optimal --workers 3
"""

import argparse
import sys

import yaml

from takeoffperf.core.config import ConfigError, ConfigLoader
from takeoffperf.core.logging_system import LoggingError, get_logger, initialize_logging, shutdown_logging
from takeoffperf.performance import TakeoffInputs, TakeoffPerformanceCalculator

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_RESULT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv).

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="TakeoffPerf - A380-842 takeoff performance calculator")

    parser.add_argument("case", type=str, help="YAML takeoff case file with a 'takeoff' section")

    parser.add_argument(
        "--optimal",
        action="store_true",
        help="Evaluate CONF 1+F, 2 and 3 and report the best one",
    )

    parser.add_argument(
        "--conf",
        type=int,
        choices=(1, 2, 3),
        help="Takeoff configuration, overriding the case file",
    )

    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a case value (e.g., takeoff.oat=30); may be repeated",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread pool size used with --optimal",
    )

    parser.add_argument("--log-config", type=str, help="Logging configuration YAML file")

    parser.add_argument("--debug", action="store_true", help="Log debug output to the console")

    return parser.parse_args(argv)


def load_case(args: argparse.Namespace) -> TakeoffInputs:
    """Load the takeoff inputs described by the command line.

    Raises:
        ConfigError: If the case file or an override is invalid.
    """
    config = ConfigLoader.load(args.case)
    for override in args.overrides:
        config.apply_override(override)

    if args.conf is not None:
        config.set("takeoff.conf", args.conf)
    elif args.optimal and config.get("takeoff.conf") is None:
        # the optimizer picks the configuration itself
        config.set("takeoff.conf", 1)

    logger.debug("Loaded case %s: %s", args.case, config.to_dict())
    return TakeoffInputs.from_dict(config.get_section("takeoff"))


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 if the calculation reported an error,
        2 for configuration errors).
    """
    args = parse_args(argv)

    try:
        initialize_logging(args.log_config, level="DEBUG" if args.debug else None)
    except LoggingError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        inputs = load_case(args)
    except ConfigError as e:
        logger.error("Invalid takeoff case: %s", e)
        print(f"error: {e}", file=sys.stderr)
        shutdown_logging()
        return EXIT_CONFIG_ERROR

    try:
        calculator = TakeoffPerformanceCalculator()
        if args.optimal:
            result = calculator.calculate_optimal_configuration(inputs, max_workers=args.workers)
        else:
            result = calculator.calculate(inputs)

        yaml.safe_dump(result.to_dict(), sys.stdout, sort_keys=False)
    finally:
        shutdown_logging()

    return EXIT_SUCCESS if result.succeeded else EXIT_RESULT_ERROR


if __name__ == "__main__":
    sys.exit(main())
