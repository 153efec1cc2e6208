"""
cli.py — Command-Line Smoother
===============================

Smooths an observation file and prints the forecast table.

Run:
    python -m backend.tss.cli [-n N_ALPHA] [-r RESET_COUNT] [-t RESET_TIME]
                              [-w OUT_CSV] INPUT

Options:
    -n  integer value of [1/alpha], default 10
    -r  pause after the record with this count to force a reset
    -t  reset time interval in seconds, default 5
    -w  also write a verbose comma delimited report to OUT_CSV
"""

import argparse
import logging
import sys

from . import config
from .reader import load_observations
from .report import ConsoleReport, CsvReport
from .runner import run_series
from .smoother import ExpSmoother
from .utils import setup_logging

logger = logging.getLogger("tss.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tss",
        description="Time series smoothing with integer double "
                    "exponential smoothing.",
    )
    parser.add_argument("-n", dest="n_alpha", default=str(config.N_ALPHA),
                        help="integer value of [1/alpha] (default %(default)s)")
    parser.add_argument("-r", dest="reset_count", default=None,
                        help="reset smoother at count value plus one")
    parser.add_argument("-t", dest="reset_time", default=str(config.RESET_TIME),
                        help="reset smoother time interval in seconds "
                             "(default %(default)s)")
    parser.add_argument("-w", dest="out_file", default=None,
                        help="write verbose output to comma delimited file")
    parser.add_argument("--log-level", default=None,
                        help="log level (default from TSS_LOG_LEVEL or INFO)")
    parser.add_argument("input", help="input file of 'count observe' pairs")
    return parser


def _positive_int(name: str, raw: str) -> int | None:
    """
    Parse an option the way strtol(raw, 0, 0) would be checked:
    decimal, 0x hex or 0o octal; zero, negative and garbage are invalid.
    """
    try:
        value = int(raw, 0)
    except ValueError:
        print(f"Invalid {name} = {raw}", file=sys.stderr)
        return None
    if value <= 0:
        print(f"Invalid {name} = {value}", file=sys.stderr)
        return None
    return value


def main(argv=None, stdout=None, sleep=None, clock=None) -> int:
    """
    Entry point of the ``tss`` command.

    Args:
        argv: Argument list, defaults to sys.argv[1:].
        stdout: Stream for the console table, defaults to sys.stdout.
        sleep: Pause function for the forced reset, defaults to time.sleep.
        clock: Time source of the smoother, defaults to time.time.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    n_alpha = _positive_int("n_alpha", args.n_alpha)
    reset_time = _positive_int("reset_time", args.reset_time)
    reset_count = 0
    if args.reset_count is not None:
        reset_count = _positive_int("reset_count", args.reset_count)
    if n_alpha is None or reset_time is None or reset_count is None:
        return 1

    try:
        observations = load_observations(args.input)
    except OSError:
        print(f"Error opening input file = {args.input}", file=sys.stderr)
        return 1

    smoother_kwargs = {"n_alpha": n_alpha, "reset_time": reset_time}
    if clock is not None:
        smoother_kwargs["clock"] = clock
    smoother = ExpSmoother(**smoother_kwargs)

    reporters = [ConsoleReport(stdout)]
    if args.out_file:
        try:
            reporters.append(CsvReport(args.out_file))
        except OSError:
            print(f"Error opening output file = {args.out_file}",
                  file=sys.stderr)
            return 1

    logger.info(f"Smoothing {args.input}: n_alpha={n_alpha} "
                f"reset_time={reset_time} reset_count={reset_count}")
    run_kwargs = {"reset_count": reset_count}
    if sleep is not None:
        run_kwargs["sleep"] = sleep
    run_series(observations, smoother, reporters, **run_kwargs)
    return 0


if __name__ == "__main__":
    sys.exit(main())
