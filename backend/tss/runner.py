"""
runner.py — Observation Stream Driver
======================================

Feeds a table of observations through an ExpSmoother one record at a
time and hands every result to the configured reporters.

Flow per record:
    observe -> smoother.absorb() -> diff / diffsum -> reporters

Optional forced reset:
    With reset_count set, the runner pauses for reset_time + 1 seconds
    after the record whose count equals reset_count.  The next record then
    arrives after the reset interval and the smoother restarts its warm-up.
"""

import logging
import time

import pandas as pd

from . import config
from .smoother import ExpSmoother, STEADY
from .utils import wrap_int32

logger = logging.getLogger("tss.runner")


def run_series(observations: pd.DataFrame, smoother: ExpSmoother,
               reporters=(), reset_count: int = 0,
               sleep=time.sleep) -> pd.DataFrame:
    """
    Smooth every observation and report the results.

    Args:
        observations: DataFrame with integer columns count, observe.
        smoother: Configured smoother; mutated in place.
        reporters: Objects with header(), row() and close() methods.
        reset_count: Pause after the record with this count (0 = never).
        sleep: Callable used for the pause, in seconds.

    Returns:
        DataFrame with one row per observation and columns
        config.CSV_COLUMNS.
    """
    for reporter in reporters:
        reporter.header(smoother.n_alpha, smoother.reset_time, reset_count)

    records = []
    diffsum = 0
    resets = 0
    try:
        rows = observations[["count", "observe"]].itertuples(index=False,
                                                             name=None)
        for raw_count, raw_xt in rows:
            count = int(raw_count)
            xt = int(raw_xt)

            now = smoother.now()
            if smoother.n and smoother.is_stale(now):
                resets += 1
                logger.info(
                    f"Record {count}: {now - smoother.last_update_time}s since "
                    f"last update (> {smoother.reset_time}s), restarting warm-up"
                )
            previous_mode = smoother.mode

            ft = smoother.absorb(xt, now)

            if smoother.mode != previous_mode and smoother.mode == STEADY:
                logger.info(f"Record {count}: warm-up complete after "
                            f"{smoother.n} samples")

            diff = wrap_int32(xt - ft)
            diffsum = wrap_int32(diffsum + diff)
            record = {
                "count": count,
                "observe": xt,
                "forecast": ft,
                "diff": diff,
                "diffsum": diffsum,
                "n": smoother.n,
                "stx1": smoother.stx1,
                "stx2": smoother.stx2,
            }
            records.append(record)
            logger.debug(f"Smoothed: {record}")

            for reporter in reporters:
                reporter.row(record)

            if reset_count and reset_count == count:
                pause = smoother.reset_time + 1
                logger.info(f"Record {count}: pausing {pause}s to force a reset")
                sleep(pause)
    finally:
        for reporter in reporters:
            reporter.close()

    logger.info(f"Smoothed {len(records)} observations "
                f"({resets} resets, final diffsum={diffsum})")
    return pd.DataFrame(records, columns=config.CSV_COLUMNS)
