"""
smoother.py — Integer Double Exponential Smoother
==================================================

Produces a one-step-ahead forecast for a stream of integer observations
using double exponential smoothing in 32-bit integer arithmetic.

Modes:
    WARMUP  — n < n_alpha.  Statistics are a running average of the
              samples seen since the last (re)start.
    STEADY  — n >= n_alpha.  Full double exponential smoothing:
                  stx1 = (xt + (n_alpha-1) * stx1) / n_alpha
                  stx2 = (stx1 + (n_alpha-1) * stx2) / n_alpha
                  ft   = 2*stx1 - stx2 + (stx1 - stx2) / (n_alpha-1)

Reset:
    If more than reset_time seconds pass between two observations the
    sample counter drops back to 0 and the smoother re-enters WARMUP.
    stx1, stx2 and ft are kept; the next sample blends from them.

Saturation:
    Each observation is clamped into [INT32_MIN/n_alpha, INT32_MAX/n_alpha]
    before use.  Values outside that band are silently clipped, so the
    forecast can never follow them.  This is an overflow guard and is not
    configurable.

All divisions truncate toward zero.  absorb() performs no I/O and does
not log; drivers report on the state it leaves behind.
"""

import time

from . import config
from .utils import saturate, trunc_div, wrap_int32

# Mode constants
WARMUP = "WARMUP"
STEADY = "STEADY"


class ExpSmoother:
    """
    Streaming double exponential smoother with time-based reset.

    One instance owns the state of exactly one series and must not be
    shared between threads.

    Attributes:
        n_alpha (int): Integer value of [1/alpha], at least 1.
        reset_time (int): Reset interval in seconds.
        stx1 (int): First smoothed statistic.
        stx2 (int): Second smoothed statistic.
        n (int): Samples absorbed since the last reset.
        ft (int): Most recent forecast.  Meaningless before the first
            observation.
        last_update_time (int): Seconds since epoch of the last observation.
    """

    def __init__(self, n_alpha: int = None, reset_time: int = None,
                 clock=time.time):
        """
        Args:
            n_alpha: Smoothing window. Defaults to config.N_ALPHA (10).
            reset_time: Reset interval in seconds.
                Defaults to config.RESET_TIME (5).
            clock: Callable returning the current time in seconds, used
                when absorb() is called without an explicit time.

        Raises:
            ConfigurationError: If n_alpha <= 0 or reset_time < 0.
        """
        n_alpha = config.N_ALPHA if n_alpha is None else n_alpha
        reset_time = config.RESET_TIME if reset_time is None else reset_time
        config.validate_settings(n_alpha, reset_time)

        self.n_alpha = n_alpha
        self.reset_time = reset_time
        self.stx1 = 0
        self.stx2 = 0
        self.n = 0
        self.ft = 0
        self.last_update_time = 0
        self._clock = clock

    def absorb(self, xt: int, now: int = None) -> int:
        """
        Absorb one observation and return the new forecast.

        Args:
            xt: Observation.  Clamped into the saturation band first.
            now: Observation time in whole seconds.  Read from the
                clock when omitted.

        Returns:
            The updated forecast (also stored in self.ft).
        """
        if now is None:
            now = self.now()
        xt = saturate(xt, self.n_alpha)

        if self.is_stale(now):
            self.n = 0
        self.last_update_time = now

        if self.n >= self.n_alpha:
            keep = self.n_alpha - 1
            self.stx1 = trunc_div(wrap_int32(xt + keep * self.stx1),
                                  self.n_alpha)
            self.stx2 = trunc_div(wrap_int32(self.stx1 + keep * self.stx2),
                                  self.n_alpha)
            if self.n_alpha > 1:
                trend = trunc_div(wrap_int32(self.stx1 - self.stx2), keep)
                self.ft = wrap_int32(
                    wrap_int32(2 * self.stx1 - self.stx2) + trend
                )
            else:
                self.ft = self.stx1
        else:
            self.n += 1
            self.stx1 = trunc_div(wrap_int32(xt + (self.n - 1) * self.stx1),
                                  self.n)
            self.stx2 = self.stx1
            self.ft = self.stx1

        return self.ft

    def now(self) -> int:
        """Current clock reading in whole seconds."""
        return int(self._clock())

    def is_stale(self, now: int) -> bool:
        """Whether an observation at ``now`` would restart the warm-up."""
        return now - self.last_update_time > self.reset_time

    @property
    def mode(self) -> str:
        """WARMUP or STEADY, keyed by the sample counter."""
        return STEADY if self.n >= self.n_alpha else WARMUP

    def snapshot(self) -> dict:
        """Current state as a plain dict."""
        return {
            "n_alpha": self.n_alpha,
            "reset_time": self.reset_time,
            "stx1": self.stx1,
            "stx2": self.stx2,
            "n": self.n,
            "ft": self.ft,
            "last_update_time": self.last_update_time,
        }


def absorb(state: ExpSmoother, xt: int, now: int = None) -> int:
    """Functional form of ExpSmoother.absorb()."""
    return state.absorb(xt, now)
