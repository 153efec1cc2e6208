"""
config.py — Smoother Configuration Constants
=============================================

Centralizes the smoothing defaults, the 32-bit integer bounds that govern
the numeric model, and the settings of the command-line and HTTP drivers.

The smoother is configured once per session:
- n_alpha     integer value of [1/alpha], the smoothing window
- reset_time  seconds without an observation before the warm-up restarts

Neither value can change after the smoother is created.
"""

import os

import numpy as np

# ═══════════════════════════════════════════════════════════════════
# SMOOTHING DEFAULTS
# ═══════════════════════════════════════════════════════════════════

# Integer value of [1/alpha].  alpha = 0.1 weighs each new observation at
# 10 % once the smoother is in steady state.  The first N_ALPHA samples
# after a (re)start are blended as a running average instead.
N_ALPHA = 10

# Maximum gap (seconds) between two observations.  A longer gap restarts
# the warm-up; the smoothed statistics are kept as the blend base.
RESET_TIME = 5

# ═══════════════════════════════════════════════════════════════════
# NUMERIC MODEL
# ═══════════════════════════════════════════════════════════════════

# All smoothing arithmetic behaves like signed 32-bit C integers.
INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

# ═══════════════════════════════════════════════════════════════════
# REPORTING
# ═══════════════════════════════════════════════════════════════════

REPORT_TITLE = "Time Series Smoothing Algorithm"

# Column order of the comma delimited report (-w option)
CSV_COLUMNS = [
    "count",
    "observe",
    "forecast",
    "diff",
    "diffsum",
    "n",
    "stx1",
    "stx2",
]

# ═══════════════════════════════════════════════════════════════════
# HTTP SERVICE
# ═══════════════════════════════════════════════════════════════════

SERVICE_HOST = os.environ.get("TSS_SERVICE_HOST", "0.0.0.0")
SERVICE_PORT = int(os.environ.get("TSS_SERVICE_PORT", "5050"))

# ═══════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════

# Log level for the tss.* loggers (DEBUG, INFO, WARNING, ERROR, CRITICAL)
LOG_LEVEL = os.environ.get("TSS_LOG_LEVEL", "INFO")


class ConfigurationError(ValueError):
    """Raised when a smoother is configured with unusable settings."""


def validate_settings(n_alpha: int, reset_time: int) -> None:
    """
    Reject settings the smoother cannot run with.

    Args:
        n_alpha: Smoothing window, must be at least 1.
        reset_time: Reset interval in seconds, must not be negative.

    Raises:
        ConfigurationError: If either value is out of range.
    """
    if n_alpha <= 0:
        raise ConfigurationError(f"Invalid n_alpha = {n_alpha}")
    if reset_time < 0:
        raise ConfigurationError(f"Invalid reset_time = {reset_time}")
