"""
utils.py — Integer Helpers and Logging Setup
=============================================

Common helpers used across the tss modules.
"""

import logging

from . import config


def setup_logging(level: str = None) -> None:
    """
    Configure logging for the smoother drivers.

    Sets up a console handler with timestamp, logger name, level,
    and message. All tss.* loggers inherit this configuration.

    Args:
        level: Log level string (DEBUG/INFO/WARNING/ERROR/CRITICAL).
               Defaults to config.LOG_LEVEL.
    """
    level = level or config.LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    tss_logger = logging.getLogger("tss")
    tss_logger.setLevel(numeric_level)

    # Avoid duplicate handlers on repeated calls
    if not tss_logger.handlers:
        tss_logger.addHandler(handler)


def wrap_int32(value: int) -> int:
    """
    Reduce an integer to signed 32-bit two's complement.

    Python integers never overflow; this gives the wrap-around a C ``int``
    would produce, so results stay bit-identical to 32-bit arithmetic.
    """
    return ((value - config.INT32_MIN) & 0xFFFFFFFF) + config.INT32_MIN


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Integer division truncating toward zero (C semantics).

    Python's ``//`` floors, which differs for operands of opposite sign:
    ``-7 // 2 == -4`` while C gives ``-3``.

    Raises:
        ZeroDivisionError: If denominator is zero.
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def saturate(value: int, n_alpha: int) -> int:
    """
    Clamp an observation into [INT32_MIN / n_alpha, INT32_MAX / n_alpha].

    Keeps ``(n_alpha - 1) * stx + xt`` inside the 32-bit range.
    """
    upper = trunc_div(config.INT32_MAX, n_alpha)
    lower = trunc_div(config.INT32_MIN, n_alpha)
    if value > upper:
        return upper
    if value < lower:
        return lower
    return value
