"""
reader.py — Observation File Loading and Cleaning
==================================================

Reads the input stream of the smoother driver: whitespace separated
integer pairs

    count observe

where ``count`` is an opaque record label and ``observe`` the value to be
smoothed.  Pairs may be split over lines in any way; only the token order
matters.

Cleaning:
- A trailing token without a partner is dropped.
- Pairs containing a token that is not a plain integer are dropped.
- Pairs with a value outside the signed 32-bit range are dropped.
Each is logged; none aborts the run.
"""

import logging

import pandas as pd

from . import config

logger = logging.getLogger("tss.reader")

COLUMNS = ["count", "observe"]

# Optional sign followed by at most 18 ASCII digits (always fits in int64)
_INTEGER_PATTERN = r"[+-]?[0-9]{1,18}"


def parse_observations(text: str) -> pd.DataFrame:
    """
    Parse whitespace separated integer pairs into a DataFrame.

    Args:
        text: Raw input text.

    Returns:
        DataFrame with int64 columns ``count`` and ``observe``, one row
        per valid pair, in input order.
    """
    tokens = text.split()
    if len(tokens) % 2:
        logger.warning(f"Ignoring dangling token at end of input: {tokens[-1]!r}")
        tokens = tokens[:-1]

    raw = pd.DataFrame(
        {"count": tokens[0::2], "observe": tokens[1::2]},
        columns=COLUMNS,
        dtype=str,
    )
    return remove_malformed(raw)


def remove_malformed(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Drop rows whose fields are not plain integers and convert the rest.

    Accepts the same tokens as a C ``%d`` read: optional sign, ASCII
    digits, value within the signed 32-bit range.

    Args:
        raw: DataFrame of string tokens.

    Returns:
        DataFrame with int64 columns and a fresh index.
    """
    mask = pd.Series(True, index=raw.index)
    for col in COLUMNS:
        mask &= raw[col].str.fullmatch(_INTEGER_PATTERN).fillna(False)

    before = len(raw)
    parsed = raw[mask].astype("int64")
    in_range = pd.Series(True, index=parsed.index)
    for col in COLUMNS:
        in_range &= parsed[col].between(config.INT32_MIN, config.INT32_MAX)

    clean = parsed[in_range].reset_index(drop=True)
    malformed = before - len(parsed)
    if malformed > 0:
        bad = raw[~mask].head(3).values.tolist()
        logger.warning(f"Removed {malformed} malformed records "
                       f"(first few: {bad})")
    out_of_range = len(parsed) - len(clean)
    if out_of_range > 0:
        bad = parsed[~in_range].head(3).values.tolist()
        logger.warning(f"Removed {out_of_range} records outside the 32-bit "
                       f"integer range (first few: {bad})")

    return clean


def load_observations(path: str) -> pd.DataFrame:
    """
    Load and clean an observation file.

    Args:
        path: Path of the input text file.

    Returns:
        DataFrame with columns ``count`` and ``observe``.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, "r") as fh:
        text = fh.read()
    observations = parse_observations(text)
    logger.info(f"Loaded {len(observations)} observations from {path}")
    return observations
