"""
report.py — Console and Comma Delimited Reports
================================================

Two reporters share the same three-call protocol used by the runner:

    reporter.header(n_alpha, reset_time, reset_count)
    reporter.row(record)        # once per observation
    reporter.close()

``record`` is a dict carrying the keys in config.CSV_COLUMNS.
"""

import csv
import logging
import sys

from . import config

logger = logging.getLogger("tss.report")

CONSOLE_HEADING = "_____count___observe__forecast______diff___diffsum"
CONSOLE_FIELDS = ["count", "observe", "forecast", "diff", "diffsum"]


class ConsoleReport:
    """Fixed-width table written to a text stream (stdout by default)."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def header(self, n_alpha: int, reset_time: int, reset_count: int = 0) -> None:
        settings = f"n_alpha = {n_alpha}  reset_time = {reset_time}"
        if reset_count:
            settings += f"  reset_count = {reset_count}"
        self.stream.write("\n")
        self.stream.write("---------" + config.REPORT_TITLE + "----------\n")
        self.stream.write(settings + "\n")
        self.stream.write(CONSOLE_HEADING + "\n")

    def row(self, record: dict) -> None:
        self.stream.write(
            "".join(f"{record[key]:10d}" for key in CONSOLE_FIELDS) + "\n"
        )

    def close(self) -> None:
        self.stream.flush()


class CsvReport:
    """
    Verbose comma delimited report, including the smoother internals
    (n, stx1, stx2) for each record.
    """

    def __init__(self, path: str):
        """
        Args:
            path: Output file, created or truncated.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        self.path = path
        self._fh = open(path, "w", newline="")
        self._writer = csv.writer(self._fh, lineterminator="\n")
        logger.info(f"Writing comma delimited report to {path}")

    def header(self, n_alpha: int, reset_time: int, reset_count: int = 0) -> None:
        settings = ["n_alpha = ", n_alpha, "", "reset_t = ", reset_time]
        if reset_count:
            settings += ["", "reset_c = ", reset_count]
        self._writer.writerow([config.REPORT_TITLE])
        self._writer.writerow(settings)
        self._writer.writerow(config.CSV_COLUMNS)

    def row(self, record: dict) -> None:
        self._writer.writerow([record[key] for key in config.CSV_COLUMNS])

    def close(self) -> None:
        self._fh.close()
