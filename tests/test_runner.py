import logging

import pandas as pd
import pytest

from backend.tss.runner import run_series
from backend.tss.smoother import ExpSmoother


class RecordingReport:
    def __init__(self):
        self.headers = []
        self.rows = []
        self.closed = False

    def header(self, n_alpha, reset_time, reset_count=0):
        self.headers.append((n_alpha, reset_time, reset_count))

    def row(self, record):
        self.rows.append(record)

    def close(self):
        self.closed = True


def frame(pairs):
    return pd.DataFrame(pairs, columns=["count", "observe"])


def test_diff_and_running_sum(clock):
    smoother = ExpSmoother(n_alpha=10, clock=clock)
    report = RecordingReport()
    result = run_series(frame([(1, 10), (2, 20), (3, 60)]), smoother, [report],
                        sleep=clock.sleep)

    assert result["forecast"].tolist() == [10, 15, 30]
    assert result["diff"].tolist() == [0, 5, 30]
    assert result["diffsum"].tolist() == [0, 5, 35]
    assert result["n"].tolist() == [1, 2, 3]
    assert report.headers == [(10, 5, 0)]
    assert report.rows == result.to_dict("records")
    assert report.closed
    assert clock.sleeps == []


def test_diff_uses_unclamped_observation(clock):
    smoother = ExpSmoother(n_alpha=10, clock=clock)
    result = run_series(frame([(1, 2_000_000_000)]), smoother,
                        sleep=clock.sleep)
    row = result.iloc[0]
    assert row["observe"] == 2_000_000_000
    assert row["forecast"] == 214748364
    assert row["diff"] == 2_000_000_000 - 214748364


def test_reset_count_forces_warmup_restart(clock, caplog):
    smoother = ExpSmoother(n_alpha=10, reset_time=5, clock=clock)
    pairs = [(1, 10), (2, 20), (3, 30), (4, 40)]
    with caplog.at_level(logging.INFO, logger="tss.runner"):
        result = run_series(frame(pairs), smoother, reset_count=2,
                            sleep=clock.sleep)

    assert clock.sleeps == [6]
    assert result["n"].tolist() == [1, 2, 1, 2]
    assert result["stx1"].tolist() == [10, 15, 30, 35]
    assert "restarting warm-up" in caplog.text
    assert "1 resets" in caplog.text


def test_logs_transition_to_steady_state(clock, caplog):
    smoother = ExpSmoother(n_alpha=2, clock=clock)
    with caplog.at_level(logging.INFO, logger="tss.runner"):
        run_series(frame([(1, 5), (2, 5), (3, 5)]), smoother,
                   sleep=clock.sleep)
    assert "warm-up complete after 2 samples" in caplog.text


def test_reporters_closed_on_error(clock):
    class Broken(RecordingReport):
        def row(self, record):
            raise OSError("disk full")

    report = Broken()
    smoother = ExpSmoother(clock=clock)
    with pytest.raises(OSError):
        run_series(frame([(1, 1)]), smoother, [report], sleep=clock.sleep)
    assert report.closed


def test_empty_input_returns_empty_frame(clock):
    result = run_series(frame([]), ExpSmoother(clock=clock), sleep=clock.sleep)
    assert result.empty
    assert list(result.columns)[:3] == ["count", "observe", "forecast"]


def test_diffsum_wraps_like_32bit_int(clock):
    smoother = ExpSmoother(n_alpha=2, clock=clock)
    pairs = [(1, -2147483648), (2, -2147483648), (3, -2147483648)]
    result = run_series(frame(pairs), smoother, sleep=clock.sleep)

    assert result["forecast"].tolist() == [-1073741824] * 3
    assert result["diff"].tolist() == [-1073741824] * 3
    assert result["diffsum"].tolist() == [-1073741824, -2147483648, 1073741824]
