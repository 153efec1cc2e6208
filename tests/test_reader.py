import logging

import pytest

from backend.tss.reader import load_observations, parse_observations


def test_pairs_may_span_lines():
    df = parse_observations("1 10\n2\n20 3 -30\n")
    assert list(df.columns) == ["count", "observe"]
    assert df.values.tolist() == [[1, 10], [2, 20], [3, -30]]
    assert str(df["observe"].dtype) == "int64"


def test_dangling_token_is_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="tss.reader"):
        df = parse_observations("1 10\n2")
    assert df.values.tolist() == [[1, 10]]
    assert "dangling" in caplog.text


def test_malformed_pairs_are_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="tss.reader"):
        df = parse_observations("1 10\n2 abc\n3 1.5\n+4 -40\n")
    assert df.values.tolist() == [[1, 10], [4, -40]]
    assert "Removed 2 malformed records" in caplog.text


def test_empty_input():
    df = parse_observations("   \n")
    assert df.empty
    assert list(df.columns) == ["count", "observe"]


def test_load_observations(tmp_path):
    path = tmp_path / "series.txt"
    path.write_text("1 100\n2 101\n")
    df = load_observations(str(path))
    assert df["observe"].tolist() == [100, 101]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_observations(str(tmp_path / "absent.txt"))


def test_non_ascii_digits_are_malformed():
    df = parse_observations("1 10\n2 ٣\n")
    assert df.values.tolist() == [[1, 10]]


def test_values_outside_int32_are_dropped(caplog):
    text = "1 2147483647\n2 2147483648\n3 -2147483648\n4 -2147483649\n"
    with caplog.at_level(logging.WARNING, logger="tss.reader"):
        df = parse_observations(text)
    assert df.values.tolist() == [[1, 2147483647], [3, -2147483648]]
    assert "Removed 2 records outside the 32-bit integer range" in caplog.text
