"""Tests for the price series reader."""

import logging

import numpy as np
import pytest

from bsvol.errors import InputUnreadableError
from bsvol.series import read_price_series


@pytest.fixture
def price_file(tmp_path):
    path = tmp_path / "prices.csv"
    path.write_text("100\n105\n102\n110\n108\n115\n")
    return path


class TestReadPriceSeries:
    def test_one_per_line(self, price_file):
        np.testing.assert_array_equal(
            read_price_series(price_file), [100, 105, 102, 110, 108, 115]
        )

    def test_mixed_separators(self, tmp_path):
        path = tmp_path / "p.txt"
        path.write_text("  100.5 101.25\t99\n\n98.0,97.5\r\n")
        np.testing.assert_array_equal(
            read_price_series(str(path)), [100.5, 101.25, 99.0, 98.0, 97.5]
        )

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert read_price_series(path).shape == (0,)

    def test_unbounded_by_default(self, tmp_path):
        path = tmp_path / "long.txt"
        path.write_text("\n".join(str(100 + i % 7) for i in range(1500)))
        assert len(read_price_series(path)) == 1500

    def test_max_count_truncates(self, tmp_path, caplog):
        path = tmp_path / "long.txt"
        path.write_text("\n".join(str(100 + i) for i in range(1200)))
        with caplog.at_level(logging.WARNING, logger="bsvol.series"):
            arr = read_price_series(path, max_count=999)
        assert len(arr) == 999
        assert arr[-1] == 1098.0
        assert "keeping the first 999" in caplog.text

    def test_negative_max_count(self, price_file):
        with pytest.raises(ValueError):
            read_price_series(price_file, max_count=-1)


class TestReadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(InputUnreadableError) as exc:
            read_price_series(tmp_path / "nope.csv")
        assert isinstance(exc.value.__cause__, OSError)

    def test_directory(self, tmp_path):
        with pytest.raises(InputUnreadableError):
            read_price_series(tmp_path)

    def test_bad_token(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("100\n101\nabc\n102\n")
        with pytest.raises(InputUnreadableError, match="#3"):
            read_price_series(path)

    def test_is_os_error(self, tmp_path):
        with pytest.raises(OSError):
            read_price_series(tmp_path / "nope.csv")
