"""End-to-end tests for the command line interface."""

import json
import os

import pytest

import config.loader as loader
from cli import main, read_price_history


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep real config files and PRICEDASH_* variables out of the run."""
    for name in list(os.environ):
        if name.startswith(loader.ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.setattr(loader, "CONFIG_PATHS", [tmp_path / "pricedash.toml"])
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def prices_csv(tmp_path):
    path = tmp_path / "prices.csv"
    rows = ["timestamp,price"]
    for i in range(40):
        rows.append(f"{1_700_000_000_000 + i * 3_600_000},{100 + (i % 7) * 1.5 + i * 0.3:.2f}")
    path.write_text("\n".join(rows) + "\n")
    return path


class TestReadPriceHistory:
    """Tests for CSV parsing."""

    def test_skips_header_and_blank_lines(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("time,close\n1000,1.5\n\n2000,2.5\n")
        assert read_price_history(path) == [(1000, 1.5), (2000, 2.5)]

    def test_without_header(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("1000,1.5\n2000,2.5\n")
        assert len(read_price_history(path)) == 2

    def test_bad_row(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("1000,1.5\n2000,abc\n")
        with pytest.raises(ValueError, match=":2:"):
            read_price_history(path)

    def test_large_timestamps_keep_precision(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("9007199254740993,1.0\n9007199254740994,2.0\n")
        assert read_price_history(path) == [(9007199254740993, 1.0), (9007199254740994, 2.0)]

    def test_decimal_timestamp_truncated(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("1000.7,1.5\n")
        assert read_price_history(path) == [(1000, 1.5)]

    def test_missing_column(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("1000\n")
        with pytest.raises(ValueError):
            read_price_history(path)


class TestChartCommand:
    """Tests for `chart`."""

    def test_json_output(self, prices_csv, capsys):
        assert main(["chart", "-i", str(prices_csv), "--indicators", "rsi,ma"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["indicators"] == ["rsi", "ma"]
        assert payload["total_points"] == 40
        assert payload["points"][0]["values"] == {"rsi": None, "ma": None}
        assert payload["points"][19]["values"]["ma"] is not None

    def test_default_indicators_from_config(self, prices_csv, capsys):
        assert main(["chart", "-i", str(prices_csv)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["indicators"] == ["bollinger", "rsi"]

    def test_config_file(self, prices_csv, tmp_path, capsys):
        cfg = tmp_path / "custom.toml"
        cfg.write_text('indicators = ["ema"]\n\n[params.moving_average]\nema_period = 5\n')

        assert main(["--config", str(cfg), "chart", "-i", str(prices_csv)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["series"] == ["ema"]
        assert payload["points"][3]["values"]["ema"] is None
        assert payload["points"][4]["values"]["ema"] is not None

    def test_table_output(self, prices_csv, capsys):
        assert main(["chart", "-i", str(prices_csv), "--indicators", "support_resistance", "-f", "table"]) == 0
        out = capsys.readouterr().out
        assert "support" in out
        assert "resistance" in out
        assert "Price axis:" in out

    def test_output_file(self, prices_csv, tmp_path):
        target = tmp_path / "chart.json"
        assert main(["chart", "-i", str(prices_csv), "--indicators", "macd", "-o", str(target)]) == 0
        payload = json.loads(target.read_text())
        assert payload["series"] == ["macd", "signal", "histogram"]

    def test_unknown_indicator(self, prices_csv, capsys):
        assert main(["chart", "-i", str(prices_csv), "--indicators", "vwap"]) == 1
        assert "Unknown indicator" in capsys.readouterr().err

    def test_too_little_history(self, tmp_path, capsys):
        path = tmp_path / "short.csv"
        path.write_text("1000,1.0\n2000,2.0\n")
        assert main(["chart", "-i", str(path), "--indicators", "rsi"]) == 1
        assert "Need at least 15 prices" in capsys.readouterr().err

    def test_timestamp_beyond_year_9999(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("PRICEDASH_SMA_PERIOD", "2")
        path = tmp_path / "micro.csv"
        path.write_text("253402300800000,1\n253402300860000,2\n253402300920000,3\n")
        assert main(["chart", "-i", str(path), "--indicators", "ma"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        assert main(["chart", "-i", str(tmp_path / "missing.csv")]) == 1
        assert "Error" in capsys.readouterr().err


class TestIndicatorsCommand:
    """Tests for `indicators`."""

    def test_lists_all_kinds(self, capsys):
        assert main(["indicators"]) == 0
        out = capsys.readouterr().out
        for name in ["ma", "ema", "bollinger", "rsi", "macd", "support_resistance"]:
            assert name in out
        assert "* bollinger" in out
        assert "fast=12 slow=26 signal=9" in out
        assert "-> upper, middle, lower" in out
        assert "-> macd, signal, histogram" in out

    def test_bad_config(self, tmp_path, capsys):
        cfg = tmp_path / "bad.toml"
        cfg.write_text("[params.macd]\nfast = 30\n")
        assert main(["--config", str(cfg), "indicators"]) == 1
        assert "slow must be greater than fast" in capsys.readouterr().err
