"""
Pricedash CLI - technical indicators over a price history.

Usage:
    python cli.py chart --input FILE [--indicators ma,rsi] [--format FORMAT]
    python cli.py indicators
"""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from config import ConfigError, PricedashConfig, load_config
from domain.indicators import IndicatorError, IndicatorKind
from orchestration.indicator_pipeline import OUTPUT_NAMES
from presentation.chart_data import ChartData, PricePoint, build_chart_data
from presentation.json_api import to_json

logger = logging.getLogger(__name__)


def _parse_timestamp(cell: str) -> int:
    """Epoch milliseconds; integer text is parsed exactly, decimals are truncated."""
    try:
        return int(cell)
    except ValueError:
        pass
    try:
        return int(float(cell))
    except OverflowError:
        raise ValueError(f"timestamp out of range: {cell!r}") from None


def read_price_history(path: str | Path) -> list[PricePoint]:
    """
    Read (timestamp, price) rows from a CSV file.

    A header row is skipped when its first cell is not a number. Blank
    lines are ignored.

    Raises:
        ValueError: If a data row cannot be parsed
    """
    history: list[PricePoint] = []

    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        for line_no, row in enumerate(reader, start=1):
            if not row or not any(cell.strip() for cell in row):
                continue
            if len(row) < 2:
                raise ValueError(f"{path}:{line_no}: expected 'timestamp,price', got {row!r}")
            try:
                timestamp = _parse_timestamp(row[0])
                price = float(row[1])
            except ValueError:
                if line_no == 1:
                    continue  # header
                raise ValueError(f"{path}:{line_no}: cannot parse {row!r}") from None
            history.append((timestamp, price))

    logger.info(f"Read {len(history)} prices from {path}")
    return history


def _format_value(value: float | None) -> str:
    return "-" if value is None else f"{value:.4f}"


def format_table(data: ChartData) -> str:
    """Render chart data as a plain-text table."""
    names = data.series_names
    header = ["time", "price"] + names
    lines = ["  ".join(f"{h:>12}" for h in header)]

    for point in data.points:
        cells = [point.time.strftime("%Y-%m-%d %H:%M"), _format_value(point.price)]
        cells += [_format_value(point.values[name]) for name in names]
        lines.append("  ".join(f"{c:>12}" for c in cells))

    lines.append(f"\nPrice axis: {data.price_min:.4f} .. {data.price_max:.4f}")
    return "\n".join(lines)


def _load(args: argparse.Namespace) -> PricedashConfig:
    return load_config(args.config) if args.config else load_config()


def cmd_chart(args: argparse.Namespace) -> int:
    """Compute indicators over a CSV price history."""
    try:
        config = _load(args)
        history = read_price_history(args.input)
        kinds = args.indicators.split(",") if args.indicators else config.indicators
        data = build_chart_data(
            history,
            kinds,
            params=config.params,
            padding_ratio=config.chart.padding_ratio,
        )
        if args.format == "json":
            output = json.dumps(to_json(data), indent=2)
        else:
            output = format_table(data)
    except (ConfigError, IndicatorError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(output)
        print(f"Chart data written to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0


def cmd_indicators(args: argparse.Namespace) -> int:
    """List available indicators and their configured parameters."""
    try:
        config = _load(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    params = config.params
    described = {
        IndicatorKind.MA: f"period={params.moving_average.sma_period}",
        IndicatorKind.EMA: f"period={params.moving_average.ema_period}",
        IndicatorKind.BOLLINGER: f"period={params.bollinger.period} deviation={params.bollinger.deviation}",
        IndicatorKind.RSI: f"period={params.rsi.period} zero_loss={params.rsi.zero_loss.value}",
        IndicatorKind.MACD: f"fast={params.macd.fast} slow={params.macd.slow} signal={params.macd.signal}",
        IndicatorKind.SUPPORT_RESISTANCE: f"period={params.support_resistance.period}",
    }

    for kind in IndicatorKind:
        marker = "*" if kind in config.indicators else " "
        outputs = ", ".join(OUTPUT_NAMES[kind])
        print(f"{marker} {kind.value:<20} {described[kind]:<32} -> {outputs}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pricedash",
        description="Technical indicators for price charts",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", help="Path to a TOML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Chart command
    chart_parser = subparsers.add_parser("chart", help="Compute chart data from a CSV history")
    chart_parser.add_argument("-i", "--input", required=True, help="CSV file with timestamp,price rows")
    chart_parser.add_argument("--indicators", help="Comma-separated indicators (default: from config)")
    chart_parser.add_argument(
        "-f", "--format",
        choices=["json", "table"],
        default="json",
        help="Output format",
    )
    chart_parser.add_argument("-o", "--output", help="Output file path")
    chart_parser.set_defaults(func=cmd_chart)

    # Indicators command
    indicators_parser = subparsers.add_parser("indicators", help="List available indicators")
    indicators_parser.set_defaults(func=cmd_indicators)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # PRICEDASH_* overrides may live in a local .env file
    load_dotenv()

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
