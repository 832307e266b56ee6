import argparse
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import PipelineConfig
from .data.alpha_vantage import VALID_INTERVALS, AlphaVantageConnector, JsonFileConnector
from .data.parser import FallbackPolicy
from .errors import TickDirectionError
from .pipeline import DirectionPipeline

# Load environment variables from .env file
load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fit a Gaussian Naive Bayes next-tick direction classifier."
    )
    parser.add_argument("--symbol", help="Instrument symbol (default: $TICK_DIRECTION_SYMBOL or IBM)")
    parser.add_argument("--api-key", help="Alpha Vantage API key (default: $ALPHAVANTAGE_API_KEY)")
    parser.add_argument("--interval", choices=VALID_INTERVALS, default="1min")
    parser.add_argument("--json-path", help="Read a saved raw payload instead of calling the API")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unparseable price/volume instead of substituting 0.0/0",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help=(
            "Sort observations by timestamp before labeling. Alpha Vantage returns "
            "newest bars first, so without this flag labels run backwards in time"
        ),
    )
    parser.add_argument("--var-smoothing", type=float, default=1e-9)
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Generate price/volume chart with the accuracy line",
    )
    parser.add_argument(
        "--plot-save",
        help="Path to save chart image (default: auto-generated filename)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    cfg = PipelineConfig.from_env(
        symbol=args.symbol,
        api_key=args.api_key,
        interval=args.interval,
        fallback_policy=FallbackPolicy.STRICT if args.strict else FallbackPolicy.DEFAULT,
        var_smoothing=args.var_smoothing,
        sort_chronologically=args.sort,
    )

    try:
        cfg.validate()
        if args.json_path:
            source = JsonFileConnector(args.json_path, interval=cfg.interval)
        else:
            source = AlphaVantageConnector(api_key=cfg.api_key or "", interval=cfg.interval)
        try:
            result = DirectionPipeline(cfg).run_from_source(source)
        finally:
            if isinstance(source, AlphaVantageConnector):
                source.close()
    except (TickDirectionError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Symbol: {result.symbol}")
    print(
        f"Observations: {len(result.observations)} "
        f"(source order: {result.source_order.value}, labeled: {result.order.value})"
    )
    print(f"Status: {result.status}")
    print(f"Numeric fallbacks: {result.fallback_count}")
    print(f"Naive Bayes Accuracy: {result.accuracy * 100:.2f}%")
    print(f"Majority baseline: {result.report.baseline_accuracy * 100:.2f}%")

    if args.plot:
        from .visualization import plot_price_volume

        chart_path = plot_price_volume(
            result.observations,
            result.accuracy,
            symbol=result.symbol,
            save_path=args.plot_save,
            show=False,
        )
        print(f"Chart saved to: {chart_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
