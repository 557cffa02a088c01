"""
Command-line interface

Loads data, runs the classify / sort / seat pipeline, prints the seat map
and exports the results. Values from the YAML configuration can be
overridden on the command line.
"""

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from .acquisition import generate_random, load_csv, parse_values
from .classification import ClassificationStrategy
from .config_loader import (
    build_seat_config,
    get_algorithm_config,
    get_data_config,
    get_logging_config,
    get_output_config,
    load_config,
    print_config_summary,
    validate_config,
    ConfigurationError,
)
from .dataset import Dataset
from .errors import SeatSortError
from .exporter import export_results
from .logging_config import setup_logging
from .pipeline import PipelineResult, SeatingPipeline
from .rendering import SeatMapVisualizer, render_ascii
from .seating import LayoutMode, OddSide, SeatConfig, gen_seat_map
from .sorting import SortStrategy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seatsort",
        description="Odd/even classification, sorting and seat map generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 main.py                                  # Use config.yaml (or defaults)
  python3 main.py --random 60 --low 1 --high 99    # 60 random values
  python3 main.py --input data.csv --mode front_back --odd-side second
  python3 main.py --classifier stable --sorter heap --benchmark
  python3 main.py --rows 4 --cols 8 --plot         # Fixed grid + PNG plot
  python3 main.py --insert 42 --insert 7           # Ordered insertion after seating
  python3 main.py --values "5 2 9 ..." --no-export # Values typed on the command line
  python3 main.py --show-config                    # Print config summary first
        """
    )

    parser.add_argument('--config', '-c', default=None,
                        help=f'Configuration file path (default: {DEFAULT_CONFIG_PATH} if present)')

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--input', '-i', metavar='CSV', help='Load integers from a CSV file')
    source.add_argument('--random', '-r', type=int, metavar='N', help='Generate N random integers')
    source.add_argument('--values', metavar='TEXT',
                        help='Integers typed directly, separated by spaces or commas')

    parser.add_argument('--low', type=int, help='Random lower bound (inclusive)')
    parser.add_argument('--high', type=int, help='Random upper bound (inclusive)')
    parser.add_argument('--seed', type=int, help='Random seed')

    parser.add_argument('--classifier', choices=[s.value for s in ClassificationStrategy],
                        help='Odd/even classification algorithm')
    parser.add_argument('--sorter', choices=[s.value for s in SortStrategy],
                        help='Sorting algorithm')

    parser.add_argument('--mode', choices=[m.value for m in LayoutMode], help='Layout mode')
    parser.add_argument('--odd-side', choices=[s.value for s in OddSide],
                        help='Half receiving the odd values')
    parser.add_argument('--rows', type=int, help='Grid rows (0 = automatic)')
    parser.add_argument('--cols', type=int, help='Grid columns (0 = automatic)')

    parser.add_argument('--insert', type=int, action='append', metavar='VALUE', default=[],
                        help='Insert VALUE after seating, keeping partitions sorted (repeatable)')

    parser.add_argument('--output-dir', '-o', metavar='DIR', help='Directory for exported files')
    parser.add_argument('--output-name', '-n', metavar='NAME', help='Prefix for exported file names')
    parser.add_argument('--no-export', action='store_true', help='Skip CSV export')
    parser.add_argument('--plot', action='store_true', help='Save a PNG plot of the seat map')
    parser.add_argument('--benchmark', '-b', action='store_true',
                        help='Time classification and sorting for the current selection')
    parser.add_argument('--show-config', action='store_true',
                        help='Print a configuration summary before running')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    return parser


def _config_path(config_path: Optional[str]) -> Optional[str]:
    """Explicit path, else config.yaml when present, else None for defaults"""
    if config_path is None and Path(DEFAULT_CONFIG_PATH).exists():
        return DEFAULT_CONFIG_PATH
    return config_path


def _load_settings(config_path: Optional[str]) -> Dict[str, Any]:
    if config_path is None:
        return {}

    config = load_config(config_path)
    issues = validate_config(config)
    if issues:
        raise ConfigurationError("; ".join(issues))
    return config


def acquire_dataset(args: argparse.Namespace, config: Dict[str, Any]) -> Dataset:
    """Load or generate the raw values selected by args and config"""
    data = get_data_config(config)
    low = args.low if args.low is not None else data["low"]
    high = args.high if args.high is not None else data["high"]
    seed = args.seed if args.seed is not None else data["seed"]

    if args.input:
        values = load_csv(args.input)
    elif args.values is not None:
        values = parse_values(args.values)
    elif args.random is not None:
        values = generate_random(args.random, low, high, seed)
    elif data["source"] == "csv":
        values = load_csv(data["path"])
    else:
        values = generate_random(data["count"], low, high, seed)

    logger.info("Loaded %d values", len(values))
    return Dataset.from_values(values)


def resolve_seat_config(args: argparse.Namespace, config: Dict[str, Any]) -> SeatConfig:
    """SeatConfig from the config file with command-line overrides applied"""
    seat_config = build_seat_config(config)
    overrides = {}
    if args.mode:
        overrides["mode"] = LayoutMode(args.mode)
    if args.odd_side:
        overrides["odd_side"] = OddSide(args.odd_side)
    if args.rows is not None:
        overrides["rows"] = args.rows or None
    if args.cols is not None:
        overrides["cols"] = args.cols or None

    seat_config = replace(seat_config, **overrides)
    seat_config.validate()
    return seat_config


def apply_insertions(dataset: Dataset, result: PipelineResult, values: List[int],
                     seat_config: SeatConfig) -> PipelineResult:
    """Insert values into the classified dataset and rebuild the seat map"""
    for value in values:
        dataset.insert(value)
        print(f"Inserted {value}")

    seat_map = gen_seat_map(dataset.odd, dataset.even, seat_config)
    return PipelineResult(
        seat_map=seat_map,
        odd=list(dataset.odd),
        even=list(dataset.even),
        timings=result.timings
    )


def run(args: argparse.Namespace) -> PipelineResult:
    config_path = _config_path(args.config)
    if args.show_config:
        if config_path is None:
            print("No configuration file found, using built-in defaults")
        else:
            print_config_summary(config_path)

    config = _load_settings(config_path)

    log_settings = get_logging_config(config)
    setup_logging("DEBUG" if args.verbose else log_settings["level"], log_settings["file"])

    classifier, sorter = get_algorithm_config(config)
    if args.classifier:
        classifier = ClassificationStrategy(args.classifier)
    if args.sorter:
        sorter = SortStrategy(args.sorter)

    seat_config = resolve_seat_config(args, config)
    dataset = acquire_dataset(args, config)

    pipeline = SeatingPipeline(classifier, sorter, seat_config)

    if args.benchmark:
        bench = pipeline.benchmark(dataset)
        print(f"Benchmark ({classifier.value} / {sorter.value}): {bench.summary()}")

    result = pipeline.run(dataset)

    if args.insert:
        result = apply_insertions(dataset, result, args.insert, seat_config)

    seat_map = result.seat_map
    print(render_ascii(seat_map))
    print(f"\nOdd values: {len(result.odd)}, even values: {len(result.even)}, "
          f"unplaced: {seat_map.unplaced}")

    output = get_output_config(config)
    output_dir = args.output_dir or output["directory"]

    if not args.no_export:
        paths = export_results(
            result,
            output_dir=output_dir,
            odd_file=output["odd_file"],
            even_file=output["even_file"],
            seat_file=output["seat_file"],
            prefix=args.output_name
        )
        print(f"Exported {paths.odd} / {paths.even} / {paths.seat_map}")

    if args.plot or output["plot"]:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        name = f"{args.output_name}_seat_map.png" if args.output_name else "seat_map.png"
        plot_path = Path(output_dir) / name
        plot_path.parent.mkdir(parents=True, exist_ok=True)
        fig = SeatMapVisualizer().plot_seat_map(seat_map, save_path=str(plot_path))
        plt.close(fig)
        print(f"Plot: {plot_path}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command-line argument parsing"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 1
    except (SeatSortError, OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0
