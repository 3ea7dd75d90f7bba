"""Argument Parser for the linsgd CLI
==================================

Two commands are provided:

- ``fit``: fit a linear model with mini-batch SGD and report its parameters
- ``learning-curve``: compute bias-variance learning curves for the same learner
"""

import argparse
from pathlib import Path

from linsgd import __version__


def _parse_percentages(value: str) -> list[float]:
    try:
        return [float(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid percentage list '{value}': {e}") from e


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "data_file",
        type=Path,
        help="Observations and targets (.npz with X/y arrays, or delimited text)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (YAML or JSON); defaults are used when omitted",
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write results as JSON to this file",
    )

    # Logging
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log errors")

    # Optimizer overrides
    sgd_group = parser.add_argument_group("Optimizer Options (override config)")
    sgd_group.add_argument("--learning-rate", type=float, default=None, help="Gradient step size")
    sgd_group.add_argument("--iterations", type=int, default=None, help="Number of gradient steps")
    sgd_group.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Observations in each batch (1 = per-sample SGD)",
    )
    sgd_group.add_argument("--seed", type=int, default=None, help="Random stream seed")

    # Data overrides
    data_group = parser.add_argument_group("Data Options (override config)")
    data_group.add_argument(
        "--target-column", type=int, default=None, help="Column holding the targets in text files"
    )
    data_group.add_argument("--delimiter", default=None, help="Field delimiter in text files")
    data_group.add_argument(
        "--skip-header", type=int, default=None, help="Header lines to skip in text files"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser for the linsgd CLI.

    Returns:
        Configured ArgumentParser with ``fit`` and ``learning-curve`` commands
    """
    epilog_text = """
Examples:
  %(prog)s fit data.csv                                # Fit with default settings
  %(prog)s fit data.csv --batch-size 32 --iterations 10000
  %(prog)s fit data.npz --config linsgd.yaml --output theta.json
  %(prog)s fit data.csv --record-cost --verbose        # Track full-data cost per step
  %(prog)s learning-curve data.csv --percentages 0.1,0.5,1.0
        """

    parser = argparse.ArgumentParser(
        prog="linsgd",
        description="Linear regression with mini-batch stochastic gradient descent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_text,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"linsgd v{__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    fit_parser = subparsers.add_parser("fit", help="Fit linear-regression parameters")
    _add_common_arguments(fit_parser)
    fit_parser.add_argument(
        "--record-cost",
        action="store_true",
        help="Evaluate the full-data cost after every step",
    )

    curve_parser = subparsers.add_parser(
        "learning-curve", help="Compute bias-variance learning curves"
    )
    _add_common_arguments(curve_parser)
    curve_parser.add_argument(
        "--percentages",
        type=_parse_percentages,
        default=None,
        help="Comma-separated training sample percentages in (0, 1]",
    )
    curve_parser.add_argument(
        "--training-percentage",
        type=float,
        default=None,
        help="Share of rows used for training, the rest for validation",
    )

    return parser


def validate_args(args) -> bool:
    """Validate parsed command-line arguments.

    Range checks that depend on the data (batch size) are left to the optimizer.

    Returns
    -------
    bool
        True if arguments are valid, False otherwise
    """
    if args.verbose and args.quiet:
        print("Error: Cannot specify both --verbose and --quiet")
        return False

    if args.learning_rate is not None and args.learning_rate <= 0:
        print("Error: Learning rate must be positive")
        return False

    if args.iterations is not None and args.iterations < 0:
        print("Error: Iterations must be non-negative")
        return False

    if args.batch_size is not None and args.batch_size < 1:
        print("Error: Batch size must be at least 1")
        return False

    if not args.data_file.exists():
        print(f"Error: Data file not found: {args.data_file}")
        return False

    if args.config is not None and not args.config.exists():
        print(f"Error: Configuration file not found: {args.config}")
        return False

    return True
