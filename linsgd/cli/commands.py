"""Command Dispatcher for the linsgd CLI
=====================================

Handles command execution and coordination between CLI arguments,
configuration, data loading and the optimizer.
"""

from typing import Any

from linsgd.cli.args_parser import validate_args
from linsgd.config.manager import ConfigManager, build_optimizer
from linsgd.core.exceptions import LinsgdError
from linsgd.crossvalidation import (
    BiasVarianceLearningCurvesCalculator,
    MeanSquaredErrorRegressionMetric,
    RandomTrainingValidationIndexSplitter,
)
from linsgd.io.data_loader import load_dataset
from linsgd.io.json_utils import json_safe
from linsgd.io.writers import save_json
from linsgd.learners import SGDLinearRegressionLearner
from linsgd.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def dispatch_command(args) -> dict[str, Any]:
    """Dispatch command based on parsed CLI arguments.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    dict
        Command execution result with success status and details
    """
    if not validate_args(args):
        return {"success": False, "error": "Invalid command-line arguments"}

    try:
        config = _load_configuration(args)
        _configure_logging(args, config)

        data_settings = config.get_data_settings()
        observations, targets = load_dataset(
            args.data_file,
            target_column=int(data_settings["target_column"]),
            delimiter=data_settings["delimiter"],
            skip_header=int(data_settings["skip_header"]),
        )

        if args.command == "fit":
            payload = _run_fit(args, config, observations, targets)
        elif args.command == "learning-curve":
            payload = _run_learning_curve(config, observations, targets)
        else:
            return {"success": False, "error": f"Unknown command: {args.command}"}

        if args.output is not None:
            save_json(payload, args.output)

        return {"success": True, "result": payload}

    except (LinsgdError, OSError, KeyError, ValueError) as e:
        logger.error(f"Command execution failed: {e}")
        logger.debug("Full traceback:", exc_info=True)
        return {"success": False, "error": str(e)}


def _load_configuration(args) -> ConfigManager:
    """Load configuration from file or defaults, then apply CLI overrides."""
    if args.config is not None:
        logger.info(f"Loading configuration from: {args.config}")
        config = ConfigManager(str(args.config))
    else:
        logger.debug("No configuration file given, using defaults")
        config = ConfigManager(config_override={})

    _apply_cli_overrides(config, args)
    return config


def _apply_cli_overrides(config: ConfigManager, args) -> None:
    """Apply CLI argument overrides to configuration.

    Precedence: CLI args > config file > code defaults.
    """
    overrides = {
        "optimizer.learning_rate": args.learning_rate,
        "optimizer.iterations": args.iterations,
        "optimizer.observations_in_each_batch": args.batch_size,
        "optimizer.seed": args.seed,
        "data.target_column": args.target_column,
        "data.delimiter": args.delimiter,
        "data.skip_header": args.skip_header,
        "learning_curves.sample_percentages": getattr(args, "percentages", None),
        "learning_curves.training_percentage": getattr(args, "training_percentage", None),
    }
    for key, value in overrides.items():
        if value is not None:
            config.update_config(key, value)
            logger.debug(f"CLI override: {key} = {value}")


def _configure_logging(args, config: ConfigManager) -> None:
    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("ERROR")
    else:
        configure_logging(config.get_logging_level())


def _run_fit(args, config: ConfigManager, observations, targets) -> dict[str, Any]:
    optimizer = build_optimizer(config)
    logger.info(f"Fitting with {optimizer!r}")

    result = optimizer.run(observations, targets, record_cost=args.record_cost)

    for line in result.format_for_display().splitlines():
        logger.info(line)

    return result.to_dict()


def _run_learning_curve(config: ConfigManager, observations, targets) -> dict[str, Any]:
    settings = config.get_learning_curve_settings()
    learner = SGDLinearRegressionLearner.from_optimizer(build_optimizer(config))
    calculator = BiasVarianceLearningCurvesCalculator(
        RandomTrainingValidationIndexSplitter(
            training_percentage=settings["training_percentage"],
            seed=settings["seed"],
        ),
        MeanSquaredErrorRegressionMetric(),
        settings["sample_percentages"],
    )

    points = calculator.calculate(learner, observations, targets)

    logger.info("Learning curve (sample size | training error | validation error)")
    for point in points:
        logger.info(
            f"{point.sample_size:>8d} | {point.training_score:.6e} | {point.validation_score:.6e}"
        )

    return json_safe(
        {
            "optimizer": config.get_optimizer_settings(),
            "points": [
                {
                    "sample_size": p.sample_size,
                    "training_score": p.training_score,
                    "validation_score": p.validation_score,
                }
                for p in points
            ],
        }
    )
