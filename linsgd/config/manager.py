"""Configuration Management for linsgd
===================================

YAML/JSON configuration loading for optimizer, learning-curve, data and
logging settings. Missing or unreadable files fall back to the default
configuration with an error logged, so command-line runs always have a
complete set of settings.
"""

import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from linsgd.core.exceptions import InvalidConfiguration
from linsgd.crossvalidation.learning_curves import DEFAULT_SAMPLE_PERCENTAGES
from linsgd.optimization.sgd import (
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
    DEFAULT_OBSERVATIONS_IN_EACH_BATCH,
    DEFAULT_SEED,
    StochasticGradientDescent,
)
from linsgd.utils.logging import get_logger

logger = get_logger(__name__)

OPTIMIZER_KEYS = ("learning_rate", "iterations", "observations_in_each_batch", "seed")
INTEGER_OPTIMIZER_KEYS = ("iterations", "observations_in_each_batch", "seed")


def _coerce_number(key: str, value: Any, integral: bool = False) -> float | int:
    """Convert a configuration value to a number.

    YAML 1.1 reads exponent notation without a dot (``1e-3``) as a string,
    so numeric strings are accepted alongside ints and floats.
    """
    if isinstance(value, bool):
        raise InvalidConfiguration(f"Setting '{key}' must be a number", parameter=key, value=value)
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(
            f"Setting '{key}' must be a number", parameter=key, value=value
        ) from e

    if not integral:
        return number
    if not number.is_integer():
        raise InvalidConfiguration(f"Setting '{key}' must be an integer", parameter=key, value=value)
    return int(number)


def _get_default_config() -> dict[str, Any]:
    """Get default configuration structure."""
    return {
        "metadata": {
            "config_version": "1.0",
            "description": "Default linsgd configuration",
        },
        "optimizer": {
            "learning_rate": DEFAULT_LEARNING_RATE,
            "iterations": DEFAULT_ITERATIONS,
            "observations_in_each_batch": DEFAULT_OBSERVATIONS_IN_EACH_BATCH,
            "seed": DEFAULT_SEED,
        },
        "learning_curves": {
            "sample_percentages": list(DEFAULT_SAMPLE_PERCENTAGES),
            "training_percentage": 0.8,
            "seed": DEFAULT_SEED,
        },
        "data": {
            "target_column": -1,
            "delimiter": ",",
            "skip_header": 0,
        },
        "logging": {
            "level": "INFO",
        },
    }


class ConfigManager:
    """Configuration manager for linsgd runs.

    Usage:
        config_manager = ConfigManager('linsgd.yaml')
        settings = config_manager.get_optimizer_settings()
    """

    def __init__(
        self,
        config_file: str | None = "linsgd_config.yaml",
        config_override: dict[str, Any] | None = None,
    ):
        """Initialize configuration manager.

        Parameters
        ----------
        config_file : str
            Path to YAML/JSON configuration file
        config_override : dict, optional
            Configuration data used instead of loading from file
        """
        self.config_file = config_file
        self.config: dict[str, Any] | None = None

        if config_override is not None:
            self.config = deepcopy(config_override)
            logger.info("Configuration loaded from override data")
        else:
            self.load_config()

        self._merge_defaults()

    def load_config(self) -> None:
        """Load and parse YAML/JSON configuration file.

        Falls back to the default configuration if loading fails.
        """
        try:
            if self.config_file is None:
                raise ValueError("Configuration file path cannot be None")

            config_path = Path(self.config_file)
            if not config_path.exists():
                raise FileNotFoundError(
                    f"Configuration file not found: {self.config_file}",
                )

            file_extension = config_path.suffix.lower()

            with open(config_path, encoding="utf-8") as f:
                if file_extension == ".json":
                    self.config = json.load(f)
                else:
                    self.config = yaml.safe_load(f)

            if self.config is None:
                self.config = {}
            if not isinstance(self.config, dict):
                raise ValueError(
                    f"Configuration root must be a mapping, got {type(self.config).__name__}"
                )

            logger.info(f"Configuration loaded from: {self.config_file}")

            if os.environ.get("LINSGD_VALIDATE_CONFIG", "true").lower() == "true":
                self._validate_config()

        except json.JSONDecodeError as e:
            logger.error(f"JSON parsing error: {e}")
            logger.info("Using default configuration...")
            self.config = _get_default_config()
        except (yaml.YAMLError, OSError, ValueError) as e:
            error_type = "YAML parsing" if isinstance(e, yaml.YAMLError) else "Configuration loading"
            logger.error(f"{error_type} error: {e}")
            logger.info("Using default configuration...")
            self.config = _get_default_config()

    def _merge_defaults(self) -> None:
        """Fill sections and keys missing from the loaded configuration."""
        defaults = _get_default_config()
        for section, values in defaults.items():
            current = self.config.get(section)
            if not isinstance(current, dict):
                self.config[section] = values
                continue
            for key, value in values.items():
                current.setdefault(key, value)

    def _validate_config(self) -> None:
        """Lightweight configuration validation.

        Warns about unknown keys; range checks happen when the optimizer runs.
        Can be disabled by setting LINSGD_VALIDATE_CONFIG=false.
        """
        if not self.config:
            logger.warning("Configuration is empty")
            return

        optimizer = self.config.get("optimizer", {})
        if isinstance(optimizer, dict):
            for key in optimizer:
                if key not in OPTIMIZER_KEYS:
                    logger.warning(
                        f"Unknown optimizer setting: '{key}'. Valid settings: {list(OPTIMIZER_KEYS)}",
                    )

        known_sections = set(_get_default_config())
        for section in self.config:
            if section not in known_sections:
                logger.warning(f"Unknown configuration section: {section}")

        logger.debug("Configuration validation completed")

    def get_config(self) -> dict[str, Any]:
        """Get the current configuration dictionary."""
        return self.config

    def update_config(self, key: str, value: Any) -> None:
        """Update a configuration value using dot notation.

        Parameters
        ----------
        key : str
            Configuration key (supports dot notation like 'optimizer.seed')
        value : Any
            New value to set
        """
        keys = key.split(".")
        config_ref = self.config

        for k in keys[:-1]:
            if k not in config_ref:
                config_ref[k] = {}
            config_ref = config_ref[k]

        config_ref[keys[-1]] = value

    def get_optimizer_settings(self) -> dict[str, Any]:
        """Keyword arguments for :class:`StochasticGradientDescent`.

        Raises
        ------
        InvalidConfiguration
            If a setting is not numeric, or not integral where an integer
            is required
        """
        optimizer = self.config["optimizer"]
        return {
            key: _coerce_number(
                f"optimizer.{key}", optimizer[key], integral=key in INTEGER_OPTIMIZER_KEYS
            )
            for key in OPTIMIZER_KEYS
        }

    def get_learning_curve_settings(self) -> dict[str, Any]:
        settings = dict(self.config["learning_curves"])
        percentages = settings["sample_percentages"]
        if not isinstance(percentages, (list, tuple)):
            raise InvalidConfiguration(
                "Sample percentages must be a list",
                parameter="learning_curves.sample_percentages",
                value=percentages,
            )
        settings["sample_percentages"] = [
            _coerce_number("learning_curves.sample_percentages", p) for p in percentages
        ]
        settings["training_percentage"] = _coerce_number(
            "learning_curves.training_percentage", settings["training_percentage"]
        )
        settings["seed"] = _coerce_number("learning_curves.seed", settings["seed"], integral=True)
        return settings

    def get_data_settings(self) -> dict[str, Any]:
        return dict(self.config["data"])

    def get_logging_level(self) -> str:
        return str(self.config["logging"].get("level", "INFO"))


def build_optimizer(config_manager: ConfigManager) -> StochasticGradientDescent:
    """Create an optimizer from the ``optimizer`` section of a configuration."""
    settings = config_manager.get_optimizer_settings()
    logger.debug(f"Building optimizer with settings: {settings}")
    return StochasticGradientDescent(**settings)


def load_linsgd_config(config_path: str) -> dict[str, Any]:
    """Load a configuration file into a dictionary with defaults filled in."""
    return ConfigManager(config_path).config
