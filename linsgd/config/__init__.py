"""Configuration loading for linsgd."""

from linsgd.config.manager import ConfigManager, build_optimizer, load_linsgd_config

__all__ = ["ConfigManager", "build_optimizer", "load_linsgd_config"]
