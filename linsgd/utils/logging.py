"""
Logging setup for linsgd.

All package loggers live below the ``linsgd`` logger. A single console
handler is attached to it the first time a logger is requested, and
``configure_logging`` is the one place where verbosity is changed (the CLI
calls it with ``--verbose``/``--quiet`` or the config ``logging.level``).

Optimizer runs are bracketed with :func:`log_operation` at DEBUG so that
learning-curve sweeps, which fit many models, stay quiet at INFO.
"""

import functools
import logging
import time
from contextlib import contextmanager

ROOT_LOGGER_NAME = "linsgd"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LEVEL = "INFO"


def _resolve_level(level) -> int | None:
    """Numeric level for an int or a level name; None when the name is unknown."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else None


class MinimalLogger:
    """Owns the console handler of the ``linsgd`` logger (one per process)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._handler = None
        return cls._instance

    @property
    def root(self) -> logging.Logger:
        return logging.getLogger(ROOT_LOGGER_NAME)

    def _ensure_handler(self) -> None:
        if self._handler is not None:
            return
        self._handler = logging.StreamHandler()
        self._handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.root.addHandler(self._handler)
        if self.root.level == logging.NOTSET:
            self.root.setLevel(_resolve_level(DEFAULT_LEVEL))

    def configure(self, level=DEFAULT_LEVEL) -> None:
        """Attach the console handler if needed and set the package level.

        Unknown level names fall back to INFO with a warning.
        """
        self._ensure_handler()
        resolved = _resolve_level(level)
        if resolved is None:
            self.root.setLevel(logging.INFO)
            self.root.warning(f"Unknown log level '{level}', using INFO")
            return
        self.root.setLevel(resolved)

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_handler()
        if name == "__main__":
            name = f"{ROOT_LOGGER_NAME}.main"
        elif name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)


_logger_manager = MinimalLogger()


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, nested under ``linsgd`` when it is not already."""
    return _logger_manager.get_logger(name)


def configure_logging(level=DEFAULT_LEVEL) -> None:
    """Set the verbosity of all linsgd loggers (name such as ``"DEBUG"`` or an int)."""
    _logger_manager.configure(level)


@contextmanager
def log_operation(operation_name: str, logger: logging.Logger, level: int = logging.INFO):
    """Log the start, duration and failure of a block of work."""
    logger.log(level, f"Starting operation: {operation_name}")
    start_time = time.perf_counter()
    try:
        yield logger
    except Exception as e:
        logger.error(
            f"Failed operation: {operation_name} after {time.perf_counter() - start_time:.3f}s: {e}"
        )
        raise
    logger.log(
        level, f"Completed operation: {operation_name} in {time.perf_counter() - start_time:.3f}s"
    )


def log_performance(logger: logging.Logger | None = None, level: int = logging.INFO, threshold: float = 0.1):
    """Decorator reporting calls that take at least ``threshold`` seconds.

    Failures are always logged at ERROR and re-raised.
    """

    def decorator(func):
        func_logger = logger or get_logger(func.__module__)
        func_name = f"{func.__module__}.{func.__qualname__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                func_logger.error(
                    f"Performance: {func_name} failed after {time.perf_counter() - start_time:.3f}s: {e}"
                )
                raise
            duration = time.perf_counter() - start_time
            if duration >= threshold:
                func_logger.log(level, f"Performance: {func_name} completed in {duration:.3f}s")
            return result

        return wrapper

    return decorator
