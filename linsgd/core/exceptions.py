"""Custom exceptions for linear-regression fitting.

Exception Hierarchy:
    LinsgdError (base)
    ├── DimensionMismatch (incompatible matrix/vector shapes)
    └── InvalidConfiguration (optimizer or calculator settings out of range)

Both concrete errors also derive from ``ValueError`` so callers that only
know about the standard library still catch them.

Examples
--------
>>> try:
...     theta = optimizer.optimize(X, y)
... except DimensionMismatch as e:
...     print(f"Bad input shapes: {e.error_context}")
... except InvalidConfiguration as e:
...     print(f"Fix setting {e.parameter}: {e}")

Notes
-----
All validation is eager: these errors are raised before the first gradient
step, so there is never a partial result to recover. Numerical divergence
(NaN/Inf parameters) is not reported through this hierarchy.
"""

from __future__ import annotations

from typing import Any


class LinsgdError(Exception):
    """Base exception for all linsgd errors.

    Attributes
    ----------
    error_context : dict
        Additional context about the error (shapes, parameter values, etc.)
    """

    def __init__(self, message: str, error_context: dict | None = None):
        super().__init__(message)
        self.error_context = error_context or {}

    def __str__(self) -> str:
        """Return formatted error message with context."""
        base_msg = super().__str__()
        if self.error_context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.error_context.items())
            return f"{base_msg} (context: {context_str})"
        return base_msg


class DimensionMismatch(LinsgdError, ValueError):
    """Raised when array shapes are incompatible.

    Covers both caller input (observation rows vs. target length) and shape
    checks inside the linear-algebra helpers, which never broadcast.

    Attributes
    ----------
    expected : Any
        Expected shape or length
    actual : Any
        Shape or length that was received
    """

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
        error_context: dict | None = None,
    ):
        context = error_context or {}
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual

        super().__init__(message, context)
        self.expected = expected
        self.actual = actual


class InvalidConfiguration(LinsgdError, ValueError):
    """Raised for out-of-range settings.

    Common Causes
    -------------
    - Non-positive learning rate
    - Negative iteration count
    - Batch size smaller than 1 or larger than the number of observations
    - Learning-curve sample percentage outside (0, 1]

    Attributes
    ----------
    parameter : str
        Name of the offending setting
    value : Any
        Value that was rejected
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
        error_context: dict | None = None,
    ):
        context = error_context or {}
        if parameter:
            context["parameter"] = parameter
        if value is not None:
            context["value"] = value

        super().__init__(message, context)
        self.parameter = parameter
        self.value = value
