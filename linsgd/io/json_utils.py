"""Conversion of fit results to plain JSON values."""

import math
from typing import Any

import numpy as np


def json_safe(value: Any) -> Any:
    """Recursively convert numpy values in ``value`` to plain Python types.

    Non-finite floats become ``None`` so that a diverged fit (NaN or inf
    parameters) still produces a valid JSON document.

    Examples
    --------
    >>> json_safe({"theta": np.array([1.0, np.nan]), "n": np.int64(3)})
    {'theta': [1.0, None], 'n': 3}
    """
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, np.ndarray):
        return json_safe(value.tolist())
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
