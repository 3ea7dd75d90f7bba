"""Dataset loading for command-line fitting.

Supported formats:
- ``.npz`` archives holding an ``X`` observation matrix and a ``y`` target vector
- delimited text (``.csv``, ``.txt``, ...) where one column holds the targets
"""

from pathlib import Path

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch, InvalidConfiguration
from linsgd.utils.logging import get_logger, log_performance

logger = get_logger(__name__)

NPZ_OBSERVATIONS_KEY = "X"
NPZ_TARGETS_KEY = "y"

@log_performance(threshold=0.5)
def load_dataset(
    file_path: str | Path,
    target_column: int = -1,
    delimiter: str = ",",
    skip_header: int = 0,
) -> tuple[np.ndarray, np.ndarray]:
    """Load an observation matrix and target vector from disk.

    Parameters
    ----------
    file_path : str or Path
        ``.npz`` archive or delimited text file
    target_column : int
        Column holding the targets (text files only); negative values count
        from the end
    delimiter : str
        Field delimiter for text files
    skip_header : int
        Number of header lines to skip in text files

    Returns
    -------
    tuple of np.ndarray
        ``(observations, targets)`` with shapes ``(n, d)`` and ``(n,)``

    Raises
    ------
    FileNotFoundError
        If ``file_path`` does not exist
    DimensionMismatch
        If the file does not describe a consistent ``(n, d)`` / ``(n,)`` pair
    InvalidConfiguration
        If ``target_column`` is outside the columns of a text file
    ValueError
        If any observation or target is missing, non-numeric or non-finite
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    if path.suffix.lower() == ".npz":
        with np.load(path) as archive:
            missing = {NPZ_OBSERVATIONS_KEY, NPZ_TARGETS_KEY} - set(archive.files)
            if missing:
                raise KeyError(f"NPZ archive {path} is missing arrays: {sorted(missing)}")
            observations = linalg.as_matrix(archive[NPZ_OBSERVATIONS_KEY], "X")
            targets = linalg.as_vector(archive[NPZ_TARGETS_KEY], "y")
    else:
        table = np.genfromtxt(
            path, delimiter=delimiter, skip_header=skip_header, dtype=np.float64, ndmin=2
        )
        n_columns = linalg.num_columns(table)
        if n_columns < 2:
            raise DimensionMismatch(
                "Text data needs at least one feature column and one target column",
                expected=">= 2 columns",
                actual=n_columns,
            )
        if not -n_columns <= target_column < n_columns:
            raise InvalidConfiguration(
                f"Target column must be in [{-n_columns}, {n_columns - 1}] for {path}",
                parameter="target_column",
                value=target_column,
            )
        column = target_column % n_columns
        targets = table[:, column]
        observations = np.delete(table, column, axis=1)

    if linalg.num_rows(observations) != targets.shape[0]:
        raise DimensionMismatch(
            "Observation rows must match number of targets",
            expected=linalg.num_rows(observations),
            actual=targets.shape[0],
        )

    non_finite = ~np.isfinite(observations).all(axis=1) | ~np.isfinite(targets)
    if non_finite.any():
        rows = np.flatnonzero(non_finite)
        raise ValueError(
            f"Data file {path} has missing or non-numeric values in "
            f"{rows.shape[0]} row(s), first at data row {rows[0]}"
        )

    logger.info(
        f"Loaded {linalg.num_rows(observations)} observations with "
        f"{linalg.num_columns(observations)} features from {path}"
    )
    return observations, targets
