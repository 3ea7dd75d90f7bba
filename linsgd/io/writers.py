"""Result writers for linsgd command-line runs."""

import json
from pathlib import Path
from typing import Any

from linsgd.io.json_utils import json_safe
from linsgd.utils.logging import get_logger

logger = get_logger(__name__)


def save_json(payload: dict[str, Any], output_file: str | Path) -> Path:
    """Write ``payload`` as indented JSON, creating parent directories.

    Parameters
    ----------
    payload : dict[str, Any]
        Data to write; numpy values and non-finite floats are converted by ``json_safe``
    output_file : str or Path
        Destination file

    Returns
    -------
    Path
        Path of the written file
    """
    output_path = Path(output_file)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(json_safe(payload), f, indent=2, allow_nan=False)
    except OSError as e:
        raise OSError(f"Failed to write JSON results to {output_path}: {e}") from e

    logger.info(f"Saved results to {output_path} ({output_path.stat().st_size / 1024:.1f} KB)")
    return output_path
