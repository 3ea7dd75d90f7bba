"""I/O operations for linsgd.

Dataset loading for the command line and JSON writers for fitted results.
"""

from linsgd.io.data_loader import load_dataset
from linsgd.io.json_utils import json_safe
from linsgd.io.writers import save_json

__all__ = [
    "load_dataset",
    "save_json",
    # JSON utility
    "json_safe",
]
