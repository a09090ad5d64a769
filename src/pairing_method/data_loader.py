"""Dataset loading for foods.json / wines.json."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pairing_method.config import FOODS_FILE, WINES_FILE
from pairing_method.error_handling import DataLoadError, DataValidationError
from pairing_method.utils import logger

PathLike = Union[str, Path]


def _read_json(path: Path, label: str) -> Any:
    """Read and parse one JSON file; any failure is a DataLoadError."""
    if not path.exists():
        logger.error(f"{label.capitalize()} file not found at {path}")
        raise DataLoadError(f"Could not load {label}.")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Error reading {label} from {path}: {e}")
        raise DataLoadError(f"Could not load {label}.") from e


def load_collection(path: PathLike, label: str) -> List[Dict[str, Any]]:
    """
    Load a JSON array of records.

    Args:
        path: Path to the JSON file
        label: Collection name used in messages ("foods", "wines")

    Returns:
        The records, in file order

    Raises:
        DataLoadError: If the file is missing or isn't valid JSON
        DataValidationError: If the payload isn't a JSON array
    """
    data = _read_json(Path(path), label)

    if not isinstance(data, list):
        logger.error(f"Expected a JSON array of {label}, got {type(data).__name__}")
        raise DataValidationError("Invalid data format.")

    logger.info(f"Loaded {len(data)} {label} from {path}")
    return data


def load_data(
    foods_path: Optional[PathLike] = None,
    wines_path: Optional[PathLike] = None
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Load foods and wines. Defaults come from config (PAIRING_DATA_DIR).

    Returns:
        (foods, wines)
    """
    foods = load_collection(foods_path or FOODS_FILE, "foods")
    wines = load_collection(wines_path or WINES_FILE, "wines")
    return foods, wines
