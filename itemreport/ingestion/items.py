"""Line item file loading for the ItemReport CLI.

Values are passed through as parsed; nothing is validated beyond the file
holding a list of records.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import pandas as pd
import yaml
from pydantic import ValidationError

from itemreport.exceptions import ItemsFileError
from itemreport.models import LineItem

MAX_FILE_SIZE_MB = 50


def load_items(file_path: Path) -> list[LineItem]:
    """Load line items from a JSON, YAML, or CSV file.

    JSON and YAML files must hold a list of objects. CSV files need a header
    row; ``id``, ``name``, ``value`` and ``priority`` columns are picked up and
    extra columns are kept on the item.

    Raises:
        ItemsFileError: If the file is missing, too large, unparsable, or of the wrong shape
    """
    if not file_path.exists():
        raise ItemsFileError(f"Items file not found: {file_path}")

    file_size_mb = file_path.stat().st_size / (1024 * 1024)
    if file_size_mb > MAX_FILE_SIZE_MB:
        raise ItemsFileError(
            f"File too large ({file_size_mb:.1f}MB). Maximum allowed: {MAX_FILE_SIZE_MB}MB"
        )

    suffix = file_path.suffix.lower()
    if suffix == ".json":
        records = _read_json(file_path)
    elif suffix in (".yaml", ".yml"):
        records = _read_yaml(file_path)
    elif suffix == ".csv":
        records = _read_csv(file_path)
    else:
        raise ItemsFileError(f"Unsupported file format: {suffix}. Use JSON, YAML, or CSV.")

    if not isinstance(records, list):
        raise ItemsFileError(f"{file_path.name}: expected a list of items")

    items = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ItemsFileError(f"{file_path.name}: item {index} is not an object")
        try:
            items.append(LineItem(**{str(k): v for k, v in record.items()}))
        except ValidationError as e:
            raise ItemsFileError(f"{file_path.name}: item {index} is invalid: {e}") from e
    return items


def _read_json(file_path: Path) -> Any:
    try:
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ItemsFileError(f"Invalid JSON in {file_path.name}: {e}") from e


def _read_yaml(file_path: Path) -> Any:
    try:
        with open(file_path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ItemsFileError(f"Invalid YAML in {file_path.name}: {e}") from e


def _read_csv(file_path: Path) -> list[dict[str, Any]]:
    try:
        df = pd.read_csv(file_path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ItemsFileError(f"Invalid CSV in {file_path.name}: {e}") from e

    records = []
    for row in df.to_dict(orient="records"):
        records.append({key: _clean_cell(value) for key, value in row.items()})
    return records


def _clean_cell(value: Any) -> Any:
    # pandas hands back numpy scalars and NaN for empty cells
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
