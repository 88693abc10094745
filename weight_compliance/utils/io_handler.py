"""Input/Output handling utilities.

This module handles file I/O operations including:
- Reading weight record JSON files
- Writing compliance results to JSON and CSV
- Finding input files in a directory
"""

import json
import csv
import logging
from enum import Enum
from pathlib import Path
from typing import List, Dict, Any, Optional
from decimal import Decimal

logger = logging.getLogger(__name__)


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return float(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class IOHandler:
    """
    Handles all file I/O operations for the compliance CLI.
    """

    def __init__(self):
        """Initialize IO handler."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def read_records(self, file_path: Path) -> List[Dict[str, Any]]:
        """
        Read weight records from a JSON file.

        The file holds either a list of record objects, a single record
        object, or an object with a "records" list.

        Args:
            file_path: Path to JSON file

        Returns:
            List of raw record dictionaries

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If JSON is invalid or holds no records
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")

        if isinstance(data, dict):
            data = data.get('records', [data])

        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise ValueError(f"Expected a list of record objects in {file_path}")

        self.logger.info(f"Loaded {len(data)} records from {file_path}")
        return data

    def write_json(
        self,
        data: List[Dict[str, Any]],
        output_path: Path,
        indent: int = 2
    ):
        """
        Write data to JSON file.

        Args:
            data: List of dictionaries to write
            output_path: Output file path
            indent: JSON indentation (default: 2)
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=indent, default=_to_jsonable)

        self.logger.info(f"Wrote {len(data)} records to {output_path}")

    def write_csv(
        self,
        data: List[Dict[str, Any]],
        output_path: Path,
        fieldnames: Optional[List[str]] = None
    ):
        """
        Write data to CSV file.

        Args:
            data: List of flat dictionaries to write
            output_path: Output file path
            fieldnames: List of field names (if None, the union of all record keys)
        """
        if not data:
            self.logger.warning("No data to write to CSV")
            return

        output_path.parent.mkdir(parents=True, exist_ok=True)

        if fieldnames is None:
            fieldnames = []
            for record in data:
                fieldnames.extend(k for k in record if k not in fieldnames)

        def convert_value(val):
            if isinstance(val, Enum):
                return val.value
            if isinstance(val, Decimal):
                return float(val)
            if val is None:
                return ''
            return val

        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for record in data:
                writer.writerow({k: convert_value(v) for k, v in record.items()})

        self.logger.info(f"Wrote {len(data)} records to {output_path}")

    def read_batch(self, input_dir: Path, pattern: str = "*.json") -> List[Path]:
        """
        Find all files matching pattern in directory.

        Args:
            input_dir: Input directory path
            pattern: File pattern (default: *.json)

        Returns:
            Sorted list of file paths
        """
        if not input_dir.exists():
            raise FileNotFoundError(f"Directory not found: {input_dir}")

        files = sorted(input_dir.glob(pattern))
        self.logger.info(f"Found {len(files)} files matching '{pattern}' in {input_dir}")

        return files
