"""Data loading functionality"""
import json
from typing import Any, Dict, List

from quarter_ratio.exceptions import QuarterDataError


class QuarterLoader:
    """Handles loading of quarter data"""

    @staticmethod
    def load_json(filepath: str) -> Any:
        """Load JSON file"""
        try:
            with open(filepath, 'r') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise QuarterDataError(f"Quarter file not found: {filepath}") from e
        except json.JSONDecodeError as e:
            raise QuarterDataError(f"Quarter file is not valid JSON: {filepath} ({e})") from e

    @staticmethod
    def load_quarters(filepath: str) -> List[Dict[str, Any]]:
        """Load a list of quarter objects from a JSON file.

        Accepts either a bare list or an object with a "quarters" list.
        """
        data = QuarterLoader.load_json(filepath)
        if isinstance(data, dict):
            data = data.get('quarters')

        if not isinstance(data, list) or not all(isinstance(q, dict) for q in data):
            raise QuarterDataError(f"Expected a list of quarter objects in {filepath}")

        print(f"Loaded {len(data)} quarters")
        return data

    @staticmethod
    def empty_quarters(number_of_qtrs: int, value_key: str = 'value') -> List[Dict[str, Any]]:
        """Zero valued quarters, used when no quarter file is given"""
        return [{value_key: 0} for _ in range(number_of_qtrs)]
