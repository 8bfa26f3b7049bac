"""Quarter model"""
from typing import Any, Dict

from quarter_ratio.utils import as_number


class Quarter:
    """Read-only view over a raw quarter record"""

    def __init__(self, data: Dict[str, Any], value_key: str = 'value', position: int = 0):
        self.value_key = value_key
        self.position = position
        self.label: str = str(data.get('label') or data.get('name') or f'Q{position + 1}')
        self._raw_data = data

    @property
    def raw_value(self) -> Any:
        return self._raw_data.get(self.value_key)

    @property
    def value(self) -> float:
        """Numeric value, 0 when the record holds nothing usable"""
        number = as_number(self.raw_value)
        return 0 if number is None else number

    @property
    def is_active(self) -> bool:
        """Check if this quarter can take a remainder adjustment"""
        return self.value >= 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return self._raw_data.copy()

    def __repr__(self) -> str:
        return f"Quarter({self.label}, {self.raw_value!r})"
