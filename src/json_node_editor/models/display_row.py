"""Display row model: one flattened field of a selected node."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from ..kind_detector import KindDetector
from ..types import RowType


@dataclass
class DisplayRow:
    """
    A single field of a node as the graph view shows it.

    Rows tagged ``array`` or ``object`` stand for nested structure that is
    displayed as separate nodes; they carry no inline value and are left
    out when the node is rendered as editable text.
    """

    key: Optional[str]
    value: Any
    type: RowType

    def __post_init__(self):
        """Validate row after initialization."""
        if isinstance(self.type, str):
            self.type = RowType(self.type)
        self._validate()

    def _validate(self) -> None:
        """Validate row integrity."""
        if not isinstance(self.type, RowType):
            raise ValueError(f"Invalid row type: {self.type}")

        if self.key is not None and not isinstance(self.key, str):
            raise ValueError("key must be a string or None")

        if KindDetector.is_container(self.value):
            raise ValueError("value must be a JSON primitive")

    def is_container(self) -> bool:
        """Check if this row stands for a nested array or object."""
        return self.type.is_container

    def has_key(self) -> bool:
        return bool(self.key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert row to dictionary for JSON serialization."""
        return {
            "key": self.key,
            "value": self.value,
            "type": self.type.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DisplayRow':
        """Create DisplayRow from dictionary."""
        return cls(
            key=data.get("key"),
            value=data.get("value"),
            type=RowType(data["type"])
        )

    @classmethod
    def for_value(cls, value: Any, key: Optional[str] = None) -> 'DisplayRow':
        """Create the row describing ``value``, optionally under ``key``."""
        row_type = KindDetector.detect_row_type(value)
        return cls(
            key=key,
            value=None if row_type.is_container else value,
            type=row_type
        )
