"""Node data model: the selected node handed over by the graph view."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from ..kind_detector import KindDetector
from ..types import JsonKind, PathSegment
from .display_row import DisplayRow


@dataclass
class NodeData:
    """
    A selected node described by its path and its display rows.

    ``path`` is None when the view could not associate a location with the
    node, which is distinct from the root path ``[]``.
    """

    path: Optional[List[PathSegment]]
    rows: List[DisplayRow] = field(default_factory=list)

    def __post_init__(self):
        """Validate node after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate node integrity."""
        if self.path is not None:
            if not isinstance(self.path, list):
                raise ValueError("path must be a list or None")
            for segment in self.path:
                if isinstance(segment, bool) or not isinstance(segment, (int, str)):
                    raise ValueError(f"Invalid path segment: {segment!r}")

        if not isinstance(self.rows, list):
            raise ValueError("rows must be a list")

    def has_path(self) -> bool:
        """Check if the node carries a path (the root path counts)."""
        return self.path is not None

    def scalar_rows(self) -> List[DisplayRow]:
        """Get rows that are rendered inline."""
        return [row for row in self.rows if not row.is_container()]

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary for JSON serialization."""
        return {
            "path": list(self.path) if self.path is not None else None,
            "rows": [row.to_dict() for row in self.rows]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NodeData':
        """Create NodeData from dictionary."""
        path = data.get("path")
        return cls(
            path=list(path) if path is not None else None,
            rows=[DisplayRow.from_dict(row) for row in data.get("rows", [])]
        )

    @classmethod
    def from_value(cls, value: Any, path: Optional[List[PathSegment]] = None) -> 'NodeData':
        """
        Describe a document value the way the graph view does.

        A scalar becomes a single row without key. An object becomes one
        row per key, with nested arrays and objects tagged but not inlined.
        An array becomes one key-less row per scalar element; nested
        containers are separate nodes and are skipped.

        Args:
            value: The value found at ``path`` in the document
            path: Location of the value, or None if unknown

        Returns:
            NodeData instance
        """
        kind = KindDetector.detect_kind(value)

        if kind is JsonKind.OBJECT:
            rows = [DisplayRow.for_value(child, key) for key, child in value.items()]
        elif kind is JsonKind.ARRAY:
            rows = [
                DisplayRow.for_value(item)
                for item in value
                if not KindDetector.is_container(item)
            ]
        else:
            rows = [DisplayRow.for_value(value)]

        return cls(path=list(path) if path is not None else None, rows=rows)
