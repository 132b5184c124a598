"""Lookup of the value found at a path in a JSON document."""

from typing import Any
from .kind_detector import KindDetector
from .path_formatter import PathFormatter
from .path_updater import is_array_index
from .types import EditError, ErrorType, JsonKind, Path


class PathResolver:
    """Reads values out of a document without modifying it."""

    def __init__(self):
        self.formatter = PathFormatter()

    def get(self, document: Any, path: Path) -> Any:
        """
        Get the value at ``path``.

        Args:
            document: Document to read from
            path: Location of the value; empty for the root

        Returns:
            The value at the path (the same object, not a copy)

        Raises:
            EditError: If the path does not resolve in the document
        """
        node = document
        segments = list(path or [])

        for depth, segment in enumerate(segments):
            kind = KindDetector.detect_kind(node)
            prefix = segments[:depth + 1]

            if kind is JsonKind.ARRAY and is_array_index(segment) and 0 <= segment < len(node):
                node = node[segment]
            elif kind is JsonKind.OBJECT and isinstance(segment, str) and segment in node:
                node = node[segment]
            else:
                raise EditError(
                    f"Path {self.formatter.format(prefix)} does not exist in the document",
                    ErrorType.INVALID_PATH,
                    context={"path": segments, "depth": depth}
                )

        return node

    def exists(self, document: Any, path: Path) -> bool:
        """Check if ``path`` resolves in the document."""
        try:
            self.get(document, path)
        except EditError:
            return False
        return True


def get_at_path(document: Any, path: Path) -> Any:
    """Get the value at a path with the default resolver."""
    return PathResolver().get(document, path)
