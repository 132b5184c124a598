"""Display formatting for document paths."""

from typing import Optional

from .types import Path, PathSegment

ROOT_SYMBOL = "$"


class PathFormatter:
    """Renders a path as ``$["key"][0]`` for read-only display."""

    def format(self, path: Optional[Path]) -> str:
        """
        Format a path for display.

        Args:
            path: Sequence of array indices and object keys, or None

        Returns:
            ``$`` for the root, otherwise ``$`` followed by one bracketed
            segment per path element
        """
        if not path:
            return ROOT_SYMBOL
        return ROOT_SYMBOL + "".join(self.format_segment(segment) for segment in path)

    @staticmethod
    def format_segment(segment: PathSegment) -> str:
        if isinstance(segment, int) and not isinstance(segment, bool):
            return f"[{segment}]"
        return f'["{segment}"]'


def format_path(path: Optional[Path]) -> str:
    """Format a path with the default formatter."""
    return PathFormatter().format(path)
