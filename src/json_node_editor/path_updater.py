"""Copy-on-write replacement of a value inside a JSON document."""

import copy
import logging
from typing import Any, Optional, Sequence, Tuple
from .kind_detector import KindDetector
from .path_formatter import PathFormatter
from .types import JsonKind, Path, PathSegment, UpdateOutcome


def is_array_index(segment: PathSegment) -> bool:
    return isinstance(segment, int) and not isinstance(segment, bool)


def splice(container: Any, segment: PathSegment, value: Any) -> Any:
    """Return a shallow copy of ``container`` with one slot replaced."""
    result = copy.copy(container)
    result[segment] = value
    return result


class PathUpdater:
    """
    Replaces the value at a path and returns a new document.

    Only the containers on the way from the root to the target are copied,
    one level at a time; every other subtree of the result is the very
    same object as in the input document. Neither the input document nor
    any of its containers is modified.

    A path that does not fit the document (index out of range, a key where
    an index is expected or the reverse, a scalar where a container is
    expected, a missing key on the way down) leaves the document as it is.
    ``update`` absorbs that silently; ``apply`` reports it.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the path updater.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.formatter = PathFormatter()

    def update(self, document: Any, path: Path, new_value: Any) -> Any:
        """
        Replace the value at ``path``.

        Args:
            document: Document to update, left unmodified
            path: Location of the value to replace; empty for the root
            new_value: Replacement value

        Returns:
            The updated document, or an unchanged copy when the path does
            not fit the document
        """
        return self.apply(document, path, new_value).document

    def apply(self, document: Any, path: Path, new_value: Any) -> UpdateOutcome:
        """
        Replace the value at ``path`` and report whether it was written.

        Args:
            document: Document to update, left unmodified
            path: Location of the value to replace; empty for the root
            new_value: Replacement value

        Returns:
            UpdateOutcome with the new document, the applied flag and the
            reason the path was not applied
        """
        segments = list(path or [])
        result, reason = self._update_level(document, segments, 0, new_value)

        if reason is not None:
            self.logger.debug(f"Update at {self.formatter.format(segments)} not applied: {reason}")
            return UpdateOutcome(document=result, applied=False, reason=reason)

        return UpdateOutcome(document=result, applied=True)

    def _update_level(self, node: Any, path: Sequence[PathSegment], depth: int,
                      new_value: Any) -> Tuple[Any, Optional[str]]:
        if depth == len(path):
            return new_value, None

        segment = path[depth]
        is_target = depth == len(path) - 1
        location = self.formatter.format(path[:depth])
        kind = KindDetector.detect_kind(node)

        if kind is JsonKind.ARRAY:
            if not is_array_index(segment):
                return copy.copy(node), f"array at {location} cannot be addressed by key {segment!r}"
            if not 0 <= segment < len(node):
                return copy.copy(node), (f"index {segment} is out of range for array at "
                                         f"{location} of length {len(node)}")
        elif kind is JsonKind.OBJECT:
            if not isinstance(segment, str):
                return copy.copy(node), f"object at {location} cannot be addressed by index {segment!r}"
            if not is_target and segment not in node:
                return copy.copy(node), f"key {segment!r} is missing from object at {location}"
        else:
            return node, f"{kind.value} at {location} has no children"

        if is_target:
            return splice(node, segment, new_value), None

        child, reason = self._update_level(node[segment], path, depth + 1, new_value)
        return splice(node, segment, child), reason


def update_at_path(document: Any, path: Path, new_value: Any) -> Any:
    """Replace the value at a path with the default updater."""
    return PathUpdater().update(document, path, new_value)
