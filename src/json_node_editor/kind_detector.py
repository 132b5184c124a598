"""Classification of JSON values into their closed set of kinds."""

from typing import Any

from .types import JsonKind, RowType


class KindDetector:
    """
    Classifies values produced by the standard ``json`` module.

    Every recursive operation on a document matches on the kind returned
    here instead of probing the value with ad-hoc ``isinstance`` chains.
    """

    @staticmethod
    def detect_kind(value: Any) -> JsonKind:
        """
        Detect the kind of a single JSON value.

        Args:
            value: Value to classify

        Returns:
            JsonKind of the value

        Raises:
            TypeError: If the value is not a JSON value
        """
        if value is None:
            return JsonKind.NULL
        # bool is a subclass of int
        if isinstance(value, bool):
            return JsonKind.BOOLEAN
        if isinstance(value, (int, float)):
            return JsonKind.NUMBER
        if isinstance(value, str):
            return JsonKind.STRING
        if isinstance(value, list):
            return JsonKind.ARRAY
        if isinstance(value, dict):
            return JsonKind.OBJECT
        raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")

    @staticmethod
    def detect_row_type(value: Any) -> RowType:
        """Map a value to the type tag used by display rows."""
        return RowType(KindDetector.detect_kind(value).value)

    @staticmethod
    def is_container(value: Any) -> bool:
        return KindDetector.detect_kind(value).is_container
