"""Coercion of free-form edited text into typed JSON values."""

import json
import logging
import math
import re
from typing import Any, Callable, List, Optional, Tuple

# Returned by a parse attempt that does not apply to the text
UNMATCHED = object()

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INT_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

Attempt = Callable[[str], Any]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON literal")


def _finite_float(literal: str) -> float:
    number = float(literal)
    if not math.isfinite(number):
        raise ValueError(f"{literal} is out of range")
    return number


class ValueCoercer:
    """
    Parses edited text into a JSON value and never fails.

    Interpretations are tried in a fixed order and the first one that
    applies wins:

    1. the text as a complete JSON document;
    2. on the trimmed text: a quoted JSON string literal, ``null``,
       ``true``/``false``, a finite number, and finally the text verbatim
       as a string.

    Reordering the attempts changes which value a given text produces.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the value coercer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.strict_attempts: List[Tuple[str, Attempt]] = [
            ("json", self.parse_json),
        ]
        self.lenient_attempts: List[Tuple[str, Attempt]] = [
            ("quoted string", self.parse_quoted_string),
            ("null", self.parse_null),
            ("boolean", self.parse_boolean),
            ("number", self.parse_number),
        ]

    def coerce(self, text: str) -> Any:
        """
        Coerce edited text into a JSON value.

        Args:
            text: Text as typed by the user

        Returns:
            The parsed JSON value, or the trimmed text as a string when no
            other interpretation applies
        """
        for name, attempt in self.strict_attempts:
            value = attempt(text)
            if value is not UNMATCHED:
                self.logger.debug(f"Coerced edited text as {name}")
                return value

        trimmed = text.strip()
        for name, attempt in self.lenient_attempts:
            value = attempt(trimmed)
            if value is not UNMATCHED:
                self.logger.debug(f"Coerced trimmed text as {name}")
                return value

        self.logger.debug("Coerced trimmed text as unquoted string")
        return trimmed

    @staticmethod
    def parse_json(text: str) -> Any:
        """Parse text as a standard JSON document."""
        try:
            return json.loads(text, parse_float=_finite_float,
                              parse_constant=_reject_constant)
        except ValueError:
            return UNMATCHED

    @staticmethod
    def parse_quoted_string(text: str) -> Any:
        """Parse a double-quoted literal, tolerating raw control characters."""
        if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
            return UNMATCHED
        try:
            value = json.loads(text, strict=False)
        except ValueError:
            return UNMATCHED
        return value if isinstance(value, str) else UNMATCHED

    @staticmethod
    def parse_null(text: str) -> Any:
        return None if text == "null" else UNMATCHED

    @staticmethod
    def parse_boolean(text: str) -> Any:
        if text == "true":
            return True
        if text == "false":
            return False
        return UNMATCHED

    @staticmethod
    def parse_number(text: str) -> Any:
        """
        Parse a numeric literal that is not valid JSON on its own.

        Accepts a leading ``+``, leading zeros, a leading or trailing dot,
        and unsigned hexadecimal, octal and binary integers. Literals
        without a fraction or exponent become ``int``; non-finite results
        are rejected.
        """
        if _PREFIXED_INT_PATTERN.fullmatch(text):
            return int(text, 0)

        if not _DECIMAL_PATTERN.fullmatch(text):
            return UNMATCHED

        if "." not in text and "e" not in text.lower():
            # int() refuses digit strings past sys.get_int_max_str_digits()
            try:
                return int(text)
            except ValueError:
                return UNMATCHED

        number = float(text)
        if not math.isfinite(number):
            return UNMATCHED
        return number


def coerce_value(text: str) -> Any:
    """Coerce edited text with the default coercer."""
    return ValueCoercer().coerce(text)
