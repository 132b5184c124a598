"""Editable text rendering of a node's display rows."""

import json
import logging
from typing import Any, Dict, Optional, Sequence
from .models import DisplayRow

EMPTY_NODE_TEXT = "{}"


class RowNormalizer:
    """
    Turns the display rows of a node back into text a user can edit.

    A bare scalar node is rendered without JSON quoting so that editing it
    does not require dealing with surrounding quotes. Any other node is
    rendered as a pretty-printed object of its scalar fields.
    """

    def __init__(self, indent: int = 2, ensure_ascii: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the row normalizer.

        Args:
            indent: Indentation used for object rendering
            ensure_ascii: Escape non-ASCII characters in object rendering
            logger: Optional logger instance
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.logger = logger or logging.getLogger(__name__)

    def normalize(self, rows: Optional[Sequence[DisplayRow]]) -> str:
        """
        Render display rows as editable text.

        Args:
            rows: Display rows of the selected node

        Returns:
            Plain text of a bare scalar, ``{}`` for no rows, otherwise the
            scalar fields as indented JSON
        """
        if not rows:
            return EMPTY_NODE_TEXT

        if len(rows) == 1 and not rows[0].has_key():
            return self.plain_text(rows[0].value)

        fields: Dict[str, Any] = {}
        for row in rows:
            if row.is_container() or not row.has_key():
                continue
            fields[row.key] = row.value

        self.logger.debug(f"Normalized {len(fields)} of {len(rows)} rows")
        return json.dumps(fields, indent=self.indent, ensure_ascii=self.ensure_ascii)

    @staticmethod
    def plain_text(value: Any) -> str:
        """Render a scalar as it reads in JSON, without quoting strings."""
        if isinstance(value, str):
            return value
        return json.dumps(value)


def normalize_rows(rows: Optional[Sequence[DisplayRow]]) -> str:
    """Render display rows with the default normalizer."""
    return RowNormalizer().normalize(rows)
