"""JSON document parsing and serialization for the editor."""

import json
import logging
from typing import Any, Optional
from .types import EditError, ErrorType
from .error_handler import ErrorHandler


class DocumentParser:
    """
    Parses the whole current document and serializes updated documents.

    Parsing is delegated to the standard ``json`` module; this class only
    validates the input first and reports failures as ``EditError``.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 indent: int = 2, ensure_ascii: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the document parser.

        Args:
            error_handler: Optional ErrorHandler instance
            indent: Indentation of serialized documents
            ensure_ascii: Escape non-ASCII characters when serializing
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON document.

        Args:
            json_string: JSON string to parse

        Returns:
            The parsed document

        Raises:
            EditError: If the document is not valid JSON
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            first_error = validation_result.errors[0]
            raise EditError(
                f"Invalid JSON: {first_error.message}",
                ErrorType.MALFORMED_INPUT,
                context={"location": first_error.location}
            )

        for warning in validation_result.warnings:
            self.logger.warning(warning)

        document = json.loads(json_string)
        self.logger.debug(f"Parsed document of {len(json_string)} characters")
        return document

    def dumps(self, document: Any) -> str:
        """
        Serialize a document as indented JSON.

        Args:
            document: Document to serialize

        Returns:
            JSON string
        """
        return json.dumps(document, indent=self.indent, ensure_ascii=self.ensure_ascii)
