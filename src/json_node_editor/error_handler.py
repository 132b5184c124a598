"""Error handling implementation for the JSON Node Editor."""

import logging
from typing import List, Optional, Sequence, Any
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    EditError,
    ErrorType
)
from .models import DisplayRow
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for node editing operations.

    Validates the inputs of an edit and turns edit errors into responses
    the caller can show to the user. Every edit error is recoverable: the
    user can correct the text or the selection and save again.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate the JSON text of the current document.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except RecursionError as e:
            self.logger.error(f"Document nesting exceeds parser limits: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message="Document is nested too deeply to be parsed",
                    location="input"
                )],
                warnings=[]
            )

    def validate_path(self, path: Optional[Sequence[Any]]) -> ValidationResult:
        """Validate the path of the node being saved."""
        return ValidationUtils.validate_path(path)

    def validate_rows(self, rows: List[DisplayRow]) -> ValidationResult:
        """Validate the display rows of the node being rendered."""
        result = ValidationUtils.validate_rows(rows)
        for warning in result.warnings:
            self.logger.debug(warning)
        return result

    def handle_edit_error(self, error: EditError) -> ErrorResponse:
        """
        Handle edit errors and provide recovery suggestions.

        Args:
            error: EditError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Edit error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.MISSING_PATH:
            return self._handle_missing_path_error(error)
        elif error.error_type in (ErrorType.MALFORMED_INPUT, ErrorType.SYNTAX):
            return self._handle_malformed_input_error(error)
        elif error.error_type == ErrorType.INVALID_PATH:
            return self._handle_invalid_path_error(error)
        else:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check the edited value and save again.",
                partial_results=None
            )

    def _handle_missing_path_error(self, error: EditError) -> ErrorResponse:
        """Handle a save attempted on a node without a path."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Select the node again in the graph so its path is known, then save.",
            partial_results=None
        )

    def _handle_malformed_input_error(self, error: EditError) -> ErrorResponse:
        """Handle a document that could not be parsed."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Fix the JSON syntax of the document in the text editor, then save again.",
            partial_results=error.context.get('location') if error.context else None
        )

    def _handle_invalid_path_error(self, error: EditError) -> ErrorResponse:
        """Handle a path that does not fit the document."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="The document changed since the node was selected. "
                             "Select the node again and repeat the edit.",
            partial_results=error.context.get('path') if error.context else None
        )

    @staticmethod
    def error_messages(result: ValidationResult) -> List[str]:
        """Get the messages of all errors in a validation result."""
        return [error.message for error in result.errors]
