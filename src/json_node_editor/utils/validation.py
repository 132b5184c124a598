"""Validation utilities for documents, paths and display rows."""

import json
from collections import abc
from typing import Any, List, Optional, Sequence
from ..models import DisplayRow
from ..types import ValidationResult, ValidationError, ErrorType

MAX_NESTING_DEPTH_WARNING = 20


class ValidationUtils:
    """Utility class for validating editor inputs."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON document syntax.

        Any JSON value is accepted as the root of a document.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"{e.msg} at line {e.lineno}, column {e.colno}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > MAX_NESTING_DEPTH_WARNING:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). This may impact performance.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        max_child_depth = current_depth
        children = data.values() if isinstance(data, dict) else data

        for child in children:
            child_depth = ValidationUtils._calculate_max_depth(child, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

    @staticmethod
    def validate_path(path: Optional[Sequence[Any]]) -> ValidationResult:
        """
        Validate a path independently of any document.

        Args:
            path: Path to validate, None when the node has no path

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if path is None:
            errors.append(ValidationError(
                type=ErrorType.MISSING_PATH,
                message="Cannot update: node path is missing",
                location="path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if isinstance(path, (str, bytes)) or not isinstance(path, abc.Sequence):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Path must be a sequence of segments, got {type(path).__name__}",
                location="path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        for position, segment in enumerate(path):
            if isinstance(segment, bool) or not isinstance(segment, (int, str)):
                errors.append(ValidationError(
                    type=ErrorType.INVALID_PATH,
                    message=f"Path segment {segment!r} must be an array index or an object key",
                    location=f"segment {position}"
                ))
            elif isinstance(segment, int) and segment < 0:
                errors.append(ValidationError(
                    type=ErrorType.INVALID_PATH,
                    message=f"Array index {segment} must be non-negative",
                    location=f"segment {position}"
                ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_rows(rows: List[DisplayRow]) -> ValidationResult:
        """
        Validate the display rows of a node.

        Args:
            rows: Rows to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        seen_keys = set()

        for position, row in enumerate(rows):
            if not isinstance(row, DisplayRow):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Row must be a DisplayRow, got {type(row).__name__}",
                    location=f"row {position}"
                ))
                continue

            if row.has_key():
                if row.key in seen_keys:
                    warnings.append(f"Duplicate key '{row.key}': the last row wins")
                seen_keys.add(row.key)
            elif len(rows) > 1:
                warnings.append(f"Row {position} has no key and is not rendered")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
