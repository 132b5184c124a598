"""Core type definitions for the JSON Node Editor."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union


# JSON values as produced by the standard ``json`` module
JsonPrimitive = Union[None, bool, int, float, str]
JsonValue = Union[JsonPrimitive, List["JsonValue"], Dict[str, "JsonValue"]]

PathSegment = Union[int, str]
Path = Sequence[PathSegment]


class JsonKind(Enum):
    """Closed classification of a JSON value."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (JsonKind.ARRAY, JsonKind.OBJECT)


class RowType(Enum):
    """Type tag carried by a display row."""
    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    @property
    def is_container(self) -> bool:
        return self in (RowType.ARRAY, RowType.OBJECT)


class ErrorType(Enum):
    """Enumeration of error types."""
    MISSING_PATH = "missing_path"
    MALFORMED_INPUT = "malformed_input"
    INVALID_PATH = "invalid_path"
    SYNTAX = "syntax"
    STRUCTURE = "structure"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


@dataclass
class UpdateOutcome:
    """Result of a checked path update."""
    document: Any
    applied: bool
    reason: Optional[str] = None


@dataclass
class EditResult:
    """Result of saving an edited node."""
    success: bool
    json_string: str
    document: Any = None
    message: Optional[str] = None
    errors: Optional[List[str]] = None
    error_type: Optional[ErrorType] = None
    suggested_action: Optional[str] = None
    applied: bool = False


class EditError(Exception):
    """Custom exception for edit errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class NodeEditorInterface(ABC):
    """Abstract interface for the node editor."""

    @abstractmethod
    def render(self, node: "NodeData") -> str:
        """Render the editable text of a node."""
        pass

    @abstractmethod
    def save(self, json_string: str, node: "NodeData", edited_text: str) -> EditResult:
        """Apply edited text to the document at the node's path."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_edit_error(self, error: EditError) -> ErrorResponse:
        """Handle edit errors."""
        pass
