"""Node editor: render a selected node, and save edits back into the document."""

import logging
from typing import Any, Optional
from .types import (
    NodeEditorInterface,
    EditResult,
    EditError,
    ErrorType,
    Path,
    ValidationResult
)
from .models import NodeData
from .coercion import ValueCoercer
from .error_handler import ErrorHandler
from .parser import DocumentParser
from .path_formatter import PathFormatter
from .path_resolver import PathResolver
from .path_updater import PathUpdater
from .row_normalizer import RowNormalizer

SUCCESS_MESSAGE = "Node updated successfully"


class NodeEditor(NodeEditorInterface):
    """
    Main implementation of the node editor interface.

    Renders the node selected in the graph view as editable text and
    applies the edited text to the document at the node's path. The
    document passed in is never modified; every successful save returns a
    new document that shares all untouched subtrees with the old one.
    """

    def __init__(self, indent: int = 2,
                 ensure_ascii: bool = False,
                 strict_paths: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the node editor.

        Args:
            indent: Indentation of rendered nodes and serialized documents
            ensure_ascii: Escape non-ASCII characters in rendered JSON
            strict_paths: Report a path that does not fit the document as a
                failure instead of saving the document unchanged
            logger: Optional logger instance
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.strict_paths = strict_paths
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = DocumentParser(self.error_handler, indent, ensure_ascii, self.logger)
        self.normalizer = RowNormalizer(indent, ensure_ascii, self.logger)
        self.coercer = ValueCoercer(self.logger)
        self.updater = PathUpdater(self.logger)
        self.resolver = PathResolver()
        self.formatter = PathFormatter()

    def render(self, node: NodeData) -> str:
        """
        Render the editable text of a node.

        Args:
            node: Selected node

        Returns:
            Text to show in the editor

        Raises:
            EditError: If the node holds something other than display rows
        """
        validation = self.error_handler.validate_rows(node.rows)
        if not validation.is_valid:
            raise EditError(validation.errors[0].message, ErrorType.STRUCTURE)
        return self.normalizer.normalize(node.rows)

    def render_path(self, node: NodeData) -> str:
        """Render the display path of a node."""
        return self.formatter.format(node.path)

    def cancel(self, node: NodeData) -> str:
        """Discard pending edits and return the node's original text."""
        return self.render(node)

    def node_at(self, document: Any, path: Path) -> NodeData:
        """
        Describe the value at ``path`` as a selected node.

        Raises:
            EditError: If the path does not resolve in the document
        """
        value = self.resolver.get(document, path)
        return NodeData.from_value(value, list(path))

    def save(self, json_string: str, node: NodeData, edited_text: str) -> EditResult:
        """
        Apply edited text to the document at the node's path.

        Args:
            json_string: Current document as JSON text
            node: Node being edited
            edited_text: Text as edited by the user

        Returns:
            EditResult with the updated document, or the reported failure
        """
        path_validation = self.error_handler.validate_path(node.path)
        if not path_validation.is_valid:
            return self._validation_failure(path_validation, json_string)

        try:
            document = self.parser.parse(json_string)
        except EditError as e:
            return self._failure(e, json_string)

        return self._apply_edit(document, node.path, edited_text, json_string)

    def edit_document(self, document: Any, path: Optional[Path], edited_text: str) -> EditResult:
        """
        Apply edited text to an already parsed document.

        Args:
            document: Current document
            path: Location of the edited value, None if unknown
            edited_text: Text as edited by the user

        Returns:
            EditResult with the updated document, or the reported failure
        """
        original_json = self.parser.dumps(document)

        path_validation = self.error_handler.validate_path(path)
        if not path_validation.is_valid:
            return self._validation_failure(path_validation, original_json, document)

        return self._apply_edit(document, path, edited_text, original_json)

    def _apply_edit(self, document: Any, path: Path, edited_text: str,
                    original_json: str) -> EditResult:
        new_value = self.coercer.coerce(edited_text)
        outcome = self.updater.apply(document, path, new_value)
        location = self.formatter.format(path)

        if not outcome.applied:
            if self.strict_paths:
                error = EditError(
                    f"Cannot update {location}: {outcome.reason}",
                    ErrorType.INVALID_PATH,
                    context={"path": list(path)}
                )
                return self._failure(error, original_json, document)
            self.logger.warning(f"Edit at {location} left the document unchanged: {outcome.reason}")
        else:
            self.logger.info(f"Updated value at {location}")

        return EditResult(
            success=True,
            json_string=self.parser.dumps(outcome.document),
            document=outcome.document,
            message=SUCCESS_MESSAGE,
            applied=outcome.applied
        )

    def _validation_failure(self, validation: ValidationResult, json_string: str,
                            document: Any = None) -> EditResult:
        first_error = validation.errors[0]
        error = EditError(first_error.message, first_error.type,
                          context={"location": first_error.location})
        return self._failure(error, json_string, document)

    def _failure(self, error: EditError, json_string: str, document: Any = None) -> EditResult:
        response = self.error_handler.handle_edit_error(error)
        return EditResult(
            success=False,
            json_string=json_string,
            document=document,
            message=str(error),
            errors=[str(error)],
            error_type=error.error_type,
            suggested_action=response.suggested_action
        )
