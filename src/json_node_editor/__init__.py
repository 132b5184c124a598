"""
JSON Node Editor - Path-addressed editing of JSON documents.

Renders the node selected in a document view as editable text, coerces
edited text back into typed JSON values and writes them into a new copy
of the document that shares every untouched subtree with the original.
"""

__version__ = "1.0.0"

from .node_editor import NodeEditor
from .models import DisplayRow, NodeData
from .types import EditResult, EditError, ErrorType, UpdateOutcome
from .coercion import ValueCoercer, coerce_value
from .path_formatter import PathFormatter, format_path
from .path_resolver import PathResolver, get_at_path
from .path_updater import PathUpdater, update_at_path
from .row_normalizer import RowNormalizer, normalize_rows

__all__ = [
    "NodeEditor",
    "DisplayRow",
    "NodeData",
    "EditResult",
    "EditError",
    "ErrorType",
    "UpdateOutcome",
    "ValueCoercer",
    "coerce_value",
    "PathFormatter",
    "format_path",
    "PathResolver",
    "get_at_path",
    "PathUpdater",
    "update_at_path",
    "RowNormalizer",
    "normalize_rows",
]
