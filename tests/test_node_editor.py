"""Integration tests for the node editor."""

import copy
import json
import logging
import pytest
from json_node_editor import NodeEditor, NodeData
from json_node_editor.models import DisplayRow
from json_node_editor.types import EditError, ErrorType


class TestNodeEditor:
    """Integration tests for the render and save flow."""

    def setup_method(self):
        """Set up test fixtures."""
        self.editor = NodeEditor()

    def test_render_object_node(self, sample_document):
        """Test rendering a node with scalar and nested fields."""
        node = self.editor.node_at(sample_document, ["customer"])

        text = self.editor.render(node)

        assert json.loads(text) == {"name": "Alice", "email": "alice@example.com", "vip": True}
        assert text.startswith('{\n  "name"')

    def test_render_scalar_node(self, sample_document):
        """Test rendering a bare string node without quotes."""
        node = self.editor.node_at(sample_document, ["customer", "name"])

        assert self.editor.render(node) == "Alice"
        assert self.editor.render_path(node) == '$["customer"]["name"]'

    def test_render_path_without_path(self):
        """Test that a node without path is shown at the root."""
        assert self.editor.render_path(NodeData(path=None)) == "$"

    def test_cancel_restores_original_text(self, sample_document):
        """Test that cancelling returns the unedited text."""
        node = self.editor.node_at(sample_document, ["items", 0])

        assert self.editor.cancel(node) == self.editor.render(node)

    def test_save_array_element(self):
        """Test the items scenario through the full save flow."""
        json_string = '{"items": [1, 2, 3]}'

        result = self.editor.save(json_string, NodeData(path=["items", 1]), "99")

        assert result.success
        assert result.applied
        assert result.document == {"items": [1, 99, 3]}
        assert result.json_string == json.dumps({"items": [1, 99, 3]}, indent=2)
        assert result.message == "Node updated successfully"
        assert result.errors is None

    def test_save_bare_string(self, sample_document):
        """Test saving unquoted text as a string."""
        result = self.editor.save(
            json.dumps(sample_document),
            NodeData(path=["customer", "name"]),
            "Alice Smith"
        )

        assert result.success
        assert result.document["customer"]["name"] == "Alice Smith"

    def test_save_quoted_number_as_string(self, sample_document):
        """Test that quoting keeps a numeric value a string."""
        result = self.editor.save(
            json.dumps(sample_document),
            NodeData(path=["customer", "address", "zip"]),
            '"02134"'
        )

        assert result.document["customer"]["address"]["zip"] == "02134"

    def test_bare_numeric_string_is_saved_as_number(self):
        """Test that re-saving the rendering of a numeric string yields a number."""
        document = {"zip": "10001"}
        node = self.editor.node_at(document, ["zip"])

        result = self.editor.edit_document(document, node.path, self.editor.render(node))

        assert result.document == {"zip": 10001}

    def test_save_object_text_replaces_node(self, sample_document):
        """Test that saving an object node replaces the whole object."""
        result = self.editor.save(
            json.dumps(sample_document),
            NodeData(path=["customer"]),
            '{\n  "name": "Bob",\n  "vip": false\n}'
        )

        assert result.document["customer"] == {"name": "Bob", "vip": False}
        assert result.document["items"] == sample_document["items"]

    def test_save_root(self):
        """Test replacing the whole document."""
        result = self.editor.save('{"x": 1}', NodeData(path=[]), "42")

        assert result.success
        assert result.document == 42
        assert result.json_string == "42"

    def test_save_missing_path(self):
        """Test that a node without path is not saved."""
        json_string = '{"x": 1}'

        result = self.editor.save(json_string, NodeData(path=None), "2")

        assert not result.success
        assert result.error_type == ErrorType.MISSING_PATH
        assert result.errors == ["Cannot update: node path is missing"]
        assert result.json_string == json_string
        assert result.suggested_action

    def test_save_malformed_document(self):
        """Test that an unparsable document is reported with the parser message."""
        result = self.editor.save('{"x": ', NodeData(path=["x"]), "2")

        assert not result.success
        assert result.error_type == ErrorType.MALFORMED_INPUT
        assert result.errors[0].startswith("Invalid JSON: ")
        assert "line 1" in result.errors[0]

    def test_save_out_of_range_is_silent(self, caplog):
        """Test that a path that does not fit leaves the document unchanged."""
        with caplog.at_level(logging.WARNING):
            result = self.editor.save('{"a": [1, 2]}', NodeData(path=["a", 5]), "7")

        assert result.success
        assert not result.applied
        assert result.document == {"a": [1, 2]}
        assert "left the document unchanged" in caplog.text

    def test_strict_paths_report_failure(self):
        """Test that strict mode turns an unapplied update into a failure."""
        editor = NodeEditor(strict_paths=True)

        result = editor.save('{"a": [1, 2]}', NodeData(path=["a", 5]), "7")

        assert not result.success
        assert result.error_type == ErrorType.INVALID_PATH
        assert "out of range" in result.errors[0]
        assert result.json_string == '{"a": [1, 2]}'

    def test_edit_document_does_not_mutate(self, sample_document):
        """Test that editing a parsed document leaves it untouched."""
        snapshot = copy.deepcopy(sample_document)

        result = self.editor.edit_document(sample_document, ["items", 2, "price"], "15.25")

        assert result.success
        assert result.document["items"][2]["price"] == 15.25
        assert sample_document == snapshot
        assert result.document["customer"] is sample_document["customer"]

    def test_edit_document_missing_path(self, sample_document):
        """Test that editing without a path is reported."""
        result = self.editor.edit_document(sample_document, None, "x")

        assert not result.success
        assert result.error_type == ErrorType.MISSING_PATH
        assert result.document is sample_document

    def test_edit_document_invalid_segment(self, sample_document):
        """Test that a malformed path is reported before any update."""
        result = self.editor.edit_document(sample_document, ["items", -1], "x")

        assert not result.success
        assert result.error_type == ErrorType.INVALID_PATH

    def test_custom_indent(self):
        """Test that the configured indentation is used for output."""
        editor = NodeEditor(indent=4)

        result = editor.save('{"a": 1}', NodeData(path=["a"]), "2")

        assert result.json_string == '{\n    "a": 2\n}'

    def test_render_then_save_unchanged_text(self, sample_document):
        """Test that saving the rendered text of a scalar keeps the document."""
        for path in (["customer", "name"], ["customer", "vip"], ["items", 1, "price"], ["note"]):
            node = self.editor.node_at(sample_document, path)

            result = self.editor.edit_document(sample_document, path, self.editor.render(node))

            assert result.document == sample_document

    def test_render_rejects_rows_that_are_not_display_rows(self):
        """Test that rendering reports a malformed row instead of crashing."""
        node = NodeData(path=[], rows=[DisplayRow("name", "Alice", "string"), {"key": "vip"}])

        with pytest.raises(EditError) as exc_info:
            self.editor.render(node)

        assert exc_info.value.error_type == ErrorType.STRUCTURE
        assert "row must be a DisplayRow, got dict" in str(exc_info.value).lower()
