"""Tests for the command-line interface."""

import json
from click.testing import CliRunner
from json_node_editor.cli import main


class TestCli:
    """Tests for the json-node-editor commands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_version(self):
        """Test the version option."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_path_command(self):
        """Test formatting a path."""
        result = self.runner.invoke(main, ["path", '["customer", 0]'])

        assert result.exit_code == 0
        assert result.output == '$["customer"][0]\n'

    def test_path_command_root(self):
        """Test formatting the root path."""
        result = self.runner.invoke(main, ["path", "[]"])

        assert result.output == "$\n"

    def test_path_command_rejects_invalid_json(self):
        """Test that a path must be a JSON array."""
        assert self.runner.invoke(main, ["path", "customer"]).exit_code == 2
        assert self.runner.invoke(main, ["path", '{"a": 1}']).exit_code == 2
        assert self.runner.invoke(main, ["path", "[-1]"]).exit_code == 2

    def test_show_object_node(self, sample_document_file):
        """Test showing the editable text of an object node."""
        result = self.runner.invoke(main, ["show", str(sample_document_file), "--path", '["customer"]'])

        assert result.exit_code == 0
        assert 'JSON Path: $["customer"]' in result.output
        assert '"name": "Alice"' in result.output
        assert "address" not in result.output

    def test_show_scalar_node(self, sample_document_file):
        """Test showing a bare scalar node."""
        result = self.runner.invoke(main, ["show", str(sample_document_file), "-p", '["items", 0, "sku"]'])

        assert result.exit_code == 0
        assert result.output.splitlines() == ['JSON Path: $["items"][0]["sku"]', "A-100"]

    def test_show_missing_node(self, sample_document_file):
        """Test showing a path that does not exist."""
        result = self.runner.invoke(main, ["show", str(sample_document_file), "-p", '["items", 9]'])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_set_to_stdout(self, sample_document_file, sample_document):
        """Test writing the updated document to stdout."""
        result = self.runner.invoke(main, [
            "set", str(sample_document_file), "--path", '["items", 1, "quantity"]', "--value", "4"
        ])

        assert result.exit_code == 0
        expected = json.loads(json.dumps(sample_document))
        expected["items"][1]["quantity"] = 4
        assert json.loads(result.output) == expected

    def test_set_to_file(self, sample_document_file, temp_dir):
        """Test writing the updated document to a file."""
        output_file = temp_dir / "updated.json"

        result = self.runner.invoke(main, [
            "set", str(sample_document_file), "-p", '["customer", "name"]',
            "--value", "Bob", "-o", str(output_file)
        ])

        assert result.exit_code == 0
        assert "Node updated successfully" in result.output
        assert json.loads(output_file.read_text(encoding="utf-8"))["customer"]["name"] == "Bob"

    def test_set_unfit_path_leaves_document(self, sample_document_file, sample_document, temp_dir):
        """Test that a path that does not fit writes the document unchanged."""
        output_file = temp_dir / "updated.json"

        result = self.runner.invoke(main, [
            "set", str(sample_document_file), "-p", '["items", 9]',
            "--value", "1", "-o", str(output_file)
        ])

        assert result.exit_code == 0
        assert json.loads(output_file.read_text(encoding="utf-8")) == sample_document

    def test_set_strict_fails(self, sample_document_file):
        """Test that strict mode fails on a path that does not fit."""
        result = self.runner.invoke(main, [
            "set", str(sample_document_file), "-p", '["items", 9]', "--value", "1", "--strict"
        ])

        assert result.exit_code == 1
        assert "Update failed" in result.output

    def test_set_malformed_document(self, temp_dir):
        """Test that a broken input document is reported."""
        broken_file = temp_dir / "broken.json"
        broken_file.write_text('{"a": ', encoding="utf-8")

        result = self.runner.invoke(main, ["set", str(broken_file), "-p", '["a"]', "--value", "1"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_show_undecodable_file(self, temp_dir):
        """Test that a file that is not UTF-8 is reported, not raised."""
        latin_file = temp_dir / "latin.json"
        latin_file.write_bytes(b'{"name": "Jos\xe9"}')

        result = self.runner.invoke(main, ["show", str(latin_file)])

        assert result.exit_code == 1
        assert "❌ Error:" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_set_undecodable_file(self, temp_dir):
        """Test that set reports a file that is not UTF-8."""
        latin_file = temp_dir / "latin.json"
        latin_file.write_bytes(b'{"name": "Jos\xe9"}')

        result = self.runner.invoke(main, ["set", str(latin_file), "-p", '["name"]', "--value", "Jose"])

        assert result.exit_code == 1
        assert "❌ Error:" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)
