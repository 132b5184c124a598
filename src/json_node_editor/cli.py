"""Command-line interface for the JSON Node Editor."""

import json
import logging
import sys
import click
from pathlib import Path
from . import __version__
from .models import NodeData
from .node_editor import NodeEditor
from .types import EditError
from .utils.validation import ValidationUtils


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )


def _parse_path_option(ctx, param, value):
    """Parse a path given as a JSON array, e.g. '["items", 0]'."""
    try:
        path = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"path must be a JSON array: {e.msg}")

    if not isinstance(path, list):
        raise click.BadParameter("path must be a JSON array")

    validation = ValidationUtils.validate_path(path)
    if not validation.is_valid:
        raise click.BadParameter("; ".join(error.message for error in validation.errors))
    return path


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Node Editor - Render and edit values inside a JSON document by path."""
    pass


@main.command()
@click.argument('path_json', callback=_parse_path_option)
def path(path_json: list):
    """Print the display form of a path given as a JSON array."""
    editor = NodeEditor()
    click.echo(editor.render_path(NodeData(path=path_json)))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--path', '-p', 'node_path', default='[]', callback=_parse_path_option,
              help='Path of the node as a JSON array (default: root)')
@click.option('--indent', default=2, show_default=True, help='Indentation of rendered JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def show(input_file: Path, node_path: list, indent: int, verbose: bool):
    """Show the editable text of the node at a path."""
    _configure_logging(verbose)
    editor = NodeEditor(indent=indent)

    try:
        document = editor.parser.parse(input_file.read_text(encoding='utf-8'))
        node = editor.node_at(document, node_path)
    except (EditError, OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    click.echo(f"JSON Path: {editor.render_path(node)}")
    click.echo(editor.render(node))


@main.command(name='set')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--path', '-p', 'node_path', required=True, callback=_parse_path_option,
              help='Path of the value to replace as a JSON array')
@click.option('--value', required=True, help='Edited text of the new value')
@click.option('--output', '-o', help='Output JSON file path (default: stdout)')
@click.option('--strict', is_flag=True, help='Fail when the path does not fit the document')
@click.option('--indent', default=2, show_default=True, help='Indentation of the written JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def set_value(input_file: Path, node_path: list, value: str, output: str,
              strict: bool, indent: int, verbose: bool):
    """Replace the value at a path and write the updated document."""
    _configure_logging(verbose)
    editor = NodeEditor(indent=indent, strict_paths=strict)

    try:
        json_string = input_file.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    result = editor.save(json_string, NodeData(path=node_path), value)

    if not result.success:
        click.echo("❌ Update failed:")
        for error in result.errors or []:
            click.echo(f"   • {error}")
        if result.suggested_action:
            click.echo(f"   {result.suggested_action}")
        sys.exit(1)

    if not result.applied:
        click.echo(f"⚠️  Path {editor.formatter.format(node_path)} does not fit the document; "
                   "document left unchanged", err=True)

    if output:
        output_path = Path(output)
        output_path.write_text(result.json_string + "\n", encoding='utf-8')
        click.echo(f"✅ {result.message}: wrote {output_path}")
    else:
        click.echo(result.json_string)


if __name__ == '__main__':
    main()
