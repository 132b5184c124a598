#!/usr/bin/env python3
"""
Example usage of the JSON Node Editor.

This script selects a few nodes of a document, shows them the way the
editor renders them, and saves edited text back into the document.
"""

import json
import logging
from json_node_editor import NodeEditor


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    print("JSON Node Editor Example")
    print("=" * 50)

    document = {
        "customer": {
            "name": "Alice Johnson",
            "email": "alice@example.com",
            "vip": True,
            "address": {"city": "New York", "zip": "10001"}
        },
        "items": [
            {"sku": "A-100", "quantity": 2},
            {"sku": "B-200", "quantity": 1}
        ]
    }

    editor = NodeEditor()

    for path in (["customer"], ["customer", "name"], ["items", 1, "quantity"]):
        node = editor.node_at(document, path)
        print(f"\n{editor.render_path(node)}")
        print(editor.render(node))

    edits = [
        (["items", 1, "quantity"], "3"),
        (["customer", "name"], "Alice Smith"),
        (["customer", "address", "zip"], '"02134"'),
        (["items", 7], "{}"),
    ]

    print("\nApplying edits...")
    for path, text in edits:
        result = editor.edit_document(document, path, text)
        status = "applied" if result.applied else "ignored"
        print(f"  {editor.formatter.format(path)} <- {text!r}: {status}")
        document = result.document

    print("\nUpdated document:")
    print(json.dumps(document, indent=2))


if __name__ == "__main__":
    main()
