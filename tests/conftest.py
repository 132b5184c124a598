"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_document():
    """Sample order document for testing."""
    return {
        "customer": {
            "name": "Alice",
            "email": "alice@example.com",
            "vip": True,
            "address": {
                "city": "New York",
                "zip": "10001"
            },
            "tags": ["early-adopter", "newsletter"]
        },
        "items": [
            {"sku": "A-100", "quantity": 2, "price": 9.5},
            {"sku": "B-200", "quantity": 1, "price": 120},
            {"sku": "C-300", "quantity": 5, "price": None}
        ],
        "note": None
    }


@pytest.fixture
def sample_document_file(temp_dir, sample_document):
    """Sample document written to a JSON file."""
    file_path = temp_dir / "order.json"
    file_path.write_text(json.dumps(sample_document, indent=2), encoding="utf-8")
    return file_path
