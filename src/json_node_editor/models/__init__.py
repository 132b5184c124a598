"""Data models for the JSON Node Editor."""

from .display_row import DisplayRow
from .node_data import NodeData

__all__ = ["DisplayRow", "NodeData"]
