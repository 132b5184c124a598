"""Utility functions for the JSON Node Editor."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
