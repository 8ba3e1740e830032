"""
Test helpers for gibson tests.

This package provides utilities for:
- Building inline GIB documents
"""

from .gib_documents import header_line, make_gib

__all__ = [
    "header_line",
    "make_gib",
]
