"""
Text similarity service: Jaccard word overlap between two text blocks.
"""

from .app import create_app

__all__ = ["create_app"]
