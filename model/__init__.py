"""Data model for split results."""

from .table import WordTable

__all__ = ["WordTable"]
