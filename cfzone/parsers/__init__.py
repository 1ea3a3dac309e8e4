"""
Desired-state parsers.

This package turns zone files into record collections.
"""

from .zone_file import ZoneFileParser

__all__ = ["ZoneFileParser"]
