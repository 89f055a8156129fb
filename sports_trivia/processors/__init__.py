"""Processors that tabulate parsed player records."""

from .base_processor import BaseProcessor
from .roster_processor import RosterProcessor

__all__ = [
    'BaseProcessor',
    'RosterProcessor',
]
