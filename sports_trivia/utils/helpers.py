"""
Helper utility functions shared by the parsers and games.
"""

import math
import unicodedata
from datetime import date, datetime
from typing import Optional, Any

from .constants import DATE_FORMATS


def normalize_name(name: str) -> str:
    """
    Normalize a player name by removing accents and extra whitespace.

    Args:
        name: Player name string

    Returns:
        Normalized name string
    """
    if not name:
        return ""
    normalized = unicodedata.normalize('NFKD', name)
    ascii_name = normalized.encode('ASCII', 'ignore').decode('ASCII')
    return ' '.join(ascii_name.split())


def parse_date(date_str: str) -> Optional[date]:
    """
    Parse a calendar date string using multiple formats.

    Args:
        date_str: Date string to parse

    Returns:
        date object or None if parsing fails
    """
    if not date_str:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue

    return None


def parse_float(value: str) -> Optional[float]:
    """Parse a float, returning None for invalid or non-finite text."""
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def parse_int(value: str) -> Optional[int]:
    """
    Parse an integer, returning None for invalid text.

    Decimal text such as "27.0" or "27.9" truncates toward zero.
    """
    try:
        return int(value)
    except (ValueError, TypeError):
        pass
    result = parse_float(value)
    if result is None:
        return None
    return int(result)


def safe_int(value: Any, default: int = 0) -> int:
    """Safely convert value to int."""
    if value is None or value == '':
        return default
    result = parse_int(value)
    return default if result is None else result


def safe_float(value: Any, default: float = 0.0) -> float:
    """Safely convert value to float (handles '.305' style averages)."""
    if value is None or value == '':
        return default
    if isinstance(value, str):
        value = value.strip().rstrip('%')
        if value.startswith('.'):
            value = '0' + value
    result = parse_float(value)
    return default if result is None else result


def first_initial(name: str) -> str:
    """Upper-cased first letter of a player's first name."""
    if not name or not name.strip():
        return ""
    return name.split()[0][0].upper()


def format_stat(value: Any, decimals: Optional[int] = None) -> str:
    """Format a stat value for display, with fixed decimals for rate stats."""
    if value is None:
        return ""
    if decimals is not None:
        return f"{float(value):.{decimals}f}"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
