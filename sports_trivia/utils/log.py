"""
Console logging for the trivia games.

Supports:
- Log levels (DEBUG, INFO, WARN, ERROR)
- Optional emoji (game messages use them heavily)
- Verbose mode for debug output
- Colored output on TTYs
"""

import sys
import re
from datetime import datetime
from typing import Optional
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels for filtering output."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


# Module-level configuration
_log_level = LogLevel.INFO
_use_emoji = True
_use_color = True
_show_timestamp = False

# ANSI color codes
_COLORS = {
    'reset': '\033[0m',
    'red': '\033[91m',
    'yellow': '\033[93m',
    'green': '\033[92m',
    'blue': '\033[94m',
    'gray': '\033[90m',
}

_EMOJI_RE = re.compile(
    "["
    "\U0001F300-\U0001FAFF"  # pictographs, emoticons, sports
    "\U00002600-\U000027BF"  # misc symbols, dingbats
    "\U0000FE0F"
    "]+",
    flags=re.UNICODE
)


def set_verbosity(verbose: bool) -> None:
    """Set verbosity level for logging.

    When verbose=True, DEBUG level messages are shown.
    When verbose=False, only INFO and above are shown.
    """
    global _log_level
    _log_level = LogLevel.DEBUG if verbose else LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the minimum log level to display."""
    global _log_level
    _log_level = level


def get_log_level() -> LogLevel:
    """Return the current minimum log level."""
    return _log_level


def set_use_emoji(use_emoji: bool) -> None:
    """Enable or disable emoji in output."""
    global _use_emoji
    _use_emoji = use_emoji


def set_use_color(use_color: bool) -> None:
    """Enable or disable colored output."""
    global _use_color
    _use_color = use_color


def set_show_timestamp(show: bool) -> None:
    """Enable or disable timestamps in log output."""
    global _show_timestamp
    _show_timestamp = show


def _supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not _use_color:
        return False
    # Only color when stdout is a TTY
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    # Windows cmd does not support ANSI by default
    if sys.platform == 'win32':
        return False
    return True


def _colorize(text: str, color: str) -> str:
    """Apply color to text if supported."""
    if _supports_color() and color in _COLORS:
        return f"{_COLORS[color]}{text}{_COLORS['reset']}"
    return text


def strip_emoji(msg: str) -> str:
    """Remove emoji from a message when emoji output is disabled."""
    if _use_emoji:
        return msg
    return _EMOJI_RE.sub('', msg).strip()


def _format_message(msg: str, level: str, color: Optional[str] = None) -> str:
    """Format a log message with optional timestamp and level prefix."""
    msg = strip_emoji(msg)

    parts = []

    if _show_timestamp:
        timestamp = datetime.now().strftime('%H:%M:%S')
        parts.append(_colorize(f"[{timestamp}]", 'gray'))

    if level:
        level_str = f"[{level}]"
        if color:
            level_str = _colorize(level_str, color)
        parts.append(level_str)

    parts.append(msg)

    return ' '.join(parts)


def debug(msg: str) -> None:
    """Print debug message (verbose mode only)."""
    if _log_level <= LogLevel.DEBUG:
        print(_format_message(msg, 'DEBUG', 'gray'))


def info(msg: str) -> None:
    """Print info message."""
    if _log_level <= LogLevel.INFO:
        print(strip_emoji(msg))


def warn(msg: str) -> None:
    """Print warning message to stderr."""
    if _log_level <= LogLevel.WARN:
        formatted = _format_message(msg, 'WARN', 'yellow') if _show_timestamp or _supports_color() else strip_emoji(msg)
        print(formatted, file=sys.stderr)


def error(msg: str) -> None:
    """Print error message to stderr."""
    if _log_level <= LogLevel.ERROR:
        print(_format_message(msg, 'ERROR', 'red'), file=sys.stderr)


def success(msg: str) -> None:
    """Print success message (always shown)."""
    if _supports_color():
        print(_colorize(strip_emoji(msg), 'green'))
    else:
        print(strip_emoji(msg))
