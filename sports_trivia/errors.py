"""
Exception types raised by the parsers, games, router and stat client.
"""

from typing import Any, Iterable, Optional


class TriviaError(Exception):
    """Base class for all sports trivia errors."""
    pass


# === Parsing ===

class ParseError(TriviaError):
    """Raised when CSV text cannot be turned into records."""
    pass


class InputError(ParseError):
    """Raised for empty or non-text input."""
    pass


class SchemaError(ParseError):
    """Raised when the CSV header does not satisfy the schema."""
    pass


class MissingHeaderError(SchemaError):
    """Raised when required schema columns are absent from the header row."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required headers: {', '.join(self.missing)}")


class ValidationError(ParseError):
    """Raised when a row value violates a column constraint."""

    def __init__(self, message: str, column: Optional[str] = None,
                 value: Any = None, line_number: Optional[int] = None):
        self.column = column
        self.value = value
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} on line {line_number}"
        super().__init__(message)


class RequiredFieldError(ValidationError):
    """Raised when a required column has no value and no default."""

    def __init__(self, column: str, line_number: Optional[int] = None):
        super().__init__(f"Required field '{column}' is empty",
                         column=column, value='', line_number=line_number)


# === Network ===

class NetworkError(TriviaError):
    """Raised when the external stat source fails or returns a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class LoadTimeoutError(TriviaError, TimeoutError):
    """Raised when loading exceeds its wall-clock budget."""
    pass


class NotEnoughPlayersError(TriviaError):
    """Raised when enrichment leaves fewer active players than a game needs."""

    def __init__(self, found: int, required: int):
        self.found = found
        self.required = required
        super().__init__(
            f"Not enough active players found ({found}). Need at least {required} to play."
        )


# === Games ===

class GameStateError(TriviaError):
    """Raised for illegal game state transitions."""
    pass


class GameOverError(GameStateError):
    """Raised when a guess is made after the game has ended."""
    pass


class DuplicateGuessError(GameStateError):
    """Raised when the same player is guessed twice."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"You already guessed {identity}!")


class HintUnavailableError(GameStateError):
    """Raised when a hint is requested before it unlocks or after it is used."""
    pass


class RouteError(TriviaError):
    """Raised for navigation to a game that is not on the allow-list."""

    def __init__(self, game_id: str, message: str = "Invalid game"):
        self.game_id = game_id
        super().__init__(f"{message}: {game_id}")
