"""
Loading and searching player data for a game session.
"""

import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from .errors import InputError
from .parsers.csv_parser import CSVParser
from .parsers.schemas import Schema
from .utils.constants import DATA_DIR
from .utils.helpers import normalize_name
from .utils.log import info, error


class DataManager:
    """Holds the parsed player records for one game."""

    def __init__(
        self,
        schema: Optional[Schema] = None,
        identity_field: str = 'Player',
        search_columns: Sequence[str] = ('Player', 'Team'),
        parser: Optional[CSVParser] = None,
        data_dir: Union[str, Path, None] = None,
    ):
        self.schema = schema
        self.identity_field = identity_field
        self.search_columns = tuple(search_columns)
        self.parser = parser or CSVParser()
        self.data_dir = Path(data_dir) if data_dir else DATA_DIR
        self.players: List[Dict[str, Any]] = []
        self.is_loaded = False

    def load_players(self, filename: Union[str, Path]) -> List[Dict[str, Any]]:
        """
        Read and parse a player CSV file.

        Args:
            filename: File name relative to the data directory, or an absolute path

        Returns:
            List of player records

        Raises:
            InputError: The file cannot be read or is not UTF-8 text
            ParseError: The file content fails parsing
        """
        path = Path(filename)
        if not path.is_absolute():
            path = self.data_dir / path

        info(f"Loading player data from {path.name}...")
        try:
            csv_text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            error(f"Error loading players data: {e}")
            raise InputError(f"Failed to load player data from {path}: {e}") from e

        return self.load_text(csv_text)

    def load_text(self, csv_text: str) -> List[Dict[str, Any]]:
        """Parse CSV text that was already read (or fetched) by the caller."""
        self.players = self.parser.parse(csv_text, self.schema)
        self.is_loaded = True
        info(f"Loaded {len(self.players)} players")
        return self.players

    def get_random_player(self, rng: Optional[random.Random] = None) -> Dict[str, Any]:
        if not self.is_loaded or not self.players:
            raise InputError("Player data not loaded")
        return (rng or random).choice(self.players)

    def find_player(self, identity: str) -> Optional[Dict[str, Any]]:
        """Exact lookup by player name, ignoring case and accents."""
        wanted = _search_key(identity)
        if not wanted:
            return None
        for player in self.players:
            if _search_key(player[self.identity_field]) == wanted:
                return player
        return None

    def filter_players(self, search_term: str) -> List[Dict[str, Any]]:
        """
        Players whose searchable columns contain the term, sorted by name.

        Matching ignores case and accents, so "acuna" finds "Acuña".

        Args:
            search_term: Free-text query

        Returns:
            Matching players sorted alphabetically
        """
        term = _search_key(search_term)
        if not term or not self.is_loaded:
            return []

        matches = [
            player for player in self.players
            if any(term in _search_key(player.get(column, '')) for column in self.search_columns)
        ]
        return sorted(matches, key=lambda p: _search_key(p[self.identity_field]))


def _search_key(value: Any) -> str:
    return normalize_name(str(value)).lower() if value is not None else ''
