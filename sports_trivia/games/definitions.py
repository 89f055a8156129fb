"""
Per-sport configuration for the player guessing games.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from ..parsers.schemas import Schema, MLB_PLAYER, NFL_PLAYER, NBA_PLAYER
from ..utils.constants import MLB_THRESHOLDS, NFL_THRESHOLDS, NBA_THRESHOLDS


@dataclass(frozen=True)
class GameDefinition:
    """Everything a guess game needs to know about one sport's data."""
    game_id: str
    name: str
    schema: Schema
    data_file: str
    identity_field: str = 'Player'
    team_field: str = 'Team'
    categorical_columns: Tuple[str, ...] = ()
    # Displayed numeric columns, in order, with their "close" thresholds
    thresholds: Mapping[str, float] = field(default_factory=dict)
    decimals: Mapping[str, int] = field(default_factory=dict)
    search_columns: Tuple[str, ...] = ('Player', 'Team')
    label_columns: Tuple[str, ...] = ('Team',)

    @property
    def columns(self) -> Tuple[str, ...]:
        """Display order: identity, categorical columns, numeric columns."""
        return (self.identity_field,) + tuple(self.categorical_columns) + tuple(self.thresholds)

    def format_item(self, player: Dict[str, Any]) -> str:
        """Dropdown label, e.g. 'Aaron Judge (NYY AL)'."""
        label = ' '.join(str(player.get(col, '')) for col in self.label_columns)
        return f"{player[self.identity_field]} ({label})"

    def display_value(self, player: Dict[str, Any]) -> str:
        return str(player[self.identity_field])


MLB_PLAYER_GUESS = GameDefinition(
    game_id='mlb-player-guess',
    name='Guess the MLB Player',
    schema=MLB_PLAYER,
    data_file='mlb_players.csv',
    categorical_columns=('League', 'Team'),
    thresholds=MLB_THRESHOLDS,
    decimals={'OPS': 3},
    search_columns=('Player', 'Team', 'League'),
    label_columns=('Team', 'League'),
)

NFL_PLAYER_GUESS = GameDefinition(
    game_id='nfl-player-guess',
    name='Guess the NFL Player',
    schema=NFL_PLAYER,
    data_file='nfl_players.csv',
    categorical_columns=('Conference', 'Team', 'Position'),
    thresholds=NFL_THRESHOLDS,
    search_columns=('Player', 'Team', 'Conference', 'Position'),
    label_columns=('Team', 'Position'),
)

NBA_PLAYER_GUESS = GameDefinition(
    game_id='nba-player-guess',
    name='Guess the NBA Player',
    schema=NBA_PLAYER,
    data_file='nba_players.csv',
    categorical_columns=('Conference', 'Team', 'Position'),
    thresholds=NBA_THRESHOLDS,
    decimals={'PTS': 1, 'REB': 1, 'AST': 1},
    search_columns=('Player', 'Team', 'Conference', 'Position'),
    label_columns=('Team', 'Position'),
)

GUESS_GAMES: Dict[str, GameDefinition] = {
    definition.game_id: definition
    for definition in (MLB_PLAYER_GUESS, NFL_PLAYER_GUESS, NBA_PLAYER_GUESS)
}
