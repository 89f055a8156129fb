"""
Hash-fragment routing (``#/home/<game-id>``) over an allow-listed game registry.

Game ids are checked against GAMES before anything is built from them, so
a crafted URL can never select an arbitrary module.
"""

import importlib
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .errors import RouteError
from .utils.log import error

HOME_PREFIX = '#/home/'


@dataclass(frozen=True)
class GameInfo:
    id: str
    name: str
    description: str
    # "module:attribute" of the factory that builds the game controller
    entry_point: str


GAMES: List[GameInfo] = [
    GameInfo('nfl-player-guess', 'Guess the NFL Player',
             'Guess the NFL player based on 2024 stats',
             'sports_trivia.main:create_guess_game'),
    GameInfo('mlb-player-guess', 'Guess the MLB Player',
             'Guess the MLB player based on 2025 stats',
             'sports_trivia.main:create_guess_game'),
    GameInfo('nba-player-guess', 'Guess the NBA Player',
             'Guess the NBA player based on 2024 stats',
             'sports_trivia.main:create_guess_game'),
    GameInfo('mlb-player-comparison', 'MLB Player Comparison',
             'Head-to-head stat comparisons between MLB players',
             'sports_trivia.main:create_comparison_game'),
]


def is_valid_game(game_id: str) -> bool:
    return any(game.id == game_id for game in GAMES)


def get_game(game_id: str) -> GameInfo:
    for game in GAMES:
        if game.id == game_id:
            return game
    error(f"Invalid game name: {game_id}")
    raise RouteError(game_id)


def navigate_to_game(game_id: str) -> str:
    """Return the hash for a game page, rejecting unknown ids."""
    get_game(game_id)
    return f"{HOME_PREFIX}{game_id}"


@dataclass(frozen=True)
class Route:
    page: str  # 'home' or 'game'
    game: Optional[GameInfo] = None


def parse_route(url_hash: str) -> Optional[Route]:
    """
    Resolve a location hash.

    Args:
        url_hash: e.g. '', '#/', '#/home/mlb-player-guess'

    Returns:
        Route for the homepage or a game, or None for hashes this router ignores

    Raises:
        RouteError: The hash names a game that is not on the allow-list
    """
    if url_hash in ('', '#', '#/', HOME_PREFIX):
        return Route('home')

    if url_hash.startswith(HOME_PREFIX):
        game_id = url_hash[len(HOME_PREFIX):]
        return Route('game', get_game(game_id))

    return None


def load_game_factory(game_id: str) -> Callable[..., Any]:
    """Import the controller factory for an allow-listed game."""
    game = get_game(game_id)
    module_name, _, attribute = game.entry_point.partition(':')
    module = importlib.import_module(module_name)
    return getattr(module, attribute)
