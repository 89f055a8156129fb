"""
Main entry point for the Sports Trivia games.
"""

import sys
import argparse
import random
from pathlib import Path
from typing import List, Optional

from .data_manager import DataManager
from .errors import RouteError, TriviaError
from .games.comparison import ComparisonGame
from .games.definitions import GUESS_GAMES, MLB_PLAYER_GUESS
from .games.player_guess import PlayerGuessGame
from .parsers.csv_parser import CSVParser
from .parsers.schemas import SCHEMAS, get_schema
from .processors.roster_processor import RosterProcessor
from .router import GAMES, HOME_PREFIX, load_game_factory, parse_route
from .scrapers.mlb_stats_api import MLBStatsClient, enrich_players
from .utils.constants import LOAD_TIMEOUT
from .utils.log import info, warn, error, success, set_verbosity, set_use_emoji


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def create_guess_game(game_id: str, data_dir: Optional[str] = None,
                      seed: Optional[int] = None, **kwargs) -> PlayerGuessGame:
    """Build a player guessing game controller with its data loaded."""
    definition = GUESS_GAMES[game_id]
    data_manager = DataManager(
        schema=definition.schema,
        identity_field=definition.identity_field,
        search_columns=definition.search_columns,
        data_dir=data_dir,
    )
    game = PlayerGuessGame(definition, data_manager, rng=_rng(seed))
    if not game.init():
        raise TriviaError(game.message)
    return game


def create_comparison_game(game_id: str, data_dir: Optional[str] = None,
                           seed: Optional[int] = None, load_timeout: float = LOAD_TIMEOUT,
                           client: Optional[MLBStatsClient] = None, **kwargs) -> ComparisonGame:
    """Load the MLB roster, fetch season stats, and build a comparison game."""
    data_manager = DataManager(schema=MLB_PLAYER_GUESS.schema, data_dir=data_dir)
    players = data_manager.load_players(MLB_PLAYER_GUESS.data_file)

    client = client or MLBStatsClient()
    info(f"Loading {client.season} stats for {len(players)} players...")
    active = enrich_players(players, client.fetch_player_stats, load_timeout=load_timeout)
    return ComparisonGame(active, rng=_rng(seed))


def list_games() -> None:
    info("Available games:")
    for game in GAMES:
        info(f"  {game.id:<24} {game.name} - {game.description}")


def validate_file(csv_path: str, schema_name: str, strict: bool, summary: bool) -> int:
    """Parse a CSV file against a schema and report the outcome."""
    schema = get_schema(schema_name)
    parser = CSVParser(strict_mode=strict)
    records = DataManager(schema=schema, parser=parser).load_players(Path(csv_path).resolve())
    success(f"{len(records)} valid rows ({parser.skipped_rows} skipped) in {csv_path}")

    if summary:
        tables = RosterProcessor(records, schema).process()
        if not tables['stat_summary'].empty:
            info("\nStat summary:")
            info(tables['stat_summary'].to_string())
        if not tables['teams'].empty:
            info("\nPlayers per team:")
            info(tables['teams'].to_string(index=False))

    return 0


def play(target: str, data_dir: Optional[str], seed: Optional[int], load_timeout: float) -> int:
    """Start a game by id or by ``#/home/<id>`` hash."""
    url_hash = target if target.startswith('#') else f"{HOME_PREFIX}{target}"
    route = parse_route(url_hash)
    if route is None or route.game is None:
        list_games()
        return 0

    factory = load_game_factory(route.game.id)
    game = factory(route.game.id, data_dir=data_dir, seed=seed, load_timeout=load_timeout)
    game.run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sports Trivia - player guessing and stat comparison games"
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable extra debug output'
    )
    parser.add_argument(
        '--no-emoji',
        action='store_true',
        help='Disable emoji in console output'
    )

    subparsers = parser.add_subparsers(dest='command')

    subparsers.add_parser('games', help='List available games')

    validate = subparsers.add_parser('validate', help='Validate a player CSV file against a schema')
    validate.add_argument('csv_path', help='Path to the CSV file')
    validate.add_argument(
        '--schema',
        required=True,
        choices=sorted(SCHEMAS),
        type=str.upper,
        help='Schema to validate against'
    )
    validate.add_argument(
        '--strict',
        action='store_true',
        help='Stop at the first invalid row'
    )
    validate.add_argument(
        '--summary',
        action='store_true',
        help='Print stat ranges and players per team'
    )

    play_parser = subparsers.add_parser('play', help='Play a game')
    play_parser.add_argument('game', help='Game id (e.g. mlb-player-guess) or #/home/<game-id>')
    play_parser.add_argument(
        '--data-dir',
        default=None,
        help='Directory containing the player CSV files'
    )
    play_parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible games'
    )
    play_parser.add_argument(
        '--timeout',
        type=float,
        default=LOAD_TIMEOUT,
        help='Seconds allowed for loading external stats'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    set_verbosity(args.verbose)
    set_use_emoji(not args.no_emoji)

    try:
        if args.command == 'validate':
            return validate_file(args.csv_path, args.schema, args.strict, args.summary)
        if args.command == 'play':
            return play(args.game, args.data_dir, args.seed, args.timeout)
        list_games()
        return 0
    except RouteError as e:
        error(str(e))
        list_games()
        return 2
    except TriviaError as e:
        error(str(e))
        warn("Please try again.")
        return 1
    except OSError as e:
        error(f"Error reading input: {e}")
        return 1
    except KeyboardInterrupt:
        info("\nGoodbye!")
        return 130


if __name__ == '__main__':
    sys.exit(main())
