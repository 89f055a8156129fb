"""Game logic: state machine, guess feedback, and per-game controllers."""

from .definitions import GameDefinition, GUESS_GAMES, MLB_PLAYER_GUESS, NFL_PLAYER_GUESS, NBA_PLAYER_GUESS
from .feedback import MatchResult, Direction, Feedback, CellFeedback, compare_numeric, compare_categorical, compare_records
from .game_state import GameState, GameStatus
from .player_guess import PlayerGuessGame
from .comparison import ComparisonGame, Question, Answer

__all__ = [
    'GameDefinition',
    'GUESS_GAMES',
    'MLB_PLAYER_GUESS',
    'NFL_PLAYER_GUESS',
    'NBA_PLAYER_GUESS',
    'MatchResult',
    'Direction',
    'Feedback',
    'CellFeedback',
    'compare_numeric',
    'compare_categorical',
    'compare_records',
    'GameState',
    'GameStatus',
    'PlayerGuessGame',
    'ComparisonGame',
    'Question',
    'Answer',
]
