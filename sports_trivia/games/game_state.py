"""
State machine for one player-guessing session.
"""

import random
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from ..errors import DuplicateGuessError, GameOverError, HintUnavailableError, InputError
from ..utils.constants import INITIAL_HINT_THRESHOLD, MAX_GUESSES, TEAM_HINT_THRESHOLD
from ..utils.helpers import first_initial


class GameStatus(str, Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


class GameState:
    """
    Guesses, wrong-guess count, hint flags and win/loss status for one game.

    The target is drawn from ``players`` on every reset. Guesses are
    append-only; once the game is won or lost no further guesses count.
    """

    def __init__(
        self,
        players: Sequence[Dict[str, Any]],
        identity_field: str = 'Player',
        team_field: str = 'Team',
        max_guesses: int = MAX_GUESSES,
        team_hint_threshold: int = TEAM_HINT_THRESHOLD,
        initial_hint_threshold: int = INITIAL_HINT_THRESHOLD,
        rng: Optional[random.Random] = None,
    ):
        self.players = players
        self.identity_field = identity_field
        self.team_field = team_field
        self.max_guesses = max_guesses
        self.team_hint_threshold = team_hint_threshold
        self.initial_hint_threshold = initial_hint_threshold
        self.rng = rng or random.Random()
        self.reset()

    def reset(self) -> None:
        """Start a new game with a freshly drawn target."""
        if not self.players:
            raise InputError("Player data not loaded")

        self.guesses: List[Dict[str, Any]] = []
        self.wrong_guesses = 0
        self.team_hint_used = False
        self.initial_hint_used = False
        self.status = GameStatus.IN_PROGRESS
        self.target = self.rng.choice(self.players)

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def guesses_remaining(self) -> int:
        return self.max_guesses - len(self.guesses)

    def identity(self, player: Dict[str, Any]) -> str:
        return player[self.identity_field]

    def is_guess_already_made(self, identity: str) -> bool:
        return any(self.identity(guess) == identity for guess in self.guesses)

    def add_guess(self, player: Dict[str, Any]) -> GameStatus:
        """
        Record a guess and update the game status.

        Args:
            player: The guessed player record

        Returns:
            The status after the guess

        Raises:
            GameOverError: The game is already won or lost
            DuplicateGuessError: This player was already guessed
        """
        if self.is_over or len(self.guesses) >= self.max_guesses:
            raise GameOverError("The game is over. Start a new game to keep playing.")

        identity = self.identity(player)
        if self.is_guess_already_made(identity):
            raise DuplicateGuessError(identity)

        self.guesses.append(player)

        if identity == self.identity(self.target):
            self.status = GameStatus.WON
        else:
            self.wrong_guesses += 1
            if len(self.guesses) >= self.max_guesses:
                self.status = GameStatus.LOST

        return self.status

    def can_use_team_hint(self) -> bool:
        return (self.wrong_guesses >= self.team_hint_threshold
                and not self.team_hint_used and not self.is_over)

    def can_use_initial_hint(self) -> bool:
        return (self.wrong_guesses >= self.initial_hint_threshold
                and not self.initial_hint_used and not self.is_over)

    def use_team_hint(self) -> str:
        """Reveal the target's team. Each hint can be used once per game."""
        if not self.can_use_team_hint():
            raise HintUnavailableError("Team hint is not available")
        self.team_hint_used = True
        return str(self.target[self.team_field])

    def use_initial_hint(self) -> str:
        """Reveal the first letter of the target's first name."""
        if not self.can_use_initial_hint():
            raise HintUnavailableError("Initial hint is not available")
        self.initial_hint_used = True
        return first_initial(self.identity(self.target))
