"""
MLB Player Comparison game.

Ten head-to-head questions: two random active players and a random stat;
the player pick with the higher (or equal) value is correct.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..errors import GameStateError, NotEnoughPlayersError
from ..utils.constants import COMPARISON_QUESTIONS
from ..utils.helpers import format_stat
from ..utils.log import info, success, warn

AVAILABLE_STATS = [
    {'key': 'avg', 'name': 'Batting Average'},
    {'key': 'homeRuns', 'name': 'Home Runs'},
    {'key': 'rbi', 'name': 'RBIs'},
    {'key': 'runs', 'name': 'Runs Scored'},
    {'key': 'hits', 'name': 'Hits'},
    {'key': 'stolenBases', 'name': 'Stolen Bases'},
    {'key': 'ops', 'name': 'OPS'},
    {'key': 'doubles', 'name': 'Doubles'},
]

# Rate stats shown with three decimals
RATE_STATS = {'avg', 'ops'}


def format_comparison_stat(stat_key: str, value: Any) -> str:
    return format_stat(value, 3 if stat_key in RATE_STATS else None)


def performance_message(percentage: int) -> str:
    if percentage >= 80:
        return 'Excellent work! You really know your baseball stats! 🏆'
    elif percentage >= 60:
        return 'Good job! You have solid knowledge of player stats! ⚾'
    elif percentage >= 40:
        return 'Not bad! Keep following the stats to improve! 📊'
    return 'Room for improvement! Try watching more games! 🤔'


@dataclass(frozen=True)
class Question:
    number: int
    player_a: Dict[str, Any]
    player_b: Dict[str, Any]
    stat_key: str
    stat_name: str

    @property
    def value_a(self) -> Any:
        return self.player_a['stats'][self.stat_key]

    @property
    def value_b(self) -> Any:
        return self.player_b['stats'][self.stat_key]

    @property
    def correct_choice(self) -> str:
        return 'A' if self.value_a >= self.value_b else 'B'


@dataclass(frozen=True)
class Answer:
    question: Question
    choice: str
    is_correct: bool


class ComparisonGame:
    """Question sequence and score for one comparison session."""

    def __init__(
        self,
        players: Sequence[Dict[str, Any]],
        max_questions: int = COMPARISON_QUESTIONS,
        rng: Optional[random.Random] = None,
    ):
        if len(players) < 2:
            raise NotEnoughPlayersError(len(players), 2)
        self.players = players
        self.max_questions = max_questions
        self.rng = rng or random.Random()
        self.new_game()

    def new_game(self) -> None:
        self.current_question = 1
        self.score = 0
        self.game_over = False
        self.answers: List[Answer] = []
        self.question: Optional[Question] = None
        self.answered_current_question = False

    def generate_question(self) -> Optional[Question]:
        """Pick two distinct players and a stat. Returns None once the game ends."""
        if self.game_over or self.current_question > self.max_questions:
            self.game_over = True
            return None

        index_a, index_b = self.rng.sample(range(len(self.players)), 2)
        stat = self.rng.choice(AVAILABLE_STATS)

        self.question = Question(
            number=self.current_question,
            player_a=self.players[index_a],
            player_b=self.players[index_b],
            stat_key=stat['key'],
            stat_name=stat['name'],
        )
        self.answered_current_question = False
        return self.question

    def select_player(self, choice: str) -> Answer:
        """
        Answer the current question.

        Args:
            choice: 'A' or 'B'

        Raises:
            GameStateError: No open question, or it was already answered
        """
        choice = choice.upper()
        if choice not in ('A', 'B'):
            raise ValueError(f"Choice must be 'A' or 'B', got {choice!r}")
        if self.game_over or self.question is None or self.answered_current_question:
            raise GameStateError("No open question to answer")

        is_correct = choice == self.question.correct_choice
        if is_correct:
            self.score += 1
        self.answered_current_question = True

        answer = Answer(self.question, choice, is_correct)
        self.answers.append(answer)
        self.current_question += 1
        if self.current_question > self.max_questions:
            self.game_over = True
        return answer

    @property
    def percentage(self) -> int:
        return round(self.score / self.max_questions * 100)

    def summary(self) -> str:
        return (f"Final score: {self.score} / {self.max_questions} ({self.percentage}%)\n"
                f"{performance_message(self.percentage)}")

    # === Terminal loop ===

    def run(self, input_fn: Callable[[str], str] = input) -> None:
        """Play all questions from the terminal."""
        while not self.game_over:
            question = self.generate_question()
            if question is None:
                break

            info(f"\nQuestion {question.number} / {self.max_questions}: "
                 f"Who has more {question.stat_name}?")
            for label, player in (('A', question.player_a), ('B', question.player_b)):
                stats = player['stats']
                info(f"  {label}. {player['name']} ({player['team']}) "
                     f"- {stats['gamesPlayed']} Games, {stats['atBats']} AB")

            choice = self._prompt_choice(input_fn)
            if choice is None:
                return

            answer = self.select_player(choice)
            values = (f"{question.player_a['name']}: {format_comparison_stat(question.stat_key, question.value_a)}, "
                      f"{question.player_b['name']}: {format_comparison_stat(question.stat_key, question.value_b)}")
            if answer.is_correct:
                success(f"✓ Correct! {values}")
            else:
                warn(f"✗ Incorrect! {values}")
            info(f"Score: {self.score} / {self.max_questions}")

        info(self.summary())

    def _prompt_choice(self, input_fn: Callable[[str], str]) -> Optional[str]:
        while True:
            try:
                line = input_fn("A or B? ").strip().upper()
            except EOFError:
                return None
            if line in ('A', 'B'):
                return line
            if line in (':QUIT', 'Q'):
                return None
            warn("Please answer A or B.")
