"""
Wordle-style feedback for a guessed player versus the target.

Categorical columns are either correct or wrong. Numeric columns are
correct on exact equality, close when within the column's threshold, and
wrong otherwise; close and wrong both point toward the target.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .definitions import GameDefinition
from ..utils.helpers import format_stat


class MatchResult(str, Enum):
    CORRECT = 'correct'
    CLOSE = 'close'
    WRONG = 'wrong'


class Direction(str, Enum):
    """Which way the target lies relative to the guess."""
    UP = 'up'
    DOWN = 'down'


ARROWS = {
    Direction.UP: '↑',
    Direction.DOWN: '↓',
}


@dataclass(frozen=True)
class Feedback:
    result: MatchResult
    direction: Optional[Direction] = None

    @property
    def arrow(self) -> str:
        return ARROWS[self.direction] if self.direction else ''


@dataclass(frozen=True)
class CellFeedback:
    """One cell of a guess row."""
    column: str
    text: str
    result: Optional[MatchResult] = None
    direction: Optional[Direction] = None


def compare_categorical(guess_value: Any, target_value: Any) -> Feedback:
    """Exact match or not; never carries a direction."""
    if guess_value == target_value:
        return Feedback(MatchResult.CORRECT)
    return Feedback(MatchResult.WRONG)


def compare_numeric(guess_value: float, target_value: float, threshold: float) -> Feedback:
    """
    Compare a numeric stat against the target.

    Args:
        guess_value: The guessed player's value
        target_value: The target player's value
        threshold: Largest absolute difference still counted as close

    Returns:
        Feedback with CORRECT (no direction), CLOSE or WRONG (with direction)
    """
    if guess_value == target_value:
        return Feedback(MatchResult.CORRECT)

    direction = Direction.UP if guess_value < target_value else Direction.DOWN
    # Tolerance for float rounding on rate stats (0.900 vs 0.850 OPS)
    if abs(guess_value - target_value) <= threshold + 1e-9:
        return Feedback(MatchResult.CLOSE, direction)
    return Feedback(MatchResult.WRONG, direction)


def compare_records(guess: Dict[str, Any], target: Dict[str, Any],
                    definition: GameDefinition) -> List[CellFeedback]:
    """Build the feedback row for one guess."""
    cells = [CellFeedback(definition.identity_field, str(guess[definition.identity_field]))]

    for column in definition.categorical_columns:
        feedback = compare_categorical(guess.get(column), target.get(column))
        cells.append(CellFeedback(column, str(guess.get(column, '')), feedback.result))

    for column, threshold in definition.thresholds.items():
        feedback = compare_numeric(guess[column], target[column], threshold)
        text = format_stat(guess[column], definition.decimals.get(column))
        if feedback.arrow:
            text = f"{text} {feedback.arrow}"
        cells.append(CellFeedback(column, text, feedback.result, feedback.direction))

    return cells
