"""Tests for sports_trivia.games.feedback module."""

from sports_trivia.games.definitions import MLB_PLAYER_GUESS, NBA_PLAYER_GUESS
from sports_trivia.games.feedback import (
    Direction,
    Feedback,
    MatchResult,
    compare_categorical,
    compare_numeric,
    compare_records,
)


class TestCompareNumeric:
    """Tests for compare_numeric function."""

    def test_close(self):
        """Test HR 20 vs 22 with threshold 5 is close."""
        feedback = compare_numeric(20, 22, 5)
        assert feedback.result == MatchResult.CLOSE
        assert feedback.direction == Direction.UP
        assert feedback.arrow == '↑'

    def test_wrong(self):
        """Test HR 20 vs 30 with threshold 5 is wrong."""
        feedback = compare_numeric(20, 30, 5)
        assert feedback.result == MatchResult.WRONG
        assert feedback.direction == Direction.UP

    def test_correct_has_no_arrow(self):
        """Test that exact matches carry no direction."""
        feedback = compare_numeric(22, 22, 5)
        assert feedback == Feedback(MatchResult.CORRECT)
        assert feedback.direction is None
        assert feedback.arrow == ''

    def test_guess_above_target(self):
        """Test that a high guess points down, close or wrong."""
        assert compare_numeric(25, 22, 5).direction == Direction.DOWN
        assert compare_numeric(40, 22, 5).direction == Direction.DOWN
        assert compare_numeric(40, 22, 5).arrow == '↓'

    def test_threshold_boundary(self):
        """Test that a difference equal to the threshold is close."""
        assert compare_numeric(17, 22, 5).result == MatchResult.CLOSE
        assert compare_numeric(16, 22, 5).result == MatchResult.WRONG

    def test_float_threshold(self):
        """Test OPS threshold 0.050 despite float rounding."""
        assert compare_numeric(0.900, 0.850, 0.050).result == MatchResult.CLOSE
        assert compare_numeric(0.800, 0.850, 0.050).result == MatchResult.CLOSE
        assert compare_numeric(0.799, 0.850, 0.050).result == MatchResult.WRONG


class TestCompareCategorical:
    """Tests for compare_categorical function."""

    def test_match(self):
        """Test matching categories."""
        assert compare_categorical('NYY', 'NYY') == Feedback(MatchResult.CORRECT)

    def test_mismatch(self):
        """Test mismatched categories have no direction."""
        feedback = compare_categorical('AL', 'NL')
        assert feedback.result == MatchResult.WRONG
        assert feedback.direction is None


class TestCompareRecords:
    """Tests for compare_records function."""

    TARGET = {'Player': 'Aaron Judge', 'League': 'AL', 'Team': 'NYY',
              'Age': 33, 'Runs': 137, 'SB': 12, 'HR': 53, 'OPS': 1.145}

    def test_mlb_row(self):
        """Test a full MLB feedback row."""
        guess = {'Player': 'Cal Raleigh', 'League': 'AL', 'Team': 'SEA',
                 'Age': 28, 'Runs': 110, 'SB': 14, 'HR': 53, 'OPS': 0.948}
        cells = {cell.column: cell for cell in compare_records(guess, self.TARGET, MLB_PLAYER_GUESS)}

        assert list(cells) == ['Player', 'League', 'Team', 'Age', 'Runs', 'SB', 'HR', 'OPS']
        assert cells['Player'].text == 'Cal Raleigh'
        assert cells['Player'].result is None
        assert cells['League'].result == MatchResult.CORRECT
        assert cells['Team'].result == MatchResult.WRONG
        assert cells['Age'].result == MatchResult.WRONG
        assert cells['Age'].text == '28 ↑'
        assert cells['SB'].result == MatchResult.CLOSE
        assert cells['SB'].text == '14 ↓'
        assert cells['HR'].result == MatchResult.CORRECT
        assert cells['HR'].text == '53'
        assert cells['OPS'].text == '0.948 ↑'
        assert cells['OPS'].result == MatchResult.WRONG

    def test_identical_record(self):
        """Test that the target compared to itself is all correct."""
        cells = compare_records(self.TARGET, self.TARGET, MLB_PLAYER_GUESS)
        assert all(cell.result in (None, MatchResult.CORRECT) for cell in cells)
        assert cells[-1].text == '1.145'

    def test_nba_decimals(self):
        """Test per-game averages display with one decimal."""
        target = {'Player': 'A', 'Conference': 'Western', 'Team': 'DEN', 'Position': 'C',
                  'Age': 29, 'PTS': 29.6, 'REB': 12.7, 'AST': 10.2}
        guess = dict(target, Player='B', PTS=28.0)
        cells = {cell.column: cell for cell in compare_records(guess, target, NBA_PLAYER_GUESS)}
        assert cells['PTS'].text == '28.0 ↑'
        assert cells['PTS'].result == MatchResult.CLOSE
