"""Tests for sports_trivia.router module."""

import pytest

from sports_trivia.errors import RouteError
from sports_trivia.router import (
    GAMES,
    Route,
    get_game,
    is_valid_game,
    load_game_factory,
    navigate_to_game,
    parse_route,
)


class TestRegistry:
    """Tests for the game allow-list."""

    def test_known_games(self):
        """Test that every registered game is valid."""
        ids = [game.id for game in GAMES]
        assert ids == ['nfl-player-guess', 'mlb-player-guess', 'nba-player-guess', 'mlb-player-comparison']
        assert all(is_valid_game(game_id) for game_id in ids)

    def test_unknown_game(self):
        """Test that unregistered ids are rejected."""
        assert not is_valid_game('not-a-game')
        assert not is_valid_game('')
        with pytest.raises(RouteError) as exc_info:
            get_game('not-a-game')
        assert exc_info.value.game_id == 'not-a-game'
        assert str(exc_info.value) == 'Invalid game: not-a-game'

    def test_navigate(self):
        """Test that navigation builds the game hash."""
        assert navigate_to_game('mlb-player-guess') == '#/home/mlb-player-guess'
        with pytest.raises(RouteError):
            navigate_to_game('../etc/passwd')


class TestParseRoute:
    """Tests for parse_route function."""

    @pytest.mark.parametrize('url_hash', ['', '#', '#/', '#/home/'])
    def test_home(self, url_hash):
        """Test hashes that resolve to the homepage."""
        assert parse_route(url_hash) == Route('home')

    def test_game(self):
        """Test a game hash."""
        route = parse_route('#/home/nba-player-guess')
        assert route.page == 'game'
        assert route.game.name == 'Guess the NBA Player'

    def test_invalid_game(self):
        """Test that an unknown game in a game hash raises RouteError."""
        with pytest.raises(RouteError):
            parse_route('#/home/fake-game')

    def test_unhandled_hash(self):
        """Test that other hashes are ignored."""
        assert parse_route('#/about') is None


class TestLoadGameFactory:
    """Tests for load_game_factory function."""

    def test_guess_factory(self):
        """Test that guess games resolve to the guess factory."""
        from sports_trivia.main import create_comparison_game, create_guess_game

        assert load_game_factory('nfl-player-guess') is create_guess_game
        assert load_game_factory('mlb-player-comparison') is create_comparison_game

    def test_unknown_is_never_imported(self):
        """Test that an id outside the allow-list never reaches the importer."""
        with pytest.raises(RouteError):
            load_game_factory('os:system')
