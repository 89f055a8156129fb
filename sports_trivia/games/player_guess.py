"""
Controller for the "Guess the Player" games (MLB, NFL, NBA).

Wires a DataManager, a GameState and a SearchDropdown together and turns
their results into status messages. ``run`` drives the game from a
terminal prompt.
"""

import random
from typing import Any, Callable, Dict, List, Optional

from .definitions import GameDefinition
from .feedback import CellFeedback, MatchResult, compare_records
from .game_state import GameState, GameStatus
from ..components.search_dropdown import SearchDropdown
from ..data_manager import DataManager
from ..errors import GameStateError, ParseError
from ..utils.helpers import first_initial
from ..utils.log import info, warn, error, success, debug

RESULT_MARKERS = {
    MatchResult.CORRECT: '🟩',
    MatchResult.CLOSE: '🟨',
    MatchResult.WRONG: '⬛',
}

# Candidates printed per search in the terminal
DISPLAYED_CANDIDATES = 10

HELP_TEXT = """Type part of a player, team or league name to search.
Enter a number from the list to guess that player, or :guess <full name>.
Commands: :team (team hint), :initial (first-initial hint), :new, :help, :quit"""


class PlayerGuessGame:
    """One player guessing game session."""

    def __init__(
        self,
        definition: GameDefinition,
        data_manager: Optional[DataManager] = None,
        rng: Optional[random.Random] = None,
    ):
        self.definition = definition
        self.data_manager = data_manager or DataManager(
            schema=definition.schema,
            identity_field=definition.identity_field,
            search_columns=definition.search_columns,
        )
        self.rng = rng or random.Random()
        self.state: Optional[GameState] = None
        self.selected_player: Optional[Dict[str, Any]] = None
        self.message = ''
        self.message_type = ''
        self.dropdown = SearchDropdown(
            on_filter=self.data_manager.filter_players,
            on_select=self._on_select,
            format_item=definition.format_item,
            get_display_value=definition.display_value,
        )

    def init(self) -> bool:
        """Load player data and start the first game. Returns False on failure."""
        try:
            if not self.data_manager.is_loaded:
                self.data_manager.load_players(self.definition.data_file)
            self.state = GameState(
                self.data_manager.players,
                identity_field=self.definition.identity_field,
                team_field=self.definition.team_field,
                rng=self.rng,
            )
        except ParseError as e:
            error(f"Game initialization error: {e}")
            self._set_message('Failed to load player data. Please try again.', 'error')
            return False

        self.start_new_game()
        return True

    def start_new_game(self) -> None:
        self.state.reset()
        self.dropdown.clear()
        self.selected_player = None
        self._set_message('')
        debug(f"Target player: {self.state.target[self.definition.identity_field]}")

    def _on_select(self, player: Dict[str, Any]) -> None:
        self.selected_player = player

    def _set_message(self, message: str, message_type: str = '') -> None:
        self.message = message
        self.message_type = message_type

    def make_guess(self) -> Optional[GameStatus]:
        """
        Submit the selected player as a guess.

        Returns:
            The game status after the guess, or None if nothing was counted
        """
        player = self.selected_player
        if player is None:
            self._set_message('Select a player first.', 'warning')
            return None
        if self.state.is_over:
            self.dropdown.clear()
            self.selected_player = None
            self._set_message('This game is over. Start a new game to keep guessing.', 'warning')
            return None

        try:
            status = self.state.add_guess(player)
        except GameStateError as e:
            self._set_message(str(e), 'warning')
            return None
        finally:
            self.dropdown.clear()
            self.selected_player = None

        target = self.state.target
        name = target[self.definition.identity_field]
        if status == GameStatus.WON:
            self._set_message(f"🎉 Congratulations! You guessed {name}!", 'success')
        elif status == GameStatus.LOST:
            self._set_message(f"😔 Game Over! The answer was {self.definition.format_item(target)}", 'error')
        else:
            self._set_message(f"{self.state.guesses_remaining} guesses remaining", '')
        return status

    def use_team_hint(self) -> Optional[str]:
        if not self.state.can_use_team_hint():
            return None
        return self.state.use_team_hint()

    def use_initial_hint(self) -> Optional[str]:
        if not self.state.can_use_initial_hint():
            return None
        return self.state.use_initial_hint()

    def guess_rows(self) -> List[List[CellFeedback]]:
        return [compare_records(guess, self.state.target, self.definition) for guess in self.state.guesses]

    def render_board(self) -> str:
        """Text rendering of the header and every guess row."""
        columns = self.definition.columns
        lines = [' | '.join(columns)]
        for row in self.guess_rows():
            cells = []
            for cell in row:
                marker = RESULT_MARKERS.get(cell.result, '')
                cells.append(f"{marker}{cell.text}" if marker else cell.text)
            lines.append(' | '.join(cells))
        return '\n'.join(lines)

    # === Terminal loop ===

    def run(self, input_fn: Callable[[str], str] = input) -> None:
        """Play from the terminal until the user quits or input ends."""
        if self.state is None and not self.init():
            warn(self.message)
            return

        info(self.definition.name)
        info(HELP_TEXT)

        while True:
            try:
                line = input_fn(f"[{len(self.state.guesses)}/{self.state.max_guesses}] > ").strip()
            except EOFError:
                break

            if not line:
                continue
            if line == ':quit':
                break
            if not self.handle_command(line):
                continue
            if self.state.is_over:
                info("Type :new for another game or :quit to exit.")

    def handle_command(self, line: str) -> bool:
        """Process one line of terminal input. Returns True if a guess was counted."""
        if line == ':help':
            info(HELP_TEXT)
        elif line == ':new':
            self.start_new_game()
            info("New game started.")
        elif line == ':team':
            info(self.team_hint_message())
        elif line == ':initial':
            info(self.initial_hint_message())
        elif line.startswith(':guess '):
            name = line[len(':guess '):].strip()
            player = self.data_manager.find_player(name)
            if player is None:
                warn(f"No player named '{name}'.")
                return False
            return self._submit(player)
        elif line.isdigit() and self.dropdown.filtered_items:
            index = int(line) - 1
            if not 0 <= index < min(len(self.dropdown.filtered_items), DISPLAYED_CANDIDATES):
                warn("No such choice.")
                return False
            return self._submit(self.dropdown.filtered_items[index])
        else:
            self._show_candidates(line)
        return False

    def team_hint_message(self) -> str:
        hint = self.use_team_hint()
        if hint:
            return f"Team hint: {hint}"
        return self._hint_unavailable('Team', self.state.team_hint_used,
                                      self.state.target[self.definition.team_field],
                                      self.state.team_hint_threshold)

    def initial_hint_message(self) -> str:
        hint = self.use_initial_hint()
        if hint:
            return f"Initial hint: {hint}"
        return self._hint_unavailable('Initial', self.state.initial_hint_used,
                                      first_initial(self.state.target[self.definition.identity_field]),
                                      self.state.initial_hint_threshold)

    def _hint_unavailable(self, label: str, used: bool, value: str, threshold: int) -> str:
        if used:
            return f"{label} hint already used: {value}"
        if self.state.is_over:
            return "Hints are not available once the game is over."
        return f"{label} hint unlocks after {threshold} wrong guesses."

    def _submit(self, player: Dict[str, Any]) -> bool:
        self.dropdown.select_item(player)
        if self.make_guess() is None:
            warn(self.message)
            return False
        info(self.render_board())
        self._announce()
        return True

    def _show_candidates(self, query: str) -> None:
        candidates = self.dropdown.perform_search(query)
        if self.dropdown.error_message:
            warn(self.dropdown.error_message)
            return
        if not candidates:
            info("No results found")
            return
        for number, label in enumerate(self.dropdown.formatted_items()[:DISPLAYED_CANDIDATES], start=1):
            info(f"  {number}. {label}")

    def _announce(self) -> None:
        if self.message_type == 'success':
            success(self.message)
        elif self.message_type == 'error':
            warn(self.message)
        else:
            info(self.message)
            if self.state.can_use_team_hint():
                info("Team hint available (:team)")
            if self.state.can_use_initial_hint():
                info("Initial hint available (:initial)")
