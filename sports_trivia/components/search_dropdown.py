"""
Searchable dropdown used by every player guessing game.

Filtering is delegated to the caller's ``on_filter`` function. Input is
debounced so the filter only runs after typing pauses. Keyboard
navigation clamps at both ends of the candidate list.
"""

import threading
from typing import Any, Callable, List, Optional

from ..utils.constants import DEBOUNCE_DELAY, MAX_RESULTS
from ..utils.log import error


class SearchDropdown:
    """Candidate list, highlight and selection for a free-text player search."""

    def __init__(
        self,
        on_filter: Callable[[str], List[Any]],
        on_select: Optional[Callable[[Any], None]] = None,
        format_item: Callable[[Any], str] = str,
        get_display_value: Callable[[Any], str] = str,
        debounce_delay: float = DEBOUNCE_DELAY,
        max_results: int = MAX_RESULTS,
        timer_factory: Callable[..., Any] = threading.Timer,
    ):
        self.on_filter = on_filter
        self.on_select = on_select or (lambda item: None)
        self.format_item = format_item
        self.get_display_value = get_display_value
        self.debounce_delay = debounce_delay
        self.max_results = max_results
        self.timer_factory = timer_factory

        self.input_value = ''
        self.filtered_items: List[Any] = []
        self.highlighted_index = -1
        self.selected_item: Any = None
        self.is_visible = False
        self.error_message: Optional[str] = None
        self._debounce_timer = None

    # === Input ===

    def handle_input(self, text: str) -> None:
        """Record typed text and (re)start the debounce timer."""
        self.input_value = text
        query = text.strip()

        self._cancel_timer()
        self._debounce_timer = self.timer_factory(self.debounce_delay, self.perform_search, args=(query,))
        self._debounce_timer.daemon = True
        self._debounce_timer.start()

    def perform_search(self, query: str) -> List[Any]:
        """Run the filter immediately and refresh the candidate list."""
        self.error_message = None

        if not query:
            self.filtered_items = []
            self.hide()
            return []

        try:
            self.filtered_items = list(self.on_filter(query))[:self.max_results]
        except Exception as e:
            error(f"SearchDropdown: Error during search: {e}")
            self.filtered_items = []
            self.error_message = 'Search failed. Please try again.'
            self.is_visible = True
            return []

        self.highlighted_index = -1
        if self.filtered_items:
            self.show()
        else:
            self.hide()
        return self.filtered_items

    # === Keyboard ===

    def move_down(self) -> int:
        if self._navigable():
            self.highlighted_index = min(self.highlighted_index + 1, len(self.filtered_items) - 1)
        return self.highlighted_index

    def move_up(self) -> int:
        if self._navigable():
            self.highlighted_index = max(self.highlighted_index - 1, -1)
        return self.highlighted_index

    def confirm(self) -> Optional[Any]:
        """Select the highlighted candidate, if any."""
        if not self._navigable() or self.highlighted_index < 0:
            return None
        item = self.filtered_items[self.highlighted_index]
        self.select_item(item)
        return item

    def escape(self) -> None:
        self.hide()

    def _navigable(self) -> bool:
        return self.is_visible and bool(self.filtered_items)

    # === Selection ===

    def select_item(self, item: Any) -> None:
        """Commit a candidate: set the input text, clear the list, notify."""
        self._cancel_timer()
        self.selected_item = item
        self.input_value = self.get_display_value(item)
        self.filtered_items = []
        self.hide()
        self.on_select(item)

    def formatted_items(self) -> List[str]:
        return [self.format_item(item) for item in self.filtered_items]

    def show(self) -> None:
        self.is_visible = True

    def hide(self) -> None:
        self.is_visible = False
        self.highlighted_index = -1

    def clear(self) -> None:
        self._cancel_timer()
        self.input_value = ''
        self.selected_item = None
        self.filtered_items = []
        self.hide()

    def destroy(self) -> None:
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._debounce_timer is not None:
            self._debounce_timer.cancel()
            self._debounce_timer = None
