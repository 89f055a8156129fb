"""Tests for sports_trivia.components.search_dropdown module."""

import threading

import pytest

from sports_trivia.components import SearchDropdown


class FakeTimer:
    """Stand-in for threading.Timer that fires only when told to."""

    created = []

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.started = False
        self.cancelled = False
        self.daemon = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args, **self.kwargs)


NAMES = ['Aaron Judge', 'Aaron Nola', 'Adley Rutschman', 'Alex Bregman', 'Bryce Harper']


def name_filter(query):
    return sorted(n for n in NAMES if query.lower() in n.lower())


@pytest.fixture
def selections():
    return []


@pytest.fixture
def dropdown(selections):
    FakeTimer.created = []
    return SearchDropdown(
        on_filter=name_filter,
        on_select=selections.append,
        format_item=lambda name: f"<{name}>",
        timer_factory=FakeTimer,
    )


class TestDebounce:
    """Tests for debounced input."""

    def test_filter_waits_for_timer(self, dropdown):
        """Test that typing does not filter until the quiet period ends."""
        dropdown.handle_input('aa')
        assert dropdown.filtered_items == []
        assert FakeTimer.created[-1].interval == dropdown.debounce_delay

        FakeTimer.created[-1].fire()
        assert dropdown.filtered_items == ['Aaron Judge', 'Aaron Nola']
        assert dropdown.is_visible

    def test_fast_typing_runs_filter_once(self, dropdown):
        """Test that each keystroke cancels the pending search."""
        calls = []
        dropdown.on_filter = lambda q: calls.append(q) or name_filter(q)

        dropdown.handle_input('a')
        dropdown.handle_input('aa')
        dropdown.handle_input('aar')
        for timer in FakeTimer.created:
            timer.fire()

        assert calls == ['aar']
        assert [t.cancelled for t in FakeTimer.created] == [True, True, False]

    def test_query_trimmed(self, dropdown):
        """Test that the filter receives the trimmed query."""
        dropdown.handle_input('  judge  ')
        FakeTimer.created[-1].fire()
        assert dropdown.filtered_items == ['Aaron Judge']

    def test_real_timer(self):
        """Test the default threading.Timer path end to end."""
        done = threading.Event()
        dropdown = SearchDropdown(on_filter=lambda q: done.set() or name_filter(q), debounce_delay=0.01)
        dropdown.handle_input('harper')
        assert done.wait(2.0)
        dropdown.destroy()

    def test_destroy_cancels_pending(self, dropdown):
        """Test that destroy cancels the pending search."""
        dropdown.handle_input('aa')
        dropdown.destroy()
        assert FakeTimer.created[-1].cancelled


class TestPerformSearch:
    """Tests for filtering and truncation."""

    def test_empty_query_hides(self, dropdown):
        """Test that an empty query hides the list."""
        dropdown.perform_search('aa')
        dropdown.perform_search('')
        assert not dropdown.is_visible
        assert dropdown.filtered_items == []

    def test_no_results_hides(self, dropdown):
        """Test that no matches hides the list."""
        assert dropdown.perform_search('zzz') == []
        assert not dropdown.is_visible

    def test_max_results(self, dropdown):
        """Test truncation to max_results."""
        dropdown.max_results = 2
        assert dropdown.perform_search('a') == ['Aaron Judge', 'Aaron Nola']

    def test_filter_error(self, dropdown):
        """Test that a failing filter surfaces an error message."""
        def broken(query):
            raise RuntimeError("boom")

        dropdown.on_filter = broken
        assert dropdown.perform_search('aa') == []
        assert dropdown.error_message == 'Search failed. Please try again.'

    def test_formatted_items(self, dropdown):
        """Test candidate labels use format_item."""
        dropdown.perform_search('nola')
        assert dropdown.formatted_items() == ['<Aaron Nola>']


class TestKeyboardNavigation:
    """Tests for highlight movement and confirm."""

    def test_move_down_clamps(self, dropdown):
        """Test that moving down stops at the last candidate."""
        dropdown.perform_search('aa')
        assert dropdown.highlighted_index == -1
        assert dropdown.move_down() == 0
        assert dropdown.move_down() == 1
        assert dropdown.move_down() == 1

    def test_move_up_clamps(self, dropdown):
        """Test that moving up stops at -1 without wrapping."""
        dropdown.perform_search('aa')
        dropdown.move_down()
        assert dropdown.move_up() == -1
        assert dropdown.move_up() == -1

    def test_no_navigation_when_hidden(self, dropdown):
        """Test that keys do nothing with no visible candidates."""
        assert dropdown.move_down() == -1
        assert dropdown.confirm() is None

    def test_confirm_selects_highlighted(self, dropdown, selections):
        """Test that confirm commits the highlighted candidate."""
        dropdown.perform_search('aa')
        dropdown.move_down()
        dropdown.move_down()

        assert dropdown.confirm() == 'Aaron Nola'
        assert selections == ['Aaron Nola']
        assert dropdown.selected_item == 'Aaron Nola'
        assert dropdown.input_value == 'Aaron Nola'
        assert dropdown.filtered_items == []
        assert not dropdown.is_visible

    def test_confirm_without_highlight(self, dropdown, selections):
        """Test that confirm with nothing highlighted selects nothing."""
        dropdown.perform_search('aa')
        assert dropdown.confirm() is None
        assert selections == []

    def test_escape_hides(self, dropdown):
        """Test that escape hides and resets the highlight."""
        dropdown.perform_search('aa')
        dropdown.move_down()
        dropdown.escape()
        assert not dropdown.is_visible
        assert dropdown.highlighted_index == -1

    def test_new_search_resets_highlight(self, dropdown):
        """Test that a new search clears the highlight."""
        dropdown.perform_search('aa')
        dropdown.move_down()
        dropdown.perform_search('a')
        assert dropdown.highlighted_index == -1


class TestSelection:
    """Tests for select_item and clear."""

    def test_select_item(self, dropdown, selections):
        """Test direct selection."""
        dropdown.perform_search('harper')
        dropdown.select_item('Bryce Harper')
        assert selections == ['Bryce Harper']
        assert dropdown.filtered_items == []

    def test_clear(self, dropdown):
        """Test that clear resets input and selection."""
        dropdown.perform_search('harper')
        dropdown.select_item('Bryce Harper')
        dropdown.clear()
        assert dropdown.input_value == ''
        assert dropdown.selected_item is None
        assert not dropdown.is_visible

    def test_pending_search_dropped_on_select(self, dropdown):
        """Test that a search still waiting on its timer cannot refill the list after a selection."""
        dropdown.perform_search('aaron')
        dropdown.handle_input('aaron n')
        stale = FakeTimer.created[-1]

        dropdown.select_item('Aaron Judge')
        stale.fire()

        assert stale.cancelled
        assert dropdown.filtered_items == []
        assert not dropdown.is_visible
        assert dropdown.selected_item == 'Aaron Judge'

    def test_pending_search_dropped_on_clear(self, dropdown):
        """Test that clear cancels the pending search."""
        dropdown.handle_input('harper')
        dropdown.clear()
        FakeTimer.created[-1].fire()
        assert dropdown.filtered_items == []
        assert not dropdown.is_visible
