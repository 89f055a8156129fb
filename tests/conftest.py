"""Shared fixtures."""

import pytest

from sports_trivia.utils import log


@pytest.fixture(autouse=True)
def reset_log_state():
    """CLI tests flip the module-level log settings; restore the defaults."""
    log.set_verbosity(False)
    log.set_use_emoji(True)
    log.set_use_color(True)
    log.set_show_timestamp(False)
    yield
