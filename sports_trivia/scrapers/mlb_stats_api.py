"""
MLB Stats API client for current-season hitting stats.

Looks players up by name, then fetches their season hitting line. Bulk
enrichment runs in small concurrent batches with a short pause between
batches; a player whose lookup fails is simply left out.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Sequence

import requests

from ..errors import LoadTimeoutError, NetworkError, NotEnoughPlayersError
from ..utils.constants import (
    BATCH_PAUSE,
    BATCH_SIZE,
    LOAD_TIMEOUT,
    MIN_ACTIVE_PLAYERS,
    MIN_AT_BATS,
    MLB_SEASON,
    MLB_STATS_API_BASE,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from ..utils.helpers import safe_float, safe_int
from ..utils.log import info, debug, success

INT_STATS = ['homeRuns', 'rbi', 'runs', 'hits', 'stolenBases', 'doubles', 'atBats', 'gamesPlayed']
FLOAT_STATS = ['avg', 'ops']


def parse_hitting_stats(stat: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert an API ``stat`` block into typed stats.

    The API reports rate stats as strings like ".305"; missing values are 0.
    """
    stats = {key: safe_float(stat.get(key, 0)) for key in FLOAT_STATS}
    stats.update({key: safe_int(stat.get(key, 0)) for key in INT_STATS})
    return stats


class MLBStatsClient:
    """Thin wrapper over the read-only MLB Stats API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = MLB_STATS_API_BASE,
        season: int = MLB_SEASON,
        timeout: float = REQUEST_TIMEOUT,
        min_at_bats: int = MIN_AT_BATS,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': USER_AGENT})
        self.base_url = base_url.rstrip('/')
        self.season = season
        self.timeout = timeout
        self.min_at_bats = min_at_bats

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Request failed: {e}", url=url) from e

        if response.status_code != 200:
            raise NetworkError(f"HTTP error! status: {response.status_code}",
                               status_code=response.status_code, url=url)
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON from {url}", status_code=response.status_code, url=url) from e

    def search_player_id(self, name: str) -> Optional[int]:
        """Return the first matching person id for a name, or None."""
        data = self._get_json(f"{self.base_url}/people/search", params={'names': name})
        people = data.get('people') or []
        if not people:
            return None
        return people[0].get('id')

    def get_season_hitting(self, player_id: int) -> Optional[Dict[str, Any]]:
        """Return the raw season hitting ``stat`` block, or None if there is none."""
        data = self._get_json(
            f"{self.base_url}/people/{player_id}/stats",
            params={'stats': 'season', 'season': self.season, 'group': 'hitting'},
        )
        stats = data.get('stats') or []
        if not stats or not stats[0].get('splits'):
            return None
        return stats[0]['splits'][0].get('stat')

    def fetch_player_stats(self, player: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Look up one CSV player and build a comparison record.

        Args:
            player: Record with Player, Team and League columns

        Returns:
            Dict with id, name, team, league and stats, or None if the player
            has no season line or too few at-bats

        Raises:
            NetworkError: A request failed or returned a non-success status
        """
        player_id = self.search_player_id(player['Player'])
        if player_id is None:
            return None

        stat = self.get_season_hitting(player_id)
        if not stat:
            return None

        stats = parse_hitting_stats(stat)
        if stats['atBats'] < self.min_at_bats:
            return None

        return {
            'id': player_id,
            'name': player['Player'],
            'team': player.get('Team', ''),
            'league': player.get('League', ''),
            'stats': stats,
        }


def enrich_players(
    players: Sequence[Dict[str, Any]],
    fetch: Callable[[Dict[str, Any]], Optional[Dict[str, Any]]],
    batch_size: int = BATCH_SIZE,
    batch_pause: float = BATCH_PAUSE,
    min_active: int = MIN_ACTIVE_PLAYERS,
    load_timeout: Optional[float] = LOAD_TIMEOUT,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Dict[str, Any]]:
    """
    Fetch stats for every player in concurrent batches.

    Each batch runs ``fetch`` for up to ``batch_size`` players at once and
    waits for all of them. Failures and None results are dropped.

    Args:
        players: Player records to enrich
        fetch: Per-player fetch function (usually MLBStatsClient.fetch_player_stats)
        batch_size: Concurrent requests per batch
        batch_pause: Seconds to wait between batches
        min_active: Fewest enriched players the caller can use
        load_timeout: Wall-clock budget in seconds (None for no limit)

    Returns:
        Enriched player records in input order

    Raises:
        LoadTimeoutError: The budget ran out before all batches finished
        NotEnoughPlayersError: Fewer than ``min_active`` players were enriched
    """
    active = []
    error_count = 0
    total = len(players)
    deadline = clock() + load_timeout if load_timeout is not None else None

    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        for start in range(0, total, batch_size):
            if deadline is not None and clock() > deadline:
                raise LoadTimeoutError(
                    f"Loading stats timed out after {load_timeout:.0f}s ({start}/{total} players processed)"
                )

            batch = players[start:start + batch_size]
            futures = [executor.submit(fetch, player) for player in batch]

            for player, future in zip(batch, futures):
                exc = future.exception()
                if exc is not None:
                    debug(f"Failed to fetch stats for {player.get('Player', '?')}: {exc}")
                    error_count += 1
                    continue
                result = future.result()
                if result:
                    active.append(result)
                else:
                    error_count += 1

            processed = min(start + batch_size, total)
            info(f"Loading stats... {processed}/{total} players processed. Found {len(active)} active players.")

            if processed < total:
                sleep(batch_pause)

    debug(f"Successfully loaded stats for {len(active)} players, {error_count} failed")

    if len(active) < min_active:
        raise NotEnoughPlayersError(len(active), min_active)

    success(f"Successfully loaded stats for {len(active)} active players!")
    return active
