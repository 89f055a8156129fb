"""Clients for external stat sources."""

from .mlb_stats_api import MLBStatsClient, enrich_players, parse_hitting_stats

__all__ = [
    'MLBStatsClient',
    'enrich_players',
    'parse_hitting_stats',
]
