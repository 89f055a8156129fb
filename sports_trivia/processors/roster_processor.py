"""
Roster summaries for a parsed player file.
"""

from typing import Dict, List, Any, Optional
import pandas as pd

from .base_processor import BaseProcessor
from ..parsers.schemas import Schema


class RosterProcessor(BaseProcessor):
    """Tabulate a player file: the roster itself, stat ranges and team counts."""

    def __init__(self, records: List[Dict[str, Any]], schema: Optional[Schema] = None,
                 team_field: str = 'Team'):
        super().__init__(records, schema)
        self.team_field = team_field

    def process(self) -> Dict[str, pd.DataFrame]:
        """
        Build every roster table.

        Returns:
            Dictionary containing:
            - 'players': DataFrame of all records in schema column order
            - 'stat_summary': count/mean/min/max for each numeric column
            - 'teams': players per team, largest first
        """
        players_df = self.create_players_dataframe()
        return {
            'players': players_df,
            'stat_summary': self.create_stat_summary(players_df),
            'teams': self.create_team_counts(players_df),
        }

    def create_players_dataframe(self) -> pd.DataFrame:
        columns = list(self.schema.columns) if self.schema is not None else None
        return self.create_dataframe(self.records, columns)

    def create_stat_summary(self, players_df: pd.DataFrame) -> pd.DataFrame:
        numeric = [c for c in self.numeric_columns() if c in players_df.columns]
        if players_df.empty or not numeric:
            return pd.DataFrame()

        summary = players_df[numeric].apply(pd.to_numeric, errors='coerce').agg(['count', 'mean', 'min', 'max'])
        return summary.T.round(3)

    def create_team_counts(self, players_df: pd.DataFrame) -> pd.DataFrame:
        if players_df.empty or self.team_field not in players_df.columns:
            return pd.DataFrame()

        counts = players_df[self.team_field].value_counts()
        return counts.rename_axis(self.team_field).reset_index(name='Players')
