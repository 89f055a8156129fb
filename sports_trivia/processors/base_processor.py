"""
Base processor class for parsed player records.
"""

from typing import Dict, List, Any, Optional
import pandas as pd

from ..parsers.schemas import ColumnType, Schema


class BaseProcessor:
    """Base class for processors that tabulate parsed records."""

    def __init__(self, records: List[Dict[str, Any]], schema: Optional[Schema] = None):
        """
        Initialize processor with parsed records.

        Args:
            records: List of record dictionaries from the CSV parser
            schema: Optional schema the records were parsed with
        """
        self.records = records
        self.schema = schema
        self.record_count = len(records)

    def create_dataframe(self, rows: List[Dict], columns: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Create a DataFrame from rows with optional column ordering.

        Args:
            rows: List of row dictionaries
            columns: Optional list of column names for ordering

        Returns:
            pandas DataFrame
        """
        if not rows:
            return pd.DataFrame()

        df = pd.DataFrame(rows)

        if columns:
            # Reorder columns, keeping any extra columns at the end
            existing_cols = [c for c in columns if c in df.columns]
            extra_cols = [c for c in df.columns if c not in columns]
            df = df[existing_cols + extra_cols]

        return df

    def numeric_columns(self) -> List[str]:
        """Schema columns with a numeric type, in schema order."""
        if self.schema is None:
            return []
        numeric = (ColumnType.NUMBER, ColumnType.INTEGER, ColumnType.FLOAT)
        return [name for name, column in self.schema.columns.items() if column.type in numeric]
