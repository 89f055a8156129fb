"""CSV parsing and schema modules for player data files."""

from .csv_parser import CSVParser, coerce_value
from .schemas import (
    ColumnSchema,
    ColumnType,
    Schema,
    SCHEMAS,
    MLB_PLAYER,
    NFL_PLAYER,
    NBA_PLAYER,
    get_schema,
)

__all__ = [
    'CSVParser',
    'coerce_value',
    'ColumnSchema',
    'ColumnType',
    'Schema',
    'SCHEMAS',
    'MLB_PLAYER',
    'NFL_PLAYER',
    'NBA_PLAYER',
    'get_schema',
]
