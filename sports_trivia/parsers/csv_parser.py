"""
Schema-aware CSV parser for player data files.

Turns raw delimited text into typed records. Each row is coerced column by
column according to its ColumnSchema and then validated against the column
constraints. Bad rows are logged and skipped unless strict mode is on.
"""

import re
from typing import Any, Callable, Dict, List, Optional

from .schemas import ColumnSchema, ColumnType, Schema
from ..errors import (
    InputError,
    MissingHeaderError,
    ParseError,
    RequiredFieldError,
    ValidationError,
)
from ..utils.constants import BOOLEAN_TRUE_VALUES
from ..utils.helpers import parse_date, parse_float, parse_int
from ..utils.log import warn, error, debug

Record = Dict[str, Any]

_LINE_SPLIT_RE = re.compile(r'\r\n|\r|\n')


# === Coercion (one function per ColumnType) ===

def _coerce_string(value: str, column: ColumnSchema, name: str) -> Any:
    return str(value)


def _coerce_float(value: str, column: ColumnSchema, name: str) -> Any:
    result = parse_float(value)
    if result is None:
        if column.required:
            raise ValidationError(f"Invalid number: {value}", column=name, value=value)
        return column.default if column.has_default else 0.0
    return result


def _coerce_integer(value: str, column: ColumnSchema, name: str) -> Any:
    result = parse_int(value)
    if result is None:
        if column.required:
            raise ValidationError(f"Invalid integer: {value}", column=name, value=value)
        return column.default if column.has_default else 0
    return result


def _coerce_boolean(value: str, column: ColumnSchema, name: str) -> Any:
    return value.lower() in BOOLEAN_TRUE_VALUES


def _coerce_date(value: str, column: ColumnSchema, name: str) -> Any:
    result = parse_date(value)
    if result is None and column.required:
        raise ValidationError(f"Invalid date: {value}", column=name, value=value)
    return result


_COERCERS: Dict[ColumnType, Callable[[str, ColumnSchema, str], Any]] = {
    ColumnType.STRING: _coerce_string,
    ColumnType.NUMBER: _coerce_float,
    ColumnType.INTEGER: _coerce_integer,
    ColumnType.FLOAT: _coerce_float,
    ColumnType.BOOLEAN: _coerce_boolean,
    ColumnType.DATE: _coerce_date,
}


def coerce_value(value: str, column: ColumnSchema, name: str = 'unknown') -> Any:
    """
    Coerce a raw CSV field according to its column schema.

    Args:
        value: Raw field text
        column: Column schema
        name: Column name (for error messages)

    Returns:
        The typed value, the column default, None or ''
    """
    if not value:
        if column.has_default:
            return column.default
        if column.required:
            raise RequiredFieldError(name)
        return None if column.nullable else ''

    return _COERCERS[ColumnType(column.type)](value, column, name)


def _is_empty(value: Any) -> bool:
    return value is None or value == ''


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CSVParser:
    """Reusable CSV parser shared by all games."""

    def __init__(
        self,
        delimiter: str = ',',
        quote_char: str = '"',
        skip_empty_lines: bool = True,
        trim_values: bool = True,
        validate_headers: bool = True,
        strict_mode: bool = False,
    ):
        self.delimiter = delimiter
        self.quote_char = quote_char
        self.skip_empty_lines = skip_empty_lines
        self.trim_values = trim_values
        self.validate_headers = validate_headers
        self.strict_mode = strict_mode
        # Number of rows skipped during the most recent parse
        self.skipped_rows = 0

    def parse(self, csv_text: str, schema: Optional[Schema] = None) -> List[Record]:
        """
        Parse CSV text into records.

        Args:
            csv_text: Raw CSV text
            schema: Optional schema for coercion and validation

        Returns:
            List of record dicts in file order

        Raises:
            InputError: Empty or non-text input, or no header
            MissingHeaderError: Required schema columns missing from header
            ValidationError: A row failed validation (strict mode only)
        """
        try:
            return self._parse(csv_text, schema)
        except ParseError as e:
            error(f"CSV parsing failed: {e}")
            raise

    def _parse(self, csv_text: str, schema: Optional[Schema]) -> List[Record]:
        if not csv_text or not isinstance(csv_text, str):
            raise InputError("Invalid CSV text provided")

        lines = self.split_lines(csv_text)
        headers = self.parse_line(lines[0])
        if not any(headers):
            raise InputError("No headers found in CSV")

        if schema is not None and self.validate_headers:
            self.check_headers(headers, schema)

        self.skipped_rows = 0
        records = []
        for index, line in enumerate(lines[1:], start=1):
            line_number = index + 1

            if self.skip_empty_lines and not line.strip():
                continue

            values = self.parse_line(line)
            if all(not v.strip() for v in values):
                continue

            try:
                record = self.create_record(headers, values, schema, line_number)
                if schema is not None:
                    self.validate_record(record, schema, line_number)
            except ValidationError as e:
                warn(f"Error parsing line {line_number}: {e}")
                if self.strict_mode:
                    raise
                self.skipped_rows += 1
                continue

            records.append(record)

        debug(f"Parsed {len(records)} rows ({self.skipped_rows} skipped)")
        return records

    def split_lines(self, csv_text: str) -> List[str]:
        """Split text on any mix of CRLF, CR and LF line endings."""
        return _LINE_SPLIT_RE.split(csv_text)

    def parse_line(self, line: str) -> List[str]:
        """
        Split a single CSV line into fields.

        The quote character toggles quoted mode; a doubled quote inside
        quotes is a literal quote; the delimiter only separates fields
        outside quotes.
        """
        values = []
        current = []
        in_quotes = False
        quote = self.quote_char
        i = 0

        while i < len(line):
            char = line[i]

            if char == quote:
                if in_quotes and i + 1 < len(line) and line[i + 1] == quote:
                    current.append(quote)
                    i += 2
                    continue
                in_quotes = not in_quotes
            elif char == self.delimiter and not in_quotes:
                values.append(self._finish_field(current))
                current = []
            else:
                current.append(char)

            i += 1

        values.append(self._finish_field(current))
        return values

    def _finish_field(self, chars: List[str]) -> str:
        field = ''.join(chars)
        return field.strip() if self.trim_values else field

    def check_headers(self, headers: List[str], schema: Schema) -> None:
        """Raise MissingHeaderError if any required schema column is absent."""
        present = set(headers)
        missing = [name for name in schema.required_columns if name not in present]
        if missing:
            raise MissingHeaderError(missing)

    def create_record(
        self,
        headers: List[str],
        values: List[str],
        schema: Optional[Schema] = None,
        line_number: Optional[int] = None,
    ) -> Record:
        """Zip headers to values, coercing columns the schema knows about."""
        record = {}
        for index, header in enumerate(headers):
            value = values[index] if index < len(values) else ''

            if schema is not None and header in schema:
                try:
                    record[header] = coerce_value(value, schema[header], header)
                except RequiredFieldError:
                    raise RequiredFieldError(header, line_number) from None
                except ValidationError as e:
                    raise ValidationError(
                        str(e), column=header, value=value, line_number=line_number
                    ) from e
            else:
                record[header] = value

        return record

    def validate_record(self, record: Record, schema: Schema, line_number: Optional[int] = None) -> None:
        """Check every schema column of a record against its constraints."""
        for name, column in schema.columns.items():
            value = record.get(name)

            if column.required and _is_empty(value):
                raise RequiredFieldError(name, line_number)

            if not _is_empty(value):
                self._validate_constraints(value, column, name, line_number)

    def _validate_constraints(self, value: Any, column: ColumnSchema, name: str,
                              line_number: Optional[int]) -> None:
        def fail(message: str) -> ValidationError:
            return ValidationError(message, column=name, value=value, line_number=line_number)

        if _is_number(value):
            if column.min is not None and value < column.min:
                raise fail(f"Value {value} in column '{name}' is below minimum {column.min}")
            if column.max is not None and value > column.max:
                raise fail(f"Value {value} in column '{name}' is above maximum {column.max}")

        if isinstance(value, str):
            if column.min_length is not None and len(value) < column.min_length:
                raise fail(f"Value '{value}' in column '{name}' is too short")
            if column.max_length is not None and len(value) > column.max_length:
                raise fail(f"Value '{value}' in column '{name}' is too long")
            if column.pattern and not re.search(column.pattern, value):
                raise fail(f"Value '{value}' in column '{name}' doesn't match pattern")

        if column.enum is not None and value not in column.enum:
            raise fail(f"Value '{value}' in column '{name}' is not in allowed values")
