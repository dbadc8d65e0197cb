"""CLI — разбор опций, чтение CSV, форматирование отчёта, точка входа."""

from .formatter import format_games, format_json_report, format_numbers, format_report, report_as_dict
from .log import setup_logging
from .options import GeneratorOptions, OptionsResult, OutputFormat, validate_options
from .reader import ReaderError, read_frequency_rows, rows_from_lines

__all__ = [
    # Options
    "GeneratorOptions",
    "OptionsResult",
    "OutputFormat",
    "validate_options",
    # Reader
    "ReaderError",
    "read_frequency_rows",
    "rows_from_lines",
    # Formatter
    "format_numbers",
    "format_games",
    "format_report",
    "format_json_report",
    "report_as_dict",
    # Logging
    "setup_logging",
]
