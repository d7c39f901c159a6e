"""Parsers for journal import and chart of accounts files."""

from .chart_parser import ChartParser
from .journal_parser import JournalParser

__all__ = [
    "ChartParser",
    "JournalParser",
]
