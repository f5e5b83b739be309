"""Ranking export utilities."""

from .csv import DEFAULT_EXPORT_COLUMNS, RankingExportError, export_rankings_to_csv

__all__ = [
    "DEFAULT_EXPORT_COLUMNS",
    "RankingExportError",
    "export_rankings_to_csv",
]
