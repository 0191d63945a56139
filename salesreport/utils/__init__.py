"""Utility functions and helpers."""

from .money import Money
from .csv_normalization import normalize_column_name, clean_amount

__all__ = [
    'Money',
    'normalize_column_name',
    'clean_amount'
]
