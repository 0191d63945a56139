"""Sales report package."""

from .processors import Aggregator, Grouper, Report, SortOrder, load_rules, read_sale_lines
from .reporter import SalesReporter
from .utils.money import Money

__all__ = [
    'Aggregator',
    'Grouper',
    'Money',
    'Report',
    'SalesReporter',
    'SortOrder',
    'load_rules',
    'read_sale_lines'
]
