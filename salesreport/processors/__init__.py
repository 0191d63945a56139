"""
Processors for turning sales exports into aggregated reports.
"""

from .grouper import GroupRule, Grouper, load_rules, load_rules_file
from .record_reader import SaleLine, read_sale_lines
from .aggregator import AggregateEntry, Aggregator
from .report import Report, SortOrder, build_report, sort_entries

__all__ = [
    'GroupRule', 'Grouper', 'load_rules', 'load_rules_file',
    'SaleLine', 'read_sale_lines',
    'AggregateEntry', 'Aggregator',
    'Report', 'SortOrder', 'build_report', 'sort_entries'
]
