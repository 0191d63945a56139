"""Report ordering and the final report structure."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from ..utils.money import Money
from .aggregator import AggregateEntry, Aggregator


class SortOrder(str, Enum):
    """Supported report orderings."""

    UNITS = 'units'
    REVENUE = 'revenue'


def _units_key(entry: AggregateEntry) -> Tuple[int, str]:
    return -entry.total_units, entry.key


def _revenue_key(entry: AggregateEntry) -> Tuple[int, str]:
    return -entry.total_revenue.cents, entry.key


def sort_entries(
    entries: Iterable[AggregateEntry],
    order: SortOrder = SortOrder.UNITS
) -> List[AggregateEntry]:
    """Sort entries best-selling first.

    By units, highest unit count first; by revenue, highest revenue first.
    Entries with equal totals are ordered by key, case-sensitively. Keys are
    unique, so the order is total.

    Args:
        entries: Aggregated entries in any order
        order: Primary sort key

    Returns:
        New sorted list
    """
    key = _revenue_key if SortOrder(order) is SortOrder.REVENUE else _units_key
    return sorted(entries, key=key)


@dataclass(frozen=True)
class Report:
    """Sorted entries with grand totals."""

    entries: Tuple[AggregateEntry, ...]
    total_units: int
    total_revenue: Money
    order: SortOrder = SortOrder.UNITS

    @property
    def keys(self) -> List[str]:
        return [entry.key for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


def build_report(aggregator: Aggregator, order: SortOrder = SortOrder.UNITS) -> Report:
    """Snapshot an aggregator into a sorted Report."""
    total_units, total_revenue = aggregator.totals()
    return Report(
        entries=tuple(sort_entries(aggregator.entries(), order)),
        total_units=total_units,
        total_revenue=total_revenue,
        order=SortOrder(order)
    )
