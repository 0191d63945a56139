"""Per-product accumulation of units and revenue."""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple

from ..errors import AccumulatorOverflowError
from ..utils.money import MAX_CENTS, Money
from .grouper import Grouper
from .record_reader import SaleLine

logger = logging.getLogger(__name__)

MAX_UNITS = MAX_CENTS


@dataclass
class AggregateEntry:
    """Running totals for one report key (product or group name)."""

    key: str
    total_units: int = 0
    total_revenue: Money = field(default_factory=Money.zero)


class Aggregator:
    """Accumulates sale lines into one entry per report key.

    An aggregator belongs to a single report run; create a new one for each
    report.
    """

    def __init__(self):
        self._entries: Dict[str, AggregateEntry] = {}
        self._total_units = 0
        self._total_revenue = Money.zero()

    def observe(self, key: str, units: int, price: Money) -> None:
        """Add ``units`` sold at unit price ``price`` to the entry for ``key``.

        Args:
            key: Report key (group name or raw product name)
            units: Quantity sold, at least 1
            price: Price of a single unit

        Raises:
            AccumulatorOverflowError: If a total would leave the 64-bit range.
                The aggregator is left unchanged in that case.
        """
        if isinstance(units, bool) or not isinstance(units, int):
            raise TypeError(f"units must be an int, got {type(units).__name__}")
        if units < 1:
            raise ValueError(f"units must be at least 1, got {units}")
        if not isinstance(price, Money):
            raise TypeError(f"price must be Money, got {type(price).__name__}")

        entry = self._entries.get(key)
        current_units = entry.total_units if entry else 0
        current_revenue = entry.total_revenue if entry else Money.zero()

        # Nothing is mutated until every new total is known to fit
        line_revenue = price * units
        new_units = current_units + units
        new_total_units = self._total_units + units
        if new_units > MAX_UNITS or new_total_units > MAX_UNITS:
            raise AccumulatorOverflowError(f"unit count for {key!r} exceeds the representable range")
        new_revenue = current_revenue + line_revenue
        new_total_revenue = self._total_revenue + line_revenue

        if entry is None:
            entry = AggregateEntry(key)
            self._entries[key] = entry
        entry.total_units = new_units
        entry.total_revenue = new_revenue
        self._total_units = new_total_units
        self._total_revenue = new_total_revenue

    def observe_line(self, line: SaleLine, grouper: Grouper) -> str:
        """Accumulate a parsed sale line under its resolved key.

        Returns:
            The key the line was counted under
        """
        key = grouper.resolve(line.product_name)
        self.observe(key, line.quantity, line.unit_price)
        return key

    def entries(self) -> List[AggregateEntry]:
        """Return a snapshot of all entries in no particular order."""
        return [replace(entry) for entry in self._entries.values()]

    def totals(self) -> Tuple[int, Money]:
        """Return (total units, total revenue) across all entries."""
        return self._total_units, self._total_revenue

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
