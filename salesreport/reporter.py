from pathlib import Path
from typing import Iterable, Optional, Union
import logging

from .errors import AccumulatorOverflowError, SaleRecordError
from .processors.aggregator import Aggregator
from .processors.grouper import Grouper
from .processors.record_reader import read_sale_lines
from .processors.report import Report, SortOrder, build_report

logger = logging.getLogger(__name__)

class SalesReporter:
    """Runs one report: reads sales files, groups and accumulates them."""

    def __init__(self, grouper: Optional[Grouper] = None, order: SortOrder = SortOrder.UNITS):
        self.grouper = grouper if grouper is not None else Grouper()
        self.order = SortOrder(order)
        self.aggregator = Aggregator()
        self.lines_read = 0

    @classmethod
    def from_groups_file(cls, groups_path: Optional[Union[str, Path]] = None,
                         order: SortOrder = SortOrder.UNITS) -> 'SalesReporter':
        """Create a reporter, loading group rules from a file if given."""
        grouper = Grouper.from_file(groups_path) if groups_path else Grouper()
        if groups_path:
            logger.info(f"Loaded {len(grouper)} group rules from {groups_path}")
        return cls(grouper, order)

    def process_files(self, paths: Iterable[Union[str, Path]]) -> None:
        """Process sales files in order. Any error aborts the run."""
        for path in paths:
            self.process_file(path)

    def process_file(self, path: Union[str, Path]) -> None:
        """Accumulate every sale line of a single CSV file."""
        logger.info(f"Processing {path}")
        count = 0
        for line in read_sale_lines(path):
            try:
                self.aggregator.observe_line(line, self.grouper)
            except AccumulatorOverflowError as e:
                raise SaleRecordError(str(e), path, line.row) from e
            count += 1
        self.lines_read += count
        logger.info(f"Read {count} sale lines from {path}")

    def build(self) -> Report:
        """Sort the accumulated entries into a report."""
        report = build_report(self.aggregator, self.order)
        logger.debug(f"Built report with {len(report)} entries from {self.lines_read} lines")
        return report
