"""Exception classes for sales report generation."""

from pathlib import Path
from typing import Optional, Union


class SalesReportError(Exception):
    """Base exception for salesreport."""
    pass


class ConfigError(SalesReportError):
    """Configuration-related errors."""
    pass


class InvalidAmountError(SalesReportError, ValueError):
    """A money amount is negative or not a number."""
    pass


class AccumulatorOverflowError(SalesReportError, OverflowError):
    """A running total left the representable range."""
    pass


class RuleError(SalesReportError):
    """Base class for group rule loading errors."""

    def __init__(self, message: str, source: str = '<rules>', line_number: int = 0):
        self.source = source
        self.line_number = line_number
        super().__init__(f"{source}, line {line_number}: {message}")


class InvalidRuleSyntaxError(RuleError):
    """A rule line is not in ``NAME | PATTERN`` form."""
    pass


class InvalidPatternError(RuleError):
    """A rule pattern is not a valid regular expression."""
    pass


class UnknownLayoutError(SalesReportError):
    """The CSV header matches none of the known export layouts."""
    pass


class SaleRecordError(SalesReportError):
    """A CSV row could not be turned into a sale line."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        row: int = 0,
        column: Optional[int] = None
    ):
        self.path = path
        self.row = row
        self.column = column
        self.reason = message
        parts = []
        if path is not None:
            parts.append(str(path))
        if row:
            parts.append(f"row {row}" if column is None else f"row {row}, column {column}")
        parts.append(message)
        super().__init__(': '.join(parts))
