"""Sales export reader.

Turns the CSV export of an e-commerce platform into ``SaleLine`` values.
Each supported platform is a ``HeaderLayout`` that knows which header cells
hold the product name, unit price and quantity.
"""

import csv
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

from ..errors import (
    AccumulatorOverflowError,
    InvalidAmountError,
    SaleRecordError,
    UnknownLayoutError,
)
from ..utils.csv_normalization import clean_amount, is_blank_row, normalize_header
from ..utils.money import MAX_CENTS, Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaleLine:
    """One parsed input row."""

    product_name: str
    unit_price: Money
    quantity: int
    row: int = 0


@dataclass(frozen=True)
class ColumnIndices:
    """Zero-based positions of the columns a sale line is built from."""

    product_name: int
    unit_price: int
    quantity: int


class HeaderLayout:
    """A known CSV header shape.

    Subclasses list the accepted header names for each logical column, first
    match wins.
    """

    name = 'generic'
    sentinels: Tuple[str, ...] = ()
    product_name_columns: Tuple[str, ...] = ()
    unit_price_columns: Tuple[str, ...] = ()
    quantity_columns: Tuple[str, ...] = ()

    def resolve(self, header: Sequence[str]) -> Optional[ColumnIndices]:
        """Resolve column indices from a normalized header row.

        Returns:
            ColumnIndices, or None if the header does not fit this layout
        """
        positions = {}
        for field_name, candidates in (
            ('product_name', self.product_name_columns),
            ('unit_price', self.unit_price_columns),
            ('quantity', self.quantity_columns),
        ):
            index = _find_column(header, candidates)
            if index is None:
                return None
            positions[field_name] = index
        return ColumnIndices(**positions)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SquarespaceLayout(HeaderLayout):
    name = 'squarespace'
    sentinels = ('Order ID',)
    product_name_columns = ('Lineitem name',)
    unit_price_columns = ('Lineitem price',)
    quantity_columns = ('Lineitem quantity',)


class GumroadLayout(HeaderLayout):
    name = 'gumroad'
    product_name_columns = ('Item Name',)
    unit_price_columns = ('Item Price ($)',)
    quantity_columns = ('Quantity',)


LAYOUTS: Tuple[HeaderLayout, ...] = (SquarespaceLayout(), GumroadLayout())


def _find_column(header: Sequence[str], candidates: Sequence[str]) -> Optional[int]:
    for name in candidates:
        if name in header:
            return list(header).index(name)
    return None


def detect_layout(
    header: Sequence[str],
    layouts: Sequence[HeaderLayout] = LAYOUTS
) -> Optional[Tuple[HeaderLayout, ColumnIndices]]:
    """Find the first layout that can resolve the given header row."""
    normalized = normalize_header(header)
    for layout in layouts:
        columns = layout.resolve(normalized)
        if columns is not None:
            return layout, columns
    return None


def parse_quantity(value: str) -> int:
    """Parse a quantity cell as a whole number of at least 1.

    Raises:
        ValueError: If the cell is not a positive whole number
    """
    try:
        number = Decimal(value.strip())
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e
    if not number.is_finite() or number != number.to_integral_value():
        raise ValueError(f"not a whole number: {value!r}")
    if number < 1:
        raise ValueError(f"must be at least 1: {value!r}")
    if number > MAX_CENTS:
        raise ValueError(f"too large: {value!r}")
    return int(number)


def parse_row(
    values: Sequence[str],
    columns: ColumnIndices,
    path: Union[str, Path, None] = None,
    row: int = 0
) -> SaleLine:
    """Build a SaleLine from the raw cells of one CSV row.

    Raises:
        SaleRecordError: With the 1-based row and column of the bad cell
    """
    def cell(index: int) -> str:
        if index >= len(values):
            raise SaleRecordError("missing field", path, row, index + 1)
        return str(values[index])

    product_name = cell(columns.product_name).strip()
    if not product_name:
        raise SaleRecordError("missing product name", path, row, columns.product_name + 1)

    raw_price = cell(columns.unit_price)
    try:
        unit_price = Money.from_decimal(clean_amount(raw_price))
    except (InvalidAmountError, AccumulatorOverflowError) as e:
        raise SaleRecordError(
            f"invalid price {raw_price!r}: {e}", path, row, columns.unit_price + 1
        ) from e

    raw_quantity = cell(columns.quantity)
    try:
        quantity = parse_quantity(raw_quantity)
    except ValueError as e:
        raise SaleRecordError(
            f"invalid quantity: {e}", path, row, columns.quantity + 1
        ) from e

    return SaleLine(product_name=product_name, unit_price=unit_price, quantity=quantity, row=row)


def read_rows(path: Union[str, Path]) -> List[List[str]]:
    """Read every CSV record as a list of strings, blanks included."""
    try:
        with open(path, 'r', newline='', encoding='utf-8-sig') as f:
            return list(csv.reader(f))
    except (csv.Error, UnicodeDecodeError) as e:
        raise SaleRecordError(f"malformed CSV: {e}", path) from e


def read_sale_lines(
    path: Union[str, Path],
    layouts: Sequence[HeaderLayout] = LAYOUTS
) -> Iterator[SaleLine]:
    """Yield one SaleLine per data row of a sales export.

    The first non-blank row is taken as the header and matched against the
    known layouts. Later rows that repeat a header sentinel in their first
    field are skipped, as are blank rows.

    Args:
        path: CSV file to read
        layouts: Candidate layouts, tried in order

    Raises:
        UnknownLayoutError: If no layout recognizes the header
        SaleRecordError: If a data row is malformed
    """
    rows = read_rows(path)
    layout = None
    columns = None
    sentinels: Set[str] = set()
    skipped = 0
    parsed = 0

    for row_number, values in enumerate(rows, start=1):
        if is_blank_row(values):
            continue

        if layout is None:
            detected = detect_layout(values, layouts)
            if detected is None:
                raise UnknownLayoutError(
                    f"{path}: unrecognized CSV header: {', '.join(normalize_header(values))}"
                )
            layout, columns = detected
            sentinels = set(layout.sentinels)
            first_cell = normalize_header(values)[0]
            if first_cell:
                sentinels.add(first_cell)
            logger.debug(f"{path}: detected {layout.name} layout ({columns})")
            continue

        if normalize_header(values[:1])[0] in sentinels:
            skipped += 1
            continue

        parsed += 1
        yield parse_row(values, columns, path, row_number)

    if layout is None:
        logger.warning(f"{path}: file is empty")
    logger.debug(f"{path}: read {parsed} sale lines, skipped {skipped} header rows")
