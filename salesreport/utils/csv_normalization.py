"""CSV cell normalization utilities."""

from typing import Any, List, Sequence


def normalize_column_name(name: Any) -> str:
    """Normalize a CSV column name.

    Normalizes by:
    - Replacing multiple spaces with single space
    - Stripping leading/trailing whitespace
    - Preserving special characters and case

    Args:
        name: Raw column name from CSV

    Returns:
        Normalized column name

    Examples:
        >>> normalize_column_name("Lineitem  name")
        'Lineitem name'
        >>> normalize_column_name(" Item Price ($) ")
        'Item Price ($)'
    """
    if name is None:
        return ''
    return ' '.join(str(name).split())


def normalize_header(row: Sequence[Any]) -> List[str]:
    """Normalize every cell of a header row."""
    return [normalize_column_name(cell) for cell in row]


def clean_amount(value: str) -> str:
    """Strip currency symbols and thousands separators from an amount.

    Examples:
        >>> clean_amount("$3,409.15")
        '3409.15'
    """
    return value.replace('$', '').replace(',', '').strip()


def is_blank_row(row: Sequence[str]) -> bool:
    """Return True if every cell of a row is empty or whitespace."""
    return all(not str(cell).strip() for cell in row)
