"""Shared test fixtures and utilities."""

import csv
import logging
import pytest
from pathlib import Path

SQUARESPACE_HEADER = ['Order ID', 'Email', 'Lineitem quantity', 'Lineitem name', 'Lineitem price']
GUMROAD_HEADER = ['Purchase ID', 'Item Name', 'Item Price ($)', 'Quantity']

def create_test_csv(directory: Path, name: str, header, rows) -> Path:
    """Create a CSV file with a header and data rows."""
    path = directory / name
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        if header:
            writer.writerow(header)
        for row in rows:
            writer.writerow(row)
    return path

def create_rules_file(directory: Path, lines, name: str = 'groups.txt') -> Path:
    """Create a group rule file with one rule per line."""
    path = directory / name
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path

@pytest.fixture
def squarespace_csv(tmp_path):
    """Squarespace export: Go mentoring 11 units / 3134.45, Code For Your Life 2 units / 79.90."""
    return create_test_csv(tmp_path, 'squarespace.csv', SQUARESPACE_HEADER, [
        ['1001', 'ann@example.com', '5', 'Go mentoring', '284.95'],
        ['1002', 'bob@example.com', '2', 'Code For Your Life', '39.95'],
        ['1003', 'cat@example.com', '6', 'Go mentoring', '284.95'],
    ])

@pytest.fixture
def conflicting_csv(tmp_path):
    """Many cheap units for one product, one expensive unit for another."""
    return create_test_csv(tmp_path, 'conflicting.csv', SQUARESPACE_HEADER, [
        ['2001', 'ann@example.com', '50', 'Sticker pack', '0.50'],
        ['2002', 'bob@example.com', '1', 'Mentoring session', '500.00'],
    ])

@pytest.fixture
def gumroad_csv(tmp_path):
    """Gumroad export of free and paid editions of two books."""
    return create_test_csv(tmp_path, 'gumroad.csv', GUMROAD_HEADER, [
        ['g1', 'The Power of Go: Tests (Go 1.22 edition)', '0', '1'],
        ['g2', 'The Power of Go: Tests (Go 1.21 edition)', '0', '2'],
        ['g3', 'For the Love of Go (Go 1.23 edition)', '0', '4'],
    ])

@pytest.fixture
def rules_file(tmp_path):
    """Rule file grouping editions of each book."""
    return create_rules_file(tmp_path, [
        'The Power of Go: Tests | The Power of Go: Tests',
        '',
        'For the Love of Go | ^For the Love of Go',
    ])

@pytest.fixture
def restore_logging():
    """Put root logger handlers back after a test reconfigures logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
