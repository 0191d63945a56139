"""Report rendering as a text table, CSV or JSON."""

import json
from typing import List

import pandas as pd

from ..processors.report import Report

NAME_HEADING = 'Product / Group'
UNITS_HEADING = 'Units'
REVENUE_HEADING = 'Revenue'
TOTAL_LABEL = 'Total'
COLUMN_GAP = '  '

OUTPUT_FORMATS = ['text', 'csv', 'json']


def format_table(report: Report) -> str:
    """Format a report as a fixed-width text table.

    Column widths come from the widest value in the report. The name column
    is left-aligned, units and revenue are right-aligned.

    Args:
        report: Report to render

    Returns:
        Table text ending in a newline
    """
    rows = [(e.key, str(e.total_units), e.total_revenue.to_decimal_string()) for e in report.entries]
    total = (TOTAL_LABEL, str(report.total_units), report.total_revenue.to_decimal_string())
    heading = (NAME_HEADING, UNITS_HEADING, REVENUE_HEADING)

    all_rows = [heading, total] + rows
    name_width = max(len(r[0]) for r in all_rows)
    units_width = max(len(r[1]) for r in all_rows)
    revenue_width = max(len(r[2]) for r in all_rows)

    def line(name: str, units: str, revenue: str) -> str:
        return (f"{name:<{name_width}}{COLUMN_GAP}"
                f"{units:>{units_width}}{COLUMN_GAP}"
                f"{revenue:>{revenue_width}}")

    rule = '-' * (name_width + units_width + revenue_width + 2 * len(COLUMN_GAP))
    lines: List[str] = [line(*heading), rule]
    lines.extend(line(*r) for r in rows)
    lines.append(rule)
    lines.append(line(*total))
    return '\n'.join(lines) + '\n'


def report_to_dataframe(report: Report) -> pd.DataFrame:
    """Convert report entries to a DataFrame.

    Revenue is kept as its exact two-decimal string rather than a float.
    """
    return pd.DataFrame(
        [
            {
                'name': entry.key,
                'units': entry.total_units,
                'revenue': entry.total_revenue.to_decimal_string()
            }
            for entry in report.entries
        ],
        columns=['name', 'units', 'revenue']
    )


def format_csv(report: Report) -> str:
    return report_to_dataframe(report).to_csv(index=False, lineterminator='\n')


def format_json(report: Report) -> str:
    data = {
        'entries': report_to_dataframe(report).to_dict(orient='records'),
        'total_units': report.total_units,
        'total_revenue': report.total_revenue.to_decimal_string(),
        'order': report.order.value
    }
    return json.dumps(data, indent=2, default=int) + '\n'


def render_report(report: Report, output_format: str = 'text') -> str:
    """Render a report in one of OUTPUT_FORMATS."""
    if output_format == 'text':
        return format_table(report)
    if output_format == 'csv':
        return format_csv(report)
    if output_format == 'json':
        return format_json(report)
    raise ValueError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}")
