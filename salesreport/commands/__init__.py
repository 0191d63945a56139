"""
Command implementations for the salesreport CLI.
"""

from .report import ReportCommand

__all__ = ['ReportCommand']
