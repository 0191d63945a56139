"""
CLI module for the salesreport package.
Provides command-line interface functionality and utilities.

The click entry point lives in ``salesreport.cli.main``.
"""

from .base import BaseCommand, FileInputCommand
from .config import Config
from .logging import setup_logging, get_logger

__all__ = ['BaseCommand', 'FileInputCommand', 'Config', 'setup_logging', 'get_logger']
