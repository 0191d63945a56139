"""
Core CLI implementation for the salesreport package.
"""

import click
from pathlib import Path
from typing import Optional, Tuple

from .config import Config
from .logging import setup_logging, get_logger
from ..commands.report import ReportCommand
from ..processors.report import SortOrder
from ..utils.formatting import OUTPUT_FORMATS

@click.command()
@click.option('-r', '--revenue', is_flag=True, help='Sort products by revenue instead of unit sales')
@click.option('-g', '--groups', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
              help='Group related line items using this rule file')
@click.option('-f', '--format', 'output_format', type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
              help='Report format (default: text)')
@click.option('-o', '--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
              help='Save the report to a file instead of printing it')
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.argument('csv_files', nargs=-1, required=True,
                type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.pass_context
def cli(ctx, revenue: bool, groups: Optional[Path], output_format: Optional[str],
        output: Optional[Path], debug: bool, csv_files: Tuple[Path, ...]):
    """Summarise units sold and revenue per product from sales CSV exports."""
    # Store debug flag in context for the command
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    
    config = Config.from_env()
    
    # Command line flags override the environment
    if groups:
        config.groups_file = groups
    if revenue:
        config.sort_by = SortOrder.REVENUE.value
    if output_format:
        config.output_format = output_format.lower()
    
    setup_logging(debug=debug, level=config.log_level)
    logger = get_logger('cli')
    if debug:
        logger.debug(f"Using configuration: {config}")
    
    command = ReportCommand(config, list(csv_files), output)
    command.execute()
