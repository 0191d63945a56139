"""Sales report command."""

import click
from pathlib import Path
from typing import Optional, Sequence

from ..cli.base import FileInputCommand, command_error_handler
from ..cli.config import Config
from ..errors import SalesReportError
from ..processors.report import Report
from ..reporter import SalesReporter
from ..utils.formatting import render_report

class ReportCommand(FileInputCommand):
    """Command to build a sales report from CSV exports."""
    
    def __init__(self, config: Config, input_files: Sequence[Path], output_file: Optional[Path] = None):
        super().__init__(config, input_files, output_file)
    
    @command_error_handler
    def execute(self) -> Report:
        """Execute the report command."""
        if not self.validate():
            raise SalesReportError("Input validation failed")
        
        reporter = SalesReporter.from_groups_file(self.config.groups_file, self.config.sort_order)
        reporter.process_files(self.input_files)
        report = reporter.build()
        self.logger.info(
            f"Report has {len(report)} entries, {report.total_units} units, "
            f"revenue {report.total_revenue}"
        )
        
        rendered = render_report(report, self.config.output_format)
        if self.output_file:
            self._save_results(rendered)
        else:
            click.echo(rendered, nl=False)
        return report
    
    def _save_results(self, rendered: str) -> None:
        """Save the rendered report to the output file."""
        with open(self.output_file, 'w', encoding='utf-8') as f:
            f.write(rendered)
        click.echo(f"Report saved to {self.output_file}", err=True)
