"""
Base command infrastructure for the sales report CLI.
Provides common functionality and utilities for all commands.
"""

import click
import functools
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from .config import Config
from ..errors import SalesReportError

class BaseCommand(ABC):
    """Base class for all CLI commands."""
    
    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        
        # Get debug status from click context
        ctx = click.get_current_context(silent=True)
        self.debug = bool(ctx and ctx.obj and ctx.obj.get('debug'))
        if self.debug:
            self.logger.debug(f"Debug mode enabled for {self.__class__.__name__}")
    
    @abstractmethod
    def execute(self) -> None:
        """Execute the command. Must be implemented by subclasses."""
        pass
    
    def validate(self) -> bool:
        """Validate command configuration and requirements.
        
        Returns:
            bool: True if validation passes, False otherwise
        """
        if self.debug:
            self.logger.debug("Validating command configuration")
        return self.config.validate()

class FileInputCommand(BaseCommand):
    """Base class for commands that process input files."""
    
    def __init__(self, config: Config, input_files: Sequence[Path], output_file: Optional[Path] = None):
        super().__init__(config)
        self.input_files = list(input_files)
        self.output_file = output_file
    
    def validate(self) -> bool:
        """Validate input files exist and are readable."""
        if not super().validate():
            return False
            
        if not self.input_files:
            self.logger.error("No input files given")
            return False
            
        for input_file in self.input_files:
            if not input_file.exists():
                self.logger.error(f"Input file not found: {input_file}")
                return False
                
            if not input_file.is_file():
                self.logger.error(f"Input path is not a file: {input_file}")
                return False
            
        return True

def command_error_handler(f):
    """Decorator to report command failures consistently.
    
    Known failures are printed as a one-line diagnostic on stderr and end the
    process with exit status 1.
    """
    @functools.wraps(f)
    def wrapper(self, *args, **kwargs):
        start = time.time()
        if self.debug:
            self.logger.debug(f"Starting command execution: {f.__name__}")
        try:
            result = f(self, *args, **kwargs)
        except (SalesReportError, OSError) as e:
            self.logger.debug(f"Command failed with error: {str(e)}", exc_info=True)
            click.secho(f"Error: {str(e)}", fg='red', err=True)
            raise click.exceptions.Exit(1)
        
        if self.debug:
            self.logger.debug(f"Command completed in {time.time() - start:.3f}s")
        return result
    return wrapper
