"""
Configuration management for the sales report CLI.
Handles loading and validating configuration from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..errors import ConfigError
from ..processors.report import SortOrder
from ..utils.formatting import OUTPUT_FORMATS

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

@dataclass
class Config:
    """Configuration settings for the sales report CLI."""
    
    # Grouping settings
    groups_file: Optional[Path] = None
    
    # Report settings
    sort_by: str = SortOrder.UNITS.value
    output_format: str = 'text'  # text, json, csv
    
    # Logging settings
    log_level: str = 'WARNING'
    
    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'Config':
        """Create configuration from environment variables.
        
        Args:
            env_file: Optional path to .env file
            
        Returns:
            Config: Configuration instance
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()
            
        groups_file = os.getenv('SALES_REPORT_GROUPS')
        return cls(
            groups_file=Path(groups_file) if groups_file else None,
            sort_by=os.getenv('SALES_REPORT_SORT', SortOrder.UNITS.value).lower(),
            output_format=os.getenv('SALES_REPORT_FORMAT', 'text').lower(),
            log_level=os.getenv('LOG_LEVEL', 'WARNING').upper()
        )
    
    @property
    def sort_order(self) -> SortOrder:
        return SortOrder(self.sort_by)
    
    def validate(self) -> bool:
        """Validate configuration settings.
        
        Returns:
            bool: True if configuration is valid
            
        Raises:
            ConfigError: If a setting has an unknown value
        """
        valid_orders = [order.value for order in SortOrder]
        if self.sort_by not in valid_orders:
            raise ConfigError(f"sort_by must be one of: {', '.join(valid_orders)}")
            
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}")
            
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
            
        return True
