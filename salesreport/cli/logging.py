"""
Logging configuration for the sales report CLI.
Log records go to stderr so stdout carries only the report.
"""

import logging
import sys

class DebugFormatter(logging.Formatter):
    """Custom formatter for debug output."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record with timestamp and source."""
        message = f"[{record.created:.3f}] {record.levelname} {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        # Add color if output is to terminal
        if sys.stderr.isatty():
            cyan = '\033[0;36m'
            reset = '\033[0m'
            return f"{cyan}{message}{reset}"
        return message

def setup_logging(debug: bool = False, level: str = 'WARNING') -> None:
    """Setup logging configuration.
    
    Args:
        debug: Enable debug logging, overriding level
        level: Log level name used when debug is off
    """
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.WARNING))
    
    # Clear any existing handlers
    root_logger.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(DebugFormatter())
    root_logger.addHandler(console_handler)

def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    
    # Ensure handler uses debug formatter
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setFormatter(DebugFormatter())
    
    return logger
