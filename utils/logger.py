"""
Centralized logging configuration for projectstore.
"""
import logging
import sys

from utils.config import CFG

# Configure root logger
logging.basicConfig(
    level=getattr(logging, CFG["log_level"], logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Module name (usually __name__)
    
    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
