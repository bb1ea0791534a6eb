"""
Utility modules for configuration, logging and timestamps.
"""
from .timestamps import now_iso

__all__ = ['now_iso']
