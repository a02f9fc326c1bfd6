"""
Storage Layer.

This package handles the configuration file. The receiver keeps no other
state between runs.
"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
