"""
Utility helpers shared by the UI layer: byte formatting and path display.
"""

from .formatting import format_size
from .path import top_level_files_text

__all__ = ["format_size", "top_level_files_text"]
