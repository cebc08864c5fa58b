"""
Utilities package for Puzzlecraft.

This package provides configuration management, Unicode word handling
and shared grid helpers.
"""

from .unicode_utils import is_alphabetic_unicode, clean_unicode_text, normalize_word
from .config_loader import ConfigLoader, get_config, reload_config
from .grid_utils import empty_grid, read_path

__all__ = [
    'is_alphabetic_unicode', 'clean_unicode_text', 'normalize_word',
    'ConfigLoader', 'get_config', 'reload_config',
    'empty_grid', 'read_path'
]
