"""Utility Functions Package

This package contains utility functions and managers for color and CSS
string handling and for loading and saving the style settings file.
"""

from .helpers import (
    normalize_hex,
    convert_to_hex_color,
    css_string,
    css_comment,
    strip_file_extension
)

from .file_manager import (
    get_app_data_dir,
    normalize_stored_colors,
    SettingsManager
)

__all__ = [
    # Helper Functions
    'normalize_hex',
    'convert_to_hex_color',
    'css_string',
    'css_comment',
    'strip_file_extension',

    # File Management Functions
    'get_app_data_dir',
    'normalize_stored_colors',

    # Manager Classes
    'SettingsManager'
]
