"""Managers orchestrating the color engine and the CSS optimizer."""

from .base import BaseManager
from .optimizer import CSSOptimizer, minify_css
from .palette import PaletteManager
from .factory import ManagerFactory

# Exported classes
__all__ = [
    'BaseManager',
    'CSSOptimizer',
    'PaletteManager',
    'ManagerFactory',
    'minify_css',
]
