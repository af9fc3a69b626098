"""reedstyle build core: color scales and CSS optimization."""

from .utils.config import VERSION as __version__
from .core import normalize, generate_scale, generate_neutral_scale, parse, group, serialize
from .managers import CSSOptimizer, PaletteManager, minify_css

__all__ = [
    '__version__',
    'normalize',
    'generate_scale',
    'generate_neutral_scale',
    'parse',
    'group',
    'serialize',
    'CSSOptimizer',
    'PaletteManager',
    'minify_css',
]
