"""Core color and CSS optimization functionality."""

from .color import OklchColor, normalize, parse_raw_color, to_oklch_css
from .scale import ColorScale, generate_scale, generate_neutral_scale, scale_for, scale_variables
from .parser import CssDeclaration, CssRule, AtRule, strip_comments, parse, parse_stylesheet
from .dedupe import RuleGroup, group
from .hoist import HoistCandidate, find_hoist_candidates, select_hoist_candidates
from .serializer import serialize, normalize_zero_units

__all__ = [
    'OklchColor',
    'normalize',
    'parse_raw_color',
    'to_oklch_css',
    'ColorScale',
    'generate_scale',
    'generate_neutral_scale',
    'scale_for',
    'scale_variables',
    'CssDeclaration',
    'CssRule',
    'AtRule',
    'strip_comments',
    'parse',
    'parse_stylesheet',
    'RuleGroup',
    'group',
    'HoistCandidate',
    'find_hoist_candidates',
    'select_hoist_candidates',
    'serialize',
    'normalize_zero_units',
]
