"""CSS optimization pipeline for reedstyle."""

from typing import Dict, Any

from .base import BaseManager
from ..core.parser import AtRule, CssRule, parse_stylesheet, iter_rules
from ..core.dedupe import group
from ..core.hoist import select_hoist_candidates
from ..core.serializer import normalize_declaration, serialize
from ..utils.config import HOIST_MIN_COUNT, HOIST_MIN_LENGTH, MAX_CSS_SIZE
from ..utils.error import OptimizationError


def _normalize_nodes(nodes):
    """Zero-normalize declaration values so equal rules compare equal."""
    result = []
    for node in nodes:
        if isinstance(node, AtRule):
            if node.children is not None:
                node = AtRule(node.name, node.prelude, children=_normalize_nodes(node.children))
            result.append(node)
        else:
            result.append(CssRule(node.selectors,
                                  [normalize_declaration(d) for d in node.declarations]))
    return result


class CSSOptimizer(BaseManager):
    """Minify a generated stylesheet.

    Runs comment stripping, parsing, rule deduplication, variable hoisting and
    serialization. Every call is independent; only statistics are kept.
    """

    manager_name = 'optimizer'
    error_class = OptimizationError

    def __init__(self, minify: bool = True,
                 hoist_min_count: int = HOIST_MIN_COUNT,
                 hoist_min_length: int = HOIST_MIN_LENGTH,
                 max_size: int = MAX_CSS_SIZE):
        """Initialize the optimizer.

        Args:
            minify: When False, ``optimize`` returns its input unchanged
            hoist_min_count: Minimum repetitions before a value is hoisted
            hoist_min_length: Hoisted values must be longer than this
            max_size: Inputs larger than this (in bytes) are returned unchanged

        Raises:
            ValueError: If any parameter is invalid
        """
        super().__init__()
        if hoist_min_count <= 0:
            raise ValueError("Hoist minimum count must be positive")
        if hoist_min_length < 0:
            raise ValueError("Hoist minimum length must not be negative")
        if max_size <= 0:
            raise ValueError("Size limit must be positive")

        self.minify = minify
        self.hoist_min_count = hoist_min_count
        self.hoist_min_length = hoist_min_length
        self.max_size = max_size
        self.reset_stats()

    def reset_stats(self) -> None:
        self.stats = {
            'runs': 0,
            'input_bytes': 0,
            'output_bytes': 0,
            'rules_parsed': 0,
            'groups': 0,
            'hoisted_values': 0,
            'skipped': 0,
            'elapsed': 0.0,
        }

    def optimize(self, css_text: str) -> str:
        """Optimize CSS text.

        Args:
            css_text: Complete stylesheet

        Returns:
            Minified, semantically equivalent stylesheet

        Raises:
            OptimizationError: If the input is not a string
        """
        if not isinstance(css_text, str):
            self.handle_error(TypeError(f"expected str, got {type(css_text).__name__}"),
                              "Invalid CSS content")
        if not self.minify:
            return css_text

        size = len(css_text.encode('utf-8'))
        if size > self.max_size:
            self.log_warning(
                f"CSS content size exceeds limit ({self.max_size / 1024 / 1024:.1f}MB), "
                "leaving it unoptimized")
            self.stats['skipped'] += 1
            return css_text

        with self.timed(self.stats):
            sheet = parse_stylesheet(css_text)
            nodes = _normalize_nodes(sheet.nodes)
            groups = group(nodes)
            hoisted = select_hoist_candidates(groups, self.hoist_min_count,
                                              self.hoist_min_length)
            output = serialize(groups, hoisted, sheet.layers, sheet.uses_layers)

        rules_parsed = sum(1 for _ in iter_rules(nodes))
        group_count = sum(1 for _ in iter_rules(groups))
        self.stats['runs'] += 1
        self.stats['input_bytes'] += size
        self.stats['output_bytes'] += len(output.encode('utf-8'))
        self.stats['rules_parsed'] += rules_parsed
        self.stats['groups'] += group_count
        self.stats['hoisted_values'] += len(hoisted)

        self.log_debug(
            f"Optimized {size} -> {len(output)} bytes: {rules_parsed} rules in "
            f"{group_count} groups, {len(hoisted)} hoisted values")
        return output

    def get_stats(self) -> Dict[str, Any]:
        stats = dict(self.stats)
        if stats['input_bytes']:
            stats['ratio'] = stats['output_bytes'] / stats['input_bytes']
        else:
            stats['ratio'] = 1.0
        return stats


def minify_css(css_text: str) -> str:
    """Optimize CSS text with the default settings."""
    return CSSOptimizer().optimize(css_text)


__all__ = ['CSSOptimizer', 'minify_css']
