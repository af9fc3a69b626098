"""Merging of rules that share an identical declaration set."""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .parser import AtRule, CssDeclaration, CssRule

logger = logging.getLogger(__name__)

DeclarationKey = Tuple[Tuple[str, str], ...]


@dataclass
class RuleGroup(CssRule):
    """A rule whose selectors are every selector sharing one declaration set.

    Declarations keep the order of the first rule seen with that set.
    """

    @classmethod
    def from_rule(cls, rule: CssRule) -> 'RuleGroup':
        return cls(list(rule.selectors), list(rule.declarations))

    def merge(self, rule: CssRule) -> None:
        for selector in rule.selectors:
            if selector not in self.selectors:
                self.selectors.append(selector)


def declaration_key(declarations: Sequence[CssDeclaration]) -> DeclarationKey:
    """Comparison key for a declaration list that ignores property order.

    Declarations are sorted by property only. The sort is stable, so repeated
    properties such as a fallback pair keep their written order and
    ``color:red;color:blue`` never matches ``color:blue;color:red``.
    """
    return tuple(sorted(((d.property, d.value) for d in declarations),
                        key=lambda pair: pair[0]))


def group(nodes) -> list:
    """Merge rules with identical declaration sets.

    Groups keep the position of their first member and list selectors in
    first-seen order. At-rules stay where they are; the rules inside grouping
    at-rules are merged only with each other.

    Args:
        nodes: Parsed CssRule and AtRule nodes

    Returns:
        List of RuleGroup and AtRule nodes
    """
    result = []
    groups: Dict[DeclarationKey, RuleGroup] = {}
    merged = 0

    for node in nodes:
        if isinstance(node, AtRule):
            if node.children is not None:
                node = AtRule(node.name, node.prelude, children=group(node.children))
            result.append(node)
            continue

        key = declaration_key(node.declarations)
        existing = groups.get(key)
        if existing is None:
            groups[key] = RuleGroup.from_rule(node)
            result.append(groups[key])
        else:
            existing.merge(node)
            merged += 1

    if merged:
        logger.debug("Merged %d rules into %d groups", merged, len(groups))
    return result


__all__ = ['RuleGroup', 'declaration_key', 'group']
