"""Compact CSS output for optimized rule groups."""

import re
from typing import Dict, Iterable, List, Optional, Sequence

from .parser import AtRule, CssDeclaration
from ..utils.config import DEFAULT_LAYERS, HOIST_VARIABLE_PREFIX

# Statement at-rules that must precede every other rule
HEAD_STATEMENTS = ('import', 'namespace')

# Shorthands where "0 0", "0 0 0" and "0 0 0 0" all mean "0"
ZERO_SHORTHAND_PROPERTIES = (
    'margin', 'margin-inline', 'margin-block',
    'padding', 'padding-inline', 'padding-block',
    'inset', 'inset-inline', 'inset-block',
    'scroll-margin', 'scroll-padding',
    'border-width', 'border-radius', 'border-spacing',
    'gap', 'grid-gap',
)

_ZERO_UNIT = re.compile(r'(?<=[:\s])0(?:px|em|rem)(?=[\s;}!,]|$)')
_ZERO_RUNS = [
    re.compile(r'(?<![\w-])(%s):0(?: 0){%d}(?=\s*[;}!]|$)' % ('|'.join(ZERO_SHORTHAND_PROPERTIES), n))
    for n in (3, 2, 1)
]


def variable_reference(name: str) -> str:
    return f"var({HOIST_VARIABLE_PREFIX}{name})"


def normalize_zero_units(css_text: str) -> str:
    """Drop units from zero lengths and collapse repeated zero shorthands.

    ``margin:0px 0em 0rem 0px;`` becomes ``margin:0;``. The collapse runs
    from the longest run (four zeros) to the shortest.
    """
    css_text = _ZERO_UNIT.sub('0', css_text)
    for pattern in _ZERO_RUNS:
        css_text = pattern.sub(r'\1:0', css_text)
    return css_text


def normalize_declaration(declaration: CssDeclaration) -> CssDeclaration:
    """Apply :func:`normalize_zero_units` to a single declaration."""
    prop = declaration.property
    text = normalize_zero_units(f"{prop}:{declaration.value}")
    return CssDeclaration(prop, text[len(prop) + 1:])


def _statement(node: AtRule) -> str:
    return f"@{node.name} {node.prelude};" if node.prelude else f"@{node.name};"


def _at_rule_head(node: AtRule) -> str:
    return f"@{node.name} {node.prelude}" if node.prelude else f"@{node.name}"


def _declarations(declarations, hoisted: Dict[str, str]) -> str:
    parts = []
    for declaration in declarations:
        value = declaration.value
        name = hoisted.get(value)
        if name is not None:
            reference = variable_reference(name)
            if len(reference) < len(value):
                value = reference
        parts.append(f"{declaration.property}:{value}")
    return ';'.join(parts)


def _serialize_nodes(nodes: Iterable, hoisted: Dict[str, str], out: List[str]) -> None:
    for node in nodes:
        if isinstance(node, AtRule):
            if node.children is not None:
                inner: List[str] = []
                _serialize_nodes(node.children, hoisted, inner)
                if inner:
                    out.append(_at_rule_head(node) + '{' + ''.join(inner) + '}')
            elif node.body is not None:
                out.append(_at_rule_head(node) + '{' + node.body + '}')
            else:
                out.append(_statement(node))
        elif node.selectors and node.declarations:
            out.append(node.selector_text + '{'
                       + _declarations(node.declarations, hoisted) + '}')


def serialize(groups: Sequence, hoisted_vars: Optional[Dict[str, str]] = None,
              layers: Optional[Sequence[str]] = None, uses_layers: bool = False) -> str:
    """Render grouped rules as minimal CSS.

    Args:
        groups: RuleGroup and AtRule nodes
        hoisted_vars: Mapping of hoisted value to generated name
        layers: Layer names for the leading ``@layer`` statement
        uses_layers: Whether the input used ``@layer`` at all

    Returns:
        Minified CSS text
    """
    hoisted = hoisted_vars or {}
    out: List[str] = []

    head = [n for n in groups if isinstance(n, AtRule) and n.is_statement
            and n.name in ('charset',) + HEAD_STATEMENTS]
    head_ids = {id(n) for n in head}
    rest = [n for n in groups if id(n) not in head_ids]

    out.extend(_statement(n) for n in head if n.name == 'charset')
    if uses_layers or layers:
        names = list(layers) if layers else list(DEFAULT_LAYERS)
        out.append('@layer ' + ','.join(names) + ';')
    out.extend(_statement(n) for n in head if n.name != 'charset')

    if hoisted:
        out.append(':root{' + ''.join(
            f"{HOIST_VARIABLE_PREFIX}{name}:{value};" for value, name in hoisted.items()
        ) + '}')

    _serialize_nodes(rest, hoisted, out)
    return normalize_zero_units(''.join(out))


__all__ = [
    'serialize',
    'normalize_zero_units',
    'normalize_declaration',
    'variable_reference',
    'ZERO_SHORTHAND_PROPERTIES',
]
