"""CSS rule parsing for the optimizer.

The parser is deliberately small: it understands style rules, declaration
blocks and at-rules, which is all the generated stylesheet contains. It never
raises on malformed input; incomplete or empty rules are dropped.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# At-rules whose block holds rules; their contents are optimized in their own scope
GROUPING_AT_RULES = frozenset([
    'media', 'supports', 'layer', 'container', 'scope', 'document', 'starting-style',
    'keyframes', '-webkit-keyframes',
])

_FOLDED = {'\n': ' ', '\r': ' ', '\t': ' '}


@dataclass(frozen=True)
class CssDeclaration:
    property: str
    value: str


@dataclass
class CssRule:
    selectors: List[str]
    declarations: List[CssDeclaration]

    @property
    def selector_text(self) -> str:
        return ','.join(self.selectors)


@dataclass
class AtRule:
    """An ``@``-rule.

    ``children`` holds the parsed rules of grouping at-rules such as
    ``@media``; ``body`` holds the verbatim block of any other at-rule.
    Statement at-rules (``@import url(x);``) have neither.
    """
    name: str
    prelude: str
    children: Optional[list] = None
    body: Optional[str] = None

    @property
    def is_statement(self) -> bool:
        return self.children is None and self.body is None


Node = Union[CssRule, AtRule]


@dataclass
class Stylesheet:
    nodes: List[Node] = field(default_factory=list)
    layers: List[str] = field(default_factory=list)
    uses_layers: bool = False


def strip_comments(css_text: str) -> str:
    """Remove ``/* ... */`` comments.

    An unterminated comment runs to the end of the input.
    """
    result = []
    in_comment = False
    i = 0
    length = len(css_text)
    while i < length:
        ch = css_text[i]
        nxt = css_text[i + 1] if i + 1 < length else ''
        if in_comment:
            if ch == '*' and nxt == '/':
                in_comment = False
                i += 2
                continue
        elif ch == '/' and nxt == '*':
            in_comment = True
            i += 2
            continue
        else:
            result.append(ch)
        i += 1
    return ''.join(result)


def split_selectors(selector_text: str) -> List[str]:
    """Split a selector list on commas outside brackets, parentheses and quotes."""
    selectors = []
    current = []
    depth = 0
    quote = None
    for ch in selector_text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = None
            continue
        if ch in '"\'':
            quote = ch
        elif ch in '([':
            depth += 1
        elif ch in ')]' and depth > 0:
            depth -= 1
        elif ch == ',' and depth == 0:
            selectors.append(''.join(current).strip())
            current = []
            continue
        current.append(ch)
    selectors.append(''.join(current).strip())
    return [s for s in selectors if s]


def _at_rule_name(prelude: str) -> Tuple[str, str]:
    """Split ``@media screen`` into (``media``, ``screen``)."""
    head = prelude[1:]
    for i, ch in enumerate(head):
        if ch.isspace() or ch in '("\'':
            return head[:i].lower(), ' '.join(head[i:].split())
    return head.lower(), ''


class _Scanner:
    """Character scanner over comment-free CSS text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.layers: List[str] = []
        self.uses_layers = False
        # Inside @layer blocks names are sublayers (a.b), not top-level layers
        self.layer_depth = 0

    def _add_layers(self, names: str) -> None:
        self.uses_layers = True
        for name in names.split(','):
            name = ' '.join(name.split())
            if name and name not in self.layers:
                self.layers.append(name)

    def skip_block(self) -> str:
        """Consume up to the ``}`` matching an already consumed ``{``.

        Returns the raw block content. At end of input returns what was read.
        """
        start = self.pos
        depth = 1
        quote = None
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            self.pos += 1
            if quote:
                if ch == '\\':
                    self.pos += 1
                elif ch == quote:
                    quote = None
            elif ch in '"\'':
                quote = ch
            elif ch == '{':
                depth += 1
            elif ch == '}':
                depth -= 1
                if depth == 0:
                    return text[start:self.pos - 1]
        return text[start:]

    def parse_nodes(self, nested: bool = False) -> List[Node]:
        """Parse rules until end of input or, when ``nested``, a closing brace."""
        nodes: List[Node] = []
        prelude: List[str] = []
        quote = None
        text = self.text

        while self.pos < len(text):
            ch = text[self.pos]
            self.pos += 1

            if quote:
                prelude.append(ch)
                if ch == quote:
                    quote = None
                continue

            if ch in '"\'':
                quote = ch
                prelude.append(ch)
            elif ch == '{':
                selector = ''.join(prelude).strip()
                prelude = []
                node = self._parse_block(selector)
                if node is not None:
                    nodes.append(node)
            elif ch == '}':
                if nested:
                    return nodes
                # Stray closing brace at top level
                prelude = []
            elif ch == ';':
                statement = ''.join(prelude).strip()
                prelude = []
                if statement.startswith('@'):
                    name, rest = _at_rule_name(statement)
                    if name == 'layer' and self.layer_depth == 0:
                        self._add_layers(rest)
                    else:
                        nodes.append(AtRule(name, rest))
            else:
                prelude.append(_FOLDED.get(ch, ch))

        return nodes

    def _parse_block(self, selector: str) -> Optional[Node]:
        if selector.startswith('@'):
            name, rest = _at_rule_name(selector)
            if name in GROUPING_AT_RULES:
                if name != 'layer':
                    return AtRule(name, rest, children=self.parse_nodes(nested=True))
                if self.layer_depth == 0:
                    if rest:
                        self._add_layers(rest)
                    else:
                        self.uses_layers = True
                self.layer_depth += 1
                children = self.parse_nodes(nested=True)
                self.layer_depth -= 1
                return AtRule(name, rest, children=children)
            body = ''.join(_FOLDED.get(c, c) for c in self.skip_block()).strip()
            return AtRule(name, rest, body=body)

        declarations = self._parse_declarations()
        selectors = split_selectors(selector)
        if not selectors or not declarations:
            return None
        return CssRule(selectors, declarations)

    def _parse_declarations(self) -> List[CssDeclaration]:
        """Read a declaration block up to its closing brace."""
        declarations: List[CssDeclaration] = []
        prop: List[str] = []
        value: List[str] = []
        in_value = False
        parens = 0
        quote = None
        text = self.text

        def flush():
            name = ''.join(prop).strip()
            val = ''.join(value).strip()
            if name and in_value and val:
                declarations.append(CssDeclaration(name, val))

        while self.pos < len(text):
            ch = text[self.pos]
            self.pos += 1

            if quote:
                value.append(ch)
                if ch == '\\' and self.pos < len(text):
                    value.append(text[self.pos])
                    self.pos += 1
                elif ch == quote:
                    quote = None
                continue

            if ch == '}':
                flush()
                return declarations
            if ch == '{':
                # Nested rule inside a declaration block
                self.skip_block()
                logger.debug("Skipping nested block inside %r", ''.join(prop).strip())
                prop, value, in_value, parens = [], [], False, 0
                continue

            if in_value:
                if ch in '"\'':
                    quote = ch
                elif ch == '(':
                    parens += 1
                elif ch == ')' and parens > 0:
                    parens -= 1
                elif ch == ';' and parens == 0:
                    flush()
                    prop, value, in_value = [], [], False
                    continue
                value.append(_FOLDED.get(ch, ch))
            elif ch == ':':
                in_value = True
            elif ch == ';':
                prop = []
            else:
                prop.append(_FOLDED.get(ch, ch))

        # Unterminated block: the rule is incomplete and gets dropped
        return []


def parse(css_text: str) -> List[Node]:
    """Parse CSS text into rules and at-rules.

    Comments are stripped first. Rules without a selector or without any
    declaration are dropped. ``@layer`` statements are not returned as
    nodes; use :func:`parse_stylesheet` to get the layer names.

    Args:
        css_text: Complete stylesheet text

    Returns:
        Ordered list of CssRule and AtRule nodes
    """
    return parse_stylesheet(css_text).nodes


def parse_stylesheet(css_text: str) -> Stylesheet:
    """Parse CSS text, also collecting ``@layer`` names in first-seen order."""
    scanner = _Scanner(strip_comments(css_text or ''))
    nodes = scanner.parse_nodes()
    logger.debug("Parsed %d top-level nodes, %d layers", len(nodes), len(scanner.layers))
    return Stylesheet(nodes=nodes, layers=scanner.layers, uses_layers=scanner.uses_layers)


def iter_rules(nodes):
    """Yield every CssRule-like node, descending into grouping at-rules."""
    for node in nodes:
        if isinstance(node, AtRule):
            if node.children:
                yield from iter_rules(node.children)
        else:
            yield node


__all__ = [
    'CssDeclaration',
    'CssRule',
    'AtRule',
    'Stylesheet',
    'GROUPING_AT_RULES',
    'strip_comments',
    'split_selectors',
    'parse',
    'parse_stylesheet',
    'iter_rules',
]
