"""Tests for the CSS rule parser."""

from reedstyle.core.parser import (
    AtRule,
    CssDeclaration,
    CssRule,
    iter_rules,
    parse,
    parse_stylesheet,
    split_selectors,
    strip_comments,
)

def decl(prop, value):
    return CssDeclaration(prop, value)

class TestStripComments:
    """Tests for comment removal."""

    def test_removes_comments(self):
        assert strip_comments("a/* x */b") == "ab"
        assert strip_comments("/**/") == ""
        assert strip_comments("/*/ x */y") == "y"
        assert strip_comments(".a{color:/* c */red}") == ".a{color:red}"

    def test_unterminated_comment_runs_to_end(self):
        """Test that an open comment consumes the rest of the input."""
        assert strip_comments(".a{color:red}/* never closed") == ".a{color:red}"
        assert strip_comments("/*") == ""

    def test_no_comments(self):
        assert strip_comments("") == ""
        assert strip_comments("a / b * c") == "a / b * c"

class TestSplitSelectors:
    """Tests for selector list splitting."""

    def test_split(self):
        assert split_selectors(".a, .b") == [".a", ".b"]
        assert split_selectors(":is(.a,.b) p,.c") == [":is(.a,.b) p", ".c"]
        assert split_selectors('[data-x="a,b"],.c') == ['[data-x="a,b"]', ".c"]
        assert split_selectors(" , ") == []

class TestParse:
    """Tests for parse()."""

    def test_simple_rule(self):
        """Test a single rule."""
        assert parse(".a{color:red;padding:10px}") == [
            CssRule([".a"], [decl("color", "red"), decl("padding", "10px")])
        ]

    def test_whitespace_is_folded(self):
        """Test newline, tab and CR handling."""
        rules = parse(".a,\n.b {\n\tcolor : red ;\r\n font-family: a,\nb;\n}")
        assert rules == [CssRule([".a", ".b"], [decl("color", "red"), decl("font-family", "a, b")])]

    def test_declaration_order_preserved(self):
        rules = parse(".a{z-index:1;color:red;z-index:2}")
        assert [d.property for d in rules[0].declarations] == ["z-index", "color", "z-index"]

    def test_empty_rules_dropped(self):
        """Test rules without selector or declarations."""
        assert parse(".a{}") == []
        assert parse("{color:red}") == []
        assert parse(".a{color}") == []
        assert parse(".a{color:}") == []
        assert parse("") == []
        assert parse(None) == []

    def test_unterminated_block_dropped(self):
        assert parse(".a{color:red}.b{color:blue") == [CssRule([".a"], [decl("color", "red")])]

    def test_colons_in_values_and_selectors(self):
        """Test that only the first colon splits a declaration."""
        rules = parse('reed[as="h1"]:hover{background:url(http://x.test/a.png)}')
        assert rules[0].selectors == ['reed[as="h1"]:hover']
        assert rules[0].declarations == [decl("background", "url(http://x.test/a.png)")]

    def test_semicolons_in_parentheses_and_strings(self):
        """Test that ; inside url() or quotes does not end a declaration."""
        rules = parse('a{background:url(data:image/png;base64,AAA);content:"a;b}"}')
        assert rules[0].declarations == [
            decl("background", "url(data:image/png;base64,AAA)"),
            decl("content", '"a;b}"'),
        ]

    def test_comments_are_stripped(self):
        rules = parse("/* head */ .a { color: red; /* inline */ }")
        assert rules == [CssRule([".a"], [decl("color", "red")])]

    def test_nested_rule_in_block_skipped(self):
        """Test that a nested style rule does not corrupt its parent."""
        rules = parse(".a{color:red;.b{color:blue}padding:0}")
        assert rules == [CssRule([".a"], [decl("color", "red"), decl("padding", "0")])]

    def test_stray_closing_brace(self):
        assert parse("}.a{color:red}") == [CssRule([".a"], [decl("color", "red")])]

class TestAtRules:
    """Tests for at-rule handling."""

    def test_media_children(self):
        """Test that @media contents are parsed recursively."""
        nodes = parse("@media (max-width: 768px) { .a { color: red } .b { color: red } }")
        assert nodes == [AtRule("media", "(max-width: 768px)", children=[
            CssRule([".a"], [decl("color", "red")]),
            CssRule([".b"], [decl("color", "red")]),
        ])]

    def test_opaque_body(self):
        """Test that other block at-rules are kept verbatim."""
        nodes = parse("@font-face { font-family: X; src: url(x.woff2); }")
        assert nodes == [AtRule("font-face", "", body="font-family: X; src: url(x.woff2);")]

    def test_statements(self):
        nodes = parse('@charset "UTF-8";@import url("a.css");.a{color:red}')
        assert nodes[0] == AtRule("charset", '"UTF-8"')
        assert nodes[1] == AtRule("import", 'url("a.css")')
        assert nodes[0].is_statement
        assert isinstance(nodes[2], CssRule)

    def test_keyframes_children(self):
        nodes = parse("@keyframes spin{from{transform:rotate(0)}to{transform:rotate(360deg)}}")
        assert nodes[0].name == "keyframes"
        assert nodes[0].prelude == "spin"
        assert [r.selectors for r in nodes[0].children] == [["from"], ["to"]]

    def test_layers(self):
        """Test layer collection."""
        sheet = parse_stylesheet(
            "@layer settings, bridge, theme, free;\n"
            "@layer theme { reed { display: block } }\n"
            "@layer extra { .x { color: red } }"
        )
        assert sheet.uses_layers
        assert sheet.layers == ["settings", "bridge", "theme", "free", "extra"]
        assert [n.prelude for n in sheet.nodes] == ["theme", "extra"]
        assert sheet.nodes[0].children == [CssRule(["reed"], [decl("display", "block")])]

    def test_sublayers_stay_nested(self):
        """Test that names inside an @layer block are not top-level layers."""
        sheet = parse_stylesheet("@layer a{@layer b{.x{color:red}}@layer c;}")
        assert sheet.layers == ["a"]
        outer = sheet.nodes[0]
        assert outer.children[0] == AtRule("layer", "b", children=[
            CssRule([".x"], [decl("color", "red")])
        ])
        assert outer.children[1] == AtRule("layer", "c")

    def test_layers_inside_media_are_top_level(self):
        sheet = parse_stylesheet("@media print{@layer p{.x{color:red}}}")
        assert sheet.layers == ["p"]

    def test_anonymous_layer(self):
        sheet = parse_stylesheet("@layer { .x { color: red } }")
        assert sheet.uses_layers
        assert sheet.layers == []

    def test_no_layers(self):
        sheet = parse_stylesheet(".a{color:red}")
        assert not sheet.uses_layers
        assert sheet.layers == []

    def test_iter_rules_descends(self):
        nodes = parse(".a{color:red}@media print{.b{color:red}}@font-face{font-family:X}")
        assert [r.selectors for r in iter_rules(nodes)] == [[".a"], [".b"]]
