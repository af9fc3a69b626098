"""Tests for CSS output."""

import pytest

from reedstyle.core.dedupe import group
from reedstyle.core.parser import AtRule, CssDeclaration, parse, parse_stylesheet
from reedstyle.core.serializer import (
    normalize_declaration,
    normalize_zero_units,
    serialize,
    variable_reference,
)

def render(css_text, hoisted=None):
    sheet = parse_stylesheet(css_text)
    return serialize(group(sheet.nodes), hoisted, sheet.layers, sheet.uses_layers)

class TestNormalizeZeroUnits:
    """Tests for zero length normalization."""

    @pytest.mark.parametrize("source, expected", [
        ("margin:0px 0em 0rem 0px;", "margin:0;"),
        ("padding:0px 0px}", "padding:0}"),
        ("margin:0 0 0;", "margin:0;"),
        ("gap:0em!important;", "gap:0!important;"),
        ("margin:0px auto;", "margin:0 auto;"),
        ("line-height:0em", "line-height:0"),
        ("margin:0 0 0 0 !important;", "margin:0 !important;"),
        ("padding:0px 0px !important}", "padding:0 !important}"),
    ])
    def test_normalizes(self, source, expected):
        assert normalize_zero_units(source) == expected

    @pytest.mark.parametrize("text", [
        "width:10px;",
        "top:0.5em;",
        "box-shadow:0 0 0 1px red;",
        "flex:0 0;",
        "-webkit-margin-before:0 0;",
        "margin:0 1px;",
        "margin:0 1px !important;",
    ])
    def test_leaves_other_values_alone(self, text):
        assert normalize_zero_units(text) == text

    def test_normalize_declaration(self):
        assert normalize_declaration(CssDeclaration("margin", "0px 0px")) == \
            CssDeclaration("margin", "0")
        assert normalize_declaration(CssDeclaration("width", "100px")) == \
            CssDeclaration("width", "100px")

class TestSerialize:
    """Tests for serialize()."""

    def test_group_output(self):
        """Test the compact rule format."""
        assert render(".a{color:red;padding:10px}.b{color:red;padding:10px}") == \
            ".a,.b{color:red;padding:10px}"

    def test_empty(self):
        assert serialize([]) == ""

    def test_layer_statement(self):
        """Test the leading @layer line."""
        assert serialize([], uses_layers=True) == "@layer settings,bridge,theme,free;"
        assert serialize([], layers=["a", "b"]) == "@layer a,b;"
        assert render("@layer a, b;@layer b{.x{color:red}}") == "@layer a,b;@layer b{.x{color:red}}"

    def test_hoisted_variables(self):
        """Test the :root block and var() substitution."""
        out = serialize(group(parse(".a{border:1px solid #e5e7eb}")), {"1px solid #e5e7eb": "0"})
        assert out == ":root{--_0:1px solid #e5e7eb;}.a{border:var(--_0)}"
        assert variable_reference("12") == "var(--_12)"

    def test_reference_only_when_shorter(self):
        """Test that a reference never replaces a shorter value."""
        out = serialize(group(parse(".a{x:abcdefghij}")), {"abcdefghij": "0"})
        assert out.endswith(".a{x:abcdefghij}")

    def test_at_rules(self):
        """Test grouping, opaque and statement at-rules."""
        out = render(
            "@media (max-width: 768px){.a{color:red}.b{color:red}}"
            "@font-face{font-family: X;\n src: url(x.woff2);}"
        )
        assert out == ("@media (max-width: 768px){.a,.b{color:red}}"
                       "@font-face{font-family: X;  src: url(x.woff2);}")

    def test_empty_grouping_at_rule_dropped(self):
        assert render("@media print{.a{}}.b{color:red}") == ".b{color:red}"

    def test_head_statement_order(self):
        """Test charset, layer and import ordering."""
        out = render('.a{color:red}@import url(a.css);@charset "UTF-8";@layer x;')
        assert out == '@charset "UTF-8";@layer x;@import url(a.css);.a{color:red}'

    def test_other_statements_stay_in_place(self):
        nodes = [AtRule("custom", "thing")] + parse(".a{color:red}")
        assert serialize(group(nodes)) == "@custom thing;.a{color:red}"

    def test_whole_output_is_normalized(self):
        assert render(".d{margin:0px 0em 0rem 0px}") == ".d{margin:0}"

    def test_sublayers_rendered_in_place(self):
        """Test that nested @layer rules stay inside their parent layer."""
        out = render("@layer a{@layer b{.x{color:red}}@layer c;}")
        assert out == "@layer a;@layer a{@layer b{.x{color:red}}@layer c;}"
