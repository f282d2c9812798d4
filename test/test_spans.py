#!/usr/bin/env python3
"""Tests for single-token span rendering."""

import pytest
from pygments.style import Style
from pygments.token import Comment, Keyword, Literal, Name, String, Text, Whitespace

from notable_html import InlineTheme, ShortNameTable, SpanRenderer, UnresolvableTokenKind


class MiniStyle(Style):
    styles = {
        Keyword: "bold #008000",
        Name: "italic",
        Comment: "underline bg:#ffffff",
    }


@pytest.fixture
def renderer() -> SpanRenderer:
    return SpanRenderer(ShortNameTable())


@pytest.fixture
def inline_renderer() -> SpanRenderer:
    return SpanRenderer(ShortNameTable(), InlineTheme(MiniStyle))


class TestClassMode:
    """Tests for CSS class spans."""

    def test_keyword(self, renderer):
        assert renderer.render(Keyword, "def") == '<span class="k">def</span>'

    def test_subtype_short_name(self, renderer):
        assert renderer.render(String.Double, '"x"') == '<span class="s2">"x"</span>'

    def test_untagged_text(self, renderer):
        assert renderer.render(Text, "plain words") == "plain words"

    def test_dotted_kind(self, renderer):
        assert renderer.render("Name.Function", "foo") == '<span class="nf">foo</span>'

    def test_escapes_markup_once(self, renderer):
        assert renderer.render(Text, "a < b && c > d") == (
            "a &lt; b &amp;&amp; c &gt; d"
        )

    def test_does_not_trust_existing_entities(self, renderer):
        assert renderer.render(Name, "&amp;") == '<span class="n">&amp;amp;</span>'

    def test_quotes_left_alone(self, renderer):
        assert renderer.render(Text, "say \"hi\" 'there'") == "say \"hi\" 'there'"

    def test_empty_text(self, renderer):
        assert renderer.render(Whitespace, "") == '<span class="w"></span>'

    def test_child_kind_uses_ancestor_name(self, renderer):
        assert renderer.render(Literal.Scalar.Plain, "1") == '<span class="l">1</span>'
        assert renderer.render(Keyword.Made.Up, "x") == '<span class="k">x</span>'

    def test_unknown_kind(self, renderer):
        with pytest.raises(UnresolvableTokenKind) as excinfo:
            renderer.render("Keyword.Made.Up.Further", "x")
        assert excinfo.value.kind == "Keyword.Made.Up.Further"
        assert excinfo.value.text == "x"
        assert "'x'" in str(excinfo.value)

    def test_no_listed_ancestor(self):
        renderer = SpanRenderer(ShortNameTable({Keyword: "k"}))
        with pytest.raises(UnresolvableTokenKind) as excinfo:
            renderer.render(Name.Builtin, "len")
        assert excinfo.value.kind is Name.Builtin

    def test_non_kind_object(self, renderer):
        with pytest.raises(UnresolvableTokenKind):
            renderer.render(object(), "x")

    def test_custom_table(self):
        table = ShortNameTable({Keyword: "kw", Text: "", Whitespace: "ws"})
        renderer = SpanRenderer(table)
        assert renderer.render(Keyword, "if") == '<span class="kw">if</span>'
        with pytest.raises(UnresolvableTokenKind):
            renderer.render(Name, "x")


class TestInlineThemeMode:
    """Tests for inline style spans."""

    def test_style_attribute(self, inline_renderer):
        assert inline_renderer.render(Keyword, "def") == (
            '<span style="color: #008000;font-weight: bold">def</span>'
        )

    def test_inherited_rules(self, inline_renderer):
        assert inline_renderer.render(Name.Function, "foo") == (
            '<span style="font-style: italic">foo</span>'
        )

    def test_child_kind_uses_ancestor_rules(self, inline_renderer):
        assert inline_renderer.render(Keyword.Scalar.Odd, "x") == (
            '<span style="color: #008000;font-weight: bold">x</span>'
        )

    def test_background_and_underline(self, inline_renderer):
        assert inline_renderer.render(Comment, "# x") == (
            '<span style="background-color: #ffffff;text-decoration: underline"># x</span>'
        )

    def test_no_rules(self, inline_renderer):
        assert inline_renderer.render(Whitespace, " ") == '<span style=""> </span>'

    def test_untagged_text(self, inline_renderer):
        assert inline_renderer.render(Text, "a") == "a"

    def test_escapes_quotes(self, inline_renderer):
        assert inline_renderer.render(Text, '<"&\'>') == "&lt;&quot;&amp;&#x27;&gt;"

    def test_escapes_style_value(self):
        class HostileTheme:
            def style_for(self, kind):
                return ['color: red" onclick="alert(1)']

        renderer = SpanRenderer(ShortNameTable(), HostileTheme())
        assert renderer.render(Keyword, "x") == (
            '<span style="color: red&quot; onclick=&quot;alert(1)">x</span>'
        )

    def test_theme_without_rules_for_kind(self):
        class KeywordsOnly:
            def style_for(self, kind):
                return ["font-weight: bold"] if kind in Keyword else None

        renderer = SpanRenderer(ShortNameTable(), KeywordsOnly())
        assert renderer.render(Keyword.Constant, "None") == (
            '<span style="font-weight: bold">None</span>'
        )
        with pytest.raises(UnresolvableTokenKind):
            renderer.render(Name, "x")
