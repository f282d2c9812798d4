"""Render lexer token streams as syntax-highlighted HTML fragments."""

from .errors import InvalidConfiguration, NotableHtmlError, UnresolvableTokenKind
from .formatter import DIV_CHROME, TABLE_CHROME, NotableHtmlFormatter
from .gutter import LineCounter, count_lines, gutter_numbers, render_gutter
from .models import FormatterOptions, LayoutStyle
from .spans import SpanRenderer
from .themes import InlineTheme, ThemeResolver
from .tokens import ShortNameTable, TokenPair, TokenStream, resolve_kind

__all__ = [
    "DIV_CHROME",
    "FormatterOptions",
    "InlineTheme",
    "InvalidConfiguration",
    "LayoutStyle",
    "LineCounter",
    "NotableHtmlError",
    "NotableHtmlFormatter",
    "ShortNameTable",
    "SpanRenderer",
    "TABLE_CHROME",
    "ThemeResolver",
    "TokenPair",
    "TokenStream",
    "UnresolvableTokenKind",
    "count_lines",
    "gutter_numbers",
    "render_gutter",
    "resolve_kind",
]
