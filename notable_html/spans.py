"""Span rendering: one token in, one escaped and styled fragment out."""

import html
import logging
from typing import Any, Optional

from .errors import UnresolvableTokenKind
from .themes import ThemeResolver
from .tokens import ShortNameTable, resolve_kind

logger = logging.getLogger(__name__)


class SpanRenderer:
    """Renders single tokens as ``<span>`` elements.

    In class mode a token becomes ``<span class="k">def</span>``. With an
    inline theme the class is replaced by the theme's declarations:
    ``<span style="color: #008000;font-weight: bold">def</span>``. Tokens
    whose short name is empty are emitted as bare escaped text in both modes.
    """

    def __init__(
        self,
        short_names: ShortNameTable,
        inline_theme: Optional[ThemeResolver] = None,
    ) -> None:
        self.short_names = short_names
        self.inline_theme = inline_theme

    def render(self, kind: Any, text: str) -> str:
        """Render one token.

        Raises:
            UnresolvableTokenKind: if the kind has no short name, or the
                inline theme has no rules for it.
        """
        try:
            ttype = resolve_kind(kind)
        except UnresolvableTokenKind:
            logger.debug("Cannot resolve token kind %r for %r", kind, text)
            raise UnresolvableTokenKind(kind, text) from None

        shortname = self.short_names.short_name(ttype)
        if shortname is None:
            logger.debug("No short name for token kind %r", ttype)
            raise UnresolvableTokenKind(ttype, text)

        if self.inline_theme is None:
            escaped = html.escape(text, quote=False)
            if not shortname:
                return escaped
            return f'<span class="{shortname}">{escaped}</span>'

        escaped = html.escape(text)
        if not shortname:
            return escaped
        rules = self.inline_theme.style_for(ttype)
        if rules is None:
            logger.debug("Inline theme has no rules for token kind %r", ttype)
            raise UnresolvableTokenKind(ttype, text)
        style = html.escape(";".join(rules))
        return f'<span style="{style}">{escaped}</span>'
