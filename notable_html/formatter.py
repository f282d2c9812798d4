#!/usr/bin/env python3
"""HTML formatter for token streams, with an optional line-number gutter.

Three layouts are available:

- flat (no line numbers): ``<pre class="highlight"><code>...</code></pre>``,
  streamed chunk by chunk as tokens arrive;
- table gutter: a one-row table with a gutter cell and a code cell;
- div gutter: the same two cells built from ``display: table`` divs, for
  pages where table markup is unwanted.

The gutter layouts need the total line count before the gutter can be
written, so they drain the whole token stream into a buffer first. The
``gutter gl``, ``lineno`` and ``code`` class names and the gutter-then-code
cell order are relied on by the client-side copy button script.
"""

import codecs
import logging
from typing import IO, Any, Iterator, List, NamedTuple, Optional, Union

from pydantic import ValidationError
from pygments.formatter import Formatter
from pygments.token import Whitespace

from .errors import InvalidConfiguration, UnresolvableTokenKind
from .gutter import LineCounter, render_gutter
from .models import FormatterOptions, LayoutStyle
from .spans import SpanRenderer
from .tokens import TokenStream

logger = logging.getLogger(__name__)


class GridChrome(NamedTuple):
    """Opening and closing markup around the gutter and code cells."""

    grid_open: str
    gutter_open: str
    gutter_close: str
    code_open: str
    code_close: str
    grid_close: str


# The "gl" class applies the Generic.Lineno style to the gutter
TABLE_CHROME = GridChrome(
    grid_open='<table style="border-spacing: 0"><tbody><tr>',
    gutter_open='<td class="gutter gl" style="text-align: right">',
    gutter_close="</td>",
    code_open='<td class="code">',
    code_close="</td>",
    grid_close="</tr></tbody></table>\n",
)

DIV_CHROME = GridChrome(
    grid_open='<div style="display: table; border-spacing: 0"><div style="display: table-row">',
    gutter_open='<div class="gutter gl" style="display: table-cell; text-align: right">',
    gutter_close="</div>",
    code_open='<div style="display: table-cell;" class="code">',
    code_close="</div>",
    grid_close="</div></div>\n",
)

LAYOUT_CHROME = {
    LayoutStyle.TABLE: TABLE_CHROME,
    LayoutStyle.DIV: DIV_CHROME,
}


class NotableHtmlFormatter(Formatter):
    """Formats a ``(kind, text)`` token stream as an HTML fragment.

    Configure once, render many times. The formatter holds no per-render
    state, so one instance can be shared between threads.

    Options can be passed as a ``FormatterOptions`` record or as keyword
    arguments (snake_case or camelCase)::

        formatter = NotableHtmlFormatter(line_numbers=True, layout_style="div")
        html = formatter.render(lexer.get_tokens(code))

    It is also a Pygments formatter, so ``pygments.highlight(code, lexer,
    NotableHtmlFormatter())`` works too.
    """

    name = "Notable HTML"
    aliases = ["notable", "html-notable"]
    filenames: List[str] = []

    def __init__(
        self, options: Optional[FormatterOptions] = None, **kwargs: Any
    ) -> None:
        if options is not None and kwargs:
            raise InvalidConfiguration(
                "Pass either a FormatterOptions record or keyword options, not both"
            )
        if options is None:
            try:
                options = FormatterOptions(**kwargs)
            except ValidationError as e:
                raise InvalidConfiguration(str(e)) from e
        super().__init__()

        self.config = options
        self.chrome = LAYOUT_CHROME[options.layout_style]
        self.spans = SpanRenderer(options.short_names, options.inline_theme)

        # Rendered up front so a lookup table or theme that cannot style the
        # synthetic final newline is rejected before any tokens arrive
        try:
            self.trailing_newline = self.spans.render(Whitespace, "\n")
        except UnresolvableTokenKind as e:
            raise InvalidConfiguration(
                f"Cannot render the trailing newline token: {e}"
            ) from e

    def stream(self, tokens: TokenStream) -> Iterator[str]:
        """Yield markup chunks for ``tokens`` using the configured layout."""
        if self.config.line_numbers:
            yield from self.render_buffered(tokens)
        else:
            yield from self.stream_flat(tokens)

    def stream_flat(self, tokens: TokenStream) -> Iterator[str]:
        """Yield one chunk per token as it arrives, without a gutter.

        Memory use does not grow with the input. If a token fails to
        resolve, the chunks already yielded for earlier tokens have been
        handed to the caller; the wrapper is never closed.
        """
        if self.config.wrap:
            yield f"<pre{self.config.wrapper_attr}><code>"
        for kind, text in tokens:
            yield self.spans.render(kind, text)
        if self.config.wrap:
            yield "</code></pre>\n"

    def render_buffered(
        self, tokens: TokenStream, layout: Optional[Union[LayoutStyle, str]] = None
    ) -> List[str]:
        """Drain ``tokens`` and return the chunks of a gutter layout.

        The whole stream is rendered before any chunk is returned, so a
        failing token leaves no partial output.

        Args:
            tokens: The token stream, consumed once.
            layout: Overrides the configured layout style.
        """
        chrome = self.chrome if layout is None else LAYOUT_CHROME[LayoutStyle(layout)]

        counter = LineCounter()
        body: List[str] = []
        for kind, text in tokens:
            counter.feed(text)
            body.append(self.spans.render(kind, text))

        # add an extra line for text that is not newline-terminated
        if counter.needs_trailing_newline:
            body.append(self.trailing_newline)

        line_count = counter.line_count
        logger.debug(
            "Rendered %d lines starting at %d for %s gutter",
            line_count,
            self.config.start_line,
            "table" if chrome is TABLE_CHROME else "div",
        )

        chunks: List[str] = []
        if self.config.wrap:
            chunks.append(f"<div{self.config.wrapper_attr}>")
        chunks.extend(
            [
                chrome.grid_open,
                chrome.gutter_open,
                render_gutter(self.config.start_line, line_count),
                chrome.gutter_close,
                chrome.code_open,
                "<pre>",
                "".join(body),
                "</pre>",
                chrome.code_close,
                chrome.grid_close,
            ]
        )
        if self.config.wrap:
            chunks.append("</div>\n")
        return chunks

    def render(self, tokens: TokenStream) -> str:
        """Render ``tokens`` to a single string."""
        return "".join(self.stream(tokens))

    def format(self, tokensource: TokenStream, outfile: IO[Any]) -> None:
        """Write the rendered chunks to ``outfile`` (Pygments formatter API).

        When ``encoding`` is set, as pygmentize does, ``outfile`` is a binary
        stream and chunks are encoded on write.
        """
        if self.encoding:
            outfile = codecs.lookup(self.encoding)[3](outfile)
        for chunk in self.stream(tokensource):
            outfile.write(chunk)
