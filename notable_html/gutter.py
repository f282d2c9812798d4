"""Line counting and gutter markup.

The gutter sits before the code body in the markup, so the total line count
must be known before anything is emitted. ``LineCounter`` is fed token texts
during the buffering pass and reports the count once the stream is drained.
"""

from typing import Iterable


class LineCounter:
    """Running line count over a stream of token texts.

    A stream whose last text does not end in a newline (including an empty
    stream) still occupies a final display line.
    """

    __slots__ = ("newlines", "last_text")

    def __init__(self) -> None:
        self.newlines = 0
        self.last_text = ""

    def feed(self, text: str) -> None:
        self.newlines += text.count("\n")
        self.last_text = text

    @property
    def needs_trailing_newline(self) -> bool:
        """True when the body needs a synthetic closing newline."""
        return not self.last_text.endswith("\n")

    @property
    def line_count(self) -> int:
        return self.newlines + (1 if self.needs_trailing_newline else 0)


def count_lines(texts: Iterable[str]) -> int:
    """Count display lines for the concatenation of ``texts``."""
    counter = LineCounter()
    for text in texts:
        counter.feed(text)
    return counter.line_count


def gutter_numbers(start_line: int, line_count: int) -> str:
    """Newline-separated line numbers, with no trailing separator.

    >>> gutter_numbers(1, 3)
    '1\\n2\\n3'
    """
    return "\n".join(str(n) for n in range(start_line, start_line + line_count))


def render_gutter(start_line: int, line_count: int) -> str:
    """Gutter content as a pre-formatted block."""
    return f'<pre class="lineno">{gutter_numbers(start_line, line_count)}</pre>'
