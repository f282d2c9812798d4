"""Pytest configuration and shared fixtures."""

from html.parser import HTMLParser
from typing import List, Tuple

import pytest
from pygments.token import Keyword, Name, Punctuation, Text, Whitespace


class TagBalanceChecker(HTMLParser):
    """Records unbalanced tags while parsing a fragment."""

    def __init__(self) -> None:
        super().__init__()
        self.stack: List[str] = []
        self.errors: List[str] = []

    def handle_starttag(self, tag, attrs):
        self.stack.append(tag)

    def handle_endtag(self, tag):
        if not self.stack or self.stack[-1] != tag:
            self.errors.append(f"unexpected </{tag}> with open {self.stack}")
            return
        self.stack.pop()


def _assert_balanced(markup: str) -> None:
    checker = TagBalanceChecker()
    checker.feed(markup)
    checker.close()
    assert checker.errors == []
    assert checker.stack == []


@pytest.fixture
def assert_balanced():
    """Assert every opened element in a fragment is closed exactly once."""
    return _assert_balanced


@pytest.fixture
def example_tokens() -> List[Tuple[object, str]]:
    """A short Python function as a token list."""
    return [
        (Keyword, "def"),
        (Whitespace, " "),
        (Name, "foo"),
        (Punctuation, "():\n"),
        (Text, "    pass"),
    ]


@pytest.fixture
def example_body() -> str:
    """Class-mode markup for ``example_tokens``, without the synthetic newline."""
    return (
        '<span class="k">def</span>'
        '<span class="w"> </span>'
        '<span class="n">foo</span>'
        '<span class="p">():\n</span>'
        "    pass"
    )
