"""Exception classes for notable-html."""

from typing import Any, Optional


class NotableHtmlError(Exception):
    """Base exception for all notable-html errors."""

    pass


class UnresolvableTokenKind(NotableHtmlError):
    """A token kind has no short name, or no style rules in the inline theme.

    Raised while rendering. The render is aborted: buffered layouts emit
    nothing, the flat layout may already have yielded the chunks for the
    tokens before the offending one.
    """

    def __init__(self, kind: Any, text: Optional[str] = None) -> None:
        self.kind = kind
        self.text = text
        message = f"Unknown token kind: {kind!r}"
        if text is not None:
            message += f" for {text!r}"
        super().__init__(message)


class InvalidConfiguration(NotableHtmlError, ValueError):
    """Formatter options could not be resolved.

    Raised at construction time, before any token is processed.
    """

    pass
