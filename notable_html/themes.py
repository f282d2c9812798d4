"""Inline theme resolution.

In inline-theme mode each span carries literal CSS declarations instead of a
class name. The declarations come from a theme resolver: any object with a
``style_for(kind)`` method returning a list of declarations, or None when the
theme has no rules for the kind. ``InlineTheme`` is the resolver backed by a
Pygments style.
"""

from typing import Any, List, Optional, Protocol, Type

from pygments.style import Style
from pygments.styles import get_style_by_name
from pygments.token import _TokenType  # type: ignore[reportPrivateUsage]
from pygments.util import ClassNotFound

from .errors import InvalidConfiguration


class ThemeResolver(Protocol):
    """Maps a token kind to CSS declarations such as ``"color: #008000"``."""

    def style_for(self, kind: _TokenType) -> Optional[List[str]]: ...


def render_rules(info: dict[str, Any]) -> List[str]:
    """Render a Pygments ``style_for_token`` result as CSS declarations."""
    rules: List[str] = []
    if info.get("color"):
        rules.append(f"color: #{info['color']}")
    if info.get("bgcolor"):
        rules.append(f"background-color: #{info['bgcolor']}")
    if info.get("bold"):
        rules.append("font-weight: bold")
    if info.get("italic"):
        rules.append("font-style: italic")
    if info.get("underline"):
        rules.append("text-decoration: underline")
    if info.get("border"):
        rules.append(f"border: 1px solid #{info['border']}")
    return rules


class InlineTheme:
    """Theme resolver backed by a Pygments ``Style`` subclass.

    Results are computed on every call and never cached.
    """

    def __init__(self, style: Type[Style]) -> None:
        self.style = style

    @classmethod
    def from_name(cls, name: str) -> "InlineTheme":
        """Look up a registered Pygments style by name (e.g. ``"monokai"``)."""
        try:
            style = get_style_by_name(name)
        except ClassNotFound as e:
            raise InvalidConfiguration(f"Unknown inline theme: {name!r}") from e
        return cls(style)

    @property
    def name(self) -> str:
        return self.style.__name__

    def style_for(self, kind: _TokenType) -> Optional[List[str]]:
        """Rules for ``kind``, or for its nearest ancestor the style knows."""
        ttype: Optional[_TokenType] = kind
        while ttype is not None:
            try:
                info = self.style.style_for_token(ttype)
            except KeyError:
                ttype = ttype.parent
                continue
            return render_rules(info)
        return None

    def __repr__(self) -> str:
        return f"InlineTheme({self.name})"


def coerce_theme(value: Any) -> Optional[ThemeResolver]:
    """Turn an ``inline_theme`` option value into a theme resolver.

    Accepts None, a style name, a Pygments ``Style`` subclass, or an object
    that already implements ``style_for``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return InlineTheme.from_name(value)
    if isinstance(value, type) and issubclass(value, Style):
        return InlineTheme(value)
    if callable(getattr(value, "style_for", None)):
        return value
    raise InvalidConfiguration(
        f"inline_theme must be a style name, a Style subclass or a theme resolver, got {value!r}"
    )
