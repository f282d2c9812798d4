"""Token kinds and short-name lookup.

Kinds are Pygments token types. Dotted string paths such as
``"Keyword.Constant"`` or ``"Token.Name.Builtin"`` are accepted anywhere a
kind is expected and resolved to the matching, already existing token type.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from pygments.token import STANDARD_TYPES, Token, _TokenType  # type: ignore[reportPrivateUsage]

from .errors import UnresolvableTokenKind

TokenKind = Union[_TokenType, str]
TokenPair = Tuple[TokenKind, str]
TokenStream = Iterable[TokenPair]


def resolve_kind(kind: Any) -> _TokenType:
    """Resolve a token kind given as a token type or a dotted path.

    Each path segment must name an existing subtype; resolving never adds
    new types to the Pygments token tree.

    Raises:
        UnresolvableTokenKind: if ``kind`` is not a token type, or is an empty
            or unknown dotted path.
    """
    if isinstance(kind, _TokenType):
        return kind
    if not isinstance(kind, str) or not kind:
        raise UnresolvableTokenKind(kind)

    parts = kind.split(".")
    if parts[0] == "Token":
        parts = parts[1:]
        if kind != "Token" and not parts[0]:
            raise UnresolvableTokenKind(kind)

    node = Token
    for part in parts:
        child = next((sub for sub in node.subtypes if sub[-1] == part), None)
        if child is None:
            raise UnresolvableTokenKind(kind)
        node = child
    return node


class ShortNameTable:
    """Maps token kinds to the compact CSS class names used in markup.

    The default table is Pygments' ``STANDARD_TYPES``, so ``Keyword`` maps to
    ``"k"`` and plain ``Text`` maps to the empty string (rendered untagged).
    A kind missing from the table takes the name of its nearest listed
    ancestor, so ``Literal.Scalar.Plain`` renders as ``"l"``.
    """

    def __init__(self, names: Optional[Mapping[Any, str]] = None) -> None:
        source: Mapping[Any, str] = STANDARD_TYPES if names is None else names
        self._names: Dict[_TokenType, str] = {
            resolve_kind(kind): short for kind, short in source.items()
        }

    def short_name(self, kind: _TokenType) -> Optional[str]:
        """Return the short name for ``kind``, or None if no ancestor is listed."""
        ttype: Optional[_TokenType] = kind
        while ttype is not None:
            name = self._names.get(ttype)
            if name is not None:
                return name
            ttype = ttype.parent
        return None

    def __contains__(self, kind: object) -> bool:
        return kind in self._names

    def __len__(self) -> int:
        return len(self._names)
