"""Lexer selection for the command-line front end.

The formatter never lexes; the CLI picks a Pygments lexer from an explicit
name or from the source file name and feeds its token stream to the
formatter.
"""

import fnmatch
import functools
import os
from typing import Any, NamedTuple, Optional

from pygments.lexers import TextLexer, get_all_lexers, get_lexer_by_name  # type: ignore[reportUnknownVariableType]
from pygments.util import ClassNotFound

from .errors import InvalidConfiguration


class FilenameRules(NamedTuple):
    """Filename-to-lexer-alias lookups built from the registered lexers."""

    by_extension: dict[str, str]
    by_pattern: dict[str, str]


@functools.lru_cache(maxsize=None)
def filename_rules() -> FilenameRules:
    """Collect each lexer's filename globs, first registered lexer winning.

    Plain ``*.ext`` globs go in the extension table for a direct lookup;
    every glob, plain or not, is kept for fnmatch.
    """
    rules = FilenameRules({}, {})
    for _name, aliases, globs, _mimetypes in get_all_lexers():  # type: ignore[reportUnknownVariableType]
        if not aliases:
            continue
        for glob in globs:
            glob = glob.lower()
            rules.by_pattern.setdefault(glob, aliases[0])
            ext = glob[2:]
            if glob.startswith("*.") and not any(c in ext for c in "*?["):
                rules.by_extension.setdefault(ext, aliases[0])
    return rules


def lexer_alias_for_path(file_path: str) -> Optional[str]:
    """Find the lexer alias for a file name, or None if nothing matches."""
    rules = filename_rules()
    basename = os.path.basename(file_path).lower()
    _, dot, ext = basename.rpartition(".")
    if dot and ext in rules.by_extension:
        return rules.by_extension[ext]
    return next(
        (alias for glob, alias in rules.by_pattern.items() if fnmatch.fnmatch(basename, glob)),
        None,
    )


def get_lexer(name: Optional[str] = None, file_path: Optional[str] = None) -> Any:
    """Return a Pygments lexer by explicit name, or guessed from ``file_path``.

    Falls back to ``TextLexer`` when the file name matches nothing. Lexers keep
    leading whitespace (``stripall=False``) so indentation survives.

    Raises:
        InvalidConfiguration: if an explicit ``name`` is not a known lexer.
    """
    if name:
        try:
            return get_lexer_by_name(name, stripall=False)  # type: ignore[reportUnknownVariableType]
        except ClassNotFound as e:
            raise InvalidConfiguration(f"Unknown lexer: {name!r}") from e

    alias = lexer_alias_for_path(file_path) if file_path else None
    if alias is None:
        return TextLexer()  # type: ignore[reportUnknownVariableType]
    return get_lexer_by_name(alias, stripall=False)  # type: ignore[reportUnknownVariableType]
