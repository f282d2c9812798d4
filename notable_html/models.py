"""Pydantic models for formatter configuration.

Options are accepted in snake_case (``line_numbers``) or camelCase
(``lineNumbers``). Unknown options are rejected.
"""

from enum import Enum
from html import escape
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .errors import UnresolvableTokenKind
from .themes import ThemeResolver, coerce_theme
from .tokens import ShortNameTable


class LayoutStyle(str, Enum):
    """Structural markup used when line numbers are enabled."""

    TABLE = "table"
    DIV = "div"


class FormatterOptions(BaseModel):
    """Immutable, validated formatter configuration.

    ``inline_theme`` and ``short_names`` are resolved to their lookup
    collaborators during validation, so a bad theme name fails here rather
    than halfway through a render.
    """

    wrapper_class: Optional[str] = Field(
        default="highlight",
        validation_alias=AliasChoices("wrapper_class", "wrapperClass", "css_class"),
    )
    layout_style: LayoutStyle = Field(
        default=LayoutStyle.TABLE,
        validation_alias=AliasChoices("layout_style", "layoutStyle", "format_style"),
    )
    line_numbers: bool = False
    start_line: int = 1
    inline_theme: Optional[Any] = None  # ThemeResolver after validation
    wrap: bool = True
    short_names: ShortNameTable = Field(default_factory=ShortNameTable)

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
    )

    @field_validator("inline_theme", mode="before")
    @classmethod
    def _resolve_theme(cls, value: Any) -> Optional[ThemeResolver]:
        return coerce_theme(value)

    @field_validator("short_names", mode="before")
    @classmethod
    def _resolve_short_names(cls, value: Any) -> ShortNameTable:
        if value is None:
            return ShortNameTable()
        if isinstance(value, ShortNameTable):
            return value
        if isinstance(value, dict):
            try:
                return ShortNameTable(value)  # type: ignore[reportUnknownArgumentType]
            except UnresolvableTokenKind as e:
                raise ValueError(str(e)) from e
        raise ValueError(
            f"short_names must be a mapping of token kinds to names, got {value!r}"
        )

    @property
    def wrapper_attr(self) -> str:
        """The ``class`` attribute for the outer wrapper, or an empty string."""
        if not self.wrapper_class:
            return ""
        return f' class="{escape(self.wrapper_class)}"'
