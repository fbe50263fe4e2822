"""Render settings and configuration helpers."""
from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

from .errors import ConfigError, HighlightIOError


class QuoteStyle(str, Enum):
    """Markdown emphasis applied to quoted passages."""

    BLOCK_QUOTE = "blockquote"
    ITALIC = "italic"
    PLAIN = "plain"
    BOLD = "bold"


class NoteStyle(str, Enum):
    """Markdown emphasis applied to reader notes."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    BLOCK_QUOTE = "blockquote"
    NESTED_QUOTE = "nested-quote"


_StyleT = TypeVar("_StyleT", QuoteStyle, NoteStyle)


def parse_style(enum_type: Type[_StyleT], value: Any) -> _StyleT:
    """Convert ``value`` into a member of ``enum_type``.

    Members pass through untouched. Strings are matched case-insensitively
    against values and names, treating ``_`` and ``-`` alike, so
    ``"nested_quote"``, ``"NESTED_QUOTE"`` and ``"nested-quote"`` all work.
    """

    if isinstance(value, enum_type):
        return value
    if isinstance(value, Enum):
        value = value.value
    key = str(value).strip().lower().replace("_", "-")
    for member in enum_type:
        if key in (member.value, member.name.lower().replace("_", "-")):
            return member
    choices = ", ".join(member.value for member in enum_type)
    raise ConfigError(f"Unknown {enum_type.__name__} {value!r}; expected one of: {choices}")


@dataclass(frozen=True)
class RenderSettings:
    """Style choices and separator policy used by a renderer."""

    split_lines_enabled: bool = True
    quote_style: QuoteStyle = QuoteStyle.BLOCK_QUOTE
    note_style: NoteStyle = NoteStyle.PLAIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "quote_style", parse_style(QuoteStyle, self.quote_style))
        object.__setattr__(self, "note_style", parse_style(NoteStyle, self.note_style))

    @classmethod
    def builder(cls) -> "RenderSettingsBuilder":
        return RenderSettingsBuilder()

    def to_builder(self) -> "RenderSettingsBuilder":
        return RenderSettingsBuilder(self)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "RenderSettings":
        kwargs: Dict[str, Any] = {}
        if "split_lines" in data and data["split_lines"] is not None:
            if not isinstance(data["split_lines"], bool):
                raise ConfigError(f"split_lines should be true or false, got {data['split_lines']!r}")
            kwargs["split_lines_enabled"] = data["split_lines"]
        if "quote_style" in data and data["quote_style"]:
            kwargs["quote_style"] = parse_style(QuoteStyle, data["quote_style"])
        if "note_style" in data and data["note_style"]:
            kwargs["note_style"] = parse_style(NoteStyle, data["note_style"])
        return cls(**kwargs)


class RenderSettingsBuilder:
    """Fluent builder producing immutable :class:`RenderSettings` snapshots.

    Every configuration call returns the builder itself so calls can be
    chained; when a field is set twice the last call wins::

        settings = (
            RenderSettings.builder()
            .disable_split_lines()
            .quote_style(QuoteStyle.ITALIC)
            .build()
        )
    """

    def __init__(self, base: Optional[RenderSettings] = None) -> None:
        self._settings = base or RenderSettings()

    def enable_split_lines(self) -> "RenderSettingsBuilder":
        self._settings = replace(self._settings, split_lines_enabled=True)
        return self

    def disable_split_lines(self) -> "RenderSettingsBuilder":
        self._settings = replace(self._settings, split_lines_enabled=False)
        return self

    def quote_style(self, style: QuoteStyle) -> "RenderSettingsBuilder":
        self._settings = replace(self._settings, quote_style=parse_style(QuoteStyle, style))
        return self

    def note_style(self, style: NoteStyle) -> "RenderSettingsBuilder":
        self._settings = replace(self._settings, note_style=parse_style(NoteStyle, style))
        return self

    def build(self) -> RenderSettings:
        return self._settings


def load_config(path: Optional[Path]) -> Dict[str, Any]:
    """Load a JSON configuration file if provided."""

    if path is None:
        return {}
    try:
        with path.expanduser().resolve().open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise HighlightIOError(f"cannot read configuration file {path}", exc) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid configuration file {path}", exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"configuration file {path} must contain a JSON object")
    return data
