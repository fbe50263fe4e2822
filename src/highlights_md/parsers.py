"""Parser for Bookcision JSON highlight exports."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Dict, List

from .errors import HighlightIOError, InvalidFormatError
from .models import Book, Comment, Highlight, Location, Note, Quote

logger = logging.getLogger(__name__)

FORMAT_ERROR_MESSAGE = "invalid bookcision json file"


class SchemaError(ValueError):
    """Describes where a decoded export departs from the expected schema."""


def _require(data: Dict[str, Any], key: str, expected: type, where: str) -> Any:
    if key not in data:
        raise SchemaError(f"{where}: missing field {key!r}")
    value = data[key]
    # bool is a subclass of int; never accept it as a number.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise SchemaError(
            f"{where}: field {key!r} should be {expected.__name__}, got {type(value).__name__}"
        )
    if isinstance(value, str):
        _check_encodable(value, key, where)
    return value


def _check_encodable(value: str, key: str, where: str) -> None:
    # json accepts lone surrogate escapes such as "\ud800"; UTF-8 output does not.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SchemaError(f"{where}: field {key!r} is not valid UTF-8 text ({exc.reason})") from exc


class BookcisionParser:
    """Builds a :class:`Book` from the JSON produced by Bookcision.

    The expected document looks like::

        {
          "asin": "B0049U443Q",
          "title": "...",
          "authors": "...",
          "highlights": [
            {"text": "...", "isNoteOnly": false,
             "location": {"value": 157, "url": "kindle://..."},
             "note": null}
          ]
        }
    """

    def parse(self, path: Path) -> Book:
        try:
            with path.expanduser().open("rb") as handle:
                return self.load(handle)
        except OSError as exc:
            raise HighlightIOError(f"cannot read input file {path}", exc) from exc

    def load(self, handle: IO[Any]) -> Book:
        try:
            data = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidFormatError(FORMAT_ERROR_MESSAGE, exc) from exc
        return self.from_mapping(data)

    def from_mapping(self, data: Any) -> Book:
        try:
            return self._build_book(data)
        except SchemaError as exc:
            raise InvalidFormatError(FORMAT_ERROR_MESSAGE, exc) from exc

    def _build_book(self, data: Any) -> Book:
        if not isinstance(data, dict):
            raise SchemaError(f"book: expected an object, got {type(data).__name__}")
        title = _require(data, "title", str, "book")
        authors = _require(data, "authors", str, "book")
        raw_highlights = _require(data, "highlights", list, "book")

        highlights: List[Highlight] = []
        for index, entry in enumerate(raw_highlights):
            highlights.append(self._build_highlight(entry, f"highlights[{index}]"))

        logger.debug("Parsed %d highlight(s) for %r", len(highlights), title)
        return Book(title=title, authors=authors, highlights=tuple(highlights))

    def _build_highlight(self, entry: Any, where: str) -> Highlight:
        if not isinstance(entry, dict):
            raise SchemaError(f"{where}: expected an object, got {type(entry).__name__}")
        text = _require(entry, "text", str, where)
        location = self._build_location(_require(entry, "location", dict, where), f"{where}.location")

        note_only = entry.get("isNoteOnly", False)
        if not isinstance(note_only, bool):
            raise SchemaError(f"{where}: field 'isNoteOnly' should be bool")
        note = entry.get("note")
        if note is not None and not isinstance(note, str):
            raise SchemaError(f"{where}: field 'note' should be str or null")
        if note is not None:
            _check_encodable(note, "note", where)

        if note_only:
            return Note(note=note if note is not None else text, location=location)
        if note:
            return Comment(quote=text, note=note, location=location)
        return Quote(quote=text, location=location)

    def _build_location(self, data: Dict[str, Any], where: str) -> Location:
        value = _require(data, "value", int, where)
        url = _require(data, "url", str, where)
        if value < 0:
            raise SchemaError(f"{where}: value must not be negative, got {value}")
        return Location(value=value, link=url)
