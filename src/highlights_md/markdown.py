"""Markdown rendering for book highlights."""
from __future__ import annotations

import io
import logging
from typing import BinaryIO, Optional

from .config import NoteStyle, QuoteStyle, RenderSettings
from .errors import HighlightIOError, InvalidFormatError
from .models import Book, Comment, Highlight, Note, Quote
from .writer import MarkdownWriter

logger = logging.getLogger(__name__)


class Renderer:
    """Base class for output formats that render a book into a sink."""

    def render(self, book: Book, out: BinaryIO) -> None:
        raise NotImplementedError

    def as_string(self, book: Book) -> str:
        """Render ``book`` into memory and return the decoded document."""

        buffer = io.BytesIO()
        self.render(book, buffer)
        return buffer.getvalue().decode("utf-8")


def _write_quote(md: MarkdownWriter, quote: str, style: QuoteStyle) -> None:
    if style is QuoteStyle.BLOCK_QUOTE:
        md.blockquote(quote)
    elif style is QuoteStyle.ITALIC:
        md.italic(quote)
    elif style is QuoteStyle.BOLD:
        md.bold(quote)
    else:
        md.text(quote)
    md.lf()


def _write_note(md: MarkdownWriter, note: str, style: NoteStyle) -> None:
    if style in (NoteStyle.BLOCK_QUOTE, NoteStyle.NESTED_QUOTE):
        # Without a quote there is nothing to nest into.
        md.blockquote(note)
    elif style is NoteStyle.ITALIC:
        md.italic(note)
    elif style is NoteStyle.BOLD:
        md.bold(note)
    else:
        md.text(note)
    md.lf()


def _write_comment(md: MarkdownWriter, comment: Comment, settings: RenderSettings) -> None:
    _write_quote(md, comment.quote, settings.quote_style)
    if settings.note_style is NoteStyle.NESTED_QUOTE:
        if settings.quote_style is QuoteStyle.BLOCK_QUOTE:
            md.blockquote_continuation().lf()
            md.blockquote(comment.note).lf()
        else:
            md.lf()
            md.text(comment.note).lf()
        return
    md.lf()
    _write_note(md, comment.note, settings.note_style)


def _write_highlight(md: MarkdownWriter, highlight: Highlight, settings: RenderSettings) -> None:
    if settings.split_lines_enabled:
        md.line().lf().lf()
    else:
        md.lf()

    if isinstance(highlight, Quote):
        _write_quote(md, highlight.quote, settings.quote_style)
    elif isinstance(highlight, Note):
        _write_note(md, highlight.note, settings.note_style)
    elif isinstance(highlight, Comment):
        _write_comment(md, highlight, settings)
    else:
        raise TypeError(f"Unsupported highlight type: {type(highlight).__name__}")

    location = highlight.location
    md.lf().link(f"Location {location.value}", location.link).lf().lf()


def render_book(book: Book, out: BinaryIO, settings: Optional[RenderSettings] = None) -> None:
    """Write ``book`` as Markdown into ``out`` in a single forward pass.

    Errors raised by ``out`` are not caught; use :class:`MarkdownRenderer`
    to get them wrapped as :class:`HighlightIOError`.
    """

    settings = settings or RenderSettings()
    md = MarkdownWriter(out)
    md.heading(book.title).lf().lf()
    md.italic(f"by {book.authors}").lf().lf()
    for highlight in book.highlights:
        _write_highlight(md, highlight, settings)


class MarkdownRenderer(Renderer):
    """Renders book highlights to Markdown using fixed render settings."""

    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or RenderSettings()

    def render(self, book: Book, out: BinaryIO) -> None:
        logger.debug(
            "Rendering %d highlight(s) of %r with %s",
            len(book.highlights),
            book.title,
            self.settings,
        )
        try:
            render_book(book, out, self.settings)
        except OSError as exc:
            raise HighlightIOError("cannot write markdown notes", exc) from exc
        except UnicodeEncodeError as exc:
            raise InvalidFormatError("cannot encode markdown notes", exc) from exc
