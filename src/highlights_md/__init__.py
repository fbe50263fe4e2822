"""Convert Kindle highlight exports into styled Markdown."""

from .config import NoteStyle, QuoteStyle, RenderSettings
from .errors import HighlightError, HighlightIOError, InvalidFormatError
from .markdown import MarkdownRenderer, Renderer
from .models import Book, Comment, Location, Note, Quote

__all__ = [
    "Book",
    "Comment",
    "HighlightError",
    "HighlightIOError",
    "InvalidFormatError",
    "Location",
    "MarkdownRenderer",
    "Note",
    "NoteStyle",
    "Quote",
    "QuoteStyle",
    "RenderSettings",
    "Renderer",
]
