"""Sample books for demos and quick manual checks."""
from __future__ import annotations

from .models import Book, Comment, Location, Note, Quote

_CHESS_URL = "kindle://book?action=open&asin=B0049U443Q&location={}"


def chess_book() -> Book:
    """Highlights from Garry Kasparov's book on chess and decision making."""

    return Book(
        title="How Life Imitates Chess: Making the Right Moves, from the Board to the Boardroom",
        authors="Garry Kasparov",
        highlights=(
            Quote(
                quote="the reality is that we discard our decisions almost as soon as we make them",
                location=Location(157, _CHESS_URL.format(157)),
            ),
            Note(
                note="Create a personalized map of your decision-making process",
                location=Location(294, _CHESS_URL.format(294)),
            ),
            Comment(
                quote="Drawing it as an actual map might be fun",
                note=(
                    "The map tells you which areas of your mind are well-known to you "
                    "and which are still uncharted."
                ),
                location=Location(295, _CHESS_URL.format(295)),
            ),
        ),
    )


def basic_attributes() -> Book:
    """One highlight of each kind with predictable text, handy for styling."""

    return Book(
        title="Title",
        authors="Author",
        highlights=(
            Quote(quote="Quote_1", location=Location(1, "http://book.org/highlights/1")),
            Note(note="Note_2", location=Location(2, "http://book.org/highlights/2")),
            Comment(quote="Quote_3", note="Note_3", location=Location(3, "http://book.org/highlights/3")),
        ),
    )
