"""Low level emitter of Markdown primitives."""
from __future__ import annotations

from typing import BinaryIO


class MarkdownWriter:
    """Writes Markdown constructs to a binary sink.

    The writer knows nothing about books or highlights and never adds line
    breaks on its own; callers decide where ``lf()`` goes. ``OSError`` raised
    by the sink propagates unchanged.
    """

    def __init__(self, sink: BinaryIO, encoding: str = "utf-8") -> None:
        self._sink = sink
        self._encoding = encoding

    def heading(self, text: str) -> "MarkdownWriter":
        return self._write(f"# {text}")

    def blockquote(self, text: str) -> "MarkdownWriter":
        # Keep multi-line passages inside a single block.
        return self._write("> " + text.replace("\n", "\n> "))

    def blockquote_continuation(self) -> "MarkdownWriter":
        return self._write(">")

    def text(self, text: str) -> "MarkdownWriter":
        return self._write(text)

    def bold(self, text: str) -> "MarkdownWriter":
        return self._write(f"**{text}**")

    def italic(self, text: str) -> "MarkdownWriter":
        return self._write(f"*{text}*")

    def link(self, title: str, url: str) -> "MarkdownWriter":
        return self._write(f"[{title}]({url})")

    def line(self) -> "MarkdownWriter":
        return self._write("---")

    def lf(self) -> "MarkdownWriter":
        return self._write("\n")

    def _write(self, value: str) -> "MarkdownWriter":
        self._sink.write(value.encode(self._encoding))
        return self
