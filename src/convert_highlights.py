"""Command line entry point for converting Bookcision highlight exports into Markdown."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from highlights_md.config import NoteStyle, QuoteStyle, RenderSettings, load_config, parse_style
from highlights_md.errors import HighlightError, HighlightIOError
from highlights_md.examples import chess_book
from highlights_md.fetchers import BookcisionFetcher, is_remote
from highlights_md.markdown import MarkdownRenderer
from highlights_md.models import Book
from highlights_md.parsers import BookcisionParser

logger = logging.getLogger("convert_highlights")

STDIO = "-"


def _parse_args(argv: Optional[Iterable[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Bookcision JSON file or http(s) URL (default: standard input)",
    )
    parser.add_argument("output", nargs="?", default=None, help="Markdown file (default: standard output)")
    parser.add_argument("--config", type=Path, help="Path to JSON configuration file", default=None)
    parser.add_argument(
        "--quote-style",
        choices=[style.value for style in QuoteStyle],
        default=None,
        help="How quoted passages are emphasised",
    )
    parser.add_argument(
        "--note-style",
        choices=[style.value for style in NoteStyle],
        default=None,
        help="How reader notes are emphasised",
    )
    split = parser.add_mutually_exclusive_group()
    split.add_argument(
        "--split-lines",
        action="store_true",
        dest="split_lines",
        default=None,
        help="Separate highlights with horizontal rules",
    )
    split.add_argument(
        "--no-split-lines",
        action="store_false",
        dest="split_lines",
        help="Separate highlights with blank lines only",
    )
    parser.add_argument("--sample", action="store_true", help="Render the built-in sample book instead of input")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to standard error")
    return parser.parse_args(None if argv is None else list(argv))


def _combine_config(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings.from_mapping(load_config(args.config))
    builder = settings.to_builder()

    if args.quote_style is not None:
        builder.quote_style(parse_style(QuoteStyle, args.quote_style))
    if args.note_style is not None:
        builder.note_style(parse_style(NoteStyle, args.note_style))
    if args.split_lines is True:
        builder.enable_split_lines()
    elif args.split_lines is False:
        builder.disable_split_lines()
    return builder.build()


def _read_book(args: argparse.Namespace) -> Book:
    if args.sample:
        return chess_book()
    source = args.input
    if source is None or source == STDIO:
        logger.debug("Reading highlights from standard input")
        return BookcisionParser().load(sys.stdin.buffer)
    if is_remote(source):
        return BookcisionFetcher().fetch(source)
    logger.debug("Reading highlights from %s", source)
    return BookcisionParser().parse(Path(source))


def _render_to_file(renderer: MarkdownRenderer, book: Book, path: Path) -> None:
    try:
        handle: BinaryIO = path.open("wb")
    except OSError as exc:
        raise HighlightIOError(f"cannot write to file {path}", exc) from exc
    # A half written document is useless; the whole render has to be redone.
    try:
        with handle:
            renderer.render(book, handle)
    except OSError as exc:
        path.unlink(missing_ok=True)
        raise HighlightIOError(f"cannot write to file {path}", exc) from exc
    except HighlightError:
        path.unlink(missing_ok=True)
        raise


def _run(args: argparse.Namespace) -> None:
    settings = _combine_config(args)
    book = _read_book(args)
    renderer = MarkdownRenderer(settings)

    if args.output is None or args.output == STDIO:
        out = sys.stdout.buffer
        renderer.render(book, out)
        try:
            out.flush()
        except OSError as exc:
            raise HighlightIOError("cannot write to standard output", exc) from exc
        return

    path = Path(args.output)
    _render_to_file(renderer, book, path)
    print(f"Wrote {len(book.highlights)} highlight(s) from '{book.title}' to {path}.")


def main(argv: Iterable[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    except HighlightError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
