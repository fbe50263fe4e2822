import io
import json
from pathlib import Path

import pytest

from highlights_md.errors import HighlightIOError, InvalidFormatError
from highlights_md.models import Comment, Location, Note, Quote
from highlights_md.parsers import BookcisionParser


BOOKCISION_SAMPLE = {
    "asin": "B0049U443Q",
    "title": "How Life Imitates Chess: Making the Right Moves, from the Board to the Boardroom",
    "authors": "Garry Kasparov",
    "highlights": [
        {
            "text": "the reality is that we discard our decisions almost as soon as we make them.",
            "isNoteOnly": False,
            "location": {"url": "kindle://book?action=open&asin=B0049U443Q&location=157", "value": 157},
            "note": None,
        },
        {
            "text": "“Why this move? What am I trying to achieve and how does this move help me achieve it?”",
            "isNoteOnly": False,
            "location": {"url": "kindle://book?action=open&asin=B0049U443Q&location=447", "value": 447},
            "note": "Each move or decision should contribute to some strategical objective",
        },
        {
            "text": "ignored for note only entries",
            "isNoteOnly": True,
            "location": {"url": "kindle://book?action=open&asin=B0049U443Q&location=294", "value": 294},
            "note": "Create a personalized map of your decision-making process",
        },
    ],
}


def write_sample(tmp_path: Path, payload) -> Path:
    sample_path = tmp_path / "bookcision.json"
    sample_path.write_text(json.dumps(payload), encoding="utf-8")
    return sample_path


def test_parse_builds_highlight_variants(tmp_path: Path) -> None:
    book = BookcisionParser().parse(write_sample(tmp_path, BOOKCISION_SAMPLE))

    assert book.title.startswith("How Life Imitates Chess")
    assert book.authors == "Garry Kasparov"
    quote, comment, note = book.highlights
    assert isinstance(quote, Quote)
    assert quote.location == Location(157, "kindle://book?action=open&asin=B0049U443Q&location=157")
    assert isinstance(comment, Comment)
    assert comment.note == "Each move or decision should contribute to some strategical objective"
    assert comment.quote.startswith("“Why this move?")
    assert isinstance(note, Note)
    assert note.note == "Create a personalized map of your decision-making process"


def test_parse_basic_details_without_highlights() -> None:
    data = {"asin": "B0049U443Q", "title": "Title", "authors": "Garry Kasparov", "highlights": []}

    book = BookcisionParser().from_mapping(data)

    assert book.authors == "Garry Kasparov"
    assert book.highlights == ()


def test_load_accepts_binary_and_text_streams() -> None:
    raw = json.dumps(BOOKCISION_SAMPLE)
    parser = BookcisionParser()

    from_bytes = parser.load(io.BytesIO(raw.encode("utf-8")))
    from_text = parser.load(io.StringIO(raw))

    assert from_bytes == from_text
    assert len(from_bytes.highlights) == 3


def test_empty_note_makes_a_plain_quote() -> None:
    data = dict(BOOKCISION_SAMPLE)
    data["highlights"] = [
        {"text": "quoted", "isNoteOnly": False, "location": {"value": 1, "url": "u"}, "note": ""}
    ]

    (highlight,) = BookcisionParser().from_mapping(data).highlights

    assert highlight == Quote("quoted", Location(1, "u"))


def test_note_only_without_note_uses_text() -> None:
    data = dict(BOOKCISION_SAMPLE)
    data["highlights"] = [{"text": "margin", "isNoteOnly": True, "location": {"value": 2, "url": "u"}}]

    (highlight,) = BookcisionParser().from_mapping(data).highlights

    assert highlight == Note("margin", Location(2, "u"))


def test_missing_file_is_an_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "file-does-not-exist.json"

    with pytest.raises(HighlightIOError) as excinfo:
        BookcisionParser().parse(missing)

    assert "cannot read input file" in str(excinfo.value)
    assert "file-does-not-exist.json" in str(excinfo.value)


def test_malformed_json_is_a_format_error(tmp_path: Path) -> None:
    sample_path = tmp_path / "invalid.json"
    sample_path.write_text('{"title": "Broken", ', encoding="utf-8")

    with pytest.raises(InvalidFormatError) as excinfo:
        BookcisionParser().parse(sample_path)

    assert "invalid bookcision json file" in str(excinfo.value)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"title": "Title", "highlights": []},
        {"title": "Title", "authors": ["A", "B"], "highlights": []},
        {"title": "Title", "authors": "A", "highlights": [{"text": "t"}]},
        {"title": "Title", "authors": "A", "highlights": [{"text": "t", "location": {"value": "1", "url": "u"}}]},
        {"title": "Title", "authors": "A", "highlights": [{"text": "t", "location": {"value": True, "url": "u"}}]},
        {"title": "Title", "authors": "A", "highlights": [{"text": "t", "location": {"value": -3, "url": "u"}}]},
        {
            "title": "Title",
            "authors": "A",
            "highlights": [{"text": "t", "isNoteOnly": "no", "location": {"value": 1, "url": "u"}}],
        },
        {
            "title": "Title",
            "authors": "A",
            "highlights": [{"text": "t", "location": {"value": 1, "url": "u"}, "note": 5}],
        },
    ],
)
def test_schema_mismatch_is_a_format_error(payload) -> None:
    with pytest.raises(InvalidFormatError) as excinfo:
        BookcisionParser().from_mapping(payload)

    assert excinfo.value.cause is not None


@pytest.mark.parametrize(
    "entry",
    [
        {"text": "bad \ud800 quote", "isNoteOnly": False, "location": {"value": 1, "url": "u"}, "note": None},
        {"text": "fine", "isNoteOnly": False, "location": {"value": 1, "url": "u"}, "note": "bad \udfff note"},
        {"text": "fine", "isNoteOnly": False, "location": {"value": 1, "url": "u\ud800"}, "note": None},
    ],
)
def test_unpaired_surrogates_are_a_format_error(tmp_path: Path, entry) -> None:
    payload = {"title": "T", "authors": "A", "highlights": [entry]}
    # json.dumps escapes the lone surrogate as \ud800, which json.loads accepts again.
    sample_path = write_sample(tmp_path, payload)

    with pytest.raises(InvalidFormatError) as excinfo:
        BookcisionParser().parse(sample_path)

    assert "not valid UTF-8" in str(excinfo.value.cause)


def test_unpaired_surrogate_in_title_is_a_format_error() -> None:
    with pytest.raises(InvalidFormatError):
        BookcisionParser().from_mapping({"title": "T\ud800", "authors": "A", "highlights": []})
