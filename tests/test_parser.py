from __future__ import annotations

import logging

from gutensplit import BookMetadata, BookParser, Chapter, ParsedBook, assemble_book, segment_book
from gutensplit.models import Author
from gutensplit.text.chapters import SegmentationOptions

BODY = "Il était une fois une histoire assez longue pour remplir un chapitre."


def _gutenberg_text(body: str) -> str:
    return (
        "The Project Gutenberg eBook of Contes\r\n\r\n"
        "*** START OF THE PROJECT GUTENBERG EBOOK CONTES ***\r\n\r\n\r\n\r\n"
        + body.replace("\n", "\r\n")
        + "\r\n\r\n\r\n*** END OF THE PROJECT GUTENBERG EBOOK CONTES ***\r\n"
        "Section 1. General Terms of Use and Redistributing Project Gutenberg works\r\n"
    )


def _metadata() -> BookMetadata:
    return BookMetadata(title="Contes", authors=(Author(name="Charles Perrault"), Author(name="Anonyme")))


def test_segment_book_end_to_end():
    body = "\n\n\n".join(["CHAPITRE I", BODY, "CHAPITRE II", BODY, "CHAPITRE III", BODY])

    book = segment_book(_gutenberg_text(body), _metadata())

    assert book.title == "Contes"
    assert book.author == "Charles Perrault, Anonyme"
    assert [chapter.title for chapter in book.chapters] == ["CHAPITRE I", "CHAPITRE II", "CHAPITRE III"]
    assert all(chapter.content == BODY for chapter in book.chapters)
    assert book.full_text == "\n\n".join(["CHAPITRE I", BODY, "CHAPITRE II", BODY, "CHAPITRE III", BODY])
    assert "\r" not in book.full_text
    assert "GUTENBERG" not in book.full_text


def test_preamble_and_two_chapters_scenario():
    preamble = "Preamble " + "p" * 51
    body_one = "Body one " + "a" * 91
    body_two = "Body two " + "b" * 91
    text = f"{preamble}\n\nCHAPTER I\n{body_one}\n\nCHAPTER II\n{body_two}"

    book = segment_book(text, BookMetadata.from_names("T", ["A"]))

    assert book == ParsedBook(
        title="T",
        author="A",
        chapters=(
            Chapter(title="Introduction", content=preamble),
            Chapter(title="CHAPTER I", content=body_one),
            Chapter(title="CHAPTER II", content=body_two),
        ),
        full_text=text,
    )


def test_roman_numeral_book_with_introduction():
    preface = "A preface long enough to be kept as its own introduction chapter."
    body = "\n\n".join([preface, "I.", BODY, "II.", BODY, "III.", BODY])

    book = segment_book(body, BookMetadata.from_names("Roman", []))

    assert [chapter.title for chapter in book.chapters] == ["Introduction", "I.", "II.", "III."]


def test_degenerate_book_is_one_chapter():
    text = BODY + "\n\n" + BODY

    book = segment_book(_gutenberg_text(text), _metadata())

    assert book.chapters == (Chapter(title="Texte Complet", content=text),)
    assert book.full_text == text


def test_empty_author_list_gives_empty_author():
    book = segment_book(BODY, BookMetadata(title="Untitled"))

    assert book.author == ""


def test_options_are_passed_through():
    body = "\n\n".join(["CHAPTER 1", "short", "CHAPTER 2", "short", "CHAPTER 3", "short"])

    default = segment_book(body, _metadata())
    relaxed = segment_book(body, _metadata(), SegmentationOptions(min_chapter_length=1))

    assert default.chapters == ()
    assert [chapter.content for chapter in relaxed.chapters] == ["short", "short", "short"]


def test_assemble_book_keeps_chapter_order():
    chapters = [Chapter(title="B", content="second"), Chapter(title="A", content="first")]

    book = assemble_book("full", chapters, _metadata())

    assert book.chapters == tuple(chapters)
    assert book.full_text == "full"


def test_to_dict_uses_wire_names():
    book = assemble_book("full", [Chapter(title="One", content="text")], _metadata())

    assert book.to_dict() == {
        "title": "Contes",
        "author": "Charles Perrault, Anonyme",
        "chapters": [{"title": "One", "content": "text"}],
        "fullText": "full",
    }


def test_book_parser_logs_summary(caplog):
    body = "\n\n".join(["CHAPTER 1", BODY, "CHAPTER 2", BODY, "CHAPTER 3", BODY])
    caplog.set_level(logging.DEBUG, logger="gutensplit.parser")

    book = BookParser().parse(body, _metadata())

    assert len(book.chapters) == 3
    assert "Detected 3 headings with the structured matcher" in caplog.text
    assert "Parsed 'Contes' into 3 chapters" in caplog.text


def test_book_parser_matches_segment_book():
    body = _gutenberg_text("\n\n".join(["I.", BODY, "II.", BODY, "III.", BODY]))

    assert BookParser().parse(body, _metadata()) == segment_book(body, _metadata())
