from __future__ import annotations

from pathlib import Path

import pytest
from ebooklib import epub

from gutensplit.ingest import InvalidPayloadError, load_book, load_text, validate_payload
from gutensplit.ingest.epub_loader import EpubLoader

PARAGRAPH = "Il était une fois une histoire assez longue pour remplir un chapitre. " * 4


def _write_epub(path: Path) -> Path:
    book = epub.EpubBook()
    book.set_identifier("pg-test")
    book.set_title("Le Livre")
    book.set_language("fr")
    book.add_author("Jean Auteur")

    chapters = []
    for index, heading in enumerate(["CHAPITRE I", "CHAPITRE II", "CHAPITRE III"], start=1):
        chapter = epub.EpubHtml(title=heading, file_name=f"chap_{index}.xhtml", lang="fr")
        chapter.content = f"<h1>{heading}</h1><p>{PARAGRAPH}</p><p>Fin &amp; suite.</p>"
        book.add_item(chapter)
        chapters.append(chapter)

    book.toc = tuple(chapters)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = chapters
    epub.write_epub(str(path), book)
    return path


def test_load_text_reads_utf8_and_drops_bom(tmp_path):
    path = tmp_path / "book.txt"
    path.write_bytes("\ufeffÉté".encode("utf-8"))

    assert load_text(path) == "Été"


def test_load_text_falls_back_to_latin1(tmp_path):
    path = tmp_path / "book.txt"
    path.write_bytes("café".encode("latin-1"))

    assert load_text(path) == "café"


@pytest.mark.parametrize(
    "payload",
    ["<!DOCTYPE html><html>" + "x" * 600, "  <HTML><body>" + "x" * 600],
)
def test_html_payload_is_rejected(payload):
    with pytest.raises(InvalidPayloadError):
        validate_payload(payload)


def test_short_payload_is_rejected():
    with pytest.raises(InvalidPayloadError):
        validate_payload("x" * 500)


def test_valid_payload_is_returned():
    text = "x" * 501

    assert validate_payload(text) is text


def test_load_book_reads_text_files(tmp_path):
    path = tmp_path / "contes.txt"
    path.write_text(PARAGRAPH * 3, encoding="utf-8")

    loaded = load_book(path)

    assert loaded.text == PARAGRAPH * 3
    assert loaded.metadata(fallback_title="contes").title == "contes"


def test_load_book_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_book(tmp_path / "missing.txt")


def test_load_book_unsupported_extension(tmp_path):
    path = tmp_path / "book.pdf"
    path.write_bytes(b"%PDF-1.4")

    with pytest.raises(ValueError):
        load_book(path)


def test_epub_is_flattened_to_paragraphs(tmp_path):
    path = _write_epub(tmp_path / "livre.epub")

    loaded = EpubLoader().load(path)

    assert loaded.title == "Le Livre"
    assert loaded.authors == ["Jean Auteur"]
    assert f"CHAPITRE I\n\n{PARAGRAPH.strip()}\n\nFin & suite." in loaded.text
    assert loaded.text.index("CHAPITRE II") < loaded.text.index("CHAPITRE III")
    assert "<" not in loaded.text


def test_load_book_dispatches_epub(tmp_path):
    path = _write_epub(tmp_path / "livre.epub")

    loaded = load_book(path)

    assert loaded.metadata(fallback_title="livre").author_label() == "Jean Auteur"
