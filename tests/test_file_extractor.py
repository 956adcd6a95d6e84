from io import BytesIO

import pytest
from docx import Document

from app.core.errors import UnsupportedDocument
from app.services.file_extractor import extract_text_from_upload


def test_txt_upload():
    text, kind = extract_text_from_upload("notes.TXT", "  Рост 25%.\n".encode("utf-8"))
    assert (text, kind) == ("Рост 25%.", "txt")


def test_docx_upload():
    doc = Document()
    doc.add_paragraph("Первый абзац.")
    doc.add_paragraph("")
    doc.add_paragraph("В 2023 году рост.")
    buf = BytesIO()
    doc.save(buf)

    text, kind = extract_text_from_upload("report.docx", buf.getvalue())
    assert kind == "docx"
    assert text == "Первый абзац.\nВ 2023 году рост."


@pytest.mark.parametrize("filename", ["virus.exe", "noext", ""])
def test_unsupported_upload(filename):
    with pytest.raises(UnsupportedDocument):
        extract_text_from_upload(filename, b"data")


@pytest.mark.parametrize(
    "filename, data",
    [
        ("data.csv", "name,value\nрост,25\n".encode("utf-8")),
        ("book.xlsx", b"PK\x03\x04"),
    ],
)
def test_spreadsheet_uploads_rejected(filename, data):
    with pytest.raises(UnsupportedDocument):
        extract_text_from_upload(filename, data)
