"""Tests for generated attachment files."""

from io import BytesIO

from openpyxl import load_workbook

from swasthyaq.adapters.mock_download import XLSX_MIME, build_mock_file
from swasthyaq.core.models import Attachment


def test_pdf_body():
    mock = build_mock_file(Attachment(id="a1", filename="memo.pdf", mime_type="application/pdf"))
    assert mock.media_type == "application/pdf"
    assert mock.content.startswith(b"%PDF-1.4")
    assert b"Mock PDF: memo.pdf" in mock.content


def test_image_body_is_png():
    mock = build_mock_file(Attachment(id="a1", label="Scan", mime_type="image/jpeg"))
    assert mock.filename == "Scan"
    assert mock.content.startswith(b"\x89PNG\r\n\x1a\n")


def test_spreadsheet_body_is_readable_workbook():
    mock = build_mock_file(
        Attachment(id="a1", filename="data.xlsx", division="Pharma", mime_type=XLSX_MIME)
    )

    sheet = load_workbook(BytesIO(mock.content)).active

    assert mock.media_type == XLSX_MIME
    assert sheet.title == "Preview"
    assert sheet["B2"].value == "data.xlsx"
    assert sheet["C2"].value == "Pharma"


def test_unknown_type_falls_back_to_text():
    mock = build_mock_file(Attachment(id="a1", division="Logistics"))
    assert mock.filename == "mock-file"
    assert mock.media_type == "text/plain"
    assert b"Division: Logistics" in mock.content
