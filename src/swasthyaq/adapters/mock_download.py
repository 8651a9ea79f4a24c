"""Placeholder file bodies served for attachments that have no stored bytes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from io import BytesIO

from openpyxl import Workbook

from swasthyaq.core.models import Attachment

# 1x1 transparent PNG
_PIXEL_PNG = bytes(
    [
        137, 80, 78, 71, 13, 10, 26, 10, 0, 0, 0, 13, 73, 72, 68, 82, 0, 0, 0, 1, 0, 0, 0, 1,
        8, 6, 0, 0, 0, 31, 21, 196, 137, 0, 0, 0, 11, 73, 68, 65, 84, 8, 215, 99, 96, 0, 0, 0,
        2, 0, 1, 226, 33, 188, 51, 0, 0, 0, 0, 73, 69, 78, 68, 174, 66, 96, 130,
    ]
)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class MockFile:
    filename: str
    media_type: str
    content: bytes


def _pdf(filename: str) -> bytes:
    return (
        "%PDF-1.4\n"
        "1 0 obj\n<< /Title (Mock PDF) /Creator (SwasthyaQ) >>\nendobj\n"
        "2 0 obj\n<< /Type /Catalog /Pages 3 0 R >>\nendobj\n"
        "3 0 obj\n<< /Type /Pages /Kids [4 0 R] /Count 1 >>\nendobj\n"
        "4 0 obj\n<< /Type /Page /Parent 3 0 R /MediaBox [0 0 612 792] /Contents 5 0 R >>\n"
        "endobj\n"
        "5 0 obj\n<< /Length 44 >>\nstream\n"
        f"BT /F1 24 Tf 100 700 Td (Mock PDF: {filename}) Tj ET\n"
        "endstream\nendobj\n"
        "xref\n0 6\n0000000000 65535 f\n"
        "trailer\n<< /Size 6 /Root 2 0 R >>\nstartxref\n310\n%%EOF"
    ).encode()


def _xlsx(attachment: Attachment, filename: str, stamp: str) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Preview"
    ws.append(["Mock Data", "Filename", "Division", "Timestamp"])
    ws.append(["This is a generated preview file", filename, attachment.division, stamp])

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def _text(attachment: Attachment, filename: str, stamp: str) -> bytes:
    return (
        "SwasthyaQ Mock File\n"
        "-------------------\n"
        f"Filename: {filename}\n"
        f"Division: {attachment.division}\n"
        f"Timestamp: {stamp}\n\n"
        "This is a generated file because no blob storage is configured."
    ).encode()


def build_mock_file(attachment: Attachment) -> MockFile:
    """Build a small file of the attachment's MIME type (plain text when unknown)."""
    mime = attachment.mime_type or "text/plain"
    filename = attachment.filename or attachment.label or "mock-file"
    stamp = datetime.now(timezone.utc).isoformat()

    if mime == "application/pdf":
        return MockFile(filename, mime, _pdf(filename))
    if mime.startswith("image/"):
        return MockFile(filename, mime, _PIXEL_PNG)
    if "spreadsheetml" in mime or "excel" in mime:
        return MockFile(filename, XLSX_MIME, _xlsx(attachment, filename, stamp))
    return MockFile(filename, "text/plain", _text(attachment, filename, stamp))
