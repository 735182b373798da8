"""Tests for document text extraction and the local document store."""

from io import BytesIO

import pytest
from docx import Document

from shortlist_ai.cv_pipeline.text_extractor import extract_text, read_document_text
from shortlist_ai.errors import DocumentNotFound, ExtractionFailed
from shortlist_ai.services.document_store import LocalDocumentStore


def _docx_bytes(*paragraphs):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def _pdf_bytes(*pages):
    """A minimal uncompressed PDF, one Helvetica text line per page."""
    bodies = ["<< /Type /Catalog /Pages 2 0 R >>"]
    page_nums = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{n} 0 R" for n in page_nums)
    bodies.append(f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>")
    bodies.append("<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")
    for n, line in zip(page_nums, pages):
        content = f"BT /F1 12 Tf 72 720 Td ({line}) Tj ET"
        bodies.append(
            "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {n + 1} 0 R >>"
        )
        bodies.append(f"<< /Length {len(content)} >>\nstream\n{content}\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(bodies, start=1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n{body}\nendobj\n".encode("latin-1")
    xref_at = len(out)
    out += f"xref\n0 {len(bodies) + 1}\n0000000000 65535 f \n".encode("latin-1")
    for off in offsets:
        out += f"{off:010d} 00000 n \n".encode("latin-1")
    out += f"trailer\n<< /Size {len(bodies) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode("latin-1")
    return bytes(out)


class TestExtractText:
    def test_plain_text_is_cleaned(self):
        text = extract_text(b"Hello   world\n\n\n\nNext", "cv.txt")
        assert text == "Hello world\n\nNext"

    def test_docx(self):
        data = _docx_bytes("Jane Doe", "Skills: Python, SQL")
        text = extract_text(data, "cv.docx")
        assert "Jane Doe" in text
        assert "Skills: Python, SQL" in text

    def test_empty_document_gives_empty_text(self):
        assert extract_text(b"   \n  ", "empty.txt") == ""

    def test_unsupported_type(self):
        with pytest.raises(ExtractionFailed):
            extract_text(b"MZ", "cv.exe")

    def test_pdf_pages_joined_by_blank_line(self):
        data = _pdf_bytes("Skills: Java, SQL", "PhD in Databases")
        text = extract_text(data, "cv.pdf")
        assert text.split("\n\n") == ["Skills: Java, SQL", "PhD in Databases"]

    def test_pdf_from_store(self, tmp_path):
        (tmp_path / "dana.pdf").write_bytes(_pdf_bytes("Dana Reyes", "6 years of experience"))
        text = read_document_text(LocalDocumentStore(tmp_path), "dana.pdf")
        assert text.startswith("Dana Reyes")
        assert "6 years of experience" in text

    def test_corrupt_docx_wraps_parser_error(self):
        with pytest.raises(ExtractionFailed) as exc_info:
            extract_text(b"not a zip", "cv.docx")
        assert exc_info.value.__cause__ is not None

    def test_corrupt_pdf_wraps_parser_error(self):
        with pytest.raises(ExtractionFailed):
            extract_text(b"definitely not a pdf", "cv.pdf")

    def test_no_size_cap(self):
        long_text = ("word " * 30000).encode("utf-8")
        assert len(extract_text(long_text, "long.txt")) > 100000


class TestDocumentStore:
    def test_read_and_has_file(self, store):
        assert store.has_file("alice.txt")
        assert store.read("alice.txt").startswith(b"Alice")

    def test_missing_file(self, store):
        assert not store.has_file("nobody.txt")
        with pytest.raises(DocumentNotFound):
            store.read("nobody.txt")

    def test_paths_cannot_escape_upload_dir(self, tmp_path):
        (tmp_path / "secret.txt").write_text("secret")
        inner = tmp_path / "uploads"
        inner.mkdir()
        store = LocalDocumentStore(inner)
        assert not store.has_file("../secret.txt")

    def test_read_document_text(self, store):
        assert read_document_text(store, "bob.txt").startswith("Bob Jones")

    def test_read_document_text_missing(self, store):
        with pytest.raises(DocumentNotFound):
            read_document_text(store, "ghost.pdf")
