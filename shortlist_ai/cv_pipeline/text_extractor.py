"""Extract raw text from stored CV files (PDF, DOCX, plain text). In-memory only."""

import re
import unicodedata
from io import BytesIO

import pdfplumber
from docx import Document

from shortlist_ai.errors import DocumentNotFound, ExtractionFailed
from shortlist_ai.services.document_store import DocumentStore
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)

PDF_EXTENSIONS = (".pdf",)
DOCX_EXTENSIONS = (".docx",)
TEXT_EXTENSIONS = (".txt", ".text", ".md")


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) and replace problematic chars."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def _clean_cv_text(text: str) -> str:
    """Remove excessive whitespace and normalize unicode for CV content. No length cap."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    return t.strip()


def _extract_pdf(bytes_io: BytesIO) -> str:
    """Extract text from PDF using pdfplumber."""
    with pdfplumber.open(bytes_io) as pdf:
        parts = []
        for page in pdf.pages:
            ptext = page.extract_text()
            if ptext:
                parts.append(ptext)
        return "\n\n".join(parts)


def _extract_docx(bytes_io: BytesIO) -> str:
    """Extract text from DOCX using python-docx (paragraphs, then table cells)."""
    doc = Document(bytes_io)
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n\n".join(parts)


def extract_text(file_bytes: bytes, filename: str) -> str:
    """
    Extract and clean text from a CV document held in memory.
    Returns cleaned text, which is empty when the document has no extractable text.
    Raises ExtractionFailed for unsupported types and for parser errors.
    """
    name_lower = (filename or "").lower().strip()
    bio = BytesIO(file_bytes)
    try:
        if name_lower.endswith(PDF_EXTENSIONS):
            raw = _extract_pdf(bio)
        elif name_lower.endswith(DOCX_EXTENSIONS):
            raw = _extract_docx(bio)
        elif name_lower.endswith(TEXT_EXTENSIONS):
            raw = file_bytes.decode("utf-8", errors="replace")
        else:
            raise ExtractionFailed(filename, "unsupported file type")
    except ExtractionFailed:
        raise
    except Exception as e:
        logger.warning("Text extraction failed for %s: %s", filename, e)
        raise ExtractionFailed(filename, str(e) or type(e).__name__) from e

    text = _clean_cv_text(raw)
    if not text:
        logger.warning("No extractable text in %s", filename)
    return text


def read_document_text(store: DocumentStore, filename: str) -> str:
    """Read a stored document and extract its text; raises DocumentNotFound or ExtractionFailed."""
    if not filename or not store.has_file(filename):
        raise DocumentNotFound(filename)
    return extract_text(store.read(filename), filename)
