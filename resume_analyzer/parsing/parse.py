from __future__ import annotations

import hashlib
import io
import logging
from pathlib import Path

from docx import Document
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .models import ParsedDocument, UnsupportedDocumentError

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"

_MIME_SOURCE_TYPES = {PDF_MIME: "pdf", DOCX_MIME: "docx", TEXT_MIME: "txt"}
_EXTENSION_SOURCE_TYPES = {".pdf": "pdf", ".docx": "docx", ".txt": "txt"}


def _compute_doc_id(text: str, fallback: str) -> str:
    seed = text if text.strip() else fallback
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def detect_source_type(mime_type: str | None, filename: str = "") -> str:
    """Resolve the document kind from the MIME type, falling back to the file extension."""
    mime = (mime_type or "").split(";", 1)[0].strip().lower()
    if mime in _MIME_SOURCE_TYPES:
        return _MIME_SOURCE_TYPES[mime]
    extension = Path(filename or "").suffix.lower()
    if extension in _EXTENSION_SOURCE_TYPES:
        return _EXTENSION_SOURCE_TYPES[extension]
    raise UnsupportedDocumentError(
        f"Unsupported document type '{mime or extension or 'unknown'}'. Supported types: PDF, DOCX, TXT"
    )


def _parse_txt(content: bytes) -> tuple[str, int | None, list[str]]:
    return content.decode("utf-8", errors="replace"), None, []


def _parse_pdf(content: bytes) -> tuple[str, int | None, list[str]]:
    warnings: list[str] = []
    try:
        reader = PdfReader(io.BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
        if not text_parts:
            warnings.append("No extractable text found in PDF.")
        return "\n".join(text_parts), len(reader.pages), warnings
    except (PdfReadError, ValueError, OSError) as exc:
        warnings.append(f"PDF parsing failed: {exc}")
        return "", None, warnings


def _parse_docx(content: bytes) -> tuple[str, int | None, list[str]]:
    warnings: list[str] = []
    try:
        document = Document(io.BytesIO(content))
    except (ValueError, KeyError, OSError) as exc:
        warnings.append(f"DOCX parsing failed: {exc}")
        return "", None, warnings
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), None, warnings


_PARSERS = {"pdf": _parse_pdf, "docx": _parse_docx, "txt": _parse_txt}


def extract_document(content: bytes, mime_type: str | None, filename: str = "") -> ParsedDocument:
    source_type = detect_source_type(mime_type, filename)
    text, page_count, warnings = _PARSERS[source_type](content)
    for warning in warnings:
        logger.warning("document_parse_warning source_type=%s warning=%s", source_type, warning)
    return ParsedDocument(
        doc_id=_compute_doc_id(text, filename or source_type),
        source_type=source_type,
        text=text,
        page_count=page_count,
        parsing_warnings=warnings,
    )


def extract_text(content: bytes, mime_type: str | None, filename: str = "") -> str:
    return extract_document(content, mime_type, filename).text


def parse_document(file_path: str | Path) -> ParsedDocument:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return extract_document(path.read_bytes(), None, path.name)
