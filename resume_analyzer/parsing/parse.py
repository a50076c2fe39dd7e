from __future__ import annotations

import codecs
import hashlib
import logging
from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfReader

from .models import ExtractionError, ParsedDoc

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {"txt", "pdf", "docx"}


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _parse_txt(content: bytes) -> tuple[str, int | None, list[str]]:
    warnings: list[str] = []
    encodings = ("utf-8-sig",)
    if content.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encodings = ("utf-16",) + encodings
    for encoding in encodings:
        try:
            text = content.decode(encoding)
        except UnicodeDecodeError:
            continue
        if encoding != "utf-8-sig":
            warnings.append(f"Decoded text file as {encoding}.")
        return text, None, warnings

    # latin-1 maps every byte, so it is the catch-all.
    warnings.append("Decoded text file as latin-1.")
    return content.decode("latin-1"), None, warnings


def _parse_pdf(content: bytes) -> tuple[str, int | None, list[str]]:
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        page_chunks: list[str] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = page.extract_text() or ""
            if page_text.strip():
                page_chunks.append(page_text)
            else:
                warnings.append(f"No extractable text on page {index}.")
        page_count = len(reader.pages)
    except Exception as exc:
        raise ExtractionError("Unable to extract text from this PDF file.") from exc

    text = "\n".join(page_chunks)
    if not text.strip():
        raise ExtractionError(
            "Failed to extract text from PDF. Make sure the PDF contains selectable text (not an image scan)."
        )
    return text, page_count, warnings


def _parse_docx(content: bytes) -> tuple[str, int | None, list[str]]:
    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        raise ExtractionError("Unable to extract text from this Word document.") from exc
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    return "\n".join(paragraphs), None, []


_PARSERS = {
    "txt": _parse_txt,
    "pdf": _parse_pdf,
    "docx": _parse_docx,
}


def parse_upload(filename: str, content: bytes) -> ParsedDoc:
    """Extract plain text from an uploaded document.

    Raises ExtractionError when the type is unsupported or no text comes out.
    """
    extension = _extension(filename)
    parser = _PARSERS.get(extension)
    if parser is None:
        raise ExtractionError(
            f"Unsupported file type '.{extension}'. Supported types: .txt, .pdf, .docx"
        )

    text, page_count, warnings = parser(content)
    if not text.strip():
        raise ExtractionError("No text could be extracted from this document.")

    for warning in warnings:
        logger.debug("parse_warning file=%s: %s", filename, warning)

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, filename=filename),
        source_type=extension,
        filename=filename,
        text=text,
        page_count=page_count,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return parse_upload(path.name, path.read_bytes())
