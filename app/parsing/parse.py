from __future__ import annotations

import logging
from io import BytesIO
from zipfile import BadZipFile, ZipFile

import defusedxml.ElementTree as ET
from docx import Document
from pypdf import PdfReader

from app.core.errors import ParseError

from .models import SOURCE_TYPES_BY_MIME, ParsedDoc

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")
UNSUPPORTED_TYPE_MESSAGE = "Invalid file type. Only PDF and DOCX allowed."


def _normalize_mime_type(mime_type: str | None) -> str:
    return (mime_type or "").split(";", 1)[0].strip().lower()


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
        return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)
    except BadZipFile:
        return False


def _parse_txt(content: bytes) -> tuple[str, str, list[str]]:
    if b"\x00" in content[:4096] and not content.startswith((b"\xff\xfe", b"\xfe\xff")):
        raise ParseError("Failed to parse text file", source_type="txt")
    for encoding in ("utf-8", "utf-16", "latin-1"):
        try:
            return content.decode(encoding), encoding, []
        except UnicodeDecodeError:
            continue
    raise ParseError("Failed to parse text file", source_type="txt")


def _parse_pdf(content: bytes) -> tuple[str, str, list[str]]:
    if not content.startswith(PDF_MAGIC):
        raise ParseError("Failed to parse PDF", source_type="pdf")

    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
    except Exception as exc:  # noqa: BLE001 - pypdf raises many unrelated error types
        raise ParseError("Failed to parse PDF", source_type="pdf") from exc

    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), "pypdf", warnings


def _extract_docx_text_fallback(content: bytes) -> str:
    with ZipFile(BytesIO(content)) as archive:
        raw = archive.read("word/document.xml")
    root = ET.fromstring(raw)
    paragraphs: list[str] = []
    for paragraph in root.iter():
        if not paragraph.tag.endswith("}p"):
            continue
        texts = [node.text.strip() for node in paragraph.iter() if node.tag.endswith("}t") and node.text]
        texts = [value for value in texts if value]
        if texts:
            paragraphs.append(" ".join(texts))
    return "\n".join(paragraphs)


def _parse_docx(content: bytes) -> tuple[str, str, list[str]]:
    if not _is_zip_payload(content) or not _zip_has_paths(content, ("word/",)):
        raise ParseError("Failed to parse DOCX", source_type="docx")

    warnings: list[str] = []
    parser = "python-docx"
    try:
        document = Document(BytesIO(content))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
        text = "\n".join(paragraphs)
    except Exception as docx_exc:  # noqa: BLE001 - retry with the raw XML reader
        logger.info("docx_parser_fallback: %s", docx_exc)
        parser = "zipxml-fallback"
        try:
            text = _extract_docx_text_fallback(content)
        except Exception as exc:  # noqa: BLE001
            raise ParseError("Failed to parse DOCX", source_type="docx") from exc

    if not text.strip():
        warnings.append("No extractable text found in DOCX.")
    return text, parser, warnings


def parse_upload(content: bytes, mime_type: str | None) -> ParsedDoc:
    normalized_mime = _normalize_mime_type(mime_type)
    source_type = SOURCE_TYPES_BY_MIME.get(normalized_mime)
    if source_type is None:
        raise ParseError(UNSUPPORTED_TYPE_MESSAGE, source_type="unknown")

    if source_type == "pdf":
        text, parser, warnings = _parse_pdf(content)
    elif source_type == "docx":
        text, parser, warnings = _parse_docx(content)
    else:
        text, parser, warnings = _parse_txt(content)

    for warning in warnings:
        logger.info("document_parse_warning source_type=%s: %s", source_type, warning)

    return ParsedDoc(
        source_type=source_type,
        text=text,
        parser=parser,
        parsing_warnings=warnings,
    )


def extract_text(content: bytes, mime_type: str | None) -> str:
    return parse_upload(content, mime_type).text
