import sys
import unittest
from io import BytesIO
from pathlib import Path
from zipfile import ZipFile

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docx import Document  # noqa: E402
from pypdf import PdfWriter  # noqa: E402

from app.core.errors import ParseError  # noqa: E402
from app.parsing.models import DOCX_MIME_TYPE, PDF_MIME_TYPE, TEXT_MIME_TYPE  # noqa: E402
from app.parsing.parse import extract_text, parse_upload  # noqa: E402

_DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body>"
    "<w:p><w:r><w:t>Python developer</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>Docker</w:t></w:r><w:r><w:t>AWS</w:t></w:r></w:p>"
    "</w:body></w:document>"
)


def _docx_bytes(*paragraphs: str) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _blank_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class DocumentParsingTests(unittest.TestCase):
    def test_docx_text_is_extracted(self):
        content = _docx_bytes("Jane Doe", "Python developer with Docker")
        parsed = parse_upload(content, DOCX_MIME_TYPE)
        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.parser, "python-docx")
        self.assertEqual(parsed.text, "Jane Doe\nPython developer with Docker")
        self.assertEqual(set(parsed.model_dump()), {"source_type", "text", "parser", "parsing_warnings"})

    def test_docx_falls_back_to_raw_xml(self):
        buffer = BytesIO()
        with ZipFile(buffer, "w") as archive:
            archive.writestr("word/document.xml", _DOCUMENT_XML)
        parsed = parse_upload(buffer.getvalue(), DOCX_MIME_TYPE)
        self.assertEqual(parsed.parser, "zipxml-fallback")
        self.assertEqual(parsed.text, "Python developer\nDocker AWS")

    def test_pdf_without_text_layer_returns_warning(self):
        parsed = parse_upload(_blank_pdf_bytes(), PDF_MIME_TYPE)
        self.assertEqual(parsed.source_type, "pdf")
        self.assertEqual(parsed.text, "")
        self.assertIn("No extractable text found in PDF.", parsed.parsing_warnings)

    def test_plain_text_upload(self):
        text = extract_text("Python developer — Docker".encode("utf-8"), "text/plain; charset=utf-8")
        self.assertEqual(text, "Python developer — Docker")
        self.assertEqual(parse_upload(b"plain", TEXT_MIME_TYPE).parser, "utf-8")

    def test_corrupt_documents_raise_parse_error(self):
        with self.assertRaises(ParseError) as pdf_ctx:
            extract_text(b"not a pdf", PDF_MIME_TYPE)
        self.assertEqual(pdf_ctx.exception.source_type, "pdf")
        self.assertEqual(str(pdf_ctx.exception), "Failed to parse PDF")

        with self.assertRaises(ParseError) as docx_ctx:
            extract_text(b"PK\x03\x04broken", DOCX_MIME_TYPE)
        self.assertEqual(docx_ctx.exception.source_type, "docx")
        self.assertEqual(str(docx_ctx.exception), "Failed to parse DOCX")

    def test_unsupported_mime_type(self):
        with self.assertRaises(ParseError) as ctx:
            extract_text(b"\x89PNG\r\n\x1a\n", "image/png")
        self.assertEqual(str(ctx.exception), "Invalid file type. Only PDF and DOCX allowed.")


if __name__ == "__main__":
    unittest.main()
