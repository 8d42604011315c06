from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME_TYPE = "text/plain"

SOURCE_TYPES_BY_MIME = {
    PDF_MIME_TYPE: "pdf",
    DOCX_MIME_TYPE: "docx",
    TEXT_MIME_TYPE: "txt",
}


class ParsedDoc(BaseModel):
    source_type: str
    text: str
    parser: str
    parsing_warnings: list[str] = Field(default_factory=list)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "txt"}:
            raise ValueError("source_type must be one of: pdf, docx, txt")
        return normalized
