from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

SOURCE_TYPES = {"pdf", "docx", "txt"}


class UnsupportedDocumentError(ValueError):
    """Raised for uploads that are not PDF, DOCX or plain text."""


class ParsedDocument(BaseModel):
    doc_id: str
    source_type: str
    text: str
    page_count: int | None = None
    parsing_warnings: list[str] = Field(default_factory=list)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in SOURCE_TYPES:
            raise ValueError("source_type must be one of: pdf, docx, txt")
        return normalized
