"""
Source document and ingestion result models.

Dependencies: pydantic
System role: Ingestion pipeline contracts
"""

import re
from datetime import date

from pydantic import BaseModel, Field

from letters_rag.models.chunk import DocumentType

_YEAR_RE = re.compile(r"(\d{4})")
_WHITESPACE_RE = re.compile(r"\s+")
_UNSUPPORTED_RE = re.compile(r"[^\w\s.,!?;:()\-\"']")


def extract_year(name: str) -> int:
    """Return the first 4-digit run in a file name, or the current year."""
    match = _YEAR_RE.search(name)
    return int(match.group(1)) if match else date.today().year


def clean_text(text: str) -> str:
    """Collapse whitespace and strip symbols outside word characters and punctuation."""
    text = _WHITESPACE_RE.sub(" ", text)
    return _UNSUPPORTED_RE.sub("", text).strip()


class SourceDocument(BaseModel):
    """Full text of one letter as handed over by the document source."""

    source: str = Field(min_length=1, description="Document identifier (file stem)")
    text: str = Field(description="Full extracted text")
    year: int = Field(description="Letter year")
    document_type: DocumentType = Field(default=DocumentType.SHAREHOLDER_LETTER)

    @classmethod
    def from_filename(cls, filename: str, text: str, clean: bool = False) -> "SourceDocument":
        """
        Build a document whose year is parsed from its file name.

        Args:
            filename: File name such as "2023-berkshire-letter.pdf"
            text: Extracted full text
            clean: Normalize whitespace and strip unsupported symbols

        Returns:
            SourceDocument: Document keyed by the file stem
        """
        stem = filename.rsplit("/", 1)[-1]
        if "." in stem:
            stem = stem.rsplit(".", 1)[0]
        return cls(
            source=stem,
            text=clean_text(text) if clean else text,
            year=extract_year(stem),
        )


class IngestionResult(BaseModel):
    """Aggregate outcome of ingesting a batch of documents."""

    success: bool
    documents_processed: int = Field(ge=0)
    total_chunks: int = Field(ge=0)
    message: str
    error: str | None = None
    failed_sources: list[str] = Field(default_factory=list)


class StoreValidationResult(BaseModel):
    """Outcome of probing a store with a test query."""

    success: bool
    results_found: int = Field(ge=0)
    message: str
    sample_result: str | None = None
    error: str | None = None


class StoreStats(BaseModel):
    """Summary of what a store currently holds."""

    backend: str
    namespace: str | None = None
    total_chunks: int = Field(ge=0)
    sources: list[str] = Field(default_factory=list)
