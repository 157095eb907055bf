from dataclasses import dataclass, field
from enum import Enum

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
TRUNCATION_MARKER = "... [TRUNCATED]"


class DocumentKind(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


@dataclass(frozen=True)
class ImportedDocument:
    """One user-submitted file: declared name, declared MIME type and raw bytes."""

    file_name: str
    mime_type: str
    content: bytes = field(repr=False)

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def kind(self) -> DocumentKind | None:
        """Document kind from the declared MIME type, else from the file suffix."""
        mime = (self.mime_type or "").lower()
        if mime == PDF_MIME_TYPE:
            return DocumentKind.PDF
        if mime == DOCX_MIME_TYPE:
            return DocumentKind.DOCX
        name = self.file_name.lower()
        if name.endswith(".pdf"):
            return DocumentKind.PDF
        if name.endswith(".docx"):
            return DocumentKind.DOCX
        return None


@dataclass(frozen=True)
class ExtractedText:
    """Plain text derived from an ImportedDocument."""

    content: str
    truncated: bool = False
    page_markers: tuple[str, ...] = ()


def cap_text(text: str, max_chars: int) -> tuple[str, bool]:
    """Cut ``text`` to at most ``max_chars`` characters, marker included.

    Returns the (possibly shortened) text and whether it was cut.
    """
    if len(text) <= max_chars:
        return text, False
    if max_chars <= len(TRUNCATION_MARKER):
        return text[:max_chars], True
    return text[: max_chars - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER, True
