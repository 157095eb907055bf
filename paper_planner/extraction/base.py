from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, ClassVar

from paper_planner.extraction.exceptions import ExtractionError, ExtractionFailureReason
from paper_planner.extraction.models import ExtractedText, cap_text
from paper_planner.logging.logger import Log


class BaseDocumentExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> ExtractedText:
        """Extract plain text from raw file content.

        Raises:
            ExtractionError: if the underlying parser fails.
        """


class BasePdfExtractor(BaseDocumentExtractor):
    """Page loop shared by the PDF adapters.

    Pages are read in order up to ``max_pages``. Each page contributes a
    ``--- Page N ---`` marker followed by its words joined by single spaces.
    Reading stops once the accumulated text crosses ``max_chars``; the final
    content never exceeds that cap.
    """

    ENGINE: ClassVar[str] = "pdf"

    def __init__(self, max_pages: int = 20, max_chars: int = 30000) -> None:
        self._max_pages = max_pages
        self._max_chars = max_chars

    @abstractmethod
    def _open(self, pdf_bytes: bytes) -> AbstractContextManager[Any]:
        """Open the document; the context value is a sized, iterable page collection."""

    @abstractmethod
    def _page_text(self, page: Any) -> str:
        """Return the raw text of a single page."""

    def extract(self, data: bytes) -> ExtractedText:
        parts: list[str] = []
        markers: list[str] = []
        length = 0
        has_text = False
        truncated = False
        try:
            with self._open(data) as pages:
                truncated = len(pages) > self._max_pages
                for number, page in enumerate(pages, start=1):
                    if number > self._max_pages:
                        break
                    marker = f"--- Page {number} ---"
                    markers.append(marker)
                    text = self._read_page(page, number)
                    has_text = has_text or bool(text)
                    chunk = f"{marker}\n{text or ''}\n\n"
                    parts.append(chunk)
                    length += len(chunk)
                    if length > self._max_chars:
                        truncated = True
                        break
        except Exception as exc:
            raise ExtractionError(
                ExtractionFailureReason.PARSER_FAILURE,
                f"{self.ENGINE} extraction failed: {exc}",
                partial_text="".join(parts).strip(),
            ) from exc

        if not has_text:
            return ExtractedText(content="", truncated=False, page_markers=tuple(markers))
        content, cut = cap_text("".join(parts).strip(), self._max_chars)
        return ExtractedText(
            content=content,
            truncated=truncated or cut,
            page_markers=tuple(markers),
        )

    def _read_page(self, page: Any, number: int) -> str | None:
        """Words of one page joined by single spaces; a failed page becomes an inline note."""
        try:
            raw = self._page_text(page) or ""
        except Exception as exc:
            Log.warning(f"{self.ENGINE}: failed to extract page {number}: {exc}")
            return f"[Error extracting page {number}]"
        return " ".join(raw.split()) or None
