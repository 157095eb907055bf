import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar

import pdfplumber

from paper_planner.extraction.base import BasePdfExtractor


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    ENGINE: ClassVar[str] = "pdfplumber"

    @contextmanager
    def _open(self, pdf_bytes: bytes) -> Iterator[Any]:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            yield pdf.pages

    def _page_text(self, page: Any) -> str:
        return page.extract_text() or ""
