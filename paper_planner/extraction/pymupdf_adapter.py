from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar

import pymupdf

from paper_planner.extraction.base import BasePdfExtractor


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    ENGINE: ClassVar[str] = "pymupdf"

    @contextmanager
    def _open(self, pdf_bytes: bytes) -> Iterator[Any]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            yield doc

    def _page_text(self, page: Any) -> str:
        return page.get_text()
