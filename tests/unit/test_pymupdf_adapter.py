import pytest

from paper_planner.extraction.exceptions import ExtractionError
from paper_planner.extraction.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(sample_pdf_bytes)
        assert result.content == "--- Page 1 ---\nHello PDF World"

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(multi_page_pdf_bytes)
        assert "Page one content" in result.content
        assert "Page two content" in result.content

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfAdapter().extract(empty_pdf_bytes).content == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(ExtractionError, match="pymupdf extraction failed"):
            PyMuPdfAdapter().extract(b"not a pdf")
