import pytest

from paper_planner.extraction.exceptions import ExtractionError, ExtractionFailureReason
from paper_planner.extraction.models import TRUNCATION_MARKER
from paper_planner.extraction.pdfplumber_adapter import PdfPlumberAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(sample_pdf_bytes)
        assert "Hello PDF World" in result.content
        assert result.truncated is False

    def test_extract_adds_page_markers(self, multi_page_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(multi_page_pdf_bytes)
        assert result.page_markers == ("--- Page 1 ---", "--- Page 2 ---")
        assert result.content.startswith("--- Page 1 ---\nPage one content")
        assert "--- Page 2 ---\nPage two content" in result.content

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(empty_pdf_bytes)
        assert result.content == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            PdfPlumberAdapter().extract(b"not a pdf")
        assert exc_info.value.reason is ExtractionFailureReason.PARSER_FAILURE

    def test_extract_result_is_stripped(self, sample_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter().extract(sample_pdf_bytes)
        assert result.content == result.content.strip()

    def test_stops_at_page_cap(self, three_page_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter(max_pages=2).extract(three_page_pdf_bytes)
        assert "Page two content" in result.content
        assert "Page three content" not in result.content
        assert len(result.page_markers) == 2
        assert result.truncated is True

    def test_never_exceeds_char_cap(self, multi_page_pdf_bytes: bytes) -> None:
        result = PdfPlumberAdapter(max_chars=40).extract(multi_page_pdf_bytes)
        assert len(result.content) <= 40
        assert result.content.endswith(TRUNCATION_MARKER)
        assert result.truncated is True
