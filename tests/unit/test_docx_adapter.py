import pytest

from paper_planner.extraction.docx_adapter import DocxAdapter
from paper_planner.extraction.exceptions import ExtractionError, ExtractionFailureReason


class TestDocxAdapter:
    def test_extracts_paragraphs(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter().extract(sample_docx_bytes)
        assert result.content.startswith(
            "Research question about coral reefs\nWe use an existing dataset of reef surveys"
        )

    def test_extracts_table_rows(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter().extract(sample_docx_bytes)
        assert "Site\tCover" in result.content
        assert "North\t42%" in result.content

    def test_empty_document(self, empty_docx_bytes: bytes) -> None:
        assert DocxAdapter().extract(empty_docx_bytes).content == ""

    def test_caps_length(self, sample_docx_bytes: bytes) -> None:
        result = DocxAdapter(max_chars=30).extract(sample_docx_bytes)
        assert len(result.content) <= 30
        assert result.truncated is True

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            DocxAdapter().extract(b"not a zip archive")
        assert exc_info.value.reason is ExtractionFailureReason.PARSER_FAILURE
