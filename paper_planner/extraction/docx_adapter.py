import io

from docx import Document

from paper_planner.extraction.base import BaseDocumentExtractor
from paper_planner.extraction.exceptions import ExtractionError, ExtractionFailureReason
from paper_planner.extraction.models import ExtractedText, cap_text


class DocxAdapter(BaseDocumentExtractor):
    """Extracts raw text from DOCX using python-docx (paragraphs, then table cells)."""

    def __init__(self, max_chars: int = 30000) -> None:
        self._max_chars = max_chars

    def extract(self, data: bytes) -> ExtractedText:
        try:
            document = Document(io.BytesIO(data))
            blocks = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    blocks.append("\t".join(cell for cell in cells if cell))
        except Exception as exc:
            raise ExtractionError(
                ExtractionFailureReason.PARSER_FAILURE,
                f"python-docx extraction failed: {exc}",
            ) from exc

        text = "\n".join(block for block in blocks if block.strip())
        content, truncated = cap_text(text.strip(), self._max_chars)
        return ExtractedText(content=content, truncated=truncated)
