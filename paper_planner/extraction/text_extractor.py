from paper_planner.extraction.base import BaseDocumentExtractor
from paper_planner.extraction.exceptions import ExtractionError, ExtractionFailureReason
from paper_planner.extraction.models import DocumentKind, ExtractedText, ImportedDocument
from paper_planner.logging.logger import Log


class TextExtractor:
    """Turns an ImportedDocument into plain text, dispatching on its declared type."""

    def __init__(
        self,
        pdf_extractor: BaseDocumentExtractor,
        docx_extractor: BaseDocumentExtractor,
    ) -> None:
        self._extractors: dict[DocumentKind, BaseDocumentExtractor] = {
            DocumentKind.PDF: pdf_extractor,
            DocumentKind.DOCX: docx_extractor,
        }

    def extract(self, document: ImportedDocument) -> ExtractedText:
        """Extract best-effort plain text.

        Raises:
            ExtractionError: READ_FAILURE for an empty file, UNSUPPORTED_TYPE
                for anything other than PDF/DOCX, PARSER_FAILURE when the
                parser fails or finds no text at all.
        """
        if document.size_bytes == 0:
            raise ExtractionError(
                ExtractionFailureReason.READ_FAILURE,
                f"File '{document.file_name}' is empty",
            )
        kind = document.kind
        if kind is None:
            raise ExtractionError(
                ExtractionFailureReason.UNSUPPORTED_TYPE,
                f"Unsupported file type '{document.mime_type or 'unknown'}' "
                f"for '{document.file_name}'",
            )

        Log.info(
            f"Extracting text from '{document.file_name}' as {kind.value} "
            f"({document.size_bytes} bytes)"
        )
        result = self._extractors[kind].extract(document.content)
        if not result.content.strip():
            raise ExtractionError(
                ExtractionFailureReason.PARSER_FAILURE,
                f"No extractable text found in '{document.file_name}' "
                "(it may be a scanned image without a text layer)",
            )
        Log.info(
            f"Extracted {len(result.content)} chars from '{document.file_name}'"
            + (" (truncated)" if result.truncated else "")
        )
        return result
