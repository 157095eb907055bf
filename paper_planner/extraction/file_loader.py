import mimetypes
from pathlib import Path

from paper_planner.extraction.exceptions import ExtractionError, ExtractionFailureReason
from paper_planner.extraction.models import DOCX_MIME_TYPE, PDF_MIME_TYPE, ImportedDocument

_SUFFIX_MIME_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
}


def guess_mime_type(path: Path) -> str:
    """Declared MIME type for a file, based on its suffix."""
    known = _SUFFIX_MIME_TYPES.get(path.suffix.lower())
    if known is not None:
        return known
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


class FileLoader:
    """Reads a file from disk into an ImportedDocument."""

    def load(self, path: Path, mime_type: str | None = None) -> ImportedDocument:
        """Read file bytes from disk.

        Raises:
            ExtractionError: READ_FAILURE if the file is missing or unreadable.
        """
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise ExtractionError(
                ExtractionFailureReason.READ_FAILURE,
                f"Failed to read file '{path}': {exc}",
            ) from exc
        return ImportedDocument(
            file_name=path.name,
            mime_type=mime_type or guess_mime_type(path),
            content=content,
        )
