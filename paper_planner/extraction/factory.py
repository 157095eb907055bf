from paper_planner.config.settings import Settings
from paper_planner.extraction.base import BasePdfExtractor
from paper_planner.extraction.docx_adapter import DocxAdapter
from paper_planner.extraction.pdfplumber_adapter import PdfPlumberAdapter
from paper_planner.extraction.pymupdf_adapter import PyMuPdfAdapter
from paper_planner.extraction.text_extractor import TextExtractor


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(
            max_pages=settings.extraction_max_pages,
            max_chars=settings.extraction_max_chars,
        )


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor with the configured PDF engine and the DOCX adapter."""
    return TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        docx_extractor=DocxAdapter(max_chars=settings.extraction_max_chars),
    )
