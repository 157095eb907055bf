import io

import pytest
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from paper_planner.rubric.loader import default_rubric
from paper_planner.rubric.models import Rubric


def _pdf_with_pages(*page_lines: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for line in page_lines:
        if line:
            c.drawString(72, 720, line)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_with_pages("Hello PDF World")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf_with_pages("Page one content", "Page two content")


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    return _pdf_with_pages("Page one content", "Page two content", "Page three content")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf_with_pages("")


@pytest.fixture()
def paper_pdf_bytes() -> bytes:
    """A short 'paper' with enough text for the import pipeline."""
    return _pdf_with_pages(
        "Does sleep deprivation impair working memory in adults?",
        "We hypothesize that participants in a randomized trial will score lower.",
    )


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a 2x2 table."""
    document = Document()
    document.add_paragraph("Research question about coral reefs")
    document.add_paragraph("")
    document.add_paragraph("We use an existing dataset of reef surveys")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Site"
    table.cell(0, 1).text = "Cover"
    table.cell(1, 0).text = "North"
    table.cell(1, 1).text = "42%"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    Document().save(buf)
    return buf.getvalue()


@pytest.fixture()
def rubric() -> Rubric:
    return default_rubric()


@pytest.fixture()
def valid_sections() -> dict[str, str]:
    """Sections of a draft that passes validation without repair."""
    return {
        "question": "Does sleep deprivation impair working memory in adults?",
        "audience": "Cognitive psychologists and sleep researchers",
        "hypothesis": "H1: deprivation lowers span scores. H2: no effect after caffeine.",
        "relatedpapers": "1. Lim & Dinges 2010\n2. Killgore 2010",
        "experiment": "Randomized trial with 120 adults over two nights",
        "analysis": "Mixed-effects model of span scores by condition",
        "process": "Six months, two research assistants, preregistered",
        "abstract": "We test whether one night without sleep impairs working memory.",
    }
