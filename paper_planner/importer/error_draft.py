from collections.abc import Callable
from datetime import datetime, timezone

from paper_planner.drafts.exceptions import DraftParseError, DraftValidationError
from paper_planner.drafts.models import ProjectDraft
from paper_planner.extraction.exceptions import ExtractionError
from paper_planner.gateway.exceptions import GatewayError
from paper_planner.importer.exceptions import ImportCancelledError
from paper_planner.importer.models import STAGE_VERSIONS, PipelineStage
from paper_planner.rubric.models import DEFAULT_GROUP_MEMBERS, Rubric

RECOVERED_TEXT_FIELD = "abstract"


def error_kind(exc: BaseException) -> str:
    """Short, stable name for an error, shown to the user in diagnostics."""
    if isinstance(exc, ExtractionError):
        return exc.reason.value
    if isinstance(exc, GatewayError):
        return exc.kind
    if isinstance(exc, DraftParseError):
        return "ParseError"
    if isinstance(exc, DraftValidationError):
        return "ValidationError"
    if isinstance(exc, ImportCancelledError):
        return "ImportCancelled"
    return type(exc).__name__


def describe_error(exc: BaseException) -> str:
    return f"{error_kind(exc)}: {exc}"


def build_error_draft(
    rubric: Rubric,
    *,
    file_name: str,
    failed_stage: PipelineStage,
    error: BaseException,
    recovered_text: str = "",
    now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
) -> ProjectDraft:
    """Draft returned when every automated stage failed.

    Every ungrouped rubric section plus the default member of each choice
    group holds its placeholder, except ``question`` (the diagnostic) and
    ``abstract`` (recovered raw text, when there is any).
    """
    section_ids = [*rubric.ungrouped_ids(), *DEFAULT_GROUP_MEMBERS.values()]
    sections = {section_id: rubric.placeholder(section_id) for section_id in section_ids}
    sections["question"] = (
        f"Import failed for '{file_name}'.\n\n"
        f"Failed stage: {failed_stage.value}\n"
        f"Error: {describe_error(error)}\n\n"
        "The other sections contain template placeholders. "
        "Fill them in by hand or try importing a different file."
    )
    if recovered_text.strip():
        sections[RECOVERED_TEXT_FIELD] = (
            "Recovered document text (automatic import failed):\n\n" + recovered_text
        )
    return ProjectDraft(
        sections=sections,
        chat_messages={},
        timestamp=now().isoformat(),
        version=STAGE_VERSIONS[PipelineStage.ERROR],
    )
