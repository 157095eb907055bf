"""Applies an imported or loaded draft to the planner's project state."""

from dataclasses import dataclass

from paper_planner.drafts.models import ChatMessage, ProjectDraft
from paper_planner.drafts.validator import present_members
from paper_planner.rubric.models import (
    APPROACH_FIELDS,
    APPROACH_GROUP,
    DATA_METHOD_FIELDS,
    DATA_METHOD_GROUP,
    DEFAULT_GROUP_MEMBERS,
    Rubric,
)


@dataclass(frozen=True)
class DetectedToggles:
    """Which choice-group member the planner UI should show."""

    approach: str
    data_method: str


def detect_toggles(draft: ProjectDraft) -> DetectedToggles:
    approach = present_members(draft, APPROACH_FIELDS)
    data_method = present_members(draft, DATA_METHOD_FIELDS)
    return DetectedToggles(
        approach=approach[0] if approach else DEFAULT_GROUP_MEMBERS[APPROACH_GROUP],
        data_method=data_method[0] if data_method else DEFAULT_GROUP_MEMBERS[DATA_METHOD_GROUP],
    )


def merge_with_template(draft: ProjectDraft, rubric: Rubric) -> ProjectDraft:
    """Build the new project state from ``draft``.

    The draft replaces the current project outright. Ungrouped sections
    start from their placeholder and take the draft's text when it is
    non-blank; every rubric section gets a chat list.
    """
    sections = {section_id: rubric.placeholder(section_id) for section_id in rubric.ungrouped_ids()}
    for section_id, text in draft.sections.items():
        if text.strip():
            sections[section_id] = text

    chat: dict[str, list[ChatMessage]] = {section_id: [] for section_id in rubric.section_ids}
    for section_id, messages in draft.chat_messages.items():
        chat[section_id] = list(messages)

    return ProjectDraft(
        sections=sections,
        chat_messages=chat,
        timestamp=draft.timestamp,
        version=draft.version,
    )
