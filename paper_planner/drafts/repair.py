from paper_planner.drafts.models import ProjectDraft
from paper_planner.drafts.templates import group_default_content
from paper_planner.drafts.validator import MIN_FIELD_LENGTH, present_members
from paper_planner.logging.logger import Log
from paper_planner.rubric.models import ESSENTIAL_FIELDS, GROUP_FIELDS, Rubric


def backfill(
    draft: ProjectDraft,
    rubric: Rubric,
    *,
    min_length: int = MIN_FIELD_LENGTH,
) -> tuple[ProjectDraft, list[str]]:
    """Replace too-short essential fields and chosen group members with placeholders.

    Blank group members are dropped so only the chosen member of each group
    remains. Returns the repaired draft and the ids that were backfilled.
    """
    sections = dict(draft.sections)
    chosen: list[str] = []
    for members in GROUP_FIELDS.values():
        for member in members:
            if member in sections and not sections[member].strip():
                del sections[member]
        chosen.extend(m for m in members if m in sections)

    filled = []
    for field in (*ESSENTIAL_FIELDS, *chosen):
        if len(sections.get(field, "").strip()) < min_length:
            sections[field] = rubric.placeholder(field)
            filled.append(field)
    if filled:
        Log.warning(f"Backfilled placeholder content for: {', '.join(filled)}")
    return ProjectDraft(
        sections=sections,
        chat_messages=draft.chat_messages,
        timestamp=draft.timestamp,
        version=draft.version,
    ), filled


def enforce_groups(
    draft: ProjectDraft,
    *,
    defaults: dict[str, str],
    topic: str,
) -> tuple[ProjectDraft, list[str]]:
    """Force exactly one member per choice group without rejecting the draft.

    Extra members are removed (the first present one is kept); a group with
    no member gets ``defaults[group]`` filled with topic-specific content.
    Returns the repaired draft and human-readable notes on what changed.
    """
    sections = dict(draft.sections)
    notes = []
    for group, members in GROUP_FIELDS.items():
        present = present_members(draft, members)
        for member in members:
            if member not in present:
                sections.pop(member, None)
        if len(present) > 1:
            for extra in present[1:]:
                del sections[extra]
            notes.append(f"{group}: kept {present[0]}, removed {', '.join(present[1:])}")
        elif not present:
            default = defaults[group]
            sections[default] = group_default_content(default, topic)
            notes.append(f"{group}: generated default {default}")
    for note in notes:
        Log.warning(f"Adjusted choice group {note}")
    return ProjectDraft(
        sections=sections,
        chat_messages=draft.chat_messages,
        timestamp=draft.timestamp,
        version=draft.version,
    ), notes
