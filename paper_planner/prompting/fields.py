"""Structured description of the JSON the import prompt asks for.

The prompt's output section is rendered from an ordered list of
PromptField entries rather than assembled by string surgery.
"""

import json
from dataclasses import dataclass
from enum import Enum

from paper_planner.rubric.models import DEFAULT_GROUP_MEMBERS, GROUP_FIELDS, Rubric

GROUP_LABELS: dict[str, str] = {
    "approach": "Research approach",
    "data_method": "Data collection method",
}


class PromptMode(str, Enum):
    PRIMARY = "primary"
    SIMPLIFIED = "simplified"


@dataclass(frozen=True)
class PromptField:
    field_id: str
    guidance: str
    is_choice_group_member: bool = False
    group_name: str | None = None


def build_prompt_fields(rubric: Rubric) -> tuple[PromptField, ...]:
    """One field per rubric section, in rubric order, guided by its placeholder."""
    return tuple(
        PromptField(
            field_id=section.id,
            guidance=section.placeholder,
            is_choice_group_member=section.group is not None,
            group_name=section.group,
        )
        for section in rubric.sections
    )


def render_output_format(fields: tuple[PromptField, ...], mode: PromptMode) -> str:
    """Render the expected output for a prompt mode.

    PRIMARY lists every field with its guidance, grouped by choice group.
    SIMPLIFIED renders a verbatim JSON skeleton holding the required fields
    and the default member of each group.
    """
    if mode is PromptMode.SIMPLIFIED:
        return _render_skeleton(fields)

    lines = ["Required fields:"]
    lines.extend(
        f"- {f.field_id}: {json.dumps(f.guidance)}"
        for f in fields
        if not f.is_choice_group_member
    )
    for group in GROUP_FIELDS:
        members = [f for f in fields if f.group_name == group]
        if not members:
            continue
        lines.append("")
        lines.append(f"{GROUP_LABELS.get(group, group)} (choose ONE of):")
        lines.extend(f"- {f.field_id}: {json.dumps(f.guidance)}" for f in members)
    return "\n".join(lines)


def render_group_rules(fields: tuple[PromptField, ...]) -> str:
    lines = []
    for group in GROUP_FIELDS:
        members = [f.field_id for f in fields if f.group_name == group]
        if not members:
            continue
        quoted = ", ".join(f'"{m}"' for m in members)
        lines.append(
            f"- {GROUP_LABELS.get(group, group)}: include EXACTLY ONE of {quoted}. "
            "Omit the other keys entirely."
        )
    return "\n".join(lines)


def _render_skeleton(fields: tuple[PromptField, ...]) -> str:
    defaults = set(DEFAULT_GROUP_MEMBERS.values())
    sections = {
        f.field_id: f.guidance
        for f in fields
        if not f.is_choice_group_member or f.field_id in defaults
    }
    skeleton = {
        "sections": sections,
        "chatMessages": {},
        "timestamp": "<ISO-8601 timestamp>",
        "version": "1.0",
    }
    return json.dumps(skeleton, indent=2)
