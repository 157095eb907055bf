"""Checks a ProjectDraft against the section invariants.

All checks run and every violation is collected, so the caller can decide
between backfilling short fields and escalating group violations.
"""

from paper_planner.drafts.models import ProjectDraft, ValidationResult, Violation, ViolationKind
from paper_planner.rubric.models import (
    APPROACH_FIELDS,
    APPROACH_GROUP,
    DATA_METHOD_FIELDS,
    DATA_METHOD_GROUP,
    ESSENTIAL_FIELDS,
)

MIN_FIELD_LENGTH = 10


def present_members(draft: ProjectDraft, members: tuple[str, ...]) -> list[str]:
    """Group members holding a non-blank string, in group order."""
    return [m for m in members if draft.sections.get(m, "").strip()]


def validate_draft(draft: ProjectDraft, *, min_length: int = MIN_FIELD_LENGTH) -> ValidationResult:
    violations: list[Violation] = []
    violations.extend(_check_essential_fields(draft, min_length))
    violations.extend(
        _check_group(draft, APPROACH_GROUP, APPROACH_FIELDS, ViolationKind.APPROACH_GROUP)
    )
    violations.extend(
        _check_group(
            draft, DATA_METHOD_GROUP, DATA_METHOD_FIELDS, ViolationKind.DATA_METHOD_GROUP
        )
    )
    return ValidationResult(violations=tuple(violations))


def _check_essential_fields(draft: ProjectDraft, min_length: int) -> list[Violation]:
    violations = []
    for field in ESSENTIAL_FIELDS:
        value = draft.sections.get(field)
        if value is None:
            violations.append(
                Violation(field, ViolationKind.FIELD, f"'{field}' is missing")
            )
        elif len(value.strip()) < min_length:
            violations.append(
                Violation(
                    field,
                    ViolationKind.FIELD,
                    f"'{field}' is shorter than {min_length} characters",
                )
            )
    return violations


def _check_group(
    draft: ProjectDraft,
    group: str,
    members: tuple[str, ...],
    kind: ViolationKind,
) -> list[Violation]:
    present = present_members(draft, members)
    if len(present) == 1:
        return []
    found = ", ".join(present) if present else "none"
    return [
        Violation(
            group,
            kind,
            f"expected exactly one of {', '.join(members)} for '{group}', found {found}",
        )
    ]
