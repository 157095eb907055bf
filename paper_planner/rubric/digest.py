"""Grading-criteria digest used to steer the import prompt toward the rubric."""

from paper_planner.rubric.models import Rubric

INTRO_MAX_CHARS = 150
INSTRUCTION_MAX_CHARS = 100


def build_digest(
    rubric: Rubric,
    *,
    intro_max_chars: int = INTRO_MAX_CHARS,
    instruction_max_chars: int = INSTRUCTION_MAX_CHARS,
) -> str:
    """Flatten the rubric into a compact text digest, in rubric order.

    Each section yields a ``## Title [id: x]`` header, an optional truncated
    intro line and one ``- Subsection: instruction`` bullet per subsection,
    followed by a blank line.
    """
    lines: list[str] = []
    for section in rubric.sections:
        lines.append(f"## {section.title} [id: {section.id}]")
        if section.intro_text:
            lines.append(_shorten(section.intro_text, intro_max_chars))
        for subsection in section.subsections:
            lines.append(
                f"- {subsection.title}: "
                f"{_shorten(subsection.instruction, instruction_max_chars)}"
            )
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def _shorten(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
