import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from paper_planner.rubric.exceptions import RubricError
from paper_planner.rubric.models import Rubric, RubricSection, RubricSubsection

_DEFAULT_RUBRIC_PATH = Path(__file__).parent / "section_content.json"


def load_rubric(path: Path | None = None) -> Rubric:
    """Load and parse a section rubric file.

    Args:
        path: Path to a rubric JSON file.
              Defaults to the bundled section_content.json.

    Raises:
        RubricError: if the file cannot be read or does not describe sections.
    """
    if path is None:
        path = _DEFAULT_RUBRIC_PATH
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RubricError(f"Failed to load rubric: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RubricError(f"Rubric is not valid JSON: {exc}") from exc
    return _build_rubric(raw)


@lru_cache(maxsize=1)
def default_rubric() -> Rubric:
    """The bundled rubric, parsed once per process."""
    return load_rubric()


def _build_rubric(raw: Any) -> Rubric:
    if not isinstance(raw, dict) or not isinstance(raw.get("sections"), list):
        raise RubricError("Rubric must be an object with a 'sections' list")
    sections = tuple(_build_section(item, i) for i, item in enumerate(raw["sections"]))
    ids = [section.id for section in sections]
    if len(ids) != len(set(ids)):
        raise RubricError("Rubric section ids must be unique")
    return Rubric(
        title=str(raw.get("title", "")),
        version=str(raw.get("version", "")),
        sections=sections,
    )


def _build_section(raw: Any, index: int) -> RubricSection:
    if not isinstance(raw, dict) or not raw.get("id") or not raw.get("title"):
        raise RubricError(f"Rubric section at index {index} needs an 'id' and a 'title'")
    subsections = tuple(
        RubricSubsection(
            id=str(sub["id"]),
            title=str(sub.get("title", "")),
            instruction=str(sub.get("instruction", "")),
        )
        for sub in raw.get("subsections", [])
        if isinstance(sub, dict) and sub.get("id")
    )
    return RubricSection(
        id=str(raw["id"]),
        title=str(raw["title"]),
        placeholder=str(raw.get("placeholder", "")).strip(),
        intro_text=str(raw.get("introText", "")),
        group=raw.get("group"),
        subsections=subsections,
    )
