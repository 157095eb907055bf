from dataclasses import dataclass
from pathlib import Path

from paper_planner.prompting.fields import (
    PromptMode,
    build_prompt_fields,
    render_group_rules,
    render_output_format,
)
from paper_planner.prompting.prompt_loader import load_prompt_template
from paper_planner.rubric.models import APPROACH_FIELDS, DATA_METHOD_FIELDS, Rubric

TRUNCATED_SUFFIX = "\n... [truncated]"

_TEMPLATE_NAMES = (
    "system_primary",
    "system_simplified",
    "system_filename_fallback",
    "task_primary",
    "task_simplified",
    "task_filename_fallback",
)


@dataclass(frozen=True)
class PromptPair:
    system_prompt: str
    task_prompt: str


def excerpt(text: str, max_chars: int) -> str:
    """Cut ``text`` at ``max_chars`` and mark the cut."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATED_SUFFIX


class PromptComposer:
    """Builds the system and task prompts for every import stage.

    Output is a pure function of the inputs: no clocks or randomness, so
    identical inputs give byte-identical prompts.
    """

    def __init__(
        self,
        rubric: Rubric,
        *,
        primary_text_max_chars: int = 8000,
        simplified_text_max_chars: int = 4000,
        prompt_dir: Path | None = None,
    ) -> None:
        self._fields = build_prompt_fields(rubric)
        self._text_limits = {
            PromptMode.PRIMARY: primary_text_max_chars,
            PromptMode.SIMPLIFIED: simplified_text_max_chars,
        }
        self._templates = {
            name: load_prompt_template(name, prompt_dir) for name in _TEMPLATE_NAMES
        }
        self._group_rules = render_group_rules(self._fields)

    def build_prompts(self, text: str, digest: str, mode: PromptMode) -> PromptPair:
        document_text = excerpt(text, self._text_limits[mode])
        output_format = render_output_format(self._fields, mode)
        if mode is PromptMode.SIMPLIFIED:
            system_prompt = self._templates["system_simplified"].format(
                approach_fields=", ".join(APPROACH_FIELDS),
                data_method_fields=", ".join(DATA_METHOD_FIELDS),
            )
            task_prompt = self._templates["task_simplified"].format(
                output_format=output_format,
                group_rules=self._group_rules,
                document_text=document_text,
            )
        else:
            system_prompt = self._templates["system_primary"]
            task_prompt = self._templates["task_primary"].format(
                output_format=output_format,
                group_rules=self._group_rules,
                digest=digest,
                document_text=document_text,
            )
        return PromptPair(system_prompt=system_prompt.strip(), task_prompt=task_prompt.strip())

    def build_filename_fallback_prompts(
        self,
        *,
        topic: str,
        file_name: str,
        approach_hint: str,
        data_method_hint: str,
    ) -> PromptPair:
        task_prompt = self._templates["task_filename_fallback"].format(
            topic=topic,
            file_name=file_name,
            approach_hint=approach_hint,
            data_method_hint=data_method_hint,
            output_format=render_output_format(self._fields, PromptMode.PRIMARY),
            group_rules=self._group_rules,
        )
        return PromptPair(
            system_prompt=self._templates["system_filename_fallback"].strip(),
            task_prompt=task_prompt.strip(),
        )
