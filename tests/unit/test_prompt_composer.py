import json

from paper_planner.prompting.composer import TRUNCATED_SUFFIX, PromptComposer, excerpt
from paper_planner.prompting.fields import (
    PromptMode,
    build_prompt_fields,
    render_group_rules,
    render_output_format,
)
from paper_planner.rubric.digest import build_digest
from paper_planner.rubric.models import Rubric


class TestExcerpt:
    def test_short_text_unchanged(self) -> None:
        assert excerpt("abc", 10) == "abc"

    def test_long_text_marked(self) -> None:
        assert excerpt("abcdef", 3) == "abc" + TRUNCATED_SUFFIX


class TestRenderOutputFormat:
    def test_primary_lists_groups_separately(self, rubric: Rubric) -> None:
        output = render_output_format(build_prompt_fields(rubric), PromptMode.PRIMARY)
        assert "Research approach (choose ONE of):" in output
        assert "Data collection method (choose ONE of):" in output
        assert output.index("- question:") < output.index("Research approach")

    def test_simplified_is_json_skeleton_with_defaults(self, rubric: Rubric) -> None:
        output = render_output_format(build_prompt_fields(rubric), PromptMode.SIMPLIFIED)
        skeleton = json.loads(output)
        sections = skeleton["sections"]
        assert "hypothesis" in sections
        assert "experiment" in sections
        assert "needsresearch" not in sections
        assert "existingdata" not in sections
        assert sections["question"] == rubric.placeholder("question")

    def test_group_rules_name_every_member(self, rubric: Rubric) -> None:
        rules = render_group_rules(build_prompt_fields(rubric))
        for member in ("hypothesis", "needsresearch", "exploratoryresearch", "theorysimulation"):
            assert f'"{member}"' in rules


class TestPromptComposer:
    def test_primary_prompt_contains_document_and_digest(self, rubric: Rubric) -> None:
        composer = PromptComposer(rubric)
        digest = build_digest(rubric)
        prompts = composer.build_prompts("Coral reef decline", digest, PromptMode.PRIMARY)
        assert "Coral reef decline" in prompts.task_prompt
        assert "## Research Question [id: question]" in prompts.task_prompt
        assert prompts.system_prompt

    def test_identical_inputs_give_identical_prompts(self, rubric: Rubric) -> None:
        composer = PromptComposer(rubric)
        digest = build_digest(rubric)
        first = composer.build_prompts("text", digest, PromptMode.PRIMARY)
        second = PromptComposer(rubric).build_prompts("text", digest, PromptMode.PRIMARY)
        assert first == second

    def test_primary_truncates_document_text(self, rubric: Rubric) -> None:
        composer = PromptComposer(rubric, primary_text_max_chars=50)
        prompts = composer.build_prompts("z" * 500, "", PromptMode.PRIMARY)
        assert "z" * 50 + TRUNCATED_SUFFIX in prompts.task_prompt
        assert "z" * 51 not in prompts.task_prompt

    def test_simplified_uses_smaller_excerpt(self, rubric: Rubric) -> None:
        composer = PromptComposer(
            rubric, primary_text_max_chars=100, simplified_text_max_chars=20
        )
        prompts = composer.build_prompts("w" * 500, "", PromptMode.SIMPLIFIED)
        assert "w" * 20 + TRUNCATED_SUFFIX in prompts.task_prompt
        assert "w" * 21 not in prompts.task_prompt
        assert '"sections": {' in prompts.task_prompt

    def test_simplified_omits_digest(self, rubric: Rubric) -> None:
        composer = PromptComposer(rubric)
        prompts = composer.build_prompts("text", build_digest(rubric), PromptMode.SIMPLIFIED)
        assert "[id: question]" not in prompts.task_prompt

    def test_filename_fallback_prompt(self, rubric: Rubric) -> None:
        composer = PromptComposer(rubric)
        prompts = composer.build_filename_fallback_prompts(
            topic="Coral Reef Decline",
            file_name="coral_reef_decline.pdf",
            approach_hint="exploratoryresearch",
            data_method_hint="existingdata",
        )
        assert "Coral Reef Decline" in prompts.task_prompt
        assert "coral_reef_decline.pdf" in prompts.task_prompt
        assert "exploratoryresearch" in prompts.task_prompt
        assert "existingdata" in prompts.task_prompt

    def test_filename_fallback_prompt_asks_for_sections_wrapper(self, rubric: Rubric) -> None:
        composer = PromptComposer(rubric)
        prompts = composer.build_filename_fallback_prompts(
            topic="Coral Reef Decline",
            file_name="coral_reef_decline.pdf",
            approach_hint="exploratoryresearch",
            data_method_hint="existingdata",
        )
        assert '"sections"' in prompts.task_prompt
