from paper_planner.drafts.exceptions import DraftValidationError
from paper_planner.drafts.models import ProjectDraft, ViolationKind
from paper_planner.drafts.parser import parse_response
from paper_planner.drafts.repair import backfill, enforce_groups
from paper_planner.drafts.validator import MIN_FIELD_LENGTH, validate_draft
from paper_planner.importer.heuristics import guess_approach, guess_data_method, topic_from_filename
from paper_planner.importer.models import PipelineStage
from paper_planner.importer.pipeline import GatewayCall, ImportContext, ImportStage
from paper_planner.logging.logger import Log
from paper_planner.prompting.composer import PromptComposer, PromptPair
from paper_planner.prompting.fields import PromptMode
from paper_planner.rubric.models import APPROACH_GROUP, DATA_METHOD_GROUP, Rubric


class LlmDraftStage(ImportStage):
    def __init__(
        self,
        composer: PromptComposer,
        gateway_call: GatewayCall,
        rubric: Rubric,
        *,
        min_length: int = MIN_FIELD_LENGTH,
    ) -> None:
        self._composer = composer
        self._gateway_call = gateway_call
        self._rubric = rubric
        self._min_length = min_length

    async def _request_draft(self, prompts: PromptPair, context: ImportContext) -> ProjectDraft:
        Log.debug(
            f"{self.stage.value}: prompts for '{context.document.file_name}'\n"
            f"[system]\n{prompts.system_prompt}\n[task]\n{prompts.task_prompt}"
        )
        raw = await self._gateway_call(prompts, context)
        Log.debug(f"{self.stage.value}: raw response ({len(raw)} chars)\n{raw}")
        return parse_response(raw, known_section_ids=self._rubric.section_ids)

    def _accept(self, draft: ProjectDraft, context: ImportContext) -> ProjectDraft:
        """Backfill field-length problems; escalate group violations."""
        result = validate_draft(draft, min_length=self._min_length)
        if not result.repairable:
            raise DraftValidationError(
                tuple(v for v in result.violations if v.kind is not ViolationKind.FIELD)
            )
        repaired, filled = backfill(draft, self._rubric, min_length=self._min_length)
        if filled:
            context.diagnostics.append(f"{self.stage.value}: backfilled {', '.join(filled)}")
        return repaired


class PrimaryStage(LlmDraftStage):
    stage = PipelineStage.PRIMARY

    def __init__(
        self,
        composer: PromptComposer,
        gateway_call: GatewayCall,
        rubric: Rubric,
        *,
        digest: str,
        min_length: int = MIN_FIELD_LENGTH,
    ) -> None:
        super().__init__(composer, gateway_call, rubric, min_length=min_length)
        self._digest = digest

    async def run(self, context: ImportContext) -> ProjectDraft:
        prompts = self._composer.build_prompts(
            context.recovered_text, self._digest, PromptMode.PRIMARY
        )
        return self._accept(await self._request_draft(prompts, context), context)


class SimplifiedStage(LlmDraftStage):
    stage = PipelineStage.RETRIED

    async def run(self, context: ImportContext) -> ProjectDraft:
        prompts = self._composer.build_prompts(context.recovered_text, "", PromptMode.SIMPLIFIED)
        return self._accept(await self._request_draft(prompts, context), context)


class FilenameFallbackStage(LlmDraftStage):
    """Generates a draft from the file name alone.

    Group violations are repaired here rather than escalated, since this is
    the last stage before the error draft.
    """

    stage = PipelineStage.FILENAME_FALLBACK

    async def run(self, context: ImportContext) -> ProjectDraft:
        file_name = context.document.file_name
        topic = topic_from_filename(file_name)
        approach = guess_approach(context.recovered_text)
        data_method = guess_data_method(context.recovered_text)
        Log.info(
            f"Filename fallback for '{file_name}': topic '{topic}', "
            f"approach {approach}, data method {data_method}"
        )
        prompts = self._composer.build_filename_fallback_prompts(
            topic=topic,
            file_name=file_name,
            approach_hint=approach,
            data_method_hint=data_method,
        )
        draft = await self._request_draft(prompts, context)
        draft, notes = enforce_groups(
            draft,
            defaults={APPROACH_GROUP: approach, DATA_METHOD_GROUP: data_method},
            topic=topic,
        )
        context.diagnostics.extend(f"{self.stage.value}: {note}" for note in notes)
        draft, filled = backfill(draft, self._rubric, min_length=self._min_length)
        if filled:
            context.diagnostics.append(f"{self.stage.value}: backfilled {', '.join(filled)}")
        return draft
