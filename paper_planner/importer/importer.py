import asyncio
from collections.abc import Sequence

from paper_planner.config.settings import Settings
from paper_planner.drafts.exceptions import DraftError
from paper_planner.extraction.exceptions import ExtractionError
from paper_planner.extraction.factory import build_text_extractor
from paper_planner.extraction.models import ImportedDocument
from paper_planner.extraction.text_extractor import TextExtractor
from paper_planner.gateway.exceptions import GatewayError, GatewayUnauthorizedError
from paper_planner.gateway.factory import GatewayFactory
from paper_planner.importer.error_draft import build_error_draft, describe_error
from paper_planner.importer.exceptions import ImportCancelledError
from paper_planner.importer.models import STAGE_VERSIONS, PipelineOutcome, PipelineStage
from paper_planner.importer.pipeline import GatewayCall, ImportContext, ImportStage
from paper_planner.importer.stages import FilenameFallbackStage, PrimaryStage, SimplifiedStage
from paper_planner.logging.logger import Log
from paper_planner.prompting.composer import PromptComposer
from paper_planner.rubric.digest import build_digest
from paper_planner.rubric.loader import default_rubric
from paper_planner.rubric.models import Rubric


class DocumentImporter:
    """Turns an uploaded document into a ProjectDraft.

    Pipeline: extract -> primary -> simplified retry -> filename fallback
    -> error draft. Each stage runs only when the one before it failed, and
    ``import_document`` never raises: every failure ends in a draft.
    """

    def __init__(
        self,
        extractor: TextExtractor,
        stages: Sequence[ImportStage],
        rubric: Rubric,
    ) -> None:
        self._extractor = extractor
        self._stages = tuple(stages)
        self._rubric = rubric

    async def import_document(
        self,
        document: ImportedDocument,
        cancel_event: asyncio.Event | None = None,
    ) -> PipelineOutcome:
        Log.info(
            f"Importing '{document.file_name}' ({document.mime_type}, {document.size_bytes} bytes)"
        )
        context = ImportContext(document=document, cancel_event=cancel_event)
        try:
            return await self._run(context)
        except Exception as exc:
            Log.exception(f"Import of '{document.file_name}' failed unexpectedly: {exc}")
            failed = context.stages_attempted[-1] if context.stages_attempted else PipelineStage.PRIMARY
            return self._error_outcome(context, failed, exc)

    async def _run(self, context: ImportContext) -> PipelineOutcome:
        try:
            context.check_cancelled()
            context.extracted = await asyncio.to_thread(self._extractor.extract, context.document)
        except (ExtractionError, ImportCancelledError) as exc:
            context.stages_attempted.append(PipelineStage.PRIMARY)
            return self._error_outcome(context, PipelineStage.PRIMARY, exc)

        last_failure: tuple[PipelineStage, Exception] | None = None
        for stage in self._stages:
            context.stages_attempted.append(stage.stage)
            try:
                draft = await stage.run(context)
            except (GatewayUnauthorizedError, ImportCancelledError) as exc:
                return self._error_outcome(context, stage.stage, exc)
            except (GatewayError, DraftError) as exc:
                Log.warning(
                    f"Stage {stage.stage.value} failed for '{context.document.file_name}': "
                    f"{describe_error(exc)}"
                )
                context.diagnostics.append(f"{stage.stage.value}: {describe_error(exc)}")
                last_failure = (stage.stage, exc)
                continue

            Log.info(f"Imported '{context.document.file_name}' at stage {stage.stage.value}")
            return PipelineOutcome(
                draft=draft.with_version(STAGE_VERSIONS[stage.stage]),
                stage=stage.stage,
                stages_attempted=tuple(context.stages_attempted),
                diagnostics=tuple(context.diagnostics),
            )

        if last_failure is None:
            raise RuntimeError("DocumentImporter has no stages configured")
        failed_stage, error = last_failure
        return self._error_outcome(context, failed_stage, error)

    def _error_outcome(
        self,
        context: ImportContext,
        failed_stage: PipelineStage,
        error: Exception,
    ) -> PipelineOutcome:
        recovered = context.recovered_text
        if not recovered and isinstance(error, ExtractionError):
            recovered = error.partial_text
        draft = build_error_draft(
            self._rubric,
            file_name=context.document.file_name,
            failed_stage=failed_stage,
            error=error,
            recovered_text=recovered,
        )
        context.stages_attempted.append(PipelineStage.ERROR)
        context.diagnostics.append(f"{failed_stage.value}: {describe_error(error)}")
        Log.error(
            f"Import of '{context.document.file_name}' produced an error draft: "
            f"{describe_error(error)}"
        )
        return PipelineOutcome(
            draft=draft,
            stage=PipelineStage.ERROR,
            stages_attempted=tuple(context.stages_attempted),
            diagnostics=tuple(dict.fromkeys(context.diagnostics)),
        )


def build_importer(settings: Settings, rubric: Rubric | None = None) -> DocumentImporter:
    """Wire a DocumentImporter from application settings."""
    rubric = rubric or default_rubric()
    composer = PromptComposer(
        rubric,
        primary_text_max_chars=settings.prompt_text_max_chars,
        simplified_text_max_chars=settings.simplified_prompt_text_max_chars,
    )
    gateway_call = GatewayCall(
        GatewayFactory.create(settings),
        timeout_seconds=settings.llm_timeout_seconds,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
    )
    min_length = settings.min_field_length
    stages = [
        PrimaryStage(
            composer, gateway_call, rubric, digest=build_digest(rubric), min_length=min_length
        ),
        SimplifiedStage(composer, gateway_call, rubric, min_length=min_length),
        FilenameFallbackStage(composer, gateway_call, rubric, min_length=min_length),
    ]
    return DocumentImporter(build_text_extractor(settings), stages, rubric)
