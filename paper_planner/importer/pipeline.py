import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from paper_planner.drafts.models import ProjectDraft
from paper_planner.extraction.models import ExtractedText, ImportedDocument
from paper_planner.gateway.base import BaseLlmGateway
from paper_planner.gateway.exceptions import GatewayTimeoutError
from paper_planner.gateway.models import CompletionRequest
from paper_planner.importer.exceptions import ImportCancelledError
from paper_planner.importer.models import PipelineStage
from paper_planner.prompting.composer import PromptPair


@dataclass(slots=True)
class ImportContext:
    document: ImportedDocument
    cancel_event: asyncio.Event | None = None
    extracted: ExtractedText | None = None
    stages_attempted: list[PipelineStage] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    @property
    def recovered_text(self) -> str:
        return self.extracted.content if self.extracted is not None else ""

    def check_cancelled(self) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise ImportCancelledError(f"Import of '{self.document.file_name}' was cancelled")


class ImportStage(ABC):
    stage: PipelineStage

    @abstractmethod
    async def run(self, context: ImportContext) -> ProjectDraft:
        """Produce an accepted draft or raise to hand over to the next stage."""
        raise NotImplementedError


class GatewayCall:
    """Runs one gateway request under a timeout and the context's cancel signal.

    On cancellation the in-flight request is abandoned: its task is cancelled
    and its result, if any ever arrives, is discarded.
    """

    def __init__(
        self,
        gateway: BaseLlmGateway,
        *,
        timeout_seconds: float,
        temperature: float = 0.3,
        max_tokens: int = 3000,
    ) -> None:
        self._gateway = gateway
        self._timeout_seconds = timeout_seconds
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def __call__(self, prompts: PromptPair, context: ImportContext) -> str:
        context.check_cancelled()
        request = CompletionRequest(
            system_prompt=prompts.system_prompt,
            task_prompt=prompts.task_prompt,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        call = asyncio.ensure_future(self._gateway.complete(request))
        waiters: set[asyncio.Future] = {call}
        cancel_wait = None
        if context.cancel_event is not None:
            cancel_wait = asyncio.ensure_future(context.cancel_event.wait())
            waiters.add(cancel_wait)
        try:
            done, _ = await asyncio.wait(
                waiters,
                timeout=self._timeout_seconds,
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            if cancel_wait is not None:
                cancel_wait.cancel()
            if not call.done():
                call.cancel()

        if call in done:
            return call.result()
        context.check_cancelled()
        raise GatewayTimeoutError(
            f"LLM request exceeded {self._timeout_seconds}s and was abandoned"
        )
