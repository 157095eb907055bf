from dataclasses import dataclass
from enum import Enum

from paper_planner.drafts.models import ProjectDraft


class PipelineStage(str, Enum):
    """Import stage that produced a draft, in fallback order."""

    PRIMARY = "primary"
    RETRIED = "retried"
    FILENAME_FALLBACK = "filename_fallback"
    ERROR = "error"


STAGE_VERSIONS: dict[PipelineStage, str] = {
    PipelineStage.PRIMARY: "2.0-primary",
    PipelineStage.RETRIED: "2.0-retried",
    PipelineStage.FILENAME_FALLBACK: "2.0-filename-fallback",
    PipelineStage.ERROR: "2.0-error",
}


@dataclass(frozen=True)
class PipelineOutcome:
    """A draft plus the stage that produced it and the stages tried on the way."""

    draft: ProjectDraft
    stage: PipelineStage
    stages_attempted: tuple[PipelineStage, ...]
    diagnostics: tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        """Whether the UI should warn that the draft is not a primary extraction."""
        return self.stage is not PipelineStage.PRIMARY

    def to_dict(self) -> dict[str, object]:
        return {
            "stage": self.stage.value,
            "stagesAttempted": [stage.value for stage in self.stages_attempted],
            "diagnostics": list(self.diagnostics),
            "draft": self.draft.to_dict(),
        }
