from paper_planner.importer.importer import DocumentImporter, build_importer
from paper_planner.importer.models import PipelineOutcome, PipelineStage

__all__ = [
    "DocumentImporter",
    "PipelineOutcome",
    "PipelineStage",
    "build_importer",
]
