import argparse
import asyncio
import json
import sys
from pathlib import Path

from paper_planner.config.settings import Settings
from paper_planner.extraction.exceptions import ExtractionError
from paper_planner.extraction.file_loader import FileLoader
from paper_planner.importer import build_importer
from paper_planner.logging.logger import Log
from paper_planner.project.loader import detect_toggles, merge_with_template
from paper_planner.project.repository import ProjectRepository
from paper_planner.project.store import JsonFileStore
from paper_planner.rubric.loader import default_rubric


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paper_planner",
        description="Import a PDF or DOCX paper into a structured research-plan draft.",
    )
    parser.add_argument("file", type=Path, help="PDF or DOCX file to import")
    parser.add_argument("--mime-type", help="declared MIME type (default: guessed from suffix)")
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="print the draft without writing it to the project store",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> load file -> import -> print and save."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    # stdout carries the draft JSON.
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        document = FileLoader().load(args.file, mime_type=args.mime_type)
    except ExtractionError as exc:
        Log.error(str(exc))
        return 2

    rubric = default_rubric()
    importer = build_importer(settings, rubric)
    outcome = asyncio.run(importer.import_document(document))
    if outcome.degraded:
        Log.warning(
            f"Draft produced by the {outcome.stage.value} stage; review it before use"
        )

    toggles = detect_toggles(outcome.draft)
    payload = outcome.to_dict()
    payload["detectedToggles"] = {
        "approach": toggles.approach,
        "dataMethod": toggles.data_method,
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    if not args.no_save:
        ProjectRepository(JsonFileStore(settings.project_store_path)).save(
            merge_with_template(outcome.draft, rubric)
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
