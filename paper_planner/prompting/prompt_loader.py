from pathlib import Path

from paper_planner.prompting.exceptions import PromptError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, directory: Path | None = None) -> str:
    """Load a prompt template by name.

    Args:
        name: Template file stem, e.g. ``task_primary``.
        directory: Directory holding ``<name>.txt``.
                   Defaults to the bundled prompts directory.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        PromptError: if the file cannot be read.
    """
    if directory is None:
        directory = _DEFAULT_PROMPT_DIR
    path = directory / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptError(f"Failed to load prompt template '{name}': {exc}") from exc
