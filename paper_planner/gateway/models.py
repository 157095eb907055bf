from dataclasses import dataclass


@dataclass(frozen=True)
class CompletionRequest:
    """One prompt pair sent to the LLM gateway."""

    system_prompt: str
    task_prompt: str
    temperature: float = 0.3
    max_tokens: int = 3000
    json_mode: bool = True
