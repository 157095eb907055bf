"""Turns raw LLM response text into a ProjectDraft.

Steps: strip code fences, strict JSON parse, then parse of the first
top-level ``{...}`` span, then backfill of missing top-level fields.
"""

import json
import re
from collections.abc import Callable, Collection
from datetime import datetime, timezone
from typing import Any

from paper_planner.drafts.exceptions import DraftParseError
from paper_planner.drafts.models import ChatMessage, ProjectDraft

DEFAULT_VERSION = "1.0-import"
SNIPPET_CHARS = 100

_CHAT_ROLES = frozenset({"user", "assistant"})
_METADATA_KEYS = frozenset({"chatMessages", "timestamp", "version"})
_INSTRUCTION_COMMENT_RE = re.compile(
    r"^[ \t]*//[ \t]*(Choose either|Include EXACTLY ONE|CHOOSE ONE|OPTION \d).*$\n?",
    re.MULTILINE | re.IGNORECASE,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if not cleaned.startswith("```"):
        return cleaned
    lines = cleaned.splitlines()
    if lines and lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines).strip()


def first_object_span(text: str) -> str | None:
    """Return the first balanced top-level ``{...}`` span, ignoring braces in strings."""
    start = text.find("{")
    if start == -1:
        return None
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def parse_response(
    raw: str,
    *,
    known_section_ids: Collection[str] | None = None,
    now: Callable[[], datetime] = _utc_now,
) -> ProjectDraft:
    """Parse an LLM response into a ProjectDraft.

    Args:
        raw: Response text, possibly wrapped in a Markdown code fence.
        known_section_ids: When given, section keys outside this set are dropped.
            An object without a "sections" or "userInputs" wrapper is read
            as a flat map of section ids.
        now: Clock used for the backfilled timestamp.

    Raises:
        DraftParseError: if no JSON object can be recovered (stage ``json``)
            or the object has the wrong shape (stage ``shape``).
    """
    cleaned = strip_code_fences(raw)
    data = _load_object(cleaned)

    raw_sections = data.get("sections", data.get("userInputs"))
    if raw_sections is None:
        # Flat object: section ids at the top level.
        raw_sections = {k: v for k, v in data.items() if k not in _METADATA_KEYS}
    if not isinstance(raw_sections, dict):
        raise DraftParseError(
            "'sections' must be an object",
            stage="shape",
            raw_snippet=cleaned[:SNIPPET_CHARS],
        )

    timestamp = data.get("timestamp")
    version = data.get("version")
    return ProjectDraft(
        sections=_build_sections(raw_sections, known_section_ids),
        chat_messages=_build_chat_messages(data.get("chatMessages")),
        timestamp=timestamp if isinstance(timestamp, str) and timestamp else now().isoformat(),
        version=version if isinstance(version, str) and version else DEFAULT_VERSION,
    )


def _load_object(cleaned: str) -> dict[str, Any]:
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        span = first_object_span(cleaned)
        if span is None:
            raise DraftParseError(
                "Invalid JSON response: no object found",
                raw_snippet=cleaned[:SNIPPET_CHARS],
            ) from None
        try:
            parsed = json.loads(span)
        except json.JSONDecodeError as exc:
            raise DraftParseError(
                f"Invalid JSON response: {exc}",
                raw_snippet=cleaned[:SNIPPET_CHARS],
            ) from exc

    if not isinstance(parsed, dict):
        raise DraftParseError(
            "JSON response must be an object",
            stage="shape",
            raw_snippet=cleaned[:SNIPPET_CHARS],
        )
    return parsed


def _build_sections(
    raw: dict[str, Any],
    known_section_ids: Collection[str] | None,
) -> dict[str, str]:
    sections: dict[str, str] = {}
    for key, value in raw.items():
        section_id = str(key).strip().lower()
        if known_section_ids is not None and section_id not in known_section_ids:
            continue
        text = coerce_section_text(value)
        if text is not None:
            sections[section_id] = text
    return sections


def coerce_section_text(value: Any) -> str | None:
    """Flatten a section value to a string; ``None`` drops the section."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value
    elif isinstance(value, (bool, int, float)):
        text = str(value)
    elif isinstance(value, list):
        items = [coerce_section_text(item) for item in value]
        text = "\n".join(item for item in items if item)
    elif isinstance(value, dict):
        lines = []
        for key, item in value.items():
            item_text = coerce_section_text(item)
            if item_text:
                lines.append(f"{key}: {item_text}")
        text = "\n".join(lines)
    else:
        return None
    return _INSTRUCTION_COMMENT_RE.sub("", text).strip()


def _build_chat_messages(raw: Any) -> dict[str, list[ChatMessage]]:
    if not isinstance(raw, dict):
        return {}
    chat: dict[str, list[ChatMessage]] = {}
    for section_id, messages in raw.items():
        if not isinstance(messages, list):
            continue
        chat[str(section_id)] = [
            ChatMessage(role=m["role"], content=m["content"])
            for m in messages
            if isinstance(m, dict)
            and m.get("role") in _CHAT_ROLES
            and isinstance(m.get("content"), str)
        ]
    return chat
