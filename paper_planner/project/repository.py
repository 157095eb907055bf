from dataclasses import asdict

from paper_planner.drafts.models import ChatMessage, ProjectDraft
from paper_planner.logging.logger import Log
from paper_planner.project.store import KeyValueStore

PROJECT_DATA_KEY = "paperPlannerData"
PROJECT_CHAT_KEY = "paperPlannerChat"


class ProjectRepository:
    """Reads and writes the current project through a KeyValueStore."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def save(self, draft: ProjectDraft) -> None:
        self._store.set(PROJECT_DATA_KEY, dict(draft.sections))
        self._store.set(
            PROJECT_CHAT_KEY,
            {
                section_id: [asdict(message) for message in messages]
                for section_id, messages in draft.chat_messages.items()
            },
        )
        Log.info(f"Saved project with {len(draft.sections)} sections")

    def load(self) -> ProjectDraft | None:
        """Return the saved project, or None when nothing has been saved."""
        sections = self._store.get(PROJECT_DATA_KEY)
        if not isinstance(sections, dict):
            return None
        raw_chat = self._store.get(PROJECT_CHAT_KEY)
        chat: dict[str, list[ChatMessage]] = {}
        if isinstance(raw_chat, dict):
            for section_id, messages in raw_chat.items():
                if isinstance(messages, list):
                    chat[section_id] = [
                        ChatMessage(role=m["role"], content=m["content"])
                        for m in messages
                        if isinstance(m, dict) and "role" in m and "content" in m
                    ]
        return ProjectDraft(
            sections={key: value for key, value in sections.items() if isinstance(value, str)},
            chat_messages=chat,
        )

    def clear(self) -> None:
        self._store.delete(PROJECT_DATA_KEY)
        self._store.delete(PROJECT_CHAT_KEY)
