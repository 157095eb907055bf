from dataclasses import asdict, dataclass, field, replace
from enum import Enum


@dataclass(frozen=True)
class ChatMessage:
    """A single chat turn attached to a section."""

    role: str
    content: str


@dataclass
class ProjectDraft:
    """Canonical output of a document import: section texts plus metadata."""

    sections: dict[str, str] = field(default_factory=dict)
    chat_messages: dict[str, list[ChatMessage]] = field(default_factory=dict)
    timestamp: str = ""
    version: str = ""

    def with_version(self, version: str) -> "ProjectDraft":
        return replace(self, sections=dict(self.sections), version=version)

    def to_dict(self) -> dict[str, object]:
        """JSON-serializable shape consumed by the planner UI."""
        return {
            "sections": dict(self.sections),
            "chatMessages": {
                section_id: [asdict(message) for message in messages]
                for section_id, messages in self.chat_messages.items()
            },
            "timestamp": self.timestamp,
            "version": self.version,
        }


class ViolationKind(str, Enum):
    FIELD = "field"
    APPROACH_GROUP = "approach_group"
    DATA_METHOD_GROUP = "data_method_group"


@dataclass(frozen=True)
class Violation:
    """One broken draft invariant. ``field`` is a section id or a group name."""

    field: str
    kind: ViolationKind
    message: str


@dataclass(frozen=True)
class ValidationResult:
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def missing(self) -> tuple[str, ...]:
        return tuple(v.field for v in self.violations)

    @property
    def repairable(self) -> bool:
        """True when only field-length problems remain, which backfill can fix."""
        return all(v.kind is ViolationKind.FIELD for v in self.violations)
