from dataclasses import dataclass, field

APPROACH_GROUP = "approach"
DATA_METHOD_GROUP = "data_method"

ESSENTIAL_FIELDS: tuple[str, ...] = ("question", "audience", "analysis", "process", "abstract")
APPROACH_FIELDS: tuple[str, ...] = ("hypothesis", "needsresearch", "exploratoryresearch")
DATA_METHOD_FIELDS: tuple[str, ...] = ("experiment", "existingdata", "theorysimulation")

GROUP_FIELDS: dict[str, tuple[str, ...]] = {
    APPROACH_GROUP: APPROACH_FIELDS,
    DATA_METHOD_GROUP: DATA_METHOD_FIELDS,
}
DEFAULT_GROUP_MEMBERS: dict[str, str] = {
    APPROACH_GROUP: "hypothesis",
    DATA_METHOD_GROUP: "experiment",
}


@dataclass(frozen=True)
class RubricSubsection:
    """One graded criterion inside a section."""

    id: str
    title: str
    instruction: str


@dataclass(frozen=True)
class RubricSection:
    """Static definition of one planner section."""

    id: str
    title: str
    placeholder: str
    intro_text: str = ""
    group: str | None = None
    subsections: tuple[RubricSubsection, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Rubric:
    """The ordered set of planner sections used for prompting, grading and backfill."""

    title: str
    version: str
    sections: tuple[RubricSection, ...]

    @property
    def section_ids(self) -> tuple[str, ...]:
        return tuple(section.id for section in self.sections)

    def get(self, section_id: str) -> RubricSection | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def placeholder(self, section_id: str) -> str:
        section = self.get(section_id)
        if section is not None and section.placeholder:
            return section.placeholder
        return f"[{section_id} content not available]"

    def group_members(self, group: str) -> tuple[str, ...]:
        return tuple(s.id for s in self.sections if s.group == group)

    def ungrouped_ids(self) -> tuple[str, ...]:
        return tuple(s.id for s in self.sections if s.group is None)
