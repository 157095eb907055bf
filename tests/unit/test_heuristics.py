import pytest

from paper_planner.importer.heuristics import (
    UNTITLED_TOPIC,
    guess_approach,
    guess_data_method,
    topic_from_filename,
)


class TestTopicFromFilename:
    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("coral_reef-decline.pdf", "Coral Reef Decline"),
            ("sleep.and.memory.docx", "Sleep And Memory"),
            ("  spaced  out.pdf", "Spaced Out"),
            ("uploads/deep_learning.pdf", "Deep Learning"),
            ("___.pdf", UNTITLED_TOPIC),
            (".pdf", UNTITLED_TOPIC),
        ],
    )
    def test_topic(self, file_name: str, expected: str) -> None:
        assert topic_from_filename(file_name) == expected


class TestGuesses:
    def test_defaults_without_keywords(self) -> None:
        assert guess_approach("") == "hypothesis"
        assert guess_data_method("") == "experiment"

    def test_exploratory_text(self) -> None:
        text = "This exploratory study aims to discover patterns in unlabelled data."
        assert guess_approach(text) == "exploratoryresearch"

    def test_existing_data_text(self) -> None:
        text = "We performed a secondary analysis of a publicly available dataset."
        assert guess_data_method(text) == "existingdata"

    def test_simulation_text(self) -> None:
        text = "A Monte Carlo simulation of the theoretical model."
        assert guess_data_method(text) == "theorysimulation"
