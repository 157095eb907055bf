"""Last-resort guesses used by the filename fallback stage.

Classification accuracy is not a goal here: the output only steers the
fallback prompt and picks which choice-group member to generate.
"""

import re

UNTITLED_TOPIC = "Untitled Research Topic"

APPROACH_KEYWORDS: dict[str, tuple[str, ...]] = {
    "hypothesis": ("hypothesis", "hypothesize", "hypotheses", "we predict", "prediction"),
    "needsresearch": (
        "stakeholder", "user needs", "need for", "practitioners", "requirements", "problem statement",
    ),
    "exploratoryresearch": (
        "exploratory", "we explore", "data-driven", "discover", "unsupervised", "patterns",
    ),
}
DATA_METHOD_KEYWORDS: dict[str, tuple[str, ...]] = {
    "experiment": ("participants", "experiment", "randomized", "trial", "we recruited", "stimuli"),
    "existingdata": (
        "dataset", "database", "secondary analysis", "publicly available", "archival", "retrospective",
    ),
    "theorysimulation": (
        "simulation", "simulate", "theoretical model", "analytical model", "monte carlo", "numerical model",
    ),
}

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_SEPARATOR_RE = re.compile(r"[\s_\-.]+")
_WORD_START_RE = re.compile(r"\b\w")


def topic_from_filename(file_name: str) -> str:
    """'deep_learning-for.proteins.pdf' -> 'Deep Learning For Proteins'."""
    stem = _EXTENSION_RE.sub("", file_name.rsplit("/", 1)[-1])
    words = _SEPARATOR_RE.sub(" ", stem).strip()
    if not words:
        return UNTITLED_TOPIC
    return _WORD_START_RE.sub(lambda match: match.group(0).upper(), words)


def guess_member(text: str, keywords: dict[str, tuple[str, ...]]) -> str:
    """Member with the most keyword hits; ties and no hits go to the first member."""
    lowered = text.lower()
    best = next(iter(keywords))
    best_score = 0
    for member, words in keywords.items():
        score = sum(lowered.count(word) for word in words)
        if score > best_score:
            best, best_score = member, score
    return best


def guess_approach(text: str) -> str:
    return guess_member(text, APPROACH_KEYWORDS)


def guess_data_method(text: str) -> str:
    return guess_member(text, DATA_METHOD_KEYWORDS)
