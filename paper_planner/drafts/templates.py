"""Topic-specific default content for choice-group sections.

Used only when a fallback draft has no member of a group and one must be
generated around the document's topic.
"""

GROUP_TEMPLATES: dict[str, str] = {
    "hypothesis": (
        "Hypothesis 1: {topic} has a direct causal effect on the measured outcomes.\n\n"
        "Hypothesis 2: The impact of {topic} is mediated by environmental factors.\n\n"
        "Why distinguishing these hypotheses matters:\n"
        "- Would clarify the mechanisms of action\n"
        "- Could lead to refined interventions"
    ),
    "needsresearch": (
        "Who needs this research:\nPractitioners and researchers working on {topic}\n\n"
        "Why they need it:\nCurrent tools for {topic} do not meet their requirements\n\n"
        "Current approaches and limitations:\nExisting methods are slow and hard to generalize\n\n"
        "Success criteria:\nMeasurable improvement over the current standard for {topic}\n\n"
        "Advantages of this approach:\nSimpler, faster and easier to adopt"
    ),
    "exploratoryresearch": (
        "Phenomena explored:\nPatterns and structure in {topic}\n\n"
        "Potential discoveries:\n1. Previously unreported regularities in {topic}\n"
        "2. Subgroups that behave differently\n\n"
        "Value to the field:\nGenerates hypotheses for future confirmatory work\n\n"
        "Analytical approaches:\nDescriptive statistics, clustering and visualization\n\n"
        "Validation approach:\nReplication on a held-out portion of the data"
    ),
    "experiment": (
        "Key Variables:\n- Independent: {topic} (manipulated at three levels)\n"
        "- Dependent: Outcome measurements (primary and secondary)\n"
        "- Controlled: Demographics, environmental factors\n\n"
        "Sample & Size Justification: 150 participants based on power analysis\n\n"
        "Data Collection Methods: Surveys, direct observations, physiological measures\n\n"
        "Predicted Results: Higher levels of {topic} will yield improved outcomes\n\n"
        "Potential Confounds & Mitigations: Selection bias addressed through random assignment"
    ),
    "existingdata": (
        "Dataset name and source:\nA public dataset covering {topic}\n\n"
        "Original purpose:\nCollected for a broader survey of the field\n\n"
        "Permissions to use data:\nOpen license permitting secondary analysis\n\n"
        "Data quality information:\nDocumented missingness and collection procedures\n\n"
        "Relevant variables:\nMeasures directly related to {topic}"
    ),
    "theorysimulation": (
        "Theoretical framework:\nA formal model of {topic}\n\n"
        "Key assumptions:\n1. The system is in steady state\n2. Interactions are local\n\n"
        "Simulation approach:\nParameter sweeps over the model's free parameters\n\n"
        "Validation against known results:\nCompare limiting cases with published findings"
    ),
}


def group_default_content(section_id: str, topic: str) -> str:
    template = GROUP_TEMPLATES.get(section_id)
    if template is None:
        return f"[{section_id} content about {topic}]"
    return template.format(topic=topic)
