"""Offline LLM gateway.

Use this module as a reference when implementing new provider adapters.
Implement BaseLlmGateway and register the provider in GatewayFactory.
"""

import json

from paper_planner.gateway.base import BaseLlmGateway
from paper_planner.gateway.models import CompletionRequest
from paper_planner.rubric.loader import default_rubric
from paper_planner.rubric.models import DEFAULT_GROUP_MEMBERS, Rubric


class ExampleGatewayAdapter(BaseLlmGateway):
    """Gateway that answers every request with the same valid project draft.

    The draft holds each rubric placeholder for the ungrouped sections plus
    the default member of each choice group. No network calls.
    """

    def __init__(self, rubric: Rubric | None = None) -> None:
        self._rubric = rubric or default_rubric()

    async def complete(self, request: CompletionRequest) -> str:
        _ = request
        section_ids = [
            *self._rubric.ungrouped_ids(),
            *DEFAULT_GROUP_MEMBERS.values(),
        ]
        return json.dumps({
            "sections": {sid: self._rubric.placeholder(sid) for sid in section_ids},
            "chatMessages": {},
            "version": "example",
        })
