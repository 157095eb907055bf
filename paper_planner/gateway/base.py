from abc import ABC, abstractmethod

from paper_planner.gateway.models import CompletionRequest


class BaseLlmGateway(ABC):
    """Contract for provider-specific LLM gateways."""

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> str:
        """Return the provider response as plain text.

        Raises:
            GatewayUnauthorizedError: missing or rejected API key.
            GatewayRequestError: non-2xx response or connection failure.
            GatewayEmptyResponseError: the response carried no content.
            GatewayTimeoutError: the provider did not answer in time.
        """
