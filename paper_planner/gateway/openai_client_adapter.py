import httpx
import openai

from paper_planner.gateway.base import BaseLlmGateway
from paper_planner.gateway.exceptions import (
    GatewayEmptyResponseError,
    GatewayRequestError,
    GatewayTimeoutError,
    GatewayUnauthorizedError,
)
from paper_planner.gateway.models import CompletionRequest


class OpenAIGatewayAdapter(BaseLlmGateway):
    """LLM gateway built on the OpenAI-compatible async chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        # An empty key is reported by complete(), not at construction.
        self._client = (
            openai.AsyncOpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=0,
            )
            if api_key
            else None
        )

    async def complete(self, request: CompletionRequest) -> str:
        if self._client is None:
            raise GatewayUnauthorizedError("LLM API key not configured")

        kwargs: dict[str, object] = {}
        if request.json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=request.temperature,
                max_tokens=request.max_tokens,
                messages=[
                    {"role": "system", "content": request.system_prompt},
                    {"role": "user", "content": request.task_prompt},
                ],
                **kwargs,
            )
        except openai.AuthenticationError as exc:
            raise GatewayUnauthorizedError(f"LLM provider rejected the API key: {exc}") from exc
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise GatewayTimeoutError(f"LLM provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise GatewayRequestError(f"LLM provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GatewayRequestError(f"LLM provider API error: {exc}") from exc

        if not response.choices:
            raise GatewayEmptyResponseError("LLM returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise GatewayEmptyResponseError("LLM returned empty response")
        return content.strip()
