class GatewayError(Exception):
    """Raised when the LLM gateway call fails."""

    kind = "GatewayError"


class GatewayUnauthorizedError(GatewayError):
    """Raised when the API key is missing or rejected. Retrying cannot fix this."""

    kind = "Unauthorized"


class GatewayRequestError(GatewayError):
    """Raised when the provider call fails due to network/infrastructure issues."""

    kind = "RequestFailed"


class GatewayEmptyResponseError(GatewayError):
    """Raised when the provider answers without any content."""

    kind = "EmptyResponse"


class GatewayTimeoutError(GatewayError):
    """Raised when the provider does not answer within the configured timeout."""

    kind = "Timeout"
