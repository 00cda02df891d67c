"""
Pipeline errors for clean API error handling.

Every failure in the research → writer pipeline is an AgentError. Each kind is
terminal for the request: it propagates unchanged to the HTTP boundary, which
renders it as a 500 with str(error) as the body.
"""


class AgentError(Exception):
    """Base class for all pipeline failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ProviderError(AgentError):
    """Raised on a network, transport, or provider-side failure from an external API."""

    def __init__(self, provider: str, cause: Exception | str) -> None:
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider} error: {cause}")


class DecodeError(AgentError):
    """Raised when a response body could not be parsed as expected."""

    def __init__(self, cause: Exception | str) -> None:
        self.cause = cause
        super().__init__(f"De/serialization error: {cause}")


class EmptyCompletion(AgentError):
    """Raised when the model returns no candidate text."""

    def __init__(self, agent_name: str) -> None:
        self.agent_name = agent_name
        super().__init__(f"{agent_name}: model returned an empty completion")


class ConfigurationError(AgentError):
    """Raised when a required setting (e.g. an API key) is missing or malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Configuration error: {reason}")
