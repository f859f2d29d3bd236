"""branch-updater exception classes."""

from typing import Any


class BranchUpdaterError(Exception):
    """Base exception for all branch-updater errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(BranchUpdaterError):
    """Raised when the action configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(BranchUpdaterError):
    """Raised when the token is rejected (401)."""

    pass


class AuthorizationError(BranchUpdaterError):
    """Raised when the token lacks permission (403)."""

    pass


class NotFoundError(BranchUpdaterError):
    """Raised when a repository or pull request is not found."""

    pass


class RateLimitedError(BranchUpdaterError):
    """Raised when the API rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(BranchUpdaterError):
    """Raised on validation errors (422 and other 4xx)."""

    pass


class ServerError(BranchUpdaterError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class GraphQLError(BranchUpdaterError):
    """Raised when a GraphQL response carries an ``errors`` array."""

    def __init__(
        self,
        errors: list[dict[str, Any]],
        request_id: str | None = None,
    ) -> None:
        self.errors = errors
        messages = [str(e.get("message", "unknown error")) for e in errors]
        code = errors[0].get("type", "GRAPHQL_ERROR") if errors else "GRAPHQL_ERROR"
        super().__init__(str(code), "; ".join(messages), request_id)


class ResponseFormatError(BranchUpdaterError):
    """Raised when a response is missing fields or has unknown values."""

    def __init__(self, message: str) -> None:
        super().__init__("MALFORMED_RESPONSE", message)
