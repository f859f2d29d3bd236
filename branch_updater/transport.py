"""
HTTP Transport for branch-updater.

Handles HTTP communication with the GitHub REST and GraphQL APIs and maps
error responses to typed exceptions. Requests are sent exactly once.
"""

import time
from typing import Any

import httpx

from branch_updater.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BranchUpdaterError,
    GraphQLError,
    NotFoundError,
    RateLimitedError,
    ResponseFormatError,
    ServerError,
    ValidationError,
)
from branch_updater.logging import log_http_request, log_http_response

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
USER_AGENT = "branch-updater"

# Fallback wait reported on rate limit errors without usable headers
_DEFAULT_RETRY_AFTER = 60


class HTTPTransport:
    """
    HTTP transport layer for the GitHub API.

    Handles:
    - Token authentication and GitHub media type/version headers
    - GraphQL requests, including ``errors`` arrays in 200 responses
    - Error response parsing into typed exceptions
    - Debug logging of requests and responses with credentials masked
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        graphql_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            token: GitHub token used as bearer credential
            base_url: REST API root (e.g., "https://api.github.com")
            graphql_url: GraphQL endpoint (default: ``{base_url}/graphql``)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.graphql_url = graphql_url or f"{self.base_url}/graphql"
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def graphql(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Run a GraphQL query or mutation.

        Args:
            query: GraphQL document
            variables: Variables referenced by the document

        Returns:
            The ``data`` member of the response

        Raises:
            GraphQLError: If the response carries an ``errors`` array
            BranchUpdaterError: On HTTP errors
        """
        body = {"query": query, "variables": variables or {}}
        payload, request_id = self._execute("POST", self.graphql_url, json=body)

        if not isinstance(payload, dict):
            raise ResponseFormatError("GraphQL response is not a JSON object")

        errors = payload.get("errors")
        if errors:
            raise GraphQLError(errors, request_id)

        return payload.get("data") or {}

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a REST API request.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/hello/pulls/1/update-branch")
            params: Query parameters
            body: JSON request body

        Returns:
            Parsed JSON response (empty dict for bodiless responses)

        Raises:
            BranchUpdaterError: On API errors
        """
        payload, _ = self._execute(method, path, params=params, json=body)
        return payload

    def _execute(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> tuple[Any, str | None]:
        """
        Send a single request and decode the response.

        Returns:
            Tuple of (parsed JSON body, GitHub request id)

        Raises:
            BranchUpdaterError: On non-2xx responses or connection failures
        """
        log_http_request(method, url, headers=dict(self._client.headers), body=json)
        started = time.monotonic()

        try:
            response = self._client.request(method, url, params=params, json=json)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        request_id = response.headers.get("X-GitHub-Request-Id")
        log_http_response(
            response.status_code,
            url,
            request_id=request_id,
            elapsed_ms=(time.monotonic() - started) * 1000,
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        if not response.content:
            return {}, request_id

        return response.json(), request_id

    def _parse_error_response(self, response: httpx.Response) -> BranchUpdaterError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate BranchUpdaterError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        code = f"HTTP_{status_code}"
        message = data.get("message") or f"HTTP {status_code}"
        details = [
            e.get("message") or e.get("code")
            for e in data.get("errors") or []
            if isinstance(e, dict) and (e.get("message") or e.get("code"))
        ]
        if details:
            message = f"{message}: {'; '.join(str(d) for d in details)}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 429 or (
            status_code == 403
            and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            retry_after = self._get_retry_after(response)
            return RateLimitedError(code, message, retry_after, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return ValidationError(code, message, request_id)

    def _get_retry_after(self, response: httpx.Response) -> int:
        """Seconds until the rate limit resets, from Retry-After or X-RateLimit-Reset."""
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return int(retry_after)
            except ValueError:
                pass

        reset_at = response.headers.get("X-RateLimit-Reset")
        if reset_at:
            try:
                return max(0, int(reset_at) - int(time.time()))
            except ValueError:
                pass

        return _DEFAULT_RETRY_AFTER
