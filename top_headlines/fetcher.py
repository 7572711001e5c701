"""
HTTP fetching for the upstream News API.

The service talks to the network through a small Transport interface so the
HTTP client can be swapped for a fake in tests. The httpx implementation
makes exactly one GET per call and reports failures in the returned
FetchResult instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping

import httpx


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None


class Transport(ABC):
    """Capability to perform a GET and return the body text or a failure."""

    @abstractmethod
    def get(self, url: str, params: Mapping[str, Any]) -> FetchResult:
        """Perform a single GET request. Must not raise."""
        raise NotImplementedError


class HttpxTransport(Transport):
    """Synchronous httpx transport, one attempt per call, no retries.

    Attributes:
        timeout: Request timeout in seconds, None keeps the httpx default
        trust_env: Whether to respect system proxy settings from environment
        http_transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        timeout: float | None = None,
        trust_env: bool = True,
        http_transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout
        self.trust_env = trust_env
        self.http_transport = http_transport

    def get(self, url: str, params: Mapping[str, Any]) -> FetchResult:
        client_kwargs: dict[str, Any] = {"follow_redirects": True, "trust_env": self.trust_env}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout
        if self.http_transport is not None:
            client_kwargs["transport"] = self.http_transport
        try:
            with httpx.Client(**client_kwargs) as client:
                resp = client.get(url, params=dict(params))
        except Exception as exc:  # noqa: BLE001
            return FetchResult(url=url, status_code=None, text=None, error=f"{type(exc).__name__}: {exc}")

        request_url = str(resp.request.url)
        if not resp.is_success:
            return FetchResult(
                url=request_url,
                status_code=resp.status_code,
                text=None,
                error=f"HTTPStatusError: {resp.status_code} {resp.reason_phrase}",
            )
        return FetchResult(url=request_url, status_code=resp.status_code, text=resp.text, error=None)
