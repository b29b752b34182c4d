"""HTTP request and response values and the interface that sends requests."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789"
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


@dataclass(frozen=True)
class Request:
    """An HTTP request ready to be sent."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def __post_init__(self) -> None:
        if not self.method:
            object.__setattr__(self, "method", "GET")
        if not set(self.method) <= _TOKEN_CHARS:
            raise ValueError(f"invalid method {self.method!r}")
        if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in self.url):
            raise ValueError(f"invalid control character in URL {self.url!r}")


@dataclass
class Response:
    """An HTTP response with its body fully read."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


@runtime_checkable
class Doer(Protocol):
    """Anything that can send an HTTP request and return the response."""

    def do(self, request: Request) -> Response:
        """Send the request and return its response."""


class UrllibDoer:
    """Sends requests with the standard library's HTTP client."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def do(self, request: Request) -> Response:
        """Send the request; error statuses are returned, not raised."""
        native = urllib.request.Request(
            request.url,
            data=request.body,
            headers=dict(request.headers),
            method=request.method,
        )
        try:
            with urllib.request.urlopen(native, timeout=self.timeout) as reply:
                return Response(reply.status, reply.read(), dict(reply.headers.items()))
        except urllib.error.HTTPError as exc:
            try:
                headers = dict(exc.headers.items()) if exc.headers is not None else {}
                return Response(exc.code, exc.read(), headers)
            finally:
                exc.close()