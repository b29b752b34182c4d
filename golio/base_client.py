"""Shared HTTP plumbing for the Riot API clients."""

from __future__ import annotations

import json
import logging
import re
import time
from http import HTTPStatus
from typing import Any

from golio.errors import error_for_status
from golio.transport import Doer, Request, Response, UrllibDoer

SCHEME = "http"
BASE_URL = "kernel:8080"
API_TOKEN_HEADER = "X-Riot-Token"

_INTEGER = re.compile(r"[+-]?\d+")

_default_logger = logging.getLogger("golio")


def _region_name(region: Any) -> str:
    return str(getattr(region, "value", region))


def _header(response: Response, name: str) -> str | None:
    wanted = name.lower()
    for key, value in response.headers.items():
        if key.lower() == wanted:
            return value
    return None


def _encode(body: Any) -> bytes:
    return (json.dumps(body) + "\n").encode()


class BaseClient:
    """Sends authenticated requests to the Riot API, handling retries."""

    def __init__(
        self,
        region: Any,
        api_key: str,
        doer: Doer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.region = region
        self.api_key = api_key
        self.doer: Doer = doer if doer is not None else UrllibDoer()
        base = logger if logger is not None else _default_logger
        self.logger = logging.LoggerAdapter(base, {"region": _region_name(region)})

    def get_json(self, endpoint: str) -> Any:
        """Send a GET request and return the decoded JSON body."""
        response = self.get(endpoint)
        try:
            return response.json()
        except ValueError as exc:
            self.logger.debug("get_json %s: %s", endpoint, exc)
            raise

    def post_json(self, endpoint: str, body: Any) -> Any:
        """Send a POST request with a JSON body and return the decoded reply."""
        response = self.post(endpoint, body)
        try:
            return response.json()
        except ValueError as exc:
            self.logger.debug("post_json %s: %s", endpoint, exc)
            raise

    def put(self, endpoint: str, body: Any) -> None:
        """Send a PUT request with a JSON body."""
        try:
            payload = _encode(body)
        except (TypeError, ValueError) as exc:
            self.logger.debug("put %s: %s", endpoint, exc)
            raise
        self.do_request("PUT", endpoint, payload)

    def get(self, endpoint: str) -> Response:
        """Send a GET request."""
        return self.do_request("GET", endpoint, None)

    def post(self, endpoint: str, body: Any) -> Response:
        """Send a POST request with a JSON body."""
        try:
            payload = _encode(body)
        except (TypeError, ValueError) as exc:
            self.logger.debug("post %s: %s", endpoint, exc)
            raise
        return self.do_request("POST", endpoint, payload)

    def do_request(self, method: str, endpoint: str, body: bytes | None = None) -> Response:
        """Send a request, retrying once when unavailable and waiting out rate limits.

        Raises ApiError for any status outside 2xx.
        """
        while True:
            request = self.new_request(method, endpoint, body)
            response = self._send(request, endpoint)
            if response.status_code == HTTPStatus.SERVICE_UNAVAILABLE:
                self.logger.info("service unavailable, retrying")
                time.sleep(1)
                response = self._send(request, endpoint)
            if response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
                retry = _header(response, "Retry-After")
                if retry is None or not _INTEGER.fullmatch(retry):
                    self.logger.debug("do_request %s: invalid Retry-After %r", endpoint, retry)
                    raise ValueError(f"invalid Retry-After header: {retry!r}")
                seconds = int(retry)
                self.logger.info("rate limited, waiting %d seconds", seconds)
                time.sleep(seconds)
                continue
            if not 200 <= response.status_code <= 299:
                self.logger.debug("error response: %s", response.status_code)
                raise error_for_status(response.status_code)
            return response

    def new_request(self, method: str, endpoint: str, body: bytes | None = None) -> Request:
        """Build a request for the endpoint with the API token and JSON accept headers."""
        try:
            return Request(
                method,
                f"{SCHEME}://{BASE_URL}{endpoint}",
                {API_TOKEN_HEADER: self.api_key, "Accept": "application/json"},
                body,
            )
        except ValueError as exc:
            self.logger.debug("new_request %s: %s", endpoint, exc)
            raise

    def _send(self, request: Request, endpoint: str) -> Response:
        try:
            return self.doer.do(request)
        except Exception as exc:
            self.logger.debug("do_request %s: %s", endpoint, exc)
            raise