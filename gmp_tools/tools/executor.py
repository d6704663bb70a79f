"""
Generic executor shared by every Maps Platform adapter.

build request -> send -> check status -> decode. Every failure (transport,
non-2xx answer, undecodable body) is folded into ``{"error": str}`` so that
nothing raises past the adapter boundary.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

import httpx

from gmp_tools.tools.config import MapsConfig
from gmp_tools.tools.endpoint import Endpoint
from gmp_tools.tools.exceptions import UpstreamError
from gmp_tools.utils.logger import get_logger

logger = get_logger(__name__)


def error_envelope(endpoint: Endpoint, message: str) -> Dict[str, str]:
    return {"error": f"An error occurred while {endpoint.error_context}: {message}"}


def is_error_envelope(result: Any) -> bool:
    return isinstance(result, dict) and set(result) == {"error"} and isinstance(result["error"], str)


def decode_response(endpoint: Endpoint, response: httpx.Response) -> Any:
    """
    Return the upstream payload, or raise for a non-2xx answer.

    Binary endpoints report the status line; JSON endpoints report the
    serialised error body.
    """
    if not response.is_success:
        if endpoint.is_binary:
            raise UpstreamError(response.status_code, f"HTTP {response.status_code} {response.reason_phrase}")
        raise UpstreamError(response.status_code, json.dumps(response.json()))

    if endpoint.is_binary:
        return response.content
    return response.json()


class AdapterExecutor:
    """Runs endpoint definitions against the live API with one shared config."""

    def __init__(self, config: MapsConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def _redact(self, text: str) -> str:
        return text.replace(self.config.api_key, "***")

    async def invoke(self, endpoint: Endpoint, arguments: Mapping[str, Any]) -> Any:
        """Issue exactly one upstream call for ``endpoint`` and normalise the outcome."""
        try:
            request = endpoint.build_request(arguments, self.config.api_key)
            logger.debug(
                "upstream_request",
                tool_id=endpoint.name,
                method=request.method,
                url=f"{request.url.scheme}://{request.url.host}{request.url.path}",
            )
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.send(request)
            logger.debug("upstream_response", tool_id=endpoint.name, status=response.status_code)
            return decode_response(endpoint, response)
        except Exception as exc:
            message = self._redact(str(exc))
            logger.warning(
                "tool_failed",
                tool_id=endpoint.name,
                error_type=type(exc).__name__,
                error=message,
            )
            return error_envelope(endpoint, message)
