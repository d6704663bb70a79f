"""
Tool-related exceptions raised at the provider boundary.

Adapters themselves never raise; they fold every failure into an error
envelope. These exceptions cover what happens before an adapter runs
(unknown tool, invalid arguments, missing credentials) plus the internal
upstream rejection that adapters convert.
"""
from __future__ import annotations

from typing import Any


class ToolError(Exception):
    """Base class for all tool errors."""

    def __init__(self, message: str, *, tool_id: str | None = None):
        self.tool_id = tool_id
        self.message = message
        super().__init__(f"Tool '{tool_id}': {message}" if tool_id else message)


class ToolNotFoundError(ToolError):
    """Raised when a requested tool is not registered with the provider."""


class ToolValidationError(ToolError):
    """Raised when invocation arguments do not satisfy the tool's parameter schema."""

    def __init__(self, message: str, *, tool_id: str, path: list[Any] | None = None):
        self.path = list(path or [])
        super().__init__(message, tool_id=tool_id)


class ToolConfigurationError(ToolError):
    """Raised when the provider is given an unusable configuration."""


class ToolCredentialsMissingError(ToolConfigurationError):
    """Raised when the Maps Platform API key is not configured."""

    def __init__(self, env_var: str, *, message: str | None = None) -> None:
        self.env_var = env_var
        base_msg = message or f"Environment variable '{env_var}' is not set with the required API KEY."
        super().__init__(base_msg)


class UpstreamError(Exception):
    """Non-2xx answer from a Maps Platform endpoint."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)
