"""Function-call declaration models consumed by tool-calling frameworks."""
from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

__all__ = [
    "FunctionDeclaration",
    "ToolDeclaration",
]


class FunctionDeclaration(BaseModel):
    """Name, description and JSON Schema parameters of one function."""

    name: str
    description: str
    parameters: Dict[str, Any] = Field(default_factory=lambda: {"type": "object", "properties": {}})


class ToolDeclaration(BaseModel):
    """`{"type": "function", "function": {...}}` envelope."""

    type: Literal["function"] = "function"
    function: FunctionDeclaration
