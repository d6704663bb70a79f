"""Abstract contracts for tools and tool providers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ToolBase(ABC):
    """A single capability a tool-calling agent can discover and invoke."""

    def __init__(self, id: str):
        self.id = id

    @abstractmethod
    def get_summary(self) -> str:
        """One-line description used for tool selection."""
        raise NotImplementedError

    @abstractmethod
    def get_details(self) -> str:
        """Full, human-readable description of the tool."""
        raise NotImplementedError

    @abstractmethod
    def get_parameters(self) -> Dict[str, Any]:
        """JSON Schema describing the invocation arguments."""
        raise NotImplementedError


class JustInTimeToolingBase(ABC):
    """Abstract contract for a tool-providing backend."""

    @abstractmethod
    def search(self, query: str, *, top_k: int = 10) -> List[ToolBase]:
        """Search for tools matching a natural language query."""
        raise NotImplementedError

    @abstractmethod
    def load(self, tool: ToolBase) -> ToolBase:
        """Load the full declaration for a tool."""
        raise NotImplementedError

    @abstractmethod
    def execute(self, tool: ToolBase, parameters: Dict[str, Any]) -> Any:
        """Execute a tool with the given parameters."""
        raise NotImplementedError
