"""
Google Maps Platform endpoints exposed through the just-in-time tooling contract.
"""
from __future__ import annotations

import asyncio
import json
import re
from typing import Any, Dict, Iterable, List, Optional

import httpx
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from gmp_tools.tools.base import JustInTimeToolingBase, ToolBase
from gmp_tools.tools.catalog import ALL_ENDPOINTS
from gmp_tools.tools.config import MapsConfig
from gmp_tools.tools.endpoint import Endpoint
from gmp_tools.tools.exceptions import ToolNotFoundError, ToolValidationError
from gmp_tools.tools.executor import AdapterExecutor
from gmp_tools.utils.logger import get_logger, trace_method

logger = get_logger(__name__)

_WORD_RE = re.compile(r"[a-z0-9_]+")


class MapsTool(ToolBase):
    """One Maps Platform adapter: a declaration plus an async executable."""

    def __init__(self, endpoint: Endpoint, executor: AdapterExecutor):
        super().__init__(endpoint.name)
        self.endpoint = endpoint
        self.name = endpoint.name
        self.description = endpoint.description
        self._executor = executor
        self._validator = Draft202012Validator(endpoint.parameters_schema())

    def __str__(self) -> str:
        return f"MapsTool({self.id}, {self.endpoint.method} {self.endpoint.url})"

    def get_summary(self) -> str:
        return f"{self.id}: {self.description}"

    def get_details(self) -> str:
        return json.dumps(self.declaration(), indent=4)

    def get_parameters(self) -> Dict[str, Any]:
        return self.endpoint.parameters_schema()

    def get_keywords(self) -> List[str]:
        return list(self.endpoint.keywords)

    def declaration(self) -> Dict[str, Any]:
        """`{"type": "function", "function": {...}}` for tool-calling frameworks."""
        return self.endpoint.declaration().model_dump()

    def validate(self, parameters: Dict[str, Any]) -> None:
        """
        Check arguments against the declared schema.

        Raises:
            ToolValidationError: on the first schema violation found.
        """
        error = best_match(self._validator.iter_errors(parameters))
        if error is not None:
            raise ToolValidationError(error.message, tool_id=self.id, path=list(error.path))

    async def __call__(self, parameters: Dict[str, Any]) -> Any:
        return await self._executor.invoke(self.endpoint, parameters)


class GoogleMapsTools(JustInTimeToolingBase):
    """
    Provider over the Maps Platform endpoint catalogue.

    Every tool shares one explicit :class:`MapsConfig`. When none is given the
    API key is read from ``GOOGLE_MAPS_PLATFORM_API_KEY``.
    """

    def __init__(
        self,
        config: Optional[MapsConfig] = None,
        *,
        endpoints: Optional[Iterable[Endpoint]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or MapsConfig.from_env()
        executor = AdapterExecutor(self.config, transport=transport)
        self._tools: Dict[str, MapsTool] = {}
        for endpoint in ALL_ENDPOINTS if endpoints is None else endpoints:
            if endpoint.name in self._tools:
                raise ValueError(f"Duplicate tool name '{endpoint.name}'")
            self._tools[endpoint.name] = MapsTool(endpoint, executor)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    @property
    def tools(self) -> List[MapsTool]:
        return list(self._tools.values())

    def get(self, name: str) -> MapsTool:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError("Requested tool is not registered", tool_id=name) from None

    def get_declarations(self) -> List[Dict[str, Any]]:
        return [tool.declaration() for tool in self._tools.values()]

    def search(self, query: str, *, top_k: int = 10) -> List[ToolBase]:
        logger.info("tool_search", query=query, top_k=top_k)
        query_lower = query.lower()
        # Skip short filler words ("a", "of", "to") that match every summary.
        words = {w for w in _WORD_RE.findall(query_lower) if len(w) > 2}
        results = []
        for tool in self._tools.values():
            summary_words = set(_WORD_RE.findall(tool.get_summary().lower()))
            if (
                tool.id in query_lower
                or words & set(tool.get_keywords())
                or words & summary_words
            ):
                results.append(tool)
        return results[:top_k]

    @trace_method
    def load(self, tool: ToolBase) -> MapsTool:
        return self.get(tool.id)

    def _resolve(self, tool: ToolBase | str) -> MapsTool:
        return self.get(tool if isinstance(tool, str) else tool.id)

    async def aexecute(self, tool: ToolBase | str, parameters: Dict[str, Any]) -> Any:
        """
        Validate then run one adapter.

        Raises:
            ToolNotFoundError: for an unknown tool.
            ToolValidationError: when the arguments break the declared schema.
        """
        maps_tool = self._resolve(tool)
        maps_tool.validate(parameters)
        logger.info("tool_execute", tool_id=maps_tool.id, param_count=len(parameters))
        return await maps_tool(parameters)

    def execute(self, tool: ToolBase | str, parameters: Dict[str, Any]) -> Any:
        return asyncio.run(self.aexecute(tool, parameters))


__all__ = ["GoogleMapsTools", "MapsTool"]
