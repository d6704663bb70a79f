"""
Declarative description of one Google Maps Platform REST call.

An :class:`Endpoint` is a static value: the tool name and description shown to
the agent, the HTTP method and URL, the ordered parameters and where each one
travels (query string, JSON body or URL path), fixed headers and query values,
where the API key goes, and how the response body is decoded.

:meth:`Endpoint.build_request` is deterministic: the same arguments and key
always produce the same ``httpx.Request``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

import httpx

from gmp_tools.tools.models import FunctionDeclaration, ToolDeclaration

API_KEY_HEADER = "X-Goog-Api-Key"
FIELD_MASK_HEADER = "X-Goog-FieldMask"

JSON_BODY_HEADERS = {"Content-Type": "application/json"}
ACCEPT_JSON = {"Accept": "application/json"}
ACCEPT_IMAGE = {"Accept": "image/*"}
ALL_FIELDS = {FIELD_MASK_HEADER: "*"}


class Location(str, Enum):
    QUERY = "query"
    BODY = "body"
    PATH = "path"


class KeyPlacement(str, Enum):
    QUERY = "query"
    HEADER = "header"


class ResponseFormat(str, Enum):
    JSON = "json"
    BINARY = "binary"


@dataclass(frozen=True)
class Param:
    """
    One declared argument.

    ``wire_name`` renames the argument on the wire. In the query string it is
    used verbatim (``location.latitude``); in a JSON body each dot opens a
    nested object (``address.regionCode`` -> ``{"address": {"regionCode": ...}}``).
    ``default`` is applied only when the caller leaves the argument out.
    """

    name: str
    schema: Mapping[str, Any]
    required: bool = False
    default: Any = None
    location: Location = Location.QUERY
    wire_name: Optional[str] = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name


def _schema(schema: Union[str, Mapping[str, Any]], description: Optional[str], enum: Optional[List[Any]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": schema} if isinstance(schema, str) else dict(schema)
    if enum is not None:
        out["enum"] = list(enum)
    if description is not None:
        out["description"] = description
    return out


def query_param(
    name: str,
    schema: Union[str, Mapping[str, Any]],
    description: Optional[str] = None,
    *,
    required: bool = False,
    default: Any = None,
    enum: Optional[List[Any]] = None,
    wire_name: Optional[str] = None,
) -> Param:
    return Param(name, _schema(schema, description, enum), required, default, Location.QUERY, wire_name)


def body_param(
    name: str,
    schema: Union[str, Mapping[str, Any]],
    description: Optional[str] = None,
    *,
    required: bool = False,
    default: Any = None,
    enum: Optional[List[Any]] = None,
    wire_name: Optional[str] = None,
) -> Param:
    return Param(name, _schema(schema, description, enum), required, default, Location.BODY, wire_name)


def path_param(name: str, schema: Union[str, Mapping[str, Any]], description: Optional[str] = None) -> Param:
    return Param(name, _schema(schema, description, None), True, None, Location.PATH)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def _assign(body: Dict[str, Any], dotted: str, value: Any) -> None:
    *parents, leaf = dotted.split(".")
    node = body
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = value


@dataclass(frozen=True)
class Endpoint:
    """Static configuration of one tool adapter."""

    name: str
    description: str
    method: str
    url: str
    params: Tuple[Param, ...] = ()
    key_placement: KeyPlacement = KeyPlacement.QUERY
    response_format: ResponseFormat = ResponseFormat.JSON
    headers: Mapping[str, str] = field(default_factory=dict)
    fixed_query: Tuple[Tuple[str, str], ...] = ()
    error_context: str = "calling the Google Maps Platform API"
    keywords: Tuple[str, ...] = ()

    @property
    def is_binary(self) -> bool:
        return self.response_format is ResponseFormat.BINARY

    def parameters_schema(self) -> Dict[str, Any]:
        """JSON Schema object for the declared arguments."""
        return {
            "type": "object",
            "properties": {p.name: dict(p.schema) for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }

    def declaration(self) -> ToolDeclaration:
        return ToolDeclaration(
            function=FunctionDeclaration(
                name=self.name,
                description=self.description,
                parameters=self.parameters_schema(),
            )
        )

    def build_request(self, arguments: Mapping[str, Any], api_key: str) -> httpx.Request:
        """
        Map invocation arguments onto a single upstream request.

        Absent optional arguments are left out entirely. In the query string
        ``False`` and ``""`` count as absent, so flags are only sent when set
        and ``0`` is still sent. In a JSON body only ``None`` is dropped.

        Raises:
            KeyError: if a path segment argument is missing.
        """
        query: List[Tuple[str, str]] = []
        body: Dict[str, Any] = {}
        segments: Dict[str, str] = {}

        for param in self.params:
            value = arguments.get(param.name)
            if value is None:
                value = param.default

            if param.location is Location.PATH:
                if value is None:
                    raise KeyError(f"missing path argument '{param.name}'")
                segments[param.name] = quote(_query_value(value), safe="")
            elif param.location is Location.QUERY:
                if value is None or value is False or value == "":
                    continue
                query.append((param.key, _query_value(value)))
            elif value is not None:
                _assign(body, param.key, value)

        query.extend(self.fixed_query)

        headers = dict(self.headers)
        if self.key_placement is KeyPlacement.QUERY:
            query.append(("key", api_key))
        else:
            headers[API_KEY_HEADER] = api_key

        content = None
        if self.method == "POST":
            content = json.dumps(body, separators=(",", ":")).encode("utf-8")

        return httpx.Request(
            self.method,
            self.url.format(**segments),
            params=query,
            headers=headers,
            content=content,
        )
