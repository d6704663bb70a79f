import asyncio
import json

import httpx
import pytest

from gmp_tools.tools import GoogleMapsTools, MapsConfig, MapsTool
from gmp_tools.tools.catalog.geocoding import GEOCODE_ADDRESS
from gmp_tools.tools.endpoint import API_KEY_HEADER
from gmp_tools.tools.exceptions import (
    ToolCredentialsMissingError,
    ToolNotFoundError,
    ToolValidationError,
)
from tests.conftest import (
    API_KEY,
    BINARY_TOOLS,
    EXPECTED_TARGETS,
    HEADER_KEY_TOOLS,
    SAMPLE_ARGUMENTS,
    Recorder,
)


# ---------------------------------------------------------------------------
# Every tool end to end against a mock transport
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", sorted(SAMPLE_ARGUMENTS))
def test_every_tool_issues_one_request_to_its_endpoint(make_tools, name):
    handler = Recorder(content=b"\x89PNG") if name in BINARY_TOOLS else Recorder(json={"ok": name})
    tools = make_tools(handler)

    result = tools.execute(name, SAMPLE_ARGUMENTS[name])

    assert len(handler.requests) == 1
    request = handler.last
    method, host, path = EXPECTED_TARGETS[name]
    assert (request.method, request.url.host, request.url.path) == (method, host, path)

    if name in HEADER_KEY_TOOLS:
        assert request.headers[API_KEY_HEADER] == API_KEY
        assert "key" not in request.url.params
    else:
        assert request.url.params["key"] == API_KEY
        assert API_KEY_HEADER not in request.headers

    if name in BINARY_TOOLS:
        assert result == b"\x89PNG"
    else:
        assert result == {"ok": name}


@pytest.mark.parametrize("name", sorted(SAMPLE_ARGUMENTS))
def test_every_tool_folds_upstream_failure_into_envelope(make_tools, name):
    handler = Recorder(500, content=b"oops") if name in BINARY_TOOLS else Recorder(500, json={"error": "oops"})
    result = make_tools(handler).execute(name, SAMPLE_ARGUMENTS[name])

    assert set(result) == {"error"}
    assert result["error"].startswith("An error occurred while ")


def test_post_body_is_compact_json(tools, recorder):
    tools.execute("get_route", SAMPLE_ARGUMENTS["get_route"])
    assert recorder.last.content == b'{"origin":{"address":"A"},"destination":{"address":"B"}}'


def test_validate_address_body_is_nested(tools, recorder):
    tools.execute("validate_address", SAMPLE_ARGUMENTS["validate_address"])
    assert json.loads(recorder.last.content) == {
        "address": {
            "regionCode": "US",
            "locality": "Mountain View",
            "addressLines": ["1600 Amphitheatre Pkwy"],
        }
    }


def test_concurrent_invocations_are_independent(tools, recorder):
    async def run_all():
        return await asyncio.gather(
            tools.aexecute("geocode_address", {"address": "first"}),
            tools.aexecute("geocode_address", {"address": "second"}),
            tools.aexecute("get_elevation", {"locations": "1,2"}),
        )

    results = asyncio.run(run_all())

    assert results == [{"status": "OK"}] * 3
    assert len(recorder.requests) == 3
    addresses = {r.url.params.get("address") for r in recorder.requests}
    assert {"first", "second"} <= addresses


# ---------------------------------------------------------------------------
# Validation and lookup
# ---------------------------------------------------------------------------

def test_missing_required_argument_raises_without_request(tools, recorder):
    with pytest.raises(ToolValidationError) as exc_info:
        tools.execute("geocode_address", {})

    assert exc_info.value.tool_id == "geocode_address"
    assert "address" in str(exc_info.value)
    assert recorder.requests == []


def test_wrong_type_raises_validation_error(tools, recorder):
    with pytest.raises(ToolValidationError) as exc_info:
        tools.execute("get_forecast", {"latitude": "north", "longitude": 1.0, "days": 2})
    assert exc_info.value.path == ["latitude"]
    assert recorder.requests == []


def test_out_of_range_days_rejected(tools):
    with pytest.raises(ToolValidationError):
        tools.execute("get_forecast", {"latitude": 1.0, "longitude": 1.0, "days": 9})


def test_enum_violation_rejected(tools):
    with pytest.raises(ToolValidationError):
        tools.execute("get_directions", {"origin": "A", "destination": "B", "mode": "teleport"})


def test_unknown_tool_raises_not_found(tools):
    with pytest.raises(ToolNotFoundError) as exc_info:
        tools.execute("launch_rocket", {})
    assert exc_info.value.tool_id == "launch_rocket"


def test_get_and_membership(tools):
    assert len(tools) == 24
    assert "geocode_address" in tools
    assert "launch_rocket" not in tools
    tool = tools.get("geocode_address")
    assert isinstance(tool, MapsTool)
    assert tool.endpoint is GEOCODE_ADDRESS


def test_duplicate_endpoint_names_rejected(maps_config):
    with pytest.raises(ValueError):
        GoogleMapsTools(maps_config, endpoints=[GEOCODE_ADDRESS, GEOCODE_ADDRESS])


def test_custom_endpoint_subset(maps_config):
    tools = GoogleMapsTools(maps_config, endpoints=[GEOCODE_ADDRESS])
    assert len(tools) == 1
    assert [t.id for t in tools.tools] == ["geocode_address"]


def test_missing_api_key_env_raises(monkeypatch):
    monkeypatch.delenv("GOOGLE_MAPS_PLATFORM_API_KEY", raising=False)
    with pytest.raises(ToolCredentialsMissingError):
        GoogleMapsTools()


def test_config_read_from_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_PLATFORM_API_KEY", "env-key")
    tools = GoogleMapsTools(transport=httpx.MockTransport(Recorder()))
    assert tools.config == MapsConfig(api_key="env-key")


# ---------------------------------------------------------------------------
# Search, load and declarations
# ---------------------------------------------------------------------------

def test_search_matches_keywords(tools):
    names = [t.id for t in tools.search("pollen forecast tomorrow")]
    assert "get_forecast" in names
    assert "geocode_address" not in names


def test_search_matches_tool_id(tools):
    names = [t.id for t in tools.search("use get_street_view_metadata please")]
    assert "get_street_view_metadata" in names


def test_search_respects_top_k(tools):
    assert len(tools.search("places route address street view", top_k=3)) == 3


def test_search_logs_query(tools, log_events):
    tools.search("elevation")
    assert any(e["event"] == "tool_search" and e["query"] == "elevation" for e in log_events)


def test_search_with_no_match_returns_empty(tools):
    assert tools.search("xylophone") == []


def test_load_returns_registered_tool(tools):
    found = tools.search("elevation")[0]
    loaded = tools.load(found)
    assert loaded is tools.get(found.id)
    assert "elevation" in loaded.get_summary().lower()


def test_execute_accepts_tool_object(tools, recorder):
    tool = tools.get("get_elevation")
    assert tools.execute(tool, {"locations": "1,2"}) == {"status": "OK"}
    assert recorder.last.url.params["locations"] == "1,2"


def test_execute_logs_tool_id(tools, log_events):
    tools.execute("get_elevation", {"locations": "1,2"})
    executes = [e for e in log_events if e["event"] == "tool_execute"]
    assert len(executes) == 1
    assert executes[0]["log_level"] == "info"
    assert executes[0]["tool_id"] == "get_elevation"
    assert executes[0]["param_count"] == 1


def test_declarations_are_function_shaped(tools):
    declarations = tools.get_declarations()
    assert len(declarations) == 24
    first = declarations[0]
    assert first["type"] == "function"
    assert first["function"]["name"] == "get_route"
    assert first["function"]["parameters"]["required"] == ["origin", "destination"]


def test_tool_details_and_parameters(tools):
    tool = tools.get("get_place_photo")
    details = json.loads(tool.get_details())
    assert details["function"]["name"] == "get_place_photo"
    assert tool.get_parameters()["required"] == ["photo_reference"]
    assert "photo" in tool.get_keywords()
    assert str(tool).startswith("MapsTool(get_place_photo, GET https://maps.googleapis.com")
