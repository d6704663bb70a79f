from typing import Any, Callable, List, Optional

import httpx
import pytest
from structlog.testing import capture_logs

from gmp_tools.tools import GoogleMapsTools, MapsConfig

API_KEY = "test-key"

# Minimal valid arguments for every tool in the catalogue.
SAMPLE_ARGUMENTS = {
    "get_route": {"origin": {"address": "A"}, "destination": {"address": "B"}},
    "get_route_matrix": {
        "origins": [{"waypoint": {"address": "Toronto"}}],
        "destinations": [{"waypoint": {"address": "Montreal"}}],
    },
    "get_directions": {"origin": "Toronto", "destination": "Montreal"},
    "distance_matrix": {"origins": "Boston", "destinations": "New York"},
    "geocode_address": {"address": "1600 Amphitheatre Pkwy"},
    "get_elevation": {"locations": "39.7391536,-104.9847034"},
    "geolocate": {"cellTowers": [], "wifiAccessPoints": []},
    "autocomplete_places": {"input": "Pizza"},
    "query_autocomplete": {"input": "pizza near par"},
    "text_search_places": {"textQuery": "Spicy Vegetarian Food in Sydney"},
    "get_place_details": {"placeId": "ChIJj61dQgK6j4AR4GeTYWZsKWw"},
    "get_place_photo": {"photo_reference": "AUc7tXWr"},
    "compute_insights": {
        "insights": ["INSIGHT_COUNT"],
        "filter": {
            "locationFilter": {"region": {"place": "places/ChIJIQBpAG2ahYAR_6128GcTUEo"}},
            "typeFilter": {"includedTypes": ["restaurant"]},
        },
    },
    "get_street_view": {"size": "600x300", "location": "46.414382,10.013988"},
    "get_street_view_metadata": {"location": "46.414382,10.013988"},
    "validate_address": {
        "regionCode": "US",
        "locality": "Mountain View",
        "addressLines": ["1600 Amphitheatre Pkwy"],
    },
    "provide_validation_feedback": {"conclusion": "VALIDATED_VERSION_USED", "responseId": "resp-123"},
    "get_building_insights": {"latitude": 37.445, "longitude": -122.139},
    "get_data_layers": {"latitude": 37.445, "longitude": -122.139},
    "render_video": {"address": "600 Montgomery St, San Francisco, CA 94111"},
    "get_video": {"videoId": "video-1"},
    "get_forecast": {"latitude": 35.32, "longitude": 32.32, "days": 3},
    "get_heatmap_tiles": {"mapType": "TREE_UPI", "zoom": 2, "x": 1, "y": 3},
    "get_hourly_weather": {"latitude": 37.42, "longitude": -122.08},
}

# (method, host, path) each tool must hit for SAMPLE_ARGUMENTS.
EXPECTED_TARGETS = {
    "get_route": ("POST", "routes.googleapis.com", "/directions/v2:computeRoutes"),
    "get_route_matrix": ("POST", "routes.googleapis.com", "/distanceMatrix/v2:computeRouteMatrix"),
    "get_directions": ("GET", "www.googleapis.com", "/maps/api/directions/json"),
    "distance_matrix": ("GET", "maps.googleapis.com", "/maps/api/distancematrix/json"),
    "geocode_address": ("GET", "www.googleapis.com", "/maps/api/geocode/json"),
    "get_elevation": ("GET", "maps.googleapis.com", "/maps/api/elevation/json"),
    "geolocate": ("POST", "www.googleapis.com", "/geolocation/v1/geolocate"),
    "autocomplete_places": ("GET", "maps.googleapis.com", "/maps/api/place/autocomplete/json"),
    "query_autocomplete": ("GET", "www.googleapis.com", "/maps/api/place/queryautocomplete/json"),
    "text_search_places": ("POST", "places.googleapis.com", "/v1/places:searchText"),
    "get_place_details": ("GET", "places.googleapis.com", "/v1/places/ChIJj61dQgK6j4AR4GeTYWZsKWw"),
    "get_place_photo": ("GET", "maps.googleapis.com", "/maps/api/place/photo"),
    "compute_insights": ("POST", "areainsights.googleapis.com", "/v1:computeInsights"),
    "get_street_view": ("GET", "www.googleapis.com", "/maps/api/streetview"),
    "get_street_view_metadata": ("GET", "www.googleapis.com", "/maps/api/streetview/metadata"),
    "validate_address": ("POST", "addressvalidation.googleapis.com", "/v1:validateAddress"),
    "provide_validation_feedback": ("POST", "addressvalidation.googleapis.com", "/v1:provideValidationFeedback"),
    "get_building_insights": ("GET", "solar.googleapis.com", "/v1/buildingInsights:findClosest"),
    "get_data_layers": ("GET", "solar.googleapis.com", "/v1/dataLayers:get"),
    "render_video": ("POST", "aerialview.googleapis.com", "/v1/videos:renderVideo"),
    "get_video": ("GET", "aerialview.googleapis.com", "/v1/videos:lookupVideo"),
    "get_forecast": ("GET", "pollen.googleapis.com", "/v1/forecast:lookup"),
    "get_heatmap_tiles": ("GET", "pollen.googleapis.com", "/v1/mapTypes/TREE_UPI/heatmapTiles/2/1/3"),
    "get_hourly_weather": ("GET", "weather.googleapis.com", "/v1/history/hours:lookup"),
}

BINARY_TOOLS = {"get_place_photo", "get_street_view", "get_heatmap_tiles"}
HEADER_KEY_TOOLS = {"get_route", "get_route_matrix", "text_search_places", "get_place_details", "compute_insights"}


class Recorder:
    """MockTransport handler that records every request and answers with a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        *,
        json: Any = None,
        content: Optional[bytes] = None,
        error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.json = {"status": "OK"} if json is None and content is None else json
        self.content = content
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def log_events():
    with capture_logs() as events:
        yield events


@pytest.fixture
def maps_config() -> MapsConfig:
    return MapsConfig(api_key=API_KEY)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_tools(maps_config) -> Callable[[Recorder], GoogleMapsTools]:
    def factory(handler: Recorder) -> GoogleMapsTools:
        return GoogleMapsTools(maps_config, transport=httpx.MockTransport(handler))
    return factory


@pytest.fixture
def tools(make_tools, recorder) -> GoogleMapsTools:
    return make_tools(recorder)
