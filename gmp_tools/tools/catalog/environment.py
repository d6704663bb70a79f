"""Pollen and Weather APIs."""
from gmp_tools.tools.endpoint import (
    JSON_BODY_HEADERS,
    Endpoint,
    ResponseFormat,
    path_param,
    query_param,
)

POLLEN_BASE_URL = "https://pollen.googleapis.com/v1"

GET_FORECAST = Endpoint(
    name="get_forecast",
    description="Get pollen forecast based on location.",
    method="GET",
    url=f"{POLLEN_BASE_URL}/forecast:lookup",
    params=(
        query_param(
            "longitude", "number", "The longitude from which the API searches for pollen forecast data.",
            required=True, wire_name="location.longitude",
        ),
        query_param(
            "latitude", "number", "The latitude from which the API searches for pollen forecast data.",
            required=True, wire_name="location.latitude",
        ),
        query_param(
            "days", {"type": "integer", "minimum": 1, "maximum": 5},
            "The number of forecast days to request (minimum value 1, maximum value is 5).",
            required=True,
        ),
    ),
    headers=JSON_BODY_HEADERS,
    error_context="getting the pollen forecast",
    keywords=("pollen", "forecast", "allergy", "allergies"),
)

# Tiles are PNG images.
GET_HEATMAP_TILES = Endpoint(
    name="get_heatmap_tiles",
    description="Get heatmap tiles from Google Maps Platform.",
    method="GET",
    url=POLLEN_BASE_URL + "/mapTypes/{mapType}/heatmapTiles/{zoom}/{x}/{y}",
    params=(
        path_param("mapType", "string", 'The type of map to request (e.g., "GRASS_UPI").'),
        path_param("x", "integer", "The X coordinate of the tile."),
        path_param("y", "integer", "The Y coordinate of the tile."),
        path_param("zoom", "integer", "The zoom level for the tile."),
    ),
    response_format=ResponseFormat.BINARY,
    error_context="fetching heatmap tiles",
    keywords=("pollen", "heatmap", "tiles", "map"),
)

GET_HOURLY_WEATHER = Endpoint(
    name="get_hourly_weather",
    description="Retrieve hourly historical weather data from Google Maps Platform.",
    method="GET",
    url="https://weather.googleapis.com/v1/history/hours:lookup",
    params=(
        query_param("latitude", "number", "The latitude for the requested location.", required=True, wire_name="location.latitude"),
        query_param("longitude", "number", "The longitude for the requested location.", required=True, wire_name="location.longitude"),
        query_param("unitsSystem", "string", "The units system for the weather conditions.", default="METRIC", enum=["METRIC", "IMPERIAL"]),
        query_param("pageSize", "integer", "The maximum number of hourly records to return per page.", default=24),
        query_param("pageToken", "string", "A token received from a previous request for pagination."),
        query_param("hours", "integer", "Limits the total hours to fetch starting from the last hour.", default=24),
        query_param("languageCode", "string", "The language for the response.", default="en"),
    ),
    headers=JSON_BODY_HEADERS,
    error_context="retrieving weather data",
    keywords=("weather", "history", "hourly", "temperature", "rain"),
)

ENDPOINTS = (GET_FORECAST, GET_HEATMAP_TILES, GET_HOURLY_WEATHER)
