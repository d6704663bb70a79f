"""Geocoding, Elevation and Geolocation APIs."""
from gmp_tools.tools.endpoint import (
    ACCEPT_JSON,
    JSON_BODY_HEADERS,
    Endpoint,
    body_param,
    query_param,
)

GEOCODE_ADDRESS = Endpoint(
    name="geocode_address",
    description="Geocode an address using the Google Maps Geocoding API.",
    method="GET",
    url="https://www.googleapis.com/maps/api/geocode/json",
    params=(
        query_param("address", "string", "The street address or plus code to geocode.", required=True),
        query_param("bounds", "string", "The bounding box of the viewport to bias geocode results."),
        query_param("components", "string", "A components filter for the geocoding request."),
        query_param("latlng", "string", "The latitude and longitude to reverse geocode."),
        query_param("place_id", "string", "A place ID to retrieve the address for."),
        query_param("language", "string", "The language in which to return results.", default="en"),
        query_param("region", "string", "The region code for the results.", default="en"),
    ),
    headers=ACCEPT_JSON,
    error_context="geocoding the address",
    keywords=("geocode", "address", "coordinates", "latitude", "longitude", "location"),
)

GET_ELEVATION = Endpoint(
    name="get_elevation",
    description="Get elevation data for specified locations from the Google Maps Elevation API.",
    method="GET",
    url="https://maps.googleapis.com/maps/api/elevation/json",
    params=(
        query_param(
            "locations", "string",
            "The locations for which to get elevation data, specified as latitude/longitude values.",
            required=True,
        ),
        query_param("path", "string", "A pipe-separated list of `latitude,longitude` strings for path elevation requests."),
        query_param(
            "samples", "integer",
            "Required if the path parameter is set, indicating the number of samples to return along the path.",
        ),
    ),
    headers=ACCEPT_JSON,
    error_context="fetching elevation data",
    keywords=("elevation", "altitude", "height", "terrain"),
)

_CELL_TOWER = {
    "type": "object",
    "properties": {
        "cellId": {"type": "integer"},
        "locationAreaCode": {"type": "integer"},
        "mobileCountryCode": {"type": "integer"},
        "mobileNetworkCode": {"type": "integer"},
        "age": {"type": "integer"},
        "signalStrength": {"type": "number"},
        "timingAdvance": {"type": "number"},
    },
    "required": ["cellId", "locationAreaCode", "mobileCountryCode", "mobileNetworkCode"],
}

_WIFI_ACCESS_POINT = {
    "type": "object",
    "properties": {
        "macAddress": {"type": "string"},
        "signalStrength": {"type": "integer"},
        "signalToNoiseRatio": {"type": "integer"},
        "age": {"type": "integer"},
        "channel": {"type": "integer"},
    },
    "required": ["macAddress", "signalStrength"],
}

GEOLOCATE = Endpoint(
    name="geolocate",
    description="Geolocate using the Google Maps Geolocation API.",
    method="POST",
    url="https://www.googleapis.com/geolocation/v1/geolocate",
    params=(
        body_param("considerIp", "boolean", "Whether to consider the IP address for geolocation.", default=False),
        body_param(
            "cellTowers", {"type": "array", "items": _CELL_TOWER},
            "An array of cell tower information.", required=True,
        ),
        body_param(
            "wifiAccessPoints", {"type": "array", "items": _WIFI_ACCESS_POINT},
            "An array of WiFi access point information.", required=True,
        ),
    ),
    headers={**JSON_BODY_HEADERS, **ACCEPT_JSON},
    error_context="geolocating",
    keywords=("geolocate", "geolocation", "wifi", "cell", "position", "location"),
)

ENDPOINTS = (GEOCODE_ADDRESS, GET_ELEVATION, GEOLOCATE)
