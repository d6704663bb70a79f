"""Routes API (v2) and the classic Directions / Distance Matrix web services."""
from gmp_tools.tools.endpoint import (
    ACCEPT_JSON,
    ALL_FIELDS,
    JSON_BODY_HEADERS,
    Endpoint,
    KeyPlacement,
    body_param,
    query_param,
)

ROUTES_BASE_URL = "https://routes.googleapis.com"


def _address_waypoint(description: str) -> dict:
    return {
        "type": "object",
        "properties": {"address": {"type": "string", "description": description}},
        "required": ["address"],
    }


GET_ROUTE = Endpoint(
    name="get_route",
    description="Get a route between an origin and a destination.",
    method="POST",
    url=f"{ROUTES_BASE_URL}/directions/v2:computeRoutes",
    params=(
        body_param("origin", _address_waypoint("The starting address for the route."), required=True),
        body_param("destination", _address_waypoint("The ending address for the route."), required=True),
    ),
    key_placement=KeyPlacement.HEADER,
    headers={**ALL_FIELDS, **JSON_BODY_HEADERS},
    error_context="getting the route",
    keywords=("route", "routes", "navigation", "drive", "travel"),
)

GET_ROUTE_MATRIX = Endpoint(
    name="get_route_matrix",
    description="Get a route matrix from the Google Maps API.",
    method="POST",
    url=f"{ROUTES_BASE_URL}/distanceMatrix/v2:computeRouteMatrix",
    params=(
        body_param(
            "origins",
            {"type": "array", "items": {"type": "object"}},
            "An array of origin waypoints with latitude and longitude.",
            required=True,
        ),
        body_param(
            "destinations",
            {"type": "array", "items": {"type": "object"}},
            "An array of destination waypoints with latitude and longitude.",
            required=True,
        ),
        body_param(
            "travelMode", "string", "The mode of travel.",
            default="DRIVE", enum=["DRIVE", "WALK", "BICYCLING", "TRANSIT"],
        ),
        body_param(
            "routingPreference", "string", "The routing preference.",
            default="TRAFFIC_AWARE", enum=["TRAFFIC_AWARE", "LESS_TRAFFIC"],
        ),
    ),
    key_placement=KeyPlacement.HEADER,
    headers={**ALL_FIELDS, **JSON_BODY_HEADERS},
    error_context="getting the route matrix",
    keywords=("route", "matrix", "distance", "duration", "travel"),
)

GET_DIRECTIONS = Endpoint(
    name="get_directions",
    description="Get directions between two locations using the Google Maps Directions API.",
    method="GET",
    url="https://www.googleapis.com/maps/api/directions/json",
    params=(
        query_param("origin", "string", "The starting point for the directions (place ID, address, or lat/lng).", required=True),
        query_param("destination", "string", "The endpoint for the directions (place ID, address, or lat/lng).", required=True),
        query_param("mode", "string", "The mode of transportation.", default="driving", enum=["driving", "walking", "bicycling", "transit"]),
        query_param("language", "string", "The language of the results.", default="en"),
        query_param("units", "string", "The unit system for displaying results.", default="metric", enum=["metric", "imperial"]),
        query_param("departure_time", "number", "The desired departure time in seconds since epoch."),
        query_param("arrival_time", "number", "The desired arrival time in seconds since epoch."),
        query_param("alternatives", "boolean", "Whether to return alternative routes."),
        query_param("avoid", "string", "Features to avoid (e.g., tolls, highways)."),
        query_param("waypoints", "string", "Intermediate locations to include along the route."),
        query_param("region", "string", "The region code for the results."),
        query_param("traffic_model", "string", "Assumptions for calculating time in traffic.", default="best_guess"),
    ),
    headers=ACCEPT_JSON,
    error_context="fetching directions",
    keywords=("directions", "route", "navigation", "travel", "transit"),
)

DISTANCE_MATRIX = Endpoint(
    name="distance_matrix",
    description="Calculate the distance matrix using Google Maps Distance Matrix API.",
    method="GET",
    url="https://maps.googleapis.com/maps/api/distancematrix/json",
    params=(
        query_param("origins", "string", "The starting point(s) for calculating travel distance and time.", required=True),
        query_param("destinations", "string", "The finishing point(s) for calculating travel distance and time.", required=True),
        query_param(
            "mode", "string", "The transportation mode to use for the calculation.",
            default="driving", enum=["driving", "walking", "bicycling", "transit"],
        ),
        query_param("units", "string", "The unit system to use when displaying results.", default="metric"),
        query_param("language", "string", "The language in which to return results.", default="en"),
        query_param("departure_time", "number", "The desired time of departure."),
        query_param("arrival_time", "number", "The desired time of arrival."),
        query_param("avoid", "string", "Restrictions to avoid certain routes."),
        query_param("region", "string", "The region code for the results.", default="en"),
        query_param("traffic_model", "string", "Assumptions to use when calculating time in traffic.", default="best_guess"),
        query_param("transit_mode", "string", "Preferred modes of transit for transit directions."),
        query_param("transit_routing_preference", "string", "Preferences for transit routes."),
    ),
    headers=ACCEPT_JSON,
    error_context="calculating the distance matrix",
    keywords=("distance", "matrix", "duration", "travel", "time"),
)

ENDPOINTS = (GET_ROUTE, GET_ROUTE_MATRIX, GET_DIRECTIONS, DISTANCE_MATRIX)
