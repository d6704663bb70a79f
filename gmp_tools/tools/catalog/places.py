"""Places API: autocomplete, text search, details, photos and area insights."""
from gmp_tools.tools.endpoint import (
    ACCEPT_IMAGE,
    ACCEPT_JSON,
    ALL_FIELDS,
    JSON_BODY_HEADERS,
    Endpoint,
    KeyPlacement,
    ResponseFormat,
    body_param,
    path_param,
    query_param,
)

PLACES_BASE_URL = "https://places.googleapis.com/v1"

AUTOCOMPLETE_PLACES = Endpoint(
    name="autocomplete_places",
    description="Perform place autocomplete using Google Maps API.",
    method="GET",
    url="https://maps.googleapis.com/maps/api/place/autocomplete/json",
    params=(
        query_param("input", "string", "The text string on which to search.", required=True),
        query_param("sessiontoken", "string", "A random string identifying an autocomplete session."),
        query_param("components", "string", "A grouping of places to restrict results."),
        query_param("strictbounds", "boolean", "Returns only places strictly within the defined region."),
        query_param("offset", "integer", "The position of the last character used for matching."),
        query_param("origin", "string", "The origin point for calculating distance to the destination."),
        query_param("location", "string", "The point around which to retrieve place information."),
        query_param("radius", "integer", "The distance within which to return place results."),
        query_param("types", "string", "Restricts results to a certain type."),
        query_param("language", "string", "The language in which to return results.", default="en"),
        query_param("region", "string", "The region code for filtering results.", default="en"),
    ),
    headers=ACCEPT_JSON,
    error_context="performing autocomplete",
    keywords=("autocomplete", "places", "suggestions", "search", "predictions"),
)

QUERY_AUTOCOMPLETE = Endpoint(
    name="query_autocomplete",
    description="Query autocomplete suggestions from the Google Maps API.",
    method="GET",
    url="https://www.googleapis.com/maps/api/place/queryautocomplete/json",
    params=(
        query_param("input", "string", "The text string on which to search.", required=True),
        query_param("offset", "integer", "The position of the last character that the service uses to match predictions."),
        query_param(
            "location", "string",
            "The point around which to retrieve place information, specified as latitude,longitude.",
        ),
        query_param("radius", "integer", "Defines the distance (in meters) within which to return place results."),
        query_param("language", "string", "The language in which to return results.", default="en"),
    ),
    headers=ACCEPT_JSON,
    error_context="querying autocomplete",
    keywords=("autocomplete", "query", "suggestions", "predictions"),
)

TEXT_SEARCH_PLACES = Endpoint(
    name="text_search_places",
    description="Perform a text search for places using the Google Maps Places API.",
    method="POST",
    url=f"{PLACES_BASE_URL}/places:searchText",
    params=(
        body_param("textQuery", "string", "The text query to search for places.", required=True),
        body_param("includedType", "string", "Optional type to include in the search."),
        body_param("languageCode", "string", "Optional language code for the search."),
        body_param("locationBias", "object", "Optional location bias for the search."),
        body_param("locationRestriction", "object", "Optional location restriction for the search."),
        body_param("evOptions", "object", "Optional options for electric vehicle charging stations."),
        body_param("minRating", "number", "Optional minimum rating for the places."),
        body_param("openNow", "boolean", "Optional flag to filter for places that are currently open."),
        body_param("pageSize", "integer", "Optional number of results to return per page."),
        body_param("pageToken", "string", "Optional token for pagination."),
        body_param(
            "priceLevels", {"type": "array", "items": {"type": "string"}},
            "Optional array of price levels to filter by.",
        ),
        body_param("rankPreference", "string", "Optional preference for ranking results."),
        body_param("regionCode", "string", "Optional region code for the search."),
        body_param("strictTypeFiltering", "boolean", "Optional flag for strict type filtering."),
    ),
    key_placement=KeyPlacement.HEADER,
    headers={**JSON_BODY_HEADERS, **ALL_FIELDS},
    error_context="performing the text search",
    keywords=("search", "places", "text", "restaurants", "find", "nearby"),
)

GET_PLACE_DETAILS = Endpoint(
    name="get_place_details",
    description="Get details of a place using its place ID.",
    method="GET",
    url=PLACES_BASE_URL + "/places/{placeId}",
    params=(
        path_param("placeId", "string", "The place ID for which to retrieve details."),
        query_param("languageCode", "string", "The language in which to return results."),
        query_param("regionCode", "string", "The region code used to format the response."),
        query_param("sessionToken", "string", "Session token for tracking autocomplete sessions."),
    ),
    key_placement=KeyPlacement.HEADER,
    headers={**ALL_FIELDS, **JSON_BODY_HEADERS},
    error_context="getting place details",
    keywords=("place", "details", "reviews", "hours", "phone", "website"),
)

GET_PLACE_PHOTO = Endpoint(
    name="get_place_photo",
    description="Retrieve a place photo from the Google Maps API.",
    method="GET",
    url="https://maps.googleapis.com/maps/api/place/photo",
    params=(
        query_param("photo_reference", "string", "A string identifier that uniquely identifies a photo.", required=True),
        query_param("maxheight", "integer", "Specifies the maximum desired height, in pixels, of the image."),
        query_param("maxwidth", "integer", "Specifies the maximum desired width, in pixels, of the image."),
    ),
    response_format=ResponseFormat.BINARY,
    headers=ACCEPT_IMAGE,
    error_context="retrieving the place photo",
    keywords=("photo", "image", "picture", "place"),
)

_LOCATION_FILTER = {
    "type": "object",
    "description": "The location filter for the insights.",
    "properties": {
        "circle": {
            "type": "object",
            "properties": {
                "latLng": {
                    "type": "object",
                    "properties": {
                        "latitude": {"type": "number", "description": "Latitude of the center point."},
                        "longitude": {"type": "number", "description": "Longitude of the center point."},
                    },
                    "required": ["latitude", "longitude"],
                },
                "place": {"type": "string", "description": "Place resource name used as the center point."},
                "radius": {"type": "number", "description": "Radius in meters."},
            },
            "required": ["radius"],
        },
        "region": {"type": "object", "description": "A region such as a locality or postal code."},
        "customArea": {"type": "object", "description": "A custom polygon area."},
    },
}

_TYPE_FILTER = {
    "type": "object",
    "description": "The type filter for the insights.",
    "properties": {
        "includedTypes": {"type": "array", "items": {"type": "string"}, "description": "Types to include."},
        "excludedTypes": {"type": "array", "items": {"type": "string"}, "description": "Types to exclude."},
        "includedPrimaryTypes": {"type": "array", "items": {"type": "string"}, "description": "Primary types to include."},
        "excludedPrimaryTypes": {"type": "array", "items": {"type": "string"}, "description": "Primary types to exclude."},
    },
}

COMPUTE_INSIGHTS = Endpoint(
    name="compute_insights",
    description="Compute insights about areas using the Google Maps Places Aggregate API.",
    method="POST",
    url="https://areainsights.googleapis.com/v1:computeInsights",
    params=(
        body_param(
            "insights",
            {"type": "array", "items": {"type": "string", "enum": ["INSIGHT_COUNT", "INSIGHT_PLACES"]}},
            "The types of insights to retrieve.",
            required=True,
        ),
        body_param(
            "filter",
            {
                "type": "object",
                "properties": {"locationFilter": _LOCATION_FILTER, "typeFilter": _TYPE_FILTER},
                "required": ["locationFilter", "typeFilter"],
            },
            "Location and type filters selecting the places to aggregate.",
            required=True,
        ),
    ),
    key_placement=KeyPlacement.HEADER,
    headers=JSON_BODY_HEADERS,
    error_context="computing insights",
    keywords=("insights", "aggregate", "count", "area", "places"),
)

ENDPOINTS = (
    AUTOCOMPLETE_PLACES,
    QUERY_AUTOCOMPLETE,
    TEXT_SEARCH_PLACES,
    GET_PLACE_DETAILS,
    GET_PLACE_PHOTO,
    COMPUTE_INSIGHTS,
)
