"""Street View Static API: images and panorama metadata."""
from gmp_tools.tools.endpoint import (
    ACCEPT_IMAGE,
    ACCEPT_JSON,
    Endpoint,
    ResponseFormat,
    query_param,
)

STREET_VIEW_URL = "https://www.googleapis.com/maps/api/streetview"

GET_STREET_VIEW = Endpoint(
    name="get_street_view",
    description="Retrieve a static Street View image from Google Maps API.",
    method="GET",
    url=STREET_VIEW_URL,
    params=(
        query_param("size", "string", "The output size of the image in pixels (format: {width}x{height}).", required=True),
        query_param("fov", "number", "The horizontal field of view of the image (max 120).", default=90),
        query_param("heading", "number", "The compass heading of the camera (0 to 360)."),
        query_param("location", "string", "The point around which to retrieve place information."),
        query_param("pano", "string", "A specific panorama ID."),
        query_param("pitch", "number", "The up or down angle of the camera."),
        query_param("radius", "number", "The radius in meters to search for a panorama.", default=50),
        query_param("return_error_code", "boolean", "Whether to return a non-200 HTTP status for errors."),
        query_param("signature", "string", "A digital signature for request verification."),
        query_param("source", "string", "Limits Street View searches to selected sources."),
    ),
    response_format=ResponseFormat.BINARY,
    headers=ACCEPT_IMAGE,
    error_context="retrieving the Street View image",
    keywords=("street", "view", "streetview", "image", "panorama"),
)

GET_STREET_VIEW_METADATA = Endpoint(
    name="get_street_view_metadata",
    description="Retrieve Street View metadata from Google Maps.",
    method="GET",
    url=f"{STREET_VIEW_URL}/metadata",
    params=(
        query_param("location", "string", "The point around which to retrieve place information.", required=True),
        query_param("heading", "number", "Indicates the compass heading of the camera."),
        query_param("pano", "string", "A specific panorama ID."),
        query_param("pitch", "number", "Specifies the up or down angle of the camera."),
        query_param("radius", "number", "Sets a radius in which to search for a panorama.", default=50),
        query_param(
            "return_error_code", "boolean",
            "Indicates whether to return a non `200 OK` HTTP status when no image is found.",
        ),
        query_param("signature", "string", "A digital signature used to verify the API key authorization."),
        query_param("size", "string", "Specifies the output size of the image in pixels."),
        query_param("source", "string", "Limits Street View searches to selected sources."),
    ),
    headers=ACCEPT_JSON,
    error_context="retrieving Street View metadata",
    keywords=("street", "view", "streetview", "metadata", "panorama"),
)

ENDPOINTS = (GET_STREET_VIEW, GET_STREET_VIEW_METADATA)
