"""Aerial View API: render and look up flyover videos."""
from gmp_tools.tools.endpoint import JSON_BODY_HEADERS, Endpoint, body_param, query_param

AERIAL_VIEW_BASE_URL = "https://aerialview.googleapis.com/v1"

RENDER_VIDEO = Endpoint(
    name="render_video",
    description="Render a video for a specified address using the Google Maps Platform.",
    method="POST",
    url=f"{AERIAL_VIEW_BASE_URL}/videos:renderVideo",
    params=(
        body_param("address", "string", "The postal address for which the aerial view video is requested.", required=True),
    ),
    headers=JSON_BODY_HEADERS,
    error_context="rendering the video",
    keywords=("aerial", "video", "render", "flyover"),
)

GET_VIDEO = Endpoint(
    name="get_video",
    description="Retrieve video URIs from the Google Aerial View API.",
    method="GET",
    url=f"{AERIAL_VIEW_BASE_URL}/videos:lookupVideo",
    params=(query_param("videoId", "string", "The ID of the video to look up.", required=True),),
    headers=JSON_BODY_HEADERS,
    error_context="retrieving the video",
    keywords=("aerial", "video", "lookup", "flyover"),
)

ENDPOINTS = (RENDER_VIDEO, GET_VIDEO)
