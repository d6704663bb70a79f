"""Solar API: building insights and data layers."""
from gmp_tools.tools.endpoint import Endpoint, query_param

SOLAR_BASE_URL = "https://solar.googleapis.com/v1"

GET_BUILDING_INSIGHTS = Endpoint(
    name="get_building_insights",
    description="Get insights about a building based on its location.",
    method="GET",
    url=f"{SOLAR_BASE_URL}/buildingInsights:findClosest",
    params=(
        query_param("latitude", "number", "The latitude of the location.", required=True, wire_name="location.latitude"),
        query_param("longitude", "number", "The longitude of the location.", required=True, wire_name="location.longitude"),
    ),
    fixed_query=(("requiredQuality", "HIGH"),),
    error_context="fetching building insights",
    keywords=("solar", "building", "roof", "insights", "panels"),
)

GET_DATA_LAYERS = Endpoint(
    name="get_data_layers",
    description="Get data layers from the Google Maps Solar API.",
    method="GET",
    url=f"{SOLAR_BASE_URL}/dataLayers:get",
    params=(
        query_param("latitude", "number", "The latitude of the location.", required=True, wire_name="location.latitude"),
        query_param("longitude", "number", "The longitude of the location.", required=True, wire_name="location.longitude"),
        query_param("radiusMeters", "integer", "The radius in meters for the data layers.", default=100),
        query_param("view", "string", "The view type for the data layers.", default="FULL_LAYERS"),
        query_param("requiredQuality", "string", "The required quality of the data.", default="HIGH"),
        query_param("pixelSizeMeters", "number", "The pixel size in meters for the data layers.", default=0.5),
    ),
    error_context="getting data layers",
    keywords=("solar", "data", "layers", "flux", "roof"),
)

ENDPOINTS = (GET_BUILDING_INSIGHTS, GET_DATA_LAYERS)
