from gmp_tools.tools.config import MapsConfig
from gmp_tools.tools.google_maps import GoogleMapsTools, MapsTool

__all__ = ["GoogleMapsTools", "MapsConfig", "MapsTool"]
