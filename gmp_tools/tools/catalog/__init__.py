"""Every Maps Platform endpoint exposed as a tool, grouped by upstream API."""
from gmp_tools.tools.catalog import (
    address_validation,
    aerial_view,
    environment,
    geocoding,
    places,
    routes,
    solar,
    street_view,
)

ALL_ENDPOINTS = (
    *routes.ENDPOINTS,
    *geocoding.ENDPOINTS,
    *places.ENDPOINTS,
    *street_view.ENDPOINTS,
    *address_validation.ENDPOINTS,
    *solar.ENDPOINTS,
    *aerial_view.ENDPOINTS,
    *environment.ENDPOINTS,
)

__all__ = ["ALL_ENDPOINTS"]
