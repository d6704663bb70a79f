"""Google Maps Platform REST endpoints exposed as agent tools."""
