from .coordinates import haversine_km, EARTH_RADIUS_KM

__all__ = ["haversine_km", "EARTH_RADIUS_KM"]
