# flightlogger/airports/utils/coordinates.py
"""
Great-circle distance on a spherical Earth. Works element-wise on numpy
arrays so a whole airport table can be measured in one call.
"""
import numpy as np

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1, lon1, lat2, lon2, radius_km: float = EARTH_RADIUS_KM):
    """Calculates the Haversine distance between two points (or arrays of points) in kilometers."""
    d_lat = np.radians(np.subtract(lat2, lat1))
    d_lon = np.radians(np.subtract(lon2, lon1))
    a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2)**2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return radius_km * c
