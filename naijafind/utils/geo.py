"""
Geo helpers for the supplier radius search.
"""

import math

EARTH_RADIUS_KM = 6371


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_to(supplier, lat: float, lng: float) -> float:
    """Distance from a point to a supplier, inf when the supplier has no coordinates."""
    if supplier.latitude is None or supplier.longitude is None:
        return math.inf
    return haversine_km(lat, lng, supplier.latitude, supplier.longitude)
