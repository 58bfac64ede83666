"""
Geometry utilities for geographic navigation
"""

from .haversine import (
    calculate_distance,
    calculate_azimuth,
    distance_between,
    azimuth_between,
)

from .coordinate_transform import (
    longitude_to_epsg3857,
    latitude_to_epsg3857,
    epsg3857_to_longitude,
    epsg3857_to_latitude,
    to_epsg3857,
    from_epsg3857,
)

__all__ = [
    # haversine
    'calculate_distance',
    'calculate_azimuth',
    'distance_between',
    'azimuth_between',
    # coordinate_transform
    'longitude_to_epsg3857',
    'latitude_to_epsg3857',
    'epsg3857_to_longitude',
    'epsg3857_to_latitude',
    'to_epsg3857',
    'from_epsg3857',
]
