"""
Coordinate System Transformation

좌표계 정의:
-------------
1. EPSG:4326 (WGS84 지리 좌표계):
   - latitude: degrees, [-90, 90], +North
   - longitude: degrees, [-180, 180], +East

2. EPSG:3857 (Web Mercator 투영 좌표계):
   - x: meters, +East, [-20037508.34, 20037508.34]
   - y: meters, +North
   - 구면 Mercator 투영이므로 극지방(위도 ±90°)에서 y가 발산한다.

CPA/TCPA 계산은 EPSG:3857 평면에서 선형 상대 운동 문제로 푼다.
"""

import numpy as np
from typing import Tuple

from ..constants import WEB_MERCATOR_HALF_EXTENT

# ========================================
# EPSG:4326 -> EPSG:3857
# ========================================

def longitude_to_epsg3857(longitude: float) -> float:
    """
    Convert longitude (EPSG:4326, degrees) to Web Mercator x (meters).
    """
    return longitude * (WEB_MERCATOR_HALF_EXTENT / 180)


def latitude_to_epsg3857(latitude: float) -> float:
    """
    Convert latitude (EPSG:4326, degrees) to Web Mercator y (meters).

    Diverges as latitude approaches ±90.
    """
    return float(
        np.log(np.tan((90 + latitude) * np.pi / 360)) / (np.pi / 180)
        * (WEB_MERCATOR_HALF_EXTENT / 180)
    )


def to_epsg3857(latitude: float, longitude: float) -> Tuple[float, float]:
    """
    Convert a geographic position to Web Mercator.

    Args:
        latitude: degrees
        longitude: degrees

    Returns:
        (x, y) in meters
    """
    return longitude_to_epsg3857(longitude), latitude_to_epsg3857(latitude)

# ========================================
# EPSG:3857 -> EPSG:4326
# ========================================

def epsg3857_to_longitude(x: float) -> float:
    """
    Convert Web Mercator x (meters) to longitude (degrees).
    """
    return (x / WEB_MERCATOR_HALF_EXTENT) * 180


def epsg3857_to_latitude(y: float) -> float:
    """
    Convert Web Mercator y (meters) to latitude (degrees).
    """
    return float(
        180 / np.pi
        * (2 * np.arctan(np.exp((y / WEB_MERCATOR_HALF_EXTENT) * np.pi)) - np.pi / 2)
    )


def from_epsg3857(x: float, y: float) -> Tuple[float, float]:
    """
    Convert a Web Mercator position back to geographic coordinates.

    Args:
        x: meters (East)
        y: meters (North)

    Returns:
        (latitude, longitude) in degrees
    """
    return epsg3857_to_latitude(y), epsg3857_to_longitude(x)
