"""
구면 거리 및 방위각 계산 (Haversine)

WGS84 좌표를 반지름 R = 6,371,000 m 인 구로 근사하여 계산한다.
"""
import numpy as np

from ..constants import EARTH_RADIUS
from ..types import GeoCoordinate
from ..utils import WrapTo360, validate_coordinates


def calculate_distance(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float
) -> float:
    """
    Haversine 공식으로 두 좌표 사이의 대권 거리 계산

    Args:
        latitude1: 첫 번째 좌표 위도 (degrees, ex. 37.13461)
        longitude1: 첫 번째 좌표 경도 (degrees, ex. 126.88848)
        latitude2: 두 번째 좌표 위도 (degrees, ex. 37.5011)
        longitude2: 두 번째 좌표 경도 (degrees, ex. 127.67278)

    Returns:
        두 좌표 사이 거리 (meters)

    Notes:
        Haversine 항 a는 [0, 1]로 clip 한다. 대척점 근처에서 반올림 오차로
        1 - a 가 음수가 되어도 NaN 대신 π·R 을 반환한다.

    Raises:
        InvalidArgumentError: 위도/경도가 범위를 벗어난 경우
    """
    validate_coordinates(latitude1, longitude1, latitude2, longitude2)

    lat1_rad = np.radians(latitude1)
    lon1_rad = np.radians(longitude1)
    lat2_rad = np.radians(latitude2)
    lon2_rad = np.radians(longitude2)

    delta_lat = (lat2_rad - lat1_rad) / 2
    delta_lon = (lon2_rad - lon1_rad) / 2

    a = (np.sin(delta_lat) ** 2
         + np.sin(delta_lon) ** 2 * np.cos(lat1_rad) * np.cos(lat2_rad))
    # Rounding near antipodal points can push a just past 1
    a = np.clip(a, 0.0, 1.0)

    return float(2 * EARTH_RADIUS * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))


def calculate_azimuth(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float
) -> float:
    """
    첫 번째 좌표에서 두 번째 좌표로의 초기 방위각 계산

    Args:
        latitude1: 첫 번째 좌표 위도 (degrees)
        longitude1: 첫 번째 좌표 경도 (degrees)
        latitude2: 두 번째 좌표 위도 (degrees)
        longitude2: 두 번째 좌표 경도 (degrees)

    Returns:
        방위각 (degrees, [0, 360), 0=North, clockwise).
        같은 좌표끼리는 0.

    Raises:
        InvalidArgumentError: 위도/경도가 범위를 벗어난 경우
    """
    validate_coordinates(latitude1, longitude1, latitude2, longitude2)

    lat1_rad = np.radians(latitude1)
    lat2_rad = np.radians(latitude2)
    delta_lon = np.radians(longitude2) - np.radians(longitude1)

    y = np.sin(delta_lon) * np.cos(lat2_rad)
    x = (np.cos(lat1_rad) * np.sin(lat2_rad)
         - np.sin(lat1_rad) * np.cos(lat2_rad) * np.cos(delta_lon))

    bearing = np.degrees(np.arctan2(y, x))

    return WrapTo360(float(bearing))


def distance_between(origin: GeoCoordinate, destination: GeoCoordinate) -> float:
    """GeoCoordinate 버전의 calculate_distance"""
    return calculate_distance(
        origin.latitude, origin.longitude,
        destination.latitude, destination.longitude
    )


def azimuth_between(origin: GeoCoordinate, destination: GeoCoordinate) -> float:
    """GeoCoordinate 버전의 calculate_azimuth"""
    return calculate_azimuth(
        origin.latitude, origin.longitude,
        destination.latitude, destination.longitude
    )
