"""
입력값 범위 검증

Every public operation calls these guards before any trigonometry runs.
"""
from ..constants import (
    MIN_LATITUDE,
    MAX_LATITUDE,
    MIN_LONGITUDE,
    MAX_LONGITUDE,
    MIN_SOG_KNOTS,
    MAX_SOG_KNOTS,
    MIN_COG_DEG,
    MAX_COG_DEG,
)


class InvalidArgumentError(ValueError):
    """Raised when a latitude, longitude, speed or course is out of range."""


def _check_range(value: float, lower: float, upper: float, label: str, unit: str) -> None:
    # NaN fails both comparisons and passes through
    if value < lower or value > upper:
        raise InvalidArgumentError(
            f"[{value}] {label} must be between {lower:g} and {upper:g} {unit}"
        )


def validate_coordinates(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float
) -> None:
    """
    두 좌표의 위도/경도 범위 검증

    Args:
        latitude1: 첫 번째 좌표 위도 (degrees)
        longitude1: 첫 번째 좌표 경도 (degrees)
        latitude2: 두 번째 좌표 위도 (degrees)
        longitude2: 두 번째 좌표 경도 (degrees)

    Raises:
        InvalidArgumentError: latitude outside [-90, 90] or
            longitude outside [-180, 180]
    """
    for latitude in (latitude1, latitude2):
        _check_range(latitude, MIN_LATITUDE, MAX_LATITUDE, "Latitude", "degrees")
    for longitude in (longitude1, longitude2):
        _check_range(longitude, MIN_LONGITUDE, MAX_LONGITUDE, "Longitude", "degrees")


def validate_sog_and_cog(
    sog1: float,
    cog1: float,
    sog2: float,
    cog2: float
) -> None:
    """
    두 선박의 SOG/COG 범위 검증

    Args:
        sog1: 첫 번째 선박 SOG (knots)
        cog1: 첫 번째 선박 COG (degrees)
        sog2: 두 번째 선박 SOG (knots)
        cog2: 두 번째 선박 COG (degrees)

    Raises:
        InvalidArgumentError: speed outside [0, 102] knots or
            course outside [0, 360] degrees
    """
    for sog in (sog1, sog2):
        _check_range(sog, MIN_SOG_KNOTS, MAX_SOG_KNOTS, "Sog", "knots")
    for cog in (cog1, cog2):
        _check_range(cog, MIN_COG_DEG, MAX_COG_DEG, "Cog", "degrees")
