"""
위치, 운동 상태, CPA/TCPA 결과 타입 정의
"""
import math
from typing import NamedTuple


class GeoCoordinate(NamedTuple):
    """
    지리 좌표 (EPSG:4326, WGS84)
    """
    latitude: float   # degrees, [-90, 90]
    longitude: float  # degrees, [-180, 180]


class MotionState(NamedTuple):
    """
    선박 운동 상태
    """
    coordinate: GeoCoordinate
    sog: float  # Speed over ground (knots), [0, 102]
    cog: float  # Course over ground (degrees, 0=North, clockwise), [0, 360]


class CpaResult(NamedTuple):
    """
    CPA/TCPA 계산 결과

    Either field may be NaN when the encounter is degenerate
    (zero relative velocity, or the first vessel is stopped).
    """
    cpa: float   # Distance at CPA (meters)
    tcpa: float  # Time to CPA (seconds)

    @property
    def is_defined(self) -> bool:
        """CPA와 TCPA가 모두 유한한 값인지 여부"""
        return math.isfinite(self.cpa) and math.isfinite(self.tcpa)

    @property
    def tcpa_minutes(self) -> float:
        """TCPA (분 단위)"""
        return self.tcpa / 60.0
