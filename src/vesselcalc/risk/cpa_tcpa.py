"""
Closest Point of Approach (CPA) 및 Time to CPA (TCPA) 계산

두 선박의 위치를 Web Mercator(EPSG:3857) 평면으로 투영해 상대 운동 방정식으로
최접근 시점을 구한 뒤, 최접근 위치를 다시 지리 좌표로 되돌려 Haversine 거리로
CPA와 TCPA를 재계산한다.
"""
import logging
import math

import numpy as np

from ..geometry.coordinate_transform import from_epsg3857, to_epsg3857
from ..geometry.haversine import calculate_distance
from ..types import CpaResult, MotionState
from ..utils import WrapTo180, knots_to_mps, validate_coordinates, validate_sog_and_cog

logger = logging.getLogger(__name__)


def _planar_vector(x: float, y: float) -> np.ndarray:
    # 2D motion embedded in 3D, z is always 0
    return np.array([x, y, 0.0])


def _course_to_velocity(sog: float, cog: float) -> np.ndarray:
    # Maritime convention: cog=0 North(+y), cog=90 East(+x)
    cog_rad = np.radians(cog)
    return _planar_vector(sog * np.sin(cog_rad), sog * np.cos(cog_rad))


def solve_tcpa(
    position1: np.ndarray,
    velocity1: np.ndarray,
    position2: np.ndarray,
    velocity2: np.ndarray
) -> float:
    """
    평면 상대 운동에서 최접근 시점 계산

    TCPA = -((P_2 - P_1) · (V_2 - V_1)) / ||V_2 - V_1||²

    Args:
        position1: 선박 1 위치 벡터 (x, y, z)
        velocity1: 선박 1 속도 벡터 (vx, vy, vz)
        position2: 선박 2 위치 벡터 (x, y, z)
        velocity2: 선박 2 속도 벡터 (vx, vy, vz)

    Returns:
        최접근 시점 (위치 단위 / 속도 단위). 음수는 이미 CPA 통과.
        상대 속도가 0이면 NaN (거리가 변하지 않음).
    """
    position_diff = np.asarray(position2, dtype=float) - np.asarray(position1, dtype=float)
    velocity_diff = np.asarray(velocity2, dtype=float) - np.asarray(velocity1, dtype=float)

    rel_speed_sq = float(np.dot(velocity_diff, velocity_diff))
    if rel_speed_sq == 0.0:
        return math.nan

    return -float(np.dot(position_diff, velocity_diff)) / rel_speed_sq


def _advance_and_unproject(position: np.ndarray, velocity: np.ndarray, t: float):
    x, y, _ = position + velocity * t
    latitude, longitude = from_epsg3857(x, y)
    if abs(longitude) > 180:
        longitude = WrapTo180(longitude)
    return latitude, longitude


def calculate_cpa_and_tcpa(
    latitude1: float,
    longitude1: float,
    sog1: float,
    cog1: float,
    latitude2: float,
    longitude2: float,
    sog2: float,
    cog2: float
) -> CpaResult:
    """
    두 선박 사이의 CPA/TCPA 계산

    TCPA는 선박 1이 현재 위치에서 최접근 위치까지 이동하는 거리를 선박 1의
    속력으로 나누어 구한다 (선박 1 기준 시간).

    Args:
        latitude1: 선박 1 위도 (degrees, ex. 37.13461)
        longitude1: 선박 1 경도 (degrees, ex. 126.88848)
        sog1: 선박 1 SOG (knots, ex. 5.7)
        cog1: 선박 1 COG (degrees, ex. 153.1)
        latitude2: 선박 2 위도 (degrees, ex. 37.5011)
        longitude2: 선박 2 경도 (degrees, ex. 127.67278)
        sog2: 선박 2 SOG (knots, ex. 9.8)
        cog2: 선박 2 COG (degrees, ex. 180.6)

    Returns:
        CpaResult(cpa, tcpa)
        cpa: 최접근 거리 (meters)
        tcpa: 최접근까지 시간 (seconds)

    Notes:
        - 이미 CPA를 지난 경우 (TCPA < 0): TCPA = 0, CPA = 현재 거리
        - 상대 속도가 0인 경우: TCPA = NaN, CPA = 현재 거리 (거리 일정)
        - 선박 1이 정지한 경우 (sog1 = 0): TCPA = NaN
        - 180° 경선을 사이에 둔 경우 짧은 쪽 경도 차로 계산

    Raises:
        InvalidArgumentError: 위도/경도/SOG/COG가 범위를 벗어난 경우
    """
    validate_coordinates(latitude1, longitude1, latitude2, longitude2)
    validate_sog_and_cog(sog1, cog1, sog2, cog2)

    # Planar gap must run the short way round the antimeridian
    projected_longitude2 = longitude2
    if longitude2 - longitude1 > 180:
        projected_longitude2 -= 360
    elif longitude2 - longitude1 < -180:
        projected_longitude2 += 360

    position1 = _planar_vector(*to_epsg3857(latitude1, longitude1))
    position2 = _planar_vector(*to_epsg3857(latitude2, projected_longitude2))

    velocity1 = _course_to_velocity(sog1, cog1)
    velocity2 = _course_to_velocity(sog2, cog2)

    tcpa = solve_tcpa(position1, velocity1, position2, velocity2)

    if math.isnan(tcpa):
        logger.debug("Zero relative velocity, separation is constant")
        cpa = calculate_distance(latitude1, longitude1, latitude2, longitude2)
        return CpaResult(cpa=cpa, tcpa=math.nan)

    if tcpa < 0:
        logger.debug("CPA already passed (raw tcpa=%.6g), clamping to 0", tcpa)
        tcpa = 0.0

    cpa_latitude1, cpa_longitude1 = _advance_and_unproject(position1, velocity1, tcpa)
    cpa_latitude2, cpa_longitude2 = _advance_and_unproject(position2, velocity2, tcpa)

    cpa = calculate_distance(cpa_latitude1, cpa_longitude1, cpa_latitude2, cpa_longitude2)

    sog1_mps = knots_to_mps(sog1)
    if sog1_mps == 0:
        logger.debug("Vessel 1 is stopped, TCPA has no time reference")
        return CpaResult(cpa=cpa, tcpa=math.nan)

    tcpa_distance = calculate_distance(latitude1, longitude1, cpa_latitude1, cpa_longitude1)
    real_tcpa = tcpa_distance / sog1_mps

    return CpaResult(cpa=cpa, tcpa=real_tcpa)


def calculate_cpa_between(own: MotionState, target: MotionState) -> CpaResult:
    """
    MotionState 버전의 calculate_cpa_and_tcpa

    Args:
        own: 기준 선박 (TCPA 시간 기준)
        target: 상대 선박

    Returns:
        CpaResult(cpa, tcpa)
    """
    return calculate_cpa_and_tcpa(
        own.coordinate.latitude, own.coordinate.longitude, own.sog, own.cog,
        target.coordinate.latitude, target.coordinate.longitude, target.sog, target.cog
    )
