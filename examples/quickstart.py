"""
vesselcalc - Quick Start Example

두 선박 사이의 거리, 방위각, CPA/TCPA 계산
"""
import math

from vesselcalc import (
    GeoCoordinate,
    MotionState,
    InvalidArgumentError,
    calculate_azimuth,
    calculate_distance,
    calculate_cpa_between,
)


def main():
    print("=" * 60)
    print("vesselcalc - Quick Start")
    print("=" * 60)

    # 1. Ship 정보 설정
    print("\n[Ship Information]")

    own_ship = MotionState(GeoCoordinate(37.13461, 126.88848), sog=5.7, cog=153.1)
    target_ship = MotionState(GeoCoordinate(37.5011, 127.67278), sog=9.8, cog=180.6)
    print(f"Own Ship:    pos={tuple(own_ship.coordinate)}, cog={own_ship.cog}°, sog={own_ship.sog}kn")
    print(f"Target Ship: pos={tuple(target_ship.coordinate)}, cog={target_ship.cog}°, sog={target_ship.sog}kn")

    # 2. 거리 / 방위각
    print("\n[Range and Bearing]")
    distance = calculate_distance(*own_ship.coordinate, *target_ship.coordinate)
    azimuth = calculate_azimuth(*own_ship.coordinate, *target_ship.coordinate)
    print(f"Distance: {distance:.0f} m ({distance/1852:.2f} NM)")
    print(f"Azimuth:  {azimuth:.1f}°")

    # 3. CPA / TCPA
    print("\n[CPA / TCPA]")
    result = calculate_cpa_between(own_ship, target_ship)
    if result.is_defined:
        print(f"CPA:  {result.cpa:.0f} m ({result.cpa/1852:.3f} NM)")
        print(f"TCPA: {result.tcpa:.0f} s ({result.tcpa_minutes:.1f} min)")
    else:
        print(f"CPA:  {result.cpa:.0f} m")
        print("TCPA: undefined (same course and speed, or own ship stopped)")

    if not math.isnan(result.tcpa) and result.tcpa == 0:
        print("CPA already passed - vessels are opening")

    # 4. 잘못된 입력
    print("\n[Invalid Input]")
    try:
        calculate_distance(91, 0, 0, 0)
    except InvalidArgumentError as e:
        print(f"Rejected: {e}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
