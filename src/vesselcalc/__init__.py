"""
vesselcalc - Vessel Distance, Azimuth and CPA/TCPA Calculation

Pure navigation geometry for two vessels given in WGS84 coordinates:
Haversine great-circle distance, initial azimuth, and Closest Point of
Approach / Time to CPA solved in the Web Mercator plane.
"""
import logging

from .geometry.haversine import (
    calculate_distance,
    calculate_azimuth,
    distance_between,
    azimuth_between,
)
from .risk.cpa_tcpa import calculate_cpa_and_tcpa, calculate_cpa_between
from .types import GeoCoordinate, MotionState, CpaResult
from .utils.validation import (
    InvalidArgumentError,
    validate_coordinates,
    validate_sog_and_cog,
)


__version__ = "0.1.0"
__author__ = "Maritime Robotics Lab"

__all__ = [
    # Calculations
    "calculate_distance",
    "calculate_azimuth",
    "calculate_cpa_and_tcpa",
    "distance_between",
    "azimuth_between",
    "calculate_cpa_between",

    # Types
    "GeoCoordinate",
    "MotionState",
    "CpaResult",

    # Validation
    "InvalidArgumentError",
    "validate_coordinates",
    "validate_sog_and_cog",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
