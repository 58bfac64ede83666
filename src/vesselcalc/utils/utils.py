from ..constants import KNOT_TO_KMH, SECONDS_PER_HOUR


def wrap_to_range(angle, min_val, max_val):
    """
    Wraps an angle to a given range [min_val, max_val).

    The length of the range (max_val - min_val) is assumed to be a full circle (360).

    Args:
        angle (float): The angle value to wrap.
        min_val (float): The minimum value of the range (inclusive).
        max_val (float): The maximum value of the range (exclusive).

    Returns:
        float: The wrapped angle.
    """
    span = max_val - min_val
    if span <= 0:
        raise ValueError("max_val must be greater than min_val.")

    # Shift by one full span before the modulo, then once more if still below range
    wrapped = (angle - min_val + span) % span
    if wrapped < 0:
        wrapped += span
    wrapped += min_val

    # Float rounding can land exactly on the excluded upper bound
    if wrapped >= max_val:
        return float(min_val)

    return float(wrapped)


def WrapTo180(deg):
    """Transform an angle in degrees to the range [-180, 180)."""
    return wrap_to_range(deg, -180.0, 180.0)


def WrapTo360(deg):
    """
    Transform an angle in degrees to the range [0, 360).
    """
    return wrap_to_range(deg, 0.0, 360.0)


def knots_to_mps(knots):
    """
    Convert speed from knots to meters per second.

    Args:
        knots (float): Speed in knots.

    Returns:
        float: Speed in m/s (1 knot = 1.852 km/h).
    """
    return knots * KNOT_TO_KMH / SECONDS_PER_HOUR * 1000
