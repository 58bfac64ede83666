from .utils import (
    WrapTo180,
    WrapTo360,
    wrap_to_range,
    knots_to_mps,
)

from .validation import (
    InvalidArgumentError,
    validate_coordinates,
    validate_sog_and_cog,
)

__all__ = [
    'WrapTo180',
    'WrapTo360',
    'wrap_to_range',
    'knots_to_mps',
    'InvalidArgumentError',
    'validate_coordinates',
    'validate_sog_and_cog',
]
