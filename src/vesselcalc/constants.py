"""
계산에 사용되는 고정 상수

All values are read-only module constants.
"""

# Mean Earth radius (meters)
EARTH_RADIUS = 6371000

# Half of the Web Mercator (EPSG:3857) world width (meters)
WEB_MERCATOR_HALF_EXTENT = 20037508.34

# Coordinate bounds (degrees)
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Motion bounds
MIN_SOG_KNOTS = 0.0
MAX_SOG_KNOTS = 102.0
MIN_COG_DEG = 0.0
MAX_COG_DEG = 360.0

# 1 knot = 1.852 km/h
KNOT_TO_KMH = 1.852
SECONDS_PER_HOUR = 3600
