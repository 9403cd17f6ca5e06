"""Fixed constants: epoch, time units, angle units, obliquity, and Earth's orbit."""

import math

# Epoch J2000.0 (2000-01-01T12:00:00 UTC)
J2000_JD = 2451545.0
UNIX_EPOCH_JD = 2440587.5  # JD of 1970-01-01T00:00:00 UTC
DAYS_PER_JULIAN_CENTURY = 36525.0

# Time: seconds/milliseconds per day
SECONDS_PER_DAY = 86400.0
MILLIS_PER_DAY = 86400000.0

# Angle: degrees per circle and right ascension units
DEGREES_PER_CIRCLE = 360.0
HOURS_PER_CIRCLE = 24.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h
TWOPI = 2.0 * math.pi

# Fixed mean obliquity of the ecliptic (no precession/nutation)
OBLIQUITY_DEG = 23.4367

# Kepler solver defaults
KEPLER_TOLERANCE_RAD = 1e-6
DEFAULT_KEPLER_MAX_ITER = 100
HIGH_ECCENTRICITY = 0.8  # start Newton iteration from pi above this

# Simplified Earth orbit (defines the ecliptic reference plane)
EARTH_SEMI_MAJOR_AXIS_AU = 1.0
EARTH_ECCENTRICITY = 0.017
EARTH_MEAN_ANOMALY_AT_EPOCH_DEG = 100.0
EARTH_MEAN_DAILY_MOTION_DEG = 0.9856

# Greenwich mean sidereal time polynomial (degrees; IAU 1982 form in JD)
GMST_AT_J2000_DEG = 280.46061837
GMST_RATE_DEG_PER_DAY = 360.98564736629
GMST_T2_COEFF = 0.000387933
GMST_T3_DIVISOR = 38710000.0

# Defaults and thresholds (configuration)
DEFAULT_SCENE_SCALE = 50.0  # renderer units per AU
DEFAULT_MIN_YEAR = 1900
DEFAULT_MAX_YEAR = 2100
DEFAULT_SPHERE_RADIUS = 1.0
