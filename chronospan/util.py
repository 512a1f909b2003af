"""Utility constants for chronospan.

Time unit constants represent durations in seconds. Durations are bounded to
the signed 64-bit range so that values round-trip with other systems that
store them as a ``long``.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Signed 64-bit bounds for total seconds
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
