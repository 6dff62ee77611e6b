# domain/geometry/constants.py
"""Constants for geometric calculations."""

# Tolerance for floating-point comparisons between scalars
EPSILON = 1e-5
