"""
Common utilities for working with arrays of angles.

Includes normalization, shortest differences, circular averaging and unwrapping.
"""

from .angles import normalize_angle, angle_diff, circular_mean, unwrap_angles

__all__ = [
    'normalize_angle',
    'angle_diff',
    'circular_mean',
    'unwrap_angles',
]
