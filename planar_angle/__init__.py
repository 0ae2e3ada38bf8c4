"""
Planar Angle Library

A small angle primitive for robotics, geometry and graphics code.
Angles are stored in radians normalized to (-pi, pi], and every
arithmetic operation renormalizes its result so values never drift.

Author: Planar Angle Team
License: MIT
"""

__version__ = "1.0.0"

from .angle import (Angle, Radians, Degrees, RADIANS_90_DEGREES, TWO_PI,
                    radians, degrees, add, subtract)

__all__ = [
    'Angle',
    'Radians',
    'Degrees',
    'RADIANS_90_DEGREES',
    'TWO_PI',
    'radians',
    'degrees',
    'add',
    'subtract',
]
