"""
Visualization utilities for angles.
"""

from .angles import plot_angles, plot_unit_circle

__all__ = [
    'plot_angles',
    'plot_unit_circle',
]
