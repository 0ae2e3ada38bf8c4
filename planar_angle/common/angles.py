"""
Array angle utilities.

Vectorized counterparts of the Angle normalization for batches of
angles stored in numpy arrays. Results use the same canonical range
(-pi, pi] and the same tie-break as Angle: -pi maps to +pi.
"""

import numpy as np

from ..angle import TWO_PI


def normalize_angle(angle):
    """
    Normalize angle(s) to (-pi, pi].

    Parameters
    ----------
    angle : float or np.ndarray
        Angle(s) in radians

    Returns
    -------
    float or np.ndarray
        Normalized angle(s). Scalar input gives a float.

    Examples
    --------
    >>> normalize_angle(-np.pi)
    3.141592653589793
    >>> normalize_angle(np.array([0.0, 2 * np.pi, -np.pi]))
    array([0.        , 0.        , 3.14159265])
    """
    angle = np.asarray(angle, dtype=float)

    # Infinities give NaN, matching float remainder semantics
    with np.errstate(invalid='ignore'):
        wrapped = np.fmod(angle, TWO_PI)
    wrapped = np.where(wrapped > np.pi, wrapped - TWO_PI, wrapped)
    wrapped = np.where(wrapped <= -np.pi, wrapped + TWO_PI, wrapped)

    if wrapped.ndim == 0:
        return float(wrapped)
    return wrapped


def angle_diff(angle1, angle2):
    """
    Compute the smallest signed difference between two angles.

    Handles the discontinuity at +-pi correctly.

    Parameters
    ----------
    angle1 : float or np.ndarray
        First angle(s) in radians
    angle2 : float or np.ndarray
        Second angle(s) in radians

    Returns
    -------
    float or np.ndarray
        Difference angle1 - angle2 in (-pi, pi]

    Examples
    --------
    >>> angle_diff(np.pi, -np.pi)
    0.0
    """
    diff = np.asarray(angle1, dtype=float) - np.asarray(angle2, dtype=float)
    return normalize_angle(diff)


def circular_mean(angles, weights=None):
    """
    Compute the circular mean of angles.

    Uses the atan2(sum(sin), sum(cos)) method for correct
    averaging across the +-pi discontinuity.

    Parameters
    ----------
    angles : np.ndarray
        Array of angles in radians
    weights : np.ndarray, optional
        Weights for each angle. If None, uniform weights are used.

    Returns
    -------
    float
        Circular mean angle in (-pi, pi]
    """
    angles = np.asarray(angles, dtype=float).ravel()
    if angles.size == 0:
        raise ValueError("circular_mean requires at least one angle")

    if weights is None:
        weights = np.ones(len(angles))
    else:
        weights = np.asarray(weights, dtype=float).ravel()
        if len(weights) != len(angles):
            raise ValueError(
                f"weights must have length {len(angles)}, got {len(weights)}"
            )

    sin_sum = np.dot(np.sin(angles), weights)
    cos_sum = np.dot(np.cos(angles), weights)

    return normalize_angle(np.arctan2(sin_sum, cos_sum))


def unwrap_angles(angles):
    """
    Remove +-2pi jumps from a sequence of wrapped angles.

    Each step between consecutive samples is replaced by its shortest
    signed equivalent, then the steps are accumulated from the first
    sample.

    Parameters
    ----------
    angles : np.ndarray
        Sequence of angles in radians (N,)

    Returns
    -------
    np.ndarray
        Continuous angle sequence (N,) starting at angles[0]
    """
    angles = np.asarray(angles, dtype=float).ravel()
    if angles.size == 0:
        return angles.copy()

    steps = normalize_angle(np.diff(angles))
    return angles[0] + np.concatenate(([0.0], np.cumsum(steps)))
