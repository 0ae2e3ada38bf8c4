"""
Wraparound-aware error metrics for angle estimates.

Errors are measured as the shortest signed separation between estimate
and ground truth, so an estimate of 179 deg against a truth of -179 deg
counts as a 2 deg error rather than 358 deg.
"""

import numpy as np

from ..common.angles import angle_diff


def _check_shapes(estimates, ground_truth):
    estimates = np.asarray(estimates, dtype=float)
    ground_truth = np.asarray(ground_truth, dtype=float)

    if estimates.shape != ground_truth.shape:
        raise ValueError(
            f"estimates shape {estimates.shape} does not match "
            f"ground_truth shape {ground_truth.shape}"
        )
    if estimates.size == 0:
        raise ValueError("Cannot compute metrics on empty arrays")

    return estimates, ground_truth


def angular_error(estimates, ground_truth):
    """
    Signed angular error, estimate minus ground truth.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated angles in radians (N,) or (N, dim)
    ground_truth : np.ndarray
        True angles in radians, same shape as estimates

    Returns
    -------
    np.ndarray
        Errors in (-pi, pi]
    """
    estimates, ground_truth = _check_shapes(estimates, ground_truth)
    return np.asarray(angle_diff(estimates, ground_truth))


def angular_rmse(estimates, ground_truth, axis=0):
    """
    Root Mean Square angular error.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated angles in radians (N, dim) or (N,)
    ground_truth : np.ndarray
        True angles in radians (N, dim) or (N,)
    axis : int, optional
        Axis along which to compute RMSE

    Returns
    -------
    float or np.ndarray
        RMSE value(s) in radians
    """
    errors = angular_error(estimates, ground_truth)
    mean_squared_error = np.mean(errors ** 2, axis=axis)

    return np.sqrt(mean_squared_error)


def angular_mae(estimates, ground_truth, axis=0):
    """
    Mean Absolute angular error.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated angles in radians
    ground_truth : np.ndarray
        True angles in radians
    axis : int, optional
        Axis along which to compute MAE

    Returns
    -------
    float or np.ndarray
        MAE value(s) in radians
    """
    errors = angular_error(estimates, ground_truth)

    return np.mean(np.abs(errors), axis=axis)


def max_angular_error(estimates, ground_truth, axis=0):
    """Largest absolute angular error along ``axis``, in radians."""
    errors = angular_error(estimates, ground_truth)

    return np.max(np.abs(errors), axis=axis)


def compute_all_metrics(estimates, ground_truth, degrees=False):
    """
    Compute all available angular metrics.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated angles in radians (N,) or (N, dim)
    ground_truth : np.ndarray
        True angles in radians, same shape as estimates
    degrees : bool, optional
        Report the metrics in degrees instead of radians

    Returns
    -------
    dict
        Dictionary with 'rmse', 'mae', 'max_error' and 'units'
    """
    metrics = {
        'rmse': angular_rmse(estimates, ground_truth, axis=0),
        'mae': angular_mae(estimates, ground_truth, axis=0),
        'max_error': max_angular_error(estimates, ground_truth, axis=0),
    }

    if degrees:
        metrics = {key: np.degrees(value) for key, value in metrics.items()}
    metrics['units'] = 'deg' if degrees else 'rad'

    return metrics


def print_metrics(metrics, name="Heading"):
    """
    Print metrics in a formatted way.

    Parameters
    ----------
    metrics : dict
        Dictionary of metrics from compute_all_metrics
    name : str, optional
        Name of the estimated quantity for display
    """
    units = metrics.get('units', 'rad')

    print(f"\n{name} Angular Error Metrics")
    print("=" * 50)

    if 'rmse' in metrics:
        print(f"RMSE: {metrics['rmse']} {units}")
    if 'mae' in metrics:
        print(f"MAE: {metrics['mae']} {units}")
    if 'max_error' in metrics:
        print(f"Max error: {metrics['max_error']} {units}")

    print("=" * 50)
