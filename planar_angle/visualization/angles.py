"""
Angle visualization functions.

Plots wrapped angle histories and positions of angles on the unit circle.
Inputs may be numpy arrays of radians or sequences of Angle objects.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from ..common.angles import normalize_angle


def plot_angles(time, angles, ground_truth=None, degrees=True,
                title="Angle History", figsize=(10, 4), save_path=None, show=True):
    """
    Plot wrapped angles over time.

    Parameters
    ----------
    time : np.ndarray
        Time vector (N,)
    angles : np.ndarray or sequence of Angle
        Angle estimates in radians (N,)
    ground_truth : np.ndarray or sequence of Angle, optional
        True angles in radians (N,)
    degrees : bool, optional
        Plot in degrees instead of radians
    title : str, optional
        Plot title
    figsize : tuple, optional
        Figure size (width, height)
    save_path : str, optional
        Path to save figure. If None, figure is not saved.
    show : bool, optional
        Whether to display the plot

    Returns
    -------
    fig, ax
        Matplotlib figure and axes
    """
    time = np.asarray(time, dtype=float)
    wrapped = np.atleast_1d(normalize_angle(np.asarray(angles, dtype=float)))

    if len(time) != len(wrapped):
        raise ValueError(f"time has {len(time)} samples but angles has {len(wrapped)}")

    scale = 180.0 / np.pi if degrees else 1.0
    limit = 180.0 if degrees else np.pi

    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(time, wrapped * scale, 'b.', markersize=3, label='Estimate', alpha=0.8)

    if ground_truth is not None:
        truth = np.atleast_1d(normalize_angle(np.asarray(ground_truth, dtype=float)))
        ax.plot(time, truth * scale, 'k.', markersize=2,
                label='Ground Truth', alpha=0.6)

    # Canonical range boundaries
    ax.axhline(limit, color='gray', linestyle=':', linewidth=1)
    ax.axhline(-limit, color='gray', linestyle=':', linewidth=1)

    ax.set_xlabel('Time (s)', fontsize=12)
    ax.set_ylabel('Angle (deg)' if degrees else 'Angle (rad)', fontsize=12)
    ax.set_ylim(-1.1 * limit, 1.1 * limit)
    ax.set_title(title, fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    if show:
        plt.show()

    return fig, ax


def plot_unit_circle(angles, labels=None, ax=None, title="Angles on the Unit Circle",
                     **kwargs):
    """
    Plot angles as points on the unit circle.

    Parameters
    ----------
    angles : np.ndarray or sequence of Angle
        Angles in radians
    labels : list of str, optional
        Text label for each angle
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure.
    title : str, optional
        Axes title
    **kwargs : dict
        Additional arguments passed to ax.scatter
        (e.g., color, marker, s)

    Returns
    -------
    matplotlib.axes.Axes
        The axes containing the plot
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    angles = np.atleast_1d(np.asarray(angles, dtype=float))
    if labels is not None and len(labels) != len(angles):
        raise ValueError(f"labels must have length {len(angles)}, got {len(labels)}")

    ax.add_patch(Circle((0.0, 0.0), 1.0, fill=False, color='gray', linewidth=1))
    ax.axhline(0.0, color='gray', linewidth=0.5, alpha=0.5)
    ax.axvline(0.0, color='gray', linewidth=0.5, alpha=0.5)

    x, y = np.cos(angles), np.sin(angles)
    ax.scatter(x, y, zorder=3, **kwargs)

    if labels is not None:
        for xi, yi, label in zip(x, y, labels):
            ax.annotate(label, (xi, yi), textcoords='offset points', xytext=(6, 6))

    ax.set_xlim(-1.3, 1.3)
    ax.set_ylim(-1.3, 1.3)
    ax.set_aspect('equal')
    ax.set_title(title, fontsize=14)
    ax.grid(True, alpha=0.3)

    return ax
