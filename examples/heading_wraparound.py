"""
Heading Wraparound Example

Demonstrates why headings must be compared along the shortest path.
A robot spinning slowly through +-180 deg is tracked by a noisy compass.
The naive error (plain subtraction) explodes at the wrap, while the
angular metrics and Angle arithmetic stay correct.
"""

import numpy as np
import matplotlib.pyplot as plt
import sys
import os
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from planar_angle import Angle
from planar_angle.common import normalize_angle, circular_mean, unwrap_angles
from planar_angle.metrics import compute_all_metrics, print_metrics
from planar_angle.visualization import plot_angles, plot_unit_circle

# ============================================================================
# CONFIGURATION
# ============================================================================
N_POINTS = 500  # Number of samples
DT = 0.02  # Time step in seconds
OMEGA = 0.8  # Turn rate in rad/s
NOISE_STD_DEG = 2.0  # Compass noise standard deviation
SEED = 42

# Output results path
RESULTS_PATH = Path(__file__).parent.parent / 'results' / 'angles'
# ============================================================================


def run_wraparound_example(show=True):
    """Run the heading wraparound example with synthetic data."""

    print("\n" + "="*60)
    print("Heading Wraparound Example")
    print("="*60 + "\n")

    rng = np.random.default_rng(SEED)
    time = np.arange(N_POINTS) * DT

    # Start just below +180 deg so the heading wraps early
    heading_true = normalize_angle(np.radians(170.0) + OMEGA * time)
    noise = np.radians(NOISE_STD_DEG) * rng.standard_normal(N_POINTS)
    heading_meas = normalize_angle(heading_true + noise)

    naive_rmse = np.degrees(np.sqrt(np.mean((heading_meas - heading_true) ** 2)))
    print(f"Naive RMSE (plain subtraction): {naive_rmse:.3f} deg")

    metrics = compute_all_metrics(heading_meas, heading_true, degrees=True)
    print_metrics(metrics, name="Compass Heading")

    # Scalar Angle arithmetic on the first sample crossing the wrap
    crossing = int(np.argmax(np.abs(np.diff(heading_true)) > np.pi))
    before = Angle.radians(heading_true[crossing])
    after = Angle.radians(heading_true[crossing + 1])
    print(f"\nHeading before wrap: {before}")
    print(f"Heading after wrap:  {after}")
    print(f"Step between them:   {after - before}")

    mean_heading = Angle.radians(circular_mean(heading_meas[max(crossing - 5, 0):crossing + 5]))
    print(f"Circular mean around the wrap: {mean_heading}")

    total_turn = unwrap_angles(heading_meas)[-1] - heading_meas[0]
    print(f"Total turn (unwrapped): {np.degrees(total_turn):.1f} deg")

    RESULTS_PATH.mkdir(parents=True, exist_ok=True)

    plot_angles(time, heading_meas, ground_truth=heading_true,
                title="Compass Heading Across the Wrap",
                save_path=RESULTS_PATH / 'heading_history.png', show=False)

    ax = plot_unit_circle([before, after, mean_heading],
                          labels=['before', 'after', 'mean'], color='tab:blue')
    ax.figure.savefig(RESULTS_PATH / 'heading_unit_circle.png', dpi=150,
                      bbox_inches='tight')

    print(f"\nFigures saved to {RESULTS_PATH}")

    if show:
        plt.show()

    return metrics


if __name__ == "__main__":
    run_wraparound_example()
