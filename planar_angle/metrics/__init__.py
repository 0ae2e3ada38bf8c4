"""
Error metrics for evaluating angle estimates.
"""

from .performance import (angular_error, angular_rmse, angular_mae, max_angular_error,
                          compute_all_metrics, print_metrics)

__all__ = [
    'angular_error',
    'angular_rmse',
    'angular_mae',
    'max_angular_error',
    'compute_all_metrics',
    'print_metrics',
]
