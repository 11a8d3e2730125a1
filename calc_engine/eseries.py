"""
E-series standard resistor values.

IEC 60063 preferred numbers per decade (1.0 to <10.0). Used by the resistor
encoder to snap an arbitrary value to the nearest purchasable one before the
band search.
"""

import math
from typing import Tuple

import numpy as np

E6_BASE = [1.0, 1.5, 2.2, 3.3, 4.7, 6.8]

E12_BASE = [1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2]

E24_BASE = [
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
]

E48_BASE = [
    1.00, 1.05, 1.10, 1.15, 1.21, 1.27, 1.33, 1.40, 1.47, 1.54, 1.62, 1.69,
    1.78, 1.87, 1.96, 2.05, 2.15, 2.26, 2.37, 2.49, 2.61, 2.74, 2.87, 3.01,
    3.16, 3.32, 3.48, 3.65, 3.83, 4.02, 4.22, 4.42, 4.64, 4.87, 5.11, 5.36,
    5.62, 5.90, 6.19, 6.49, 6.81, 7.15, 7.50, 7.87, 8.25, 8.66, 9.09, 9.53,
]

E96_BASE = [
    1.00, 1.02, 1.05, 1.07, 1.10, 1.13, 1.15, 1.18, 1.21, 1.24, 1.27, 1.30,
    1.33, 1.37, 1.40, 1.43, 1.47, 1.50, 1.54, 1.58, 1.62, 1.65, 1.69, 1.74,
    1.78, 1.82, 1.87, 1.91, 1.96, 2.00, 2.05, 2.10, 2.15, 2.21, 2.26, 2.32,
    2.37, 2.43, 2.49, 2.55, 2.61, 2.67, 2.74, 2.80, 2.87, 2.94, 3.01, 3.09,
    3.16, 3.24, 3.32, 3.40, 3.48, 3.57, 3.65, 3.74, 3.83, 3.92, 4.02, 4.12,
    4.22, 4.32, 4.42, 4.53, 4.64, 4.75, 4.87, 4.99, 5.11, 5.23, 5.36, 5.49,
    5.62, 5.76, 5.90, 6.04, 6.19, 6.34, 6.49, 6.65, 6.81, 6.98, 7.15, 7.32,
    7.50, 7.68, 7.87, 8.06, 8.25, 8.45, 8.66, 8.87, 9.09, 9.31, 9.53, 9.76,
]

E_SERIES = {
    'E6': E6_BASE,
    'E12': E12_BASE,
    'E24': E24_BASE,
    'E48': E48_BASE,
    'E96': E96_BASE,
}


def snap_to_e_series(value: float, series: str = 'E24') -> Tuple[float, float]:
    """
    Snap a value to the nearest standard E-series value.

    Distance is measured on a log scale, so 1.0 and 10.0 are equally "close"
    to 3.16. The top of the previous decade and the bottom of the next decade
    are candidates too.

    Args:
        value: Target resistance (Ohms).
        series: 'E6', 'E12', 'E24', 'E48' or 'E96'.

    Returns:
        Tuple of (snapped_value, error_percentage). The error is signed:
        positive means the snapped value is higher than the target.

    Raises:
        ValueError: value is not positive or the series is unknown.
    """
    if value <= 0:
        raise ValueError(f"Value must be positive, got {value}")

    if series not in E_SERIES:
        raise ValueError(f"Unknown series '{series}'. Must be one of: {list(E_SERIES.keys())}")

    # value = mantissa * 10^decade where 1 <= mantissa < 10
    decade = math.floor(math.log10(value))
    mantissa = value / (10 ** decade)

    base_values = E_SERIES[series]
    candidates = np.array([base_values[-1] * 0.1] + base_values + [base_values[0] * 10])
    distances = np.abs(np.log10(candidates) - math.log10(mantissa))
    best = float(candidates[int(np.argmin(distances))])

    # Keep 10 significant digits so 4.7 * 1000 reads back as 4700.0
    snapped = round(best * (10 ** decade), 9 - decade)
    error_pct = ((snapped - value) / value) * 100
    return snapped, round(error_pct, 4)


def is_standard_value(value: float, series: str = 'E24') -> bool:
    """True if value is (within float noise) a member of the series."""
    if value <= 0:
        return False
    _, error_pct = snap_to_e_series(value, series)
    return abs(error_pct) < 1e-6
