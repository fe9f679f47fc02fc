# Andy Zhao
"""
SE(2) exponential map (3x3 homogeneous form).

A twist xi = (tx, ty, theta) maps to the rigid motion

    T = [[cos, -sin, t_x],
         [sin,  cos, t_y],
         [  0,    0,   1]]

with the translation mixed through the left Jacobian

    [t_x]   [a  -b] [tx]        a = sin(theta) / theta
    [t_y] = [b   a] [ty]        b = (1 - cos(theta)) / theta

Both a and b are 0/0 at theta = 0, so tiny angles use their Taylor series:

    a ~ 1 - theta^2 / 6
    b ~ theta / 2 - theta^3 / 24
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..types import Mat3x3, is_valid_mat3x3

# Below this |theta| the closed forms lose precision (float32 machine epsilon).
SE2_EPS = float(np.finfo(np.float32).eps)


def _jacobian_coefficients(theta: float) -> tuple[float, float]:
    """
    Return (sin(theta)/theta, (1 - cos(theta))/theta).
    """
    if abs(theta) < SE2_EPS:
        theta_sq = theta * theta
        return 1.0 - theta_sq / 6.0, 0.5 * theta - theta * theta_sq / 24.0

    return math.sin(theta) / theta, (1.0 - math.cos(theta)) / theta


def se2_exp(twist: Sequence[float]) -> Mat3x3:
    """
    Exponential map of a planar twist.

    twist:
      - (tx, ty, theta): translation components and rotation angle (radians)

    Returns:
      3x3 float64 homogeneous transform.
    """
    if len(twist) != 3:
        raise ValueError(f"se2_exp expects a 3-vector (tx, ty, theta), got length {len(twist)}")

    tx, ty, theta = (float(v) for v in twist)
    a, b = _jacobian_coefficients(theta)

    t_x = a * tx - b * ty
    t_y = b * tx + a * ty

    c = math.cos(theta)
    s = math.sin(theta)

    T = np.array(
        [
            [c, -s, t_x],
            [s, c, t_y],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    if not is_valid_mat3x3(T):
        raise ValueError(f"se2_exp produced a non-finite transform from twist {tuple(twist)}")
    return T
