# Andy Zhao
"""
Fixed finite-difference and interpolation stencils.

Second derivatives use the 3x3 neighbourhood of each pixel:

    dxx = I(x-1,y) - 2 I(x,y) + I(x+1,y)
    dyy = I(x,y-1) - 2 I(x,y) + I(x,y+1)
    dxy = 0.25 * (I(x+1,y+1) - I(x-1,y+1) - I(x+1,y-1) + I(x-1,y-1))

The outermost ring has no full neighbourhood, so everything here works on
the interior view src[1:-1, 1:-1]. Shifted slices of the same array stand
in for the nine taps, which evaluates every row at once.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


def second_derivatives(src: np.ndarray) -> Optional[Tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """
    Compute (dxx, dyy, dxy) for every interior pixel of a 2D image.

    Output arrays have shape (H-2, W-2) and the dtype of src.
    Returns None if the image is smaller than 3x3 (no interior).
    """
    if src.ndim != 2:
        raise ValueError(f"second_derivatives expects (H,W), got {src.shape}")

    h, w = src.shape
    if h < 3 or w < 3:
        return None

    # Taps named by (row offset, col offset) around the centre
    c = src[1:-1, 1:-1]
    up = src[:-2, 1:-1]
    down = src[2:, 1:-1]
    left = src[1:-1, :-2]
    right = src[1:-1, 2:]
    up_left = src[:-2, :-2]
    up_right = src[:-2, 2:]
    down_left = src[2:, :-2]
    down_right = src[2:, 2:]

    two = src.dtype.type(2.0)
    quarter = src.dtype.type(0.25)

    dxx = left - two * c + right
    dyy = up - two * c + down
    dxy = quarter * (down_right - down_left - up_right + up_left)
    return dxx, dyy, dxy


def bilinear_weights(fx: float, fy: float) -> np.ndarray:
    """
    2x2 bilinear weights for fractional offsets (fx, fy) in [0, 1).

    Layout follows image indexing [row, col]:
        [[(1-fx)(1-fy), fx(1-fy)],
         [(1-fx) fy,    fx fy   ]]
    """
    gx = 1.0 - fx
    gy = 1.0 - fy
    return np.array(
        [
            [gx * gy, fx * gy],
            [gx * fy, fx * fy],
        ],
        dtype=np.float64,
    )


def bilinear_blend(block: np.ndarray, weights: np.ndarray) -> float:
    """
    Weighted sum of a 2x2 pixel block.
    """
    if block.shape != (2, 2):
        raise ValueError(f"Expected a (2,2) block, got {block.shape}")
    return float(np.sum(block * weights))
