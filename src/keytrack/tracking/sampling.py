# Andy Zhao
"""
Subpixel sampling and bounds checks for the tracker update loop.

sample_gradient reads a 4x4 neighbourhood around (x, y):

    rows iy-1 .. iy+2, cols ix-1 .. ix+2     (ix = floor(x), iy = floor(y))

Callers must check the neighbourhood is inside the image first,
typically with inbound(image, x, y, radius) for some radius >= 2.
"""
from __future__ import annotations

import math

import numpy as np

from ..features.stencil import bilinear_weights, bilinear_blend
from ..types import Corner, FloatArray


def sample_gradient(image: np.ndarray, x: float, y: float) -> FloatArray:
    """
    Bilinear intensity and central-difference gradient at (x, y).

    Returns:
      (3,) float64 array: [I, dI/dx, dI/dy]
        - I: bilinear blend of the 2x2 block at (ix, iy)
        - dI/dx: 0.5 * (blend shifted +1 in x - blend shifted -1 in x)
        - dI/dy: same along y

    Raises IndexError if the 4x4 neighbourhood leaves the image.
    """
    if image.ndim != 2:
        raise ValueError(f"sample_gradient expects grayscale (H,W), got {image.shape}")

    ix = math.floor(x)
    iy = math.floor(y)
    h, w = image.shape
    if ix < 1 or iy < 1 or ix + 2 >= w or iy + 2 >= h:
        raise IndexError(f"Sample point ({x}, {y}) too close to the border of a {w}x{h} image")

    # patch[r, c] is pixel (ix - 1 + c, iy - 1 + r)
    patch = image[iy - 1:iy + 3, ix - 1:ix + 3].astype(np.float64)
    weights = bilinear_weights(x - ix, y - iy)

    intensity = bilinear_blend(patch[1:3, 1:3], weights)

    minus_x = bilinear_blend(patch[1:3, 0:2], weights)
    plus_x = bilinear_blend(patch[1:3, 2:4], weights)
    minus_y = bilinear_blend(patch[0:2, 1:3], weights)
    plus_y = bilinear_blend(patch[2:4, 1:3], weights)

    return np.array(
        [intensity, 0.5 * (plus_x - minus_x), 0.5 * (plus_y - minus_y)],
        dtype=np.float64,
    )


def point_in_bound(corner: Corner, height: int, width: int, radius: int) -> bool:
    """
    True if the corner is at least `radius` pixels from every edge.
    Upper bounds are inclusive: x <= width - radius.
    """
    return (
        radius <= corner.x <= width - radius
        and radius <= corner.y <= height - radius
    )


def _round_half_away(v: float) -> int:
    # half away from zero (round() would go to even)
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def inbound(image: np.ndarray, x: float, y: float, radius: int) -> bool:
    """
    True if (x, y), snapped to the nearest pixel, keeps `radius` pixels
    of margin. Upper bounds are strict: x < width - radius.
    """
    h, w = image.shape[:2]
    px = _round_half_away(x)
    py = _round_half_away(y)
    return radius <= px < w - radius and radius <= py < h - radius
