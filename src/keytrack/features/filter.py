# Andy Zhao
"""
Image filtering helpers used by the response maps.

Wraps two OpenCV operators with fixed border behaviour:
1) Gaussian blur (separable):
    - cv2.getGaussianKernel builds the 1D taps
    - cv2.sepFilter2D runs rows then columns
    - pixels outside the image count as 0 (cv2.BORDER_CONSTANT)
2) Spatial gradient:
    - 3x3 Sobel normalised by 1/8, so a unit ramp gives gradient 1
    - edge pixels are replicated (cv2.BORDER_REPLICATE)

Both write into a caller-owned destination of the same shape.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np
import cv2

from ..types import check_same_size


def gaussian_kernel_size(sigma: float) -> int:
    """
    Kernel size covering +/- 4 sigma, forced to be odd.

        ksize = int(2 * 4 * sigma + 1), +1 if even

    Raises ValueError for sigma <= 0 (would give a degenerate kernel).
    """
    sigma = float(sigma)
    if not math.isfinite(sigma) or sigma <= 0.0:
        raise ValueError(f"sigma must be a positive finite number, got {sigma}")

    ksize = int(2.0 * 4.0 * sigma + 1.0)
    if ksize % 2 == 0:
        ksize += 1
    return ksize


def _gaussian_kernel_1d(ksize: int, sigma: float) -> np.ndarray:
    if ksize <= 0 or ksize % 2 == 0:
        raise ValueError(f"Gaussian kernel size must be odd and positive, got {ksize}")
    if not math.isfinite(sigma) or sigma <= 0.0:
        raise ValueError(f"Gaussian sigma must be positive, got {sigma}")

    return cv2.getGaussianKernel(int(ksize), float(sigma), ktype=cv2.CV_32F)


def gaussian_blur(
        src: np.ndarray,
        dst: np.ndarray,
        kernel_size: Tuple[int, int],
        sigma: Tuple[float, float],
) -> None:
    """
    Blur src into dst with a separable Gaussian.

    kernel_size:
      - (kx, ky) odd tap counts along x (columns) and y (rows)
    sigma:
      - (sigma_x, sigma_y), both > 0
    """
    check_same_size(src, dst)

    kx = _gaussian_kernel_1d(kernel_size[0], sigma[0])
    ky = _gaussian_kernel_1d(kernel_size[1], sigma[1])

    src32 = np.asarray(src, dtype=np.float32)
    out = cv2.sepFilter2D(
        src32,
        cv2.CV_32F,
        kx,
        ky,
        borderType=cv2.BORDER_CONSTANT,
    )
    dst[...] = out


def spatial_gradient(src: np.ndarray, dx: np.ndarray, dy: np.ndarray) -> None:
    """
    First derivatives of src along x and y, written into dx / dy.

    Kernels (cross-correlation, scaled by 1/8):
        x: [[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]]
        y: transpose of x
    """
    check_same_size(src, dx)
    check_same_size(src, dy)

    src32 = np.asarray(src, dtype=np.float32)
    dx[...] = cv2.Sobel(src32, cv2.CV_32F, 1, 0, ksize=3, scale=0.125, borderType=cv2.BORDER_REPLICATE)
    dy[...] = cv2.Sobel(src32, cv2.CV_32F, 0, 1, ksize=3, scale=0.125, borderType=cv2.BORDER_REPLICATE)
