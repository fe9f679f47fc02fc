# Andy Zhao
"""
Cornerness response maps.

Three scores, each written per pixel into a caller-owned float image:
- Shi-Tomasi (GFTT): minimum eigenvalue of the smoothed structure tensor
- Hessian: determinant of the second-derivative matrix
- DoG: difference of two Gaussian blurs

All functions are pure: same input -> same output, no hidden state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..types import check_same_size
from .filter import gaussian_blur, gaussian_kernel_size, spatial_gradient
from .stencil import second_derivatives


@dataclass(frozen=True)
class GFTTParams:
    """
    Structure tensor smoothing for the Shi-Tomasi response.

    kernel_size:
      - Gaussian taps along (x, y). Larger = bigger neighbourhood.
    sigma:
      - Gaussian sigma along (x, y).
    """
    kernel_size: Tuple[int, int] = (7, 7)
    sigma: Tuple[float, float] = (1.0, 1.0)


def gftt_response(
        src: np.ndarray,
        dst: np.ndarray,
        *,
        params: GFTTParams = GFTTParams(),
) -> None:
    """
    Compute the Shi-Tomasi cornerness of src into dst.

    Structure tensor per pixel, after Gaussian smoothing:

        M = [[A, C],
             [C, B]]     A = <dx^2>, B = <dy^2>, C = <dx dy>

    Eigenvalues of the symmetric 2x2 matrix:

        l1,2 = (tr +/- sqrt(|tr^2 - 4 det|)) / 2

    The abs() guards tiny negative discriminants from rounding.
    Response = min(l1, l2).
    """
    check_same_size(src, dst)
    src = np.asarray(src, dtype=np.float32)

    # ---------- Gradients ----------
    dx = np.zeros(src.shape, dtype=np.float32)
    dy = np.zeros(src.shape, dtype=np.float32)
    spatial_gradient(src, dx, dy)

    # ---------- Structure tensor entries, smoothed ----------
    a = np.zeros(src.shape, dtype=np.float32)
    b = np.zeros(src.shape, dtype=np.float32)
    c = np.zeros(src.shape, dtype=np.float32)
    gaussian_blur(dx * dx, a, params.kernel_size, params.sigma)
    gaussian_blur(dy * dy, b, params.kernel_size, params.sigma)
    gaussian_blur(dx * dy, c, params.kernel_size, params.sigma)

    # ---------- Eigenvalues ----------
    det = a * b - c * c
    trace = a + b
    root = np.sqrt(np.abs(trace * trace - np.float32(4.0) * det))

    e1 = np.float32(0.5) * (trace + root)
    e2 = np.float32(0.5) * (trace - root)

    dst[...] = np.minimum(e1, e2)


def hessian_response(src: np.ndarray, dst: np.ndarray) -> None:
    """
    Compute the Hessian determinant dxx * dyy - dxy^2 into dst.

    Only interior pixels are written; the first/last row and column of dst
    keep whatever value they had.
    """
    check_same_size(src, dst)
    src = np.asarray(src, dtype=np.float32)

    derivs = second_derivatives(src)
    if derivs is None:
        # No interior to write
        return

    dxx, dyy, dxy = derivs
    dst[1:-1, 1:-1] = dxx * dyy - dxy * dxy


def dog_response(src: np.ndarray, dst: np.ndarray, sigma1: float, sigma2: float) -> None:
    """
    Compute the Difference-of-Gaussians blur(sigma2) - blur(sigma1) into dst.

    Kernel sizes come from gaussian_kernel_size(); a sigma <= 0 raises
    ValueError before anything is written.
    """
    check_same_size(src, dst)

    ks1 = gaussian_kernel_size(sigma1)
    ks2 = gaussian_kernel_size(sigma2)

    src = np.asarray(src, dtype=np.float32)
    gauss1 = np.zeros(src.shape, dtype=np.float32)
    gauss2 = np.zeros(src.shape, dtype=np.float32)

    gaussian_blur(src, gauss1, (ks1, ks1), (float(sigma1), float(sigma1)))
    gaussian_blur(src, gauss2, (ks2, ks2), (float(sigma2), float(sigma2)))

    dst[...] = gauss2 - gauss1
