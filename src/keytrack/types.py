# Andy Zhao

"""
Shared typed primitives for the feature / keypoint layer.

Defines:
- Typed NumPy aliases
    - Images are 2D arrays indexed [y, x]
    - Points are (N,2) float arrays
    - Transforms are 3x3 homogeneous matrices
- Corner container (integer pixel + score)
- ImageSizeError for mismatched image pairs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

import numpy as np
import numpy.typing as npt

# ---------- Numpy typing aliases ----------
# - float32 for response maps (same precision as the filters write)
# - uint8 for the frames the corner detector consumes
# - float64 for geometry / matrices

FloatArray: TypeAlias = npt.NDArray[np.float64]
FloatImage: TypeAlias = npt.NDArray[np.float32]   # shape: (H, W)
GrayImage: TypeAlias = npt.NDArray[np.uint8]      # shape: (H, W)

# Points in 2D image coordinates, (x, y) per row.
Points2D: TypeAlias = FloatArray      # shape: (N, 2)

# 3x3 homogeneous transform matrix, last row [0, 0, 1].
Mat3x3: TypeAlias = FloatArray        # shape: (3, 3)


# ---------- Corner container ----------
@dataclass(frozen=True)
class Corner:
    """
    A detected corner.

    x, y:
      - integer pixel coordinates (column, row)
    score:
      - detector response; selection sorts on this field only
    """
    x: int
    y: int
    score: float = 0.0


# ---------- Errors ----------
class ImageSizeError(ValueError):
    """
    Raised when two images that must share a shape do not.
    """

    def __init__(self, src_shape: tuple[int, ...], dst_shape: tuple[int, ...]) -> None:
        self.src_shape = tuple(src_shape)
        self.dst_shape = tuple(dst_shape)
        super().__init__(
            f"Image size mismatch: src {self.src_shape} vs dst {self.dst_shape}"
        )


# ---------- Helper Function ----------
def check_same_size(src: np.ndarray, dst: np.ndarray) -> None:
    """
    Validate a (src, dst) pair of single-channel images.
    - both must be 2D (H,W)
    - shapes must match exactly, never broadcast
    """
    if src.ndim != 2 or dst.ndim != 2:
        raise ValueError(f"Expected single-channel images (H,W), got {src.shape} and {dst.shape}")

    if src.shape != dst.shape:
        raise ImageSizeError(src.shape, dst.shape)


def is_valid_mat3x3(T: Mat3x3) -> bool:
    """
    Verify a 3x3 transform matrix.
    """
    return isinstance(T, np.ndarray) and T.shape == (3, 3) and np.isfinite(T).all()
