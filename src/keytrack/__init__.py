"""
keytrack: cornerness response maps, grid-constrained keypoint detection
and the per-keypoint primitives used by frame-to-frame trackers.
"""
from .types import (
    FloatArray, FloatImage, GrayImage, Points2D, Mat3x3,
    Corner, ImageSizeError, check_same_size, is_valid_mat3x3,
)
from .features import (
    gftt_response, hessian_response, dog_response, GFTTParams,
)
from .tracking import (
    detect_keypoints, GridDetectorParams,
    fast_detect, corners_to_points,
    sample_gradient, point_in_bound, inbound,
    se2_exp,
)

__all__ = [
    "FloatArray", "FloatImage", "GrayImage", "Points2D", "Mat3x3",
    "Corner", "ImageSizeError", "check_same_size", "is_valid_mat3x3",
    "gftt_response", "hessian_response", "dog_response", "GFTTParams",
    "detect_keypoints", "GridDetectorParams",
    "fast_detect", "corners_to_points",
    "sample_gradient", "point_in_bound", "inbound",
    "se2_exp",
]
