"""
Tracking primitives package
"""
from .keypoints import detect_keypoints, GridDetectorParams
from .corners import fast_detect, corners_to_points
from .sampling import sample_gradient, point_in_bound, inbound
from .se2 import se2_exp, SE2_EPS

__all__ = [
    "detect_keypoints", "GridDetectorParams",
    "fast_detect", "corners_to_points",
    "sample_gradient", "point_in_bound", "inbound",
    "se2_exp", "SE2_EPS",
]
