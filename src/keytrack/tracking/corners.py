# Andy Zhao
"""
Corners / keypoint detection

FAST-9 via cv2.FastFeatureDetector (no non-max suppression).
The grid detector calls this once per cell and threshold.

OpenCV only scores keypoints when non-max suppression runs, so the score is
computed here: the highest threshold at which the pixel still passes the
segment test, i.e. over every arc of 9 contiguous ring pixels

    score = max( min(ring - centre), min(centre - ring) ) - 1

(OpenCV compares strictly: ring > centre + t.)
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import cv2

from ..types import Corner, Points2D

# Bresenham circle of radius 3, (dx, dy), walked in order around the ring
_RING = np.array(
    [
        (0, 3), (1, 3), (2, 2), (3, 1), (3, 0), (3, -1), (2, -2), (1, -3),
        (0, -3), (-1, -3), (-2, -2), (-3, -1), (-3, 0), (-3, 1), (-2, 2), (-1, 3),
    ],
    dtype=np.intp,
)
_ARC = 9


def _segment_scores(gray: np.ndarray, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    FAST-9 score for each (xs[i], ys[i]). Pixels must be >= 3 px from the border.
    """
    centre = gray[ys, xs].astype(np.int16)
    ring = gray[ys[:, None] + _RING[:, 1], xs[:, None] + _RING[:, 0]].astype(np.int16)
    diff = ring - centre[:, None]                                   # (N, 16)

    # Wrap so every arc start has 9 contiguous entries
    wrapped = np.concatenate([diff, diff[:, :_ARC - 1]], axis=1)    # (N, 24)
    arcs = np.lib.stride_tricks.sliding_window_view(wrapped, _ARC, axis=1)[:, :len(_RING)]

    brighter = arcs.min(axis=2)
    darker = (-arcs).min(axis=2)
    return np.maximum(brighter, darker).max(axis=1) - 1


def fast_detect(gray: np.ndarray, threshold: int) -> list[Corner]:
    """
    Detect FAST-9 corners on a grayscale image.

    Input:
      gray: (H,W) uint8 image
      threshold: intensity difference a ring pixel must exceed, 0..255
    Output:
      every pixel passing the segment test, in detector order,
      integer pixel coordinates, score >= threshold
    """
    if gray.ndim != 2:
        raise ValueError("fast_detect expects grayscale (H,W).")
    if gray.dtype != np.uint8:
        raise ValueError(f"fast_detect expects uint8 image, got {gray.dtype}")
    if not 0 <= int(threshold) <= 255:
        raise ValueError(f"FAST threshold must be in [0, 255], got {threshold}")

    gray = np.ascontiguousarray(gray)
    detector = cv2.FastFeatureDetector_create(
        threshold=int(threshold),
        nonmaxSuppression=False,
        type=cv2.FAST_FEATURE_DETECTOR_TYPE_9_16,
    )
    keypoints = detector.detect(gray, None)
    if not keypoints:
        return []

    xs = np.array([int(round(kp.pt[0])) for kp in keypoints], dtype=np.intp)
    ys = np.array([int(round(kp.pt[1])) for kp in keypoints], dtype=np.intp)
    scores = _segment_scores(gray, xs, ys)

    return [
        Corner(x=int(x), y=int(y), score=float(s))
        for x, y, s in zip(xs, ys, scores)
    ]


def corners_to_points(corners: Iterable[Corner]) -> Points2D:
    """
    Corners -> (N,2) float64 points, the layout the LK tracker expects.
    """
    pts = [(c.x, c.y) for c in corners]
    if not pts:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray(pts, dtype=np.float64)
