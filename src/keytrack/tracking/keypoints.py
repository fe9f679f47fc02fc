# Andy Zhao
"""
Grid-constrained keypoint detection.

The frame is split into square cells of side grid_size, centred so the
leftover margin is shared by both ends of each axis. Cells that already
hold a tracked corner are skipped; every other cell runs FAST with a
threshold that drops step by step until the cell quota is met.

Per call:
  1) grid setup: rows = h // g + 1, cols = w // g + 1, occupancy = 0
  2) seeding: +1 for each existing corner inside the gridded band
  3) per empty cell: FAST at 40, 35, ..., 10 until num_points_in_cell
     corners passing the edge margin are collected
  4) result: accepted corners in cell visit order
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
import os

import numpy as np

from ..types import Corner
from .corners import fast_detect
from .sampling import point_in_bound

_DETECT_DEBUG = os.environ.get("KEYTRACK_DETECT_DEBUG", "0") == "1"


@dataclass(frozen=True)
class GridDetectorParams:
    """
    Policy constants for detect_keypoints.

    edge_threshold:
      - Accepted corners keep at least this many pixels from every edge.
    initial_threshold:
      - First FAST threshold tried in a cell.
    threshold_step:
      - Amount the threshold drops after a pass that missed the quota.
      - The loop also stops once the threshold is below one step (no negatives).
    min_threshold:
      - Lowest threshold that still gets a pass.
    prefer_low_score:
      - True: accept corners in ascending score order (literal behaviour).
      - False: strongest corners first.
    """
    edge_threshold: int = 19
    initial_threshold: int = 40
    threshold_step: int = 5
    min_threshold: int = 10
    prefer_low_score: bool = True


@dataclass(frozen=True)
class _GridLayout:
    rows: int
    cols: int
    x_start: int
    x_stop: int
    y_start: int
    y_stop: int
    grid_size: int

    def cell_index(self, x: int, y: int) -> int:
        # flat row-major index of the cell containing (x, y)
        col = (x - self.x_start) // self.grid_size
        row = (y - self.y_start) // self.grid_size
        return row * self.cols + col

    def in_band(self, x: int, y: int) -> bool:
        return (
            self.x_start <= x < self.x_stop + self.grid_size
            and self.y_start <= y < self.y_stop + self.grid_size
        )


def _grid_layout(height: int, width: int, grid_size: int) -> _GridLayout:
    """
    Cell origins run from *_start to *_stop (exclusive) in steps of grid_size.
    The last origin leaves room for one full cell inside the frame.
    """
    x_start = (width % grid_size) // 2
    y_start = (height % grid_size) // 2
    x_stop = x_start + grid_size * (width // grid_size - 1) + 1
    y_stop = y_start + grid_size * (height // grid_size - 1) + 1

    return _GridLayout(
        rows=height // grid_size + 1,
        cols=width // grid_size + 1,
        x_start=x_start,
        x_stop=x_stop,
        y_start=y_start,
        y_stop=y_stop,
        grid_size=grid_size,
    )


def _seed_occupancy(layout: _GridLayout, corners: Sequence[Corner]) -> np.ndarray:
    """
    Count existing corners per cell. Corners in the margin are ignored.
    """
    occupancy = np.zeros(layout.rows * layout.cols, dtype=np.int32)
    for corner in corners:
        if not layout.in_band(corner.x, corner.y):
            continue
        idx = layout.cell_index(corner.x, corner.y)
        if idx < occupancy.shape[0]:
            occupancy[idx] += 1
    return occupancy


def _detect_in_cell(
        image: np.ndarray,
        x: int,
        y: int,
        grid_size: int,
        num_points_in_cell: int,
        params: GridDetectorParams,
) -> list[Corner]:
    """
    Adaptive-threshold FAST search inside one cell.
    Returned corners are in frame coordinates.
    """
    h, w = image.shape
    cell = np.ascontiguousarray(image[y:y + grid_size, x:x + grid_size])

    accepted: list[Corner] = []
    threshold = params.initial_threshold

    while len(accepted) < num_points_in_cell and threshold >= params.min_threshold:
        candidates = fast_detect(cell, threshold)
        candidates.sort(key=lambda c: c.score, reverse=not params.prefer_low_score)

        for corner in candidates:
            if len(accepted) >= num_points_in_cell:
                break

            # Cell coords -> frame coords
            point = Corner(x=corner.x + x, y=corner.y + y, score=corner.score)
            if point_in_bound(point, h, w, params.edge_threshold):
                accepted.append(point)

        if threshold < params.threshold_step:
            break
        threshold -= params.threshold_step

    if _DETECT_DEBUG:
        print(f"[DETECT] cell=({x},{y}) added={len(accepted)}/{num_points_in_cell} next_threshold={threshold}")

    return accepted


def detect_keypoints(
        image: np.ndarray,
        grid_size: int,
        existing_corners: Sequence[Corner],
        num_points_in_cell: int,
        *,
        params: GridDetectorParams = GridDetectorParams(),
) -> list[Corner]:
    """
    Detect new keypoints in every grid cell that has no tracked corner yet.

    Inputs:
        image:
          - (H,W) uint8 grayscale frame
        grid_size:
          - cell side in pixels, >= 1
        existing_corners:
          - corners already being tracked; only read to mark occupied cells
        num_points_in_cell:
          - quota per empty cell, >= 0

    Returns:
        New corners, grouped by cell in visit order (column by column,
        top to bottom within a column). Each satisfies the edge margin.
    """
    # ---------- Input Check ----------
    if image.ndim != 2:
        raise ValueError("detect_keypoints expects grayscale (H,W). Convert BGR->gray before calling.")
    if image.dtype != np.uint8:
        raise ValueError(f"detect_keypoints expects uint8 image, got {image.dtype}")

    grid_size = int(grid_size)
    num_points_in_cell = int(num_points_in_cell)
    if grid_size < 1:
        raise ValueError(f"grid_size must be >= 1, got {grid_size}")
    if num_points_in_cell < 0:
        raise ValueError(f"num_points_in_cell must be >= 0, got {num_points_in_cell}")

    h, w = image.shape
    layout = _grid_layout(h, w, grid_size)
    occupancy = _seed_occupancy(layout, existing_corners)

    all_corners: list[Corner] = []
    for x in range(layout.x_start, layout.x_stop, grid_size):
        for y in range(layout.y_start, layout.y_stop, grid_size):
            # Already tracked here: leave the cell alone
            if occupancy[layout.cell_index(x, y)] > 0:
                continue
            all_corners.extend(
                _detect_in_cell(image, x, y, grid_size, num_points_in_cell, params)
            )

    return all_corners
