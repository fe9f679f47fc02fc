from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def cross_pattern() -> np.ndarray:
    """Symmetric 9x9 image: four ring blocks around a bright centre pixel."""
    return np.array(
        [
            [0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 1, 1, 1, 0, 1, 1, 1, 0],
            [0, 1, 0, 1, 0, 1, 0, 1, 0],
            [0, 1, 1, 1, 0, 1, 1, 1, 0],
            [0, 0, 0, 0, 4, 0, 0, 0, 0],
            [0, 1, 1, 1, 0, 1, 1, 1, 0],
            [0, 1, 0, 1, 0, 1, 0, 1, 0],
            [0, 1, 1, 1, 0, 1, 1, 1, 0],
            [0, 0, 0, 0, 0, 0, 0, 0, 0],
        ],
        dtype=np.float32,
    )


@pytest.fixture
def ring_5x5() -> np.ndarray:
    return np.array(
        [
            [0, 0, 0, 0, 0],
            [0, 1, 1, 1, 0],
            [0, 1, 0, 1, 0],
            [0, 1, 1, 1, 0],
            [0, 0, 0, 0, 0],
        ],
        dtype=np.float32,
    )


@pytest.fixture
def square_5x5() -> np.ndarray:
    img = np.zeros((5, 5), dtype=np.float32)
    img[1:4, 1:4] = 1.0
    return img


@pytest.fixture
def squares_frame() -> np.ndarray:
    """160x160 uint8 frame with bright 8x8 squares every 16 px: FAST corners everywhere."""
    img = np.zeros((160, 160), dtype=np.uint8)
    for y in range(4, 160, 16):
        for x in range(4, 160, 16):
            img[y:y + 8, x:x + 8] = 255
    return img


@pytest.fixture
def ramp_image() -> np.ndarray:
    """uint8 image with I(x, y) = 2x + 3y."""
    ys, xs = np.mgrid[0:20, 0:20]
    return (2 * xs + 3 * ys).astype(np.uint8)
