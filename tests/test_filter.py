import numpy as np
import pytest

from keytrack import ImageSizeError
from keytrack.features import (
    gaussian_blur, gaussian_kernel_size, spatial_gradient,
    second_derivatives, bilinear_weights, bilinear_blend,
)


# ---------- Kernel size ----------
@pytest.mark.parametrize(
    "sigma,expected",
    [(0.5, 5), (1.0, 9), (0.7, 7), (1.6, 13), (0.1, 1)],
)
def test_gaussian_kernel_size(sigma, expected):
    assert gaussian_kernel_size(sigma) == expected


@pytest.mark.parametrize("sigma", [0.0, -1.0, float("inf")])
def test_gaussian_kernel_size_rejects_bad_sigma(sigma):
    with pytest.raises(ValueError):
        gaussian_kernel_size(sigma)


# ---------- Gaussian blur ----------
def test_gaussian_blur_impulse_keeps_mass_and_symmetry():
    src = np.zeros((21, 21), dtype=np.float32)
    src[10, 10] = 1.0
    dst = np.zeros_like(src)

    gaussian_blur(src, dst, (7, 7), (1.0, 1.0))

    assert abs(float(dst.sum()) - 1.0) < 1e-5
    assert dst[10, 10] == dst.max()
    np.testing.assert_allclose(dst, dst.T, atol=1e-7)
    np.testing.assert_allclose(dst, dst[::-1, ::-1], atol=1e-7)


def test_gaussian_blur_pads_with_zero():
    src = np.ones((5, 5), dtype=np.float32)
    dst = np.zeros_like(src)
    gaussian_blur(src, dst, (5, 5), (1.0, 1.0))
    # corners lose the most mass to the zero border
    assert dst[0, 0] < dst[2, 2]
    assert dst[0, 0] < 0.6


def test_gaussian_blur_rejects_even_kernel():
    src = np.zeros((5, 5), dtype=np.float32)
    with pytest.raises(ValueError):
        gaussian_blur(src, np.zeros_like(src), (4, 5), (1.0, 1.0))


def test_gaussian_blur_shape_mismatch():
    with pytest.raises(ImageSizeError):
        gaussian_blur(np.zeros((4, 4), np.float32), np.zeros((4, 5), np.float32), (3, 3), (1.0, 1.0))


# ---------- Gradient ----------
def test_spatial_gradient_on_ramp():
    ys, xs = np.mgrid[0:8, 0:10]
    src = (3.0 * xs - 2.0 * ys).astype(np.float32)
    dx = np.zeros_like(src)
    dy = np.zeros_like(src)

    spatial_gradient(src, dx, dy)

    np.testing.assert_allclose(dx[1:-1, 1:-1], 3.0, atol=1e-5)
    np.testing.assert_allclose(dy[1:-1, 1:-1], -2.0, atol=1e-5)
    # replicated edge halves the one-sided difference
    np.testing.assert_allclose(dx[1:-1, 0], 1.5, atol=1e-5)


# ---------- Stencils ----------
def test_second_derivatives_of_quadratic():
    ys, xs = np.mgrid[0:6, 0:7]
    src = (xs * xs + 0.5 * ys * ys + xs * ys).astype(np.float64)

    dxx, dyy, dxy = second_derivatives(src)

    assert dxx.shape == (4, 5)
    np.testing.assert_allclose(dxx, 2.0)
    np.testing.assert_allclose(dyy, 1.0)
    np.testing.assert_allclose(dxy, 1.0)


def test_second_derivatives_needs_interior():
    assert second_derivatives(np.zeros((2, 10))) is None
    assert second_derivatives(np.zeros((10, 2))) is None


def test_bilinear_weights_sum_to_one():
    w = bilinear_weights(0.25, 0.75)
    assert abs(w.sum() - 1.0) < 1e-12
    block = np.array([[0.0, 4.0], [8.0, 12.0]])
    # value = 4 * fx + 8 * fy
    assert abs(bilinear_blend(block, w) - 7.0) < 1e-12


def test_bilinear_blend_rejects_wrong_block():
    with pytest.raises(ValueError):
        bilinear_blend(np.zeros((3, 2)), bilinear_weights(0.0, 0.0))
