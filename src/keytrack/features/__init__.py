"""
Response maps package
"""
from .response import gftt_response, hessian_response, dog_response, GFTTParams
from .filter import gaussian_blur, gaussian_kernel_size, spatial_gradient
from .stencil import second_derivatives, bilinear_weights, bilinear_blend

__all__ = [
    "gftt_response", "hessian_response", "dog_response", "GFTTParams",
    "gaussian_blur", "gaussian_kernel_size", "spatial_gradient",
    "second_derivatives", "bilinear_weights", "bilinear_blend",
]
