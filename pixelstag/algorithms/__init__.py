"""
The numerical kernels of PixelStag: Gaussian blur and index mapped
downsampling for images and color sequences.
"""

from .kernel import GaussianKernel, gaussian_kernel, identity_kernel
from .axis import convolve_axis, sample_indices
from .blur import blur, blur_image, blur_colors
from .downsample import downsample, downsample_image, downsample_colors

__all__ = [
    "GaussianKernel",
    "gaussian_kernel",
    "identity_kernel",
    "convolve_axis",
    "sample_indices",
    "blur",
    "blur_image",
    "blur_colors",
    "downsample",
    "downsample_image",
    "downsample_colors",
]
