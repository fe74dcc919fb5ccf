"""
PixelStag - Gaussian blur and index mapped downsampling for images and
color sequences
"""

from .errors import ContractViolation
from .config import Settings, settings
from .color import Color, ColorSequence, colors_to_array, colors_from_array
from .image import Image
from .algorithms import (
    GaussianKernel,
    gaussian_kernel,
    blur,
    blur_image,
    blur_colors,
    downsample,
    downsample_image,
    downsample_colors,
)

__all__ = [
    # Errors
    "ContractViolation",
    # Configuration
    "Settings",
    "settings",
    # Core types
    "Color",
    "ColorSequence",
    "colors_to_array",
    "colors_from_array",
    "Image",
    # Algorithms
    "GaussianKernel",
    "gaussian_kernel",
    "blur",
    "blur_image",
    "blur_colors",
    "downsample",
    "downsample_image",
    "downsample_colors",
]

__version__ = "0.1.0"
