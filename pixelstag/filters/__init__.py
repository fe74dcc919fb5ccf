# PixelStag Filters Module
"""
Dataclass-based filters wrapping the blur and downsample kernels.

All filters are JSON-serializable, can be parsed from compact strings and
composed into pipelines.
"""

from .base import (
    Filter,
    FILTER_REGISTRY,
    FILTER_ALIASES,
    register_filter,
    register_alias,
)
from .blur import GaussianBlur
from .geometric import Downsample
from .pipeline import FilterPipeline

__all__ = [
    "Filter",
    "FILTER_REGISTRY",
    "FILTER_ALIASES",
    "register_filter",
    "register_alias",
    "GaussianBlur",
    "Downsample",
    "FilterPipeline",
]
