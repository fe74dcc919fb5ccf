"""PixelStag configuration."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings, overridable through ``PIXELSTAG_*`` environment variables."""

    # Numerics
    ACCUMULATOR_DTYPE: Literal["float32", "float64"] = "float32"  # Blur accumulation precision

    # Debug output
    DEBUG_DUMP: bool = False  # Write intermediate images via dump_debug_image
    DEBUG_DIR: Path = Path("tmp") / "debug"

    model_config = {"env_prefix": "PIXELSTAG_"}


settings = Settings()
