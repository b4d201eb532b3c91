"""Configuration management."""

import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration."""

    # Paths
    output_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("CHARTREEL_OUTPUT_DIR", "./output")),
        description="Directory rendered videos are written to"
    )
    cache_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("CHARTREEL_CACHE_DIR", "./cache")),
        description="Directory for intermediate render assets"
    )
    font: str = Field(
        default_factory=lambda: os.getenv("CHARTREEL_FONT", ""),
        description="Path to a TTF/OTF font used for text nodes"
    )

    # Encoding settings
    fps: int = Field(
        default_factory=lambda: int(os.getenv("CHARTREEL_FPS", "30")),
        description="Default frame rate",
        gt=0
    )
    preset: str = Field(
        default_factory=lambda: os.getenv("CHARTREEL_PRESET", "medium"),
        description="x264 encoding preset"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def ensure_dirs(self) -> None:
        """Create the output and cache directories if missing."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.cache_dir.mkdir(parents=True, exist_ok=True)


# Global config instance
config = Config()
