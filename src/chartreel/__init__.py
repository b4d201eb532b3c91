"""Chart and story short-video creator."""

__version__ = "0.1.0"
