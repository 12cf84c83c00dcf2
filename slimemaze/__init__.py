"""A tile-based maze game with hidden traps, pressure plates and a locked door."""

__version__ = "2025.0"

__all__ = ["__version__"]