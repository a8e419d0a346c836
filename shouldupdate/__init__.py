"""Track application versions and check GitHub releases for updates."""

__version__ = "0.1.0"
__all__ = ["__version__"]