"""Area, perimeter, surface and volume of common plane and solid figures."""

__version__ = "0.1.0"
__all__ = ["__version__"]