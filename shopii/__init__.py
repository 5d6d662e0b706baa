"""A small terminal shop with customer and seller accounts."""

__version__ = "0.1.0"
__all__ = ["__version__"]