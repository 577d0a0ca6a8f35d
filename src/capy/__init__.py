"""Capy: a themable desktop launcher for programmer searches."""

__version__ = "0.1.0"

__all__ = ["__version__"]
