"""Continuous and discrete Fréchet distances, curve simplification and helpers."""

__version__ = "0.1.0"
__all__ = [
    "collection",
    "config",
    "curve",
    "frechet",
    "grid",
    "interval",
    "point",
    "random_gen",
    "simplification",
]