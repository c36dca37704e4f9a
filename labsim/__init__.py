"""Simulations of a restaurant, a boating park and demand paging."""

__version__ = "0.1.0"

__all__ = [
    "boating",
    "kitchen",
    "paging",
    "restaurant",
    "service",
]