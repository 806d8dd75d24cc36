"""Arithmetic, number, statistics and star-pattern exercises, with a small command line front end."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "numbers", "statistics", "stars", "cli"]