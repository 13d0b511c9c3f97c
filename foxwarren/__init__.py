"""Predator and prey grid simulation: organisms, world rules, text and chart views, and a Tk window."""

__version__ = "0.1.0"
__all__ = ["__version__"]