"""Amusement park model: tickets, attractions, employees, visitors and the park."""

__version__ = "0.1.0"
__all__ = ["__version__"]