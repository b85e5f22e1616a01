"""Core business logic layer.

Subpackages:
- shopping: building and formatting the shopping list from the stored plan
"""
__all__ = ["shopping"]
