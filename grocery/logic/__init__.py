"""Core business logic layer.

Subpackages:
- shopping: combining recipes into one priced grocery list
- reporting: recipe costing and text rendering of lists and recipes
"""
__all__ = ["shopping", "reporting"]
