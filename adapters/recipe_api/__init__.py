"""
Recipe API adapters package.
"""

from .spoonacular import SpoonacularClient

__all__ = ["SpoonacularClient"]
