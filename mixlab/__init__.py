"""Ingredient mixing simulation and best-mix search for a crafting game."""

__version__ = "0.1.0"
__all__ = ["__version__"]