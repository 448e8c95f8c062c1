"""Small tools: a calculator, a matrix library, 3D point helpers and a restaurant menu bot."""

__version__ = "0.1.0"

__all__ = ["calculator", "matrix", "points", "menu", "interface", "user", "cli"]