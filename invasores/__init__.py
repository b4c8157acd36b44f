"""A small space-invaders style arcade game for the terminal."""

__version__ = "1.0.0"
__all__ = ["__version__"]