"""Classic data-structure and algorithm problems, solved in plain Python."""

__version__ = "1.0.0"
__all__ = ["nodes", "easy", "medium", "hard"]