"""A small tree-walking evaluator with typed values and an environment of variables."""

__version__ = "0.1.0"
__all__ = ["nodes", "environment", "evaluator", "cli"]