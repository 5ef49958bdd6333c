"""Template processing and expression evaluation."""

from .engine import JSONPathEngine, ExpressionParser

__all__ = [
    "JSONPathEngine",
    "ExpressionParser",
]
