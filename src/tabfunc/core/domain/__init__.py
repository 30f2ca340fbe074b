"""
Domain models and value objects.

Contains the FunctionPoint value object.
"""

from tabfunc.core.domain.point import FunctionPoint

__all__ = [
    "FunctionPoint",
]
