"""
Табулированные функции: контракт, две реализации и исключения.
"""

from tabfunc.functions.array_function import ArrayTabulatedFunction
from tabfunc.functions.base import (
    DEFAULT_CONFIG,
    TabulatedFunction,
    TabulatedFunctionConfig,
    initial_points,
    tabulate_x,
    validate_borders,
)
from tabfunc.functions.errors import (
    FunctionConstructionError,
    FunctionPointIndexError,
    FunctionStateError,
    InappropriateFunctionPointError,
    TabulatedFunctionError,
)
from tabfunc.functions.factory import FunctionKind, create_tabulated_function
from tabfunc.functions.linked_list_function import LinkedListTabulatedFunction

__all__ = [
    # Contract
    "TabulatedFunction",
    "TabulatedFunctionConfig",
    "DEFAULT_CONFIG",
    # Implementations
    "ArrayTabulatedFunction",
    "LinkedListTabulatedFunction",
    # Factory
    "FunctionKind",
    "create_tabulated_function",
    # Helpers
    "initial_points",
    "tabulate_x",
    "validate_borders",
    # Exceptions
    "TabulatedFunctionError",
    "FunctionConstructionError",
    "FunctionPointIndexError",
    "InappropriateFunctionPointError",
    "FunctionStateError",
]
