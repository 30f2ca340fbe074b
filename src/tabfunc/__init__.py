"""
tabfunc — табулированные функции с линейной интерполяцией.

Функция задана точками (x, y), строго возрастающими по x.
Две взаимозаменяемые реализации: массив и кольцевой двусвязный список.
"""

from tabfunc.core.domain import FunctionPoint
from tabfunc.core.math import EPSILON, MIN_POINTS_COUNT
from tabfunc.functions import (
    ArrayTabulatedFunction,
    FunctionConstructionError,
    FunctionKind,
    FunctionPointIndexError,
    FunctionStateError,
    InappropriateFunctionPointError,
    LinkedListTabulatedFunction,
    TabulatedFunction,
    TabulatedFunctionConfig,
    TabulatedFunctionError,
    create_tabulated_function,
)

__all__ = [
    "EPSILON",
    "MIN_POINTS_COUNT",
    "FunctionPoint",
    "TabulatedFunction",
    "TabulatedFunctionConfig",
    "ArrayTabulatedFunction",
    "LinkedListTabulatedFunction",
    "FunctionKind",
    "create_tabulated_function",
    "TabulatedFunctionError",
    "FunctionConstructionError",
    "FunctionPointIndexError",
    "InappropriateFunctionPointError",
    "FunctionStateError",
]
