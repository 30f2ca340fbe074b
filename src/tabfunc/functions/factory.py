"""
Фабрика табулированных функций.

Позволяет выбирать хранилище по FunctionKind, возвращая абстрактный
TabulatedFunction: вызывающий код не зависит от конкретного класса.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Optional, Union

from tabfunc.functions.array_function import ArrayTabulatedFunction
from tabfunc.functions.base import TabulatedFunction, TabulatedFunctionConfig
from tabfunc.functions.linked_list_function import LinkedListTabulatedFunction


class FunctionKind(str, Enum):
    """Стратегия хранения точек"""

    ARRAY = "array"
    LINKED_LIST = "linked_list"


_IMPLEMENTATIONS: dict[FunctionKind, type[TabulatedFunction]] = {
    FunctionKind.ARRAY: ArrayTabulatedFunction,
    FunctionKind.LINKED_LIST: LinkedListTabulatedFunction,
}


def create_tabulated_function(
    kind: Union[FunctionKind, str],
    left_x: float,
    right_x: float,
    points_count: Optional[int] = None,
    *,
    values: Optional[Sequence[float]] = None,
    config: Optional[TabulatedFunctionConfig] = None,
) -> TabulatedFunction:
    """
    Создание табулированной функции выбранного типа.

    Args:
        kind: FunctionKind или его строковое значение ("array", "linked_list")
        left_x: Левая граница
        right_x: Правая граница
        points_count: Количество точек с нулевыми y
        values: Значения y (вместо points_count)
        config: Параметры хранилища

    Returns:
        Новая функция

    Raises:
        ValueError: Неизвестный kind
        FunctionConstructionError: Неверные аргументы конструктора
    """
    implementation = _IMPLEMENTATIONS[FunctionKind(kind)]
    return implementation(left_x, right_x, points_count, values=values, config=config)
