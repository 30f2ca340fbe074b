"""
Исключения табулированных функций.

Все ошибки синхронные и не частичные: при исключении функция
остаётся в том же состоянии, что и до вызова.
"""


class TabulatedFunctionError(Exception):
    """Базовое исключение для всех ошибок табулированных функций."""
    pass


class FunctionConstructionError(TabulatedFunctionError, ValueError):
    """
    Функция не может быть построена.

    Причины:
    - points_count < 2 или values содержит меньше двух значений
    - right_x <= left_x или граница не конечна (NaN, Inf)
    - values или points_count нечисловые
    - не задан источник значений (ни points_count, ни values)
    """
    pass


class FunctionPointIndexError(TabulatedFunctionError, IndexError):
    """Индекс точки вне диапазона [0, count)."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of bounds for points count {size}")


class InappropriateFunctionPointError(TabulatedFunctionError):
    """
    Точка нарушает строгий возрастающий порядок x.

    Возникает при изменении x точки за пределы соседей
    и при добавлении точки с x, уже существующим в пределах EPSILON.
    """
    pass


class FunctionStateError(TabulatedFunctionError):
    """Удаление точки при count == 2 (минимальный размер функции)."""
    pass
