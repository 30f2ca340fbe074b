"""
TabulatedFunction — общий контракт табулированных функций

Функция задана конечным набором точек (x, y), строго возрастающих по x,
и правилом линейной интерполяции между ними.

Две реализации контракта взаимозаменяемы:
- ArrayTabulatedFunction: непрерывный буфер, доступ по индексу O(1)
- LinkedListTabulatedFunction: кольцевой двусвязный список с sentinel-узлом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. x строго возрастает по индексу: point_x(i) < point_x(i + 1)
2. count() >= 2 после конструирования
3. Точки копируются при каждом пересечении границы контракта
4. Ошибка не меняет состояние функции
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from tabfunc.core.domain.point import FunctionPoint
from tabfunc.core.math.numerical_safeguards import EPSILON, MIN_POINTS_COUNT, is_valid_float
from tabfunc.functions.errors import (
    FunctionConstructionError,
    FunctionPointIndexError,
    InappropriateFunctionPointError,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TabulatedFunctionConfig:
    """Конфигурация хранилища точек.

    default_capacity — минимальная ёмкость буфера ArrayTabulatedFunction.
    growth_factor — множитель ёмкости при переполнении буфера.
    Для LinkedListTabulatedFunction конфигурация не влияет на поведение.
    """

    default_capacity: int = 8
    growth_factor: float = 1.5

    def __post_init__(self) -> None:
        if self.default_capacity < MIN_POINTS_COUNT:
            raise ValueError(
                f"default_capacity must be >= {MIN_POINTS_COUNT}, got {self.default_capacity}"
            )
        if not self.growth_factor > 1.0:
            raise ValueError(f"growth_factor must be > 1.0, got {self.growth_factor}")


DEFAULT_CONFIG = TabulatedFunctionConfig()


# =============================================================================
# CONSTRUCTION HELPERS
# =============================================================================


def validate_borders(left_x: float, right_x: float) -> None:
    """
    Проверка границ области определения.

    Raises:
        FunctionConstructionError: Граница не конечна или не right_x > left_x
    """
    try:
        finite = is_valid_float(left_x) and is_valid_float(right_x)
    except TypeError as e:
        raise FunctionConstructionError(
            f"Borders must be numbers, got left_x={left_x!r}, right_x={right_x!r}"
        ) from e
    if not finite:
        raise FunctionConstructionError(
            f"Borders must be finite, got left_x={left_x}, right_x={right_x}"
        )
    if not right_x > left_x:
        raise FunctionConstructionError(
            f"Right border must be greater than left border, got left_x={left_x}, right_x={right_x}"
        )


def tabulate_x(left_x: float, right_x: float, points_count: int) -> list[float]:
    """
    Равномерная сетка x на [left_x, right_x].

    x_i = left_x + i * step, step = (right_x - left_x) / (points_count - 1).
    Последний x равен right_x точно, без накопленной погрешности.

    Examples:
        >>> tabulate_x(0.0, 3.0, 4)
        [0.0, 1.0, 2.0, 3.0]
    """
    step = (right_x - left_x) / (points_count - 1)
    xs = [left_x + step * i for i in range(points_count - 1)]
    xs.append(right_x)
    return xs


def initial_points(
    left_x: float,
    right_x: float,
    points_count: Optional[int] = None,
    values: Optional[Sequence[float]] = None,
) -> list[FunctionPoint]:
    """
    Начальные точки функции для обоих конструкторов.

    Ровно один источник должен быть задан:
    - points_count: y = 0.0 во всех точках
    - values: y берутся из values без изменений

    Raises:
        FunctionConstructionError: Нет источника, оба источника,
            меньше двух точек, нечисловые данные или неверные границы
    """
    if points_count is None and values is None:
        raise FunctionConstructionError("Either points_count or values must be provided")
    if points_count is not None and values is not None:
        raise FunctionConstructionError("points_count and values are mutually exclusive")

    if values is not None:
        try:
            ys = [float(v) for v in values]
        except (TypeError, ValueError) as e:
            raise FunctionConstructionError(f"Values must be numbers, got {values!r}") from e
        if len(ys) < MIN_POINTS_COUNT:
            raise FunctionConstructionError(
                f"Values must contain at least {MIN_POINTS_COUNT} items, got {len(ys)}"
            )
    else:
        if isinstance(points_count, bool) or not isinstance(points_count, int):
            raise FunctionConstructionError(
                f"points_count must be an integer, got {points_count!r}"
            )
        if points_count < MIN_POINTS_COUNT:
            raise FunctionConstructionError(
                f"Tabulated function must contain at least {MIN_POINTS_COUNT} points, "
                f"got {points_count}"
            )
        ys = [0.0] * points_count

    validate_borders(left_x, right_x)
    xs = tabulate_x(left_x, right_x, len(ys))
    return [FunctionPoint(x=x, y=y) for x, y in zip(xs, ys)]


# =============================================================================
# CONTRACT
# =============================================================================


class TabulatedFunction(ABC):
    """
    Контракт табулированной функции.

    Вызывающий код работает только с этим типом, не с конкретным хранилищем.
    Все индексные операции бросают FunctionPointIndexError для index
    вне [0, count).
    """

    EPSILON = EPSILON

    @abstractmethod
    def left_border(self) -> float:
        """x первой точки (NaN для пустой функции)."""

    @abstractmethod
    def right_border(self) -> float:
        """x последней точки (NaN для пустой функции)."""

    @abstractmethod
    def value_at(self, x: float) -> float:
        """
        Значение функции в x.

        - NaN, если x вне [left_border - EPSILON, right_border + EPSILON]
        - y точки, если |x - point.x| <= EPSILON
        - иначе линейная интерполяция на содержащем отрезке
        """

    @abstractmethod
    def count(self) -> int:
        """Количество точек."""

    @abstractmethod
    def point_at(self, index: int) -> FunctionPoint:
        """Копия точки с индексом index."""

    @abstractmethod
    def set_point(self, index: int, point: FunctionPoint) -> None:
        """
        Замена точки копией point.

        Raises:
            FunctionPointIndexError: index вне диапазона
            InappropriateFunctionPointError: point.x не строго между соседями
        """

    @abstractmethod
    def point_x(self, index: int) -> float:
        """x точки с индексом index."""

    @abstractmethod
    def set_point_x(self, index: int, x: float) -> None:
        """Изменение x точки с той же проверкой порядка, что и set_point."""

    @abstractmethod
    def point_y(self, index: int) -> float:
        """y точки с индексом index."""

    @abstractmethod
    def set_point_y(self, index: int, y: float) -> None:
        """Изменение y точки (порядок не проверяется)."""

    @abstractmethod
    def delete_point(self, index: int) -> None:
        """
        Удаление точки, индексы последующих точек сдвигаются на -1.

        Raises:
            FunctionStateError: count() <= 2
            FunctionPointIndexError: index вне диапазона
        """

    @abstractmethod
    def add_point(self, point: FunctionPoint) -> None:
        """
        Вставка копии point с сохранением порядка.

        Точка встаёт перед первой точкой с большим x, иначе в конец.

        Raises:
            InappropriateFunctionPointError: x уже существует (в пределах EPSILON)
        """

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def points(self) -> list[FunctionPoint]:
        """Копии всех точек в порядке возрастания x."""
        return list(self)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[FunctionPoint]:
        for index in range(self.count()):
            yield self.point_at(index)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={self.count()}, "
            f"left_border={self.left_border()}, right_border={self.right_border()})"
        )

    # -------------------------------------------------------------------------
    # Shared checks
    # -------------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        size = self.count()
        if index < 0 or index >= size:
            raise FunctionPointIndexError(index, size)

    @staticmethod
    def _require_point(point: Optional[FunctionPoint]) -> FunctionPoint:
        if point is None:
            raise ValueError("Point must not be None")
        return point

    @staticmethod
    def _ensure_finite(x: float) -> None:
        """NaN и Inf не имеют места в строгом порядке x."""
        if not is_valid_float(x):
            raise InappropriateFunctionPointError(f"x={x} must be a finite number")
