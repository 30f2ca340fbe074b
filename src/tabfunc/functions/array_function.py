"""
ArrayTabulatedFunction — табулированная функция на непрерывном буфере

Точки хранятся в буфере фиксированной ёмкости (list длины capacity),
логический размер хранится отдельно.

Сложность:
- Доступ по индексу: O(1)
- Вставка/удаление: O(n) (сдвиг хвоста буфера на одну ячейку)
- Рост буфера: capacity * growth_factor, не меньше требуемого размера
"""

import logging
import math
from collections.abc import Sequence
from typing import Optional

from tabfunc.core.domain.point import FunctionPoint
from tabfunc.core.math.numerical_safeguards import (
    MIN_POINTS_COUNT,
    is_close_abs,
    is_outside_domain,
    lerp,
)
from tabfunc.functions.base import (
    DEFAULT_CONFIG,
    TabulatedFunction,
    TabulatedFunctionConfig,
    initial_points,
)
from tabfunc.functions.errors import (
    FunctionStateError,
    InappropriateFunctionPointError,
)

log = logging.getLogger(__name__)


class ArrayTabulatedFunction(TabulatedFunction):
    """Табулированная функция на массиве точек.

    Args:
        left_x: Левая граница области определения
        right_x: Правая граница (строго больше left_x)
        points_count: Количество точек с нулевыми y
        values: Значения y на равномерной сетке (вместо points_count)
        config: Параметры буфера (default: DEFAULT_CONFIG)

    Raises:
        FunctionConstructionError: Неверные границы или меньше двух точек
    """

    def __init__(
        self,
        left_x: float,
        right_x: float,
        points_count: Optional[int] = None,
        *,
        values: Optional[Sequence[float]] = None,
        config: Optional[TabulatedFunctionConfig] = None,
    ):
        self._config = config or DEFAULT_CONFIG
        points = initial_points(left_x, right_x, points_count, values)

        capacity = max(len(points), self._config.default_capacity)
        self._points: list[Optional[FunctionPoint]] = [None] * capacity
        self._points[: len(points)] = points
        self._size = len(points)

    @property
    def capacity(self) -> int:
        """Текущая ёмкость буфера (>= count())."""
        return len(self._points)

    # -------------------------------------------------------------------------
    # Borders and evaluation
    # -------------------------------------------------------------------------

    def left_border(self) -> float:
        return math.nan if self._size == 0 else self._points[0].x

    def right_border(self) -> float:
        return math.nan if self._size == 0 else self._points[self._size - 1].x

    def value_at(self, x: float) -> float:
        if self._size == 0 or math.isnan(x):
            return math.nan
        if is_outside_domain(x, self.left_border(), self.right_border()):
            return math.nan

        for i in range(self._size):
            if is_close_abs(x, self._points[i].x):
                return self._points[i].y

        for i in range(self._size - 1):
            left = self._points[i]
            right = self._points[i + 1]
            # Соседние x конечны и строго возрастают, lerp не бросает
            if x < right.x:
                return lerp(left.x, left.y, right.x, right.y, x)

        # x в пределах EPSILON за правой границей
        return self._points[self._size - 1].y

    # -------------------------------------------------------------------------
    # Index access
    # -------------------------------------------------------------------------

    def count(self) -> int:
        return self._size

    def point_at(self, index: int) -> FunctionPoint:
        self._check_index(index)
        return self._points[index].clone()

    def set_point(self, index: int, point: FunctionPoint) -> None:
        point = self._require_point(point)
        self._check_index(index)
        self._ensure_correct_order(point.x, index)
        self._points[index] = point.clone()
        log.debug("set_point index=%d point=%s", index, point)

    def point_x(self, index: int) -> float:
        self._check_index(index)
        return self._points[index].x

    def set_point_x(self, index: int, x: float) -> None:
        self._check_index(index)
        self._ensure_correct_order(x, index)
        self._points[index].x = x
        log.debug("set_point_x index=%d x=%r", index, x)

    def point_y(self, index: int) -> float:
        self._check_index(index)
        return self._points[index].y

    def set_point_y(self, index: int, y: float) -> None:
        self._check_index(index)
        self._points[index].y = y

    # -------------------------------------------------------------------------
    # Structural mutation
    # -------------------------------------------------------------------------

    def delete_point(self, index: int) -> None:
        if self._size <= MIN_POINTS_COUNT:
            log.debug("delete_point rejected: count=%d", self._size)
            raise FunctionStateError(
                f"Tabulated function must contain at least {MIN_POINTS_COUNT} points"
            )
        self._check_index(index)

        # Сдвиг хвоста влево на одну ячейку
        self._points[index : self._size - 1] = self._points[index + 1 : self._size]
        self._points[self._size - 1] = None
        self._size -= 1
        log.debug("delete_point index=%d count=%d", index, self._size)

    def add_point(self, point: FunctionPoint) -> None:
        point = self._require_point(point)
        self._ensure_finite(point.x)

        insert_index = self._size
        for i in range(self._size):
            stored_x = self._points[i].x
            if is_close_abs(point.x, stored_x):
                log.debug("add_point rejected: duplicate x=%r at index=%d", point.x, i)
                raise InappropriateFunctionPointError(
                    f"Point with x={point.x} already exists at index {i}"
                )
            if point.x < stored_x:
                insert_index = i
                break

        self._ensure_capacity(self._size + 1)

        # Сдвиг хвоста вправо на одну ячейку
        self._points[insert_index + 1 : self._size + 1] = self._points[insert_index : self._size]
        self._points[insert_index] = point.clone()
        self._size += 1
        log.debug("add_point index=%d point=%s count=%d", insert_index, point, self._size)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _ensure_capacity(self, min_capacity: int) -> None:
        capacity = len(self._points)
        if capacity >= min_capacity:
            return

        new_capacity = max(int(capacity * self._config.growth_factor), min_capacity)
        self._points.extend([None] * (new_capacity - capacity))
        log.debug("buffer grown: capacity %d -> %d", capacity, new_capacity)

    def _ensure_correct_order(self, x: float, index: int) -> None:
        """Строгая проверка x против непосредственных соседей index."""
        self._ensure_finite(x)
        if index > 0 and x <= self._points[index - 1].x:
            raise InappropriateFunctionPointError(
                f"x={x} must be greater than previous x={self._points[index - 1].x}"
            )
        if index < self._size - 1 and x >= self._points[index + 1].x:
            raise InappropriateFunctionPointError(
                f"x={x} must be less than next x={self._points[index + 1].x}"
            )
