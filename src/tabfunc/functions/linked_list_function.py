"""
LinkedListTabulatedFunction — табулированная функция на кольцевом двусвязном списке

Структура:
    head (sentinel) <-> node_0 <-> node_1 <-> ... <-> node_{n-1} <-> head

- head никогда не хранит точку
- head.next — первая точка, head.prev — последняя
- пустой список: head.next is head.prev is head
- узлы не покидают функцию, наружу отдаются только копии точек

Сложность:
- Доступ по индексу: O(n), обход от ближайшего конца (index < size // 2 — с головы)
- Вставка/удаление: O(1) после нахождения соседей
"""

import logging
import math
from collections.abc import Iterator, Sequence
from typing import Optional

from tabfunc.core.domain.point import FunctionPoint
from tabfunc.core.math.numerical_safeguards import (
    MIN_POINTS_COUNT,
    is_close_abs,
    is_outside_domain,
    lerp,
)
from tabfunc.functions.base import (
    TabulatedFunction,
    TabulatedFunctionConfig,
    initial_points,
)
from tabfunc.functions.errors import (
    FunctionStateError,
    InappropriateFunctionPointError,
)

log = logging.getLogger(__name__)


class _FunctionNode:
    __slots__ = ("point", "prev", "next")

    def __init__(self, point: Optional[FunctionPoint] = None):
        self.point = point
        self.prev: "_FunctionNode" = self
        self.next: "_FunctionNode" = self


class LinkedListTabulatedFunction(TabulatedFunction):
    """Табулированная функция на кольцевом списке с sentinel-узлом.

    Конструкторы и сетка x совпадают с ArrayTabulatedFunction:
    для одинаковых аргументов обе реализации дают одинаковые x и y.
    config принимается для единообразия с ArrayTabulatedFunction.
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
        points = initial_points(left_x, right_x, points_count, values)

        self._head = _FunctionNode()
        self._size = 0
        for point in points:
            self._insert_between(_FunctionNode(point), self._head.prev, self._head)

    # -------------------------------------------------------------------------
    # Borders and evaluation
    # -------------------------------------------------------------------------

    def left_border(self) -> float:
        return math.nan if self._size == 0 else self._head.next.point.x

    def right_border(self) -> float:
        return math.nan if self._size == 0 else self._head.prev.point.x

    def value_at(self, x: float) -> float:
        if self._size == 0 or math.isnan(x):
            return math.nan
        if is_outside_domain(x, self.left_border(), self.right_border()):
            return math.nan

        node = self._head.next
        while node is not self._head:
            if is_close_abs(x, node.point.x):
                return node.point.y
            node = node.next

        # x не совпал ни с одной точкой: поиск отрезка
        node = self._head.next
        while node.next is not self._head:
            current, following = node.point, node.next.point
            # Соседние x конечны и строго возрастают, lerp не бросает
            if x < following.x:
                return lerp(current.x, current.y, following.x, following.y, x)
            node = node.next

        # x в пределах EPSILON за правой границей
        return self._head.prev.point.y

    # -------------------------------------------------------------------------
    # Index access
    # -------------------------------------------------------------------------

    def count(self) -> int:
        return self._size

    def point_at(self, index: int) -> FunctionPoint:
        return self._node_at(index).point.clone()

    def set_point(self, index: int, point: FunctionPoint) -> None:
        point = self._require_point(point)
        node = self._node_at(index)
        self._ensure_correct_order(point.x, node)
        node.point = point.clone()
        log.debug("set_point index=%d point=%s", index, point)

    def point_x(self, index: int) -> float:
        return self._node_at(index).point.x

    def set_point_x(self, index: int, x: float) -> None:
        node = self._node_at(index)
        self._ensure_correct_order(x, node)
        node.point.x = x
        log.debug("set_point_x index=%d x=%r", index, x)

    def point_y(self, index: int) -> float:
        return self._node_at(index).point.y

    def set_point_y(self, index: int, y: float) -> None:
        self._node_at(index).point.y = y

    def __iter__(self) -> Iterator[FunctionPoint]:
        node = self._head.next
        while node is not self._head:
            yield node.point.clone()
            node = node.next

    # -------------------------------------------------------------------------
    # Structural mutation
    # -------------------------------------------------------------------------

    def delete_point(self, index: int) -> None:
        if self._size <= MIN_POINTS_COUNT:
            log.debug("delete_point rejected: count=%d", self._size)
            raise FunctionStateError(
                f"Tabulated function must contain at least {MIN_POINTS_COUNT} points"
            )
        self._unlink(self._node_at(index))
        log.debug("delete_point index=%d count=%d", index, self._size)

    def add_point(self, point: FunctionPoint) -> None:
        point = self._require_point(point)
        self._ensure_finite(point.x)

        insert_index = 0
        following = self._head.next
        while following is not self._head:
            stored_x = following.point.x
            if is_close_abs(point.x, stored_x):
                log.debug(
                    "add_point rejected: duplicate x=%r at index=%d", point.x, insert_index
                )
                raise InappropriateFunctionPointError(
                    f"Point with x={point.x} already exists at index {insert_index}"
                )
            if point.x < stored_x:
                break
            following = following.next
            insert_index += 1

        # following — первый узел с большим x, либо head (вставка в конец)
        self._insert_between(_FunctionNode(point.clone()), following.prev, following)
        log.debug("add_point index=%d point=%s count=%d", insert_index, point, self._size)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _node_at(self, index: int) -> _FunctionNode:
        self._check_index(index)

        if index < self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._head.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _insert_between(
        self, node: _FunctionNode, prev_node: _FunctionNode, next_node: _FunctionNode
    ) -> None:
        node.prev = prev_node
        node.next = next_node
        prev_node.next = node
        next_node.prev = node
        self._size += 1

    def _unlink(self, node: _FunctionNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node
        node.next = node
        self._size -= 1

    def _ensure_correct_order(self, x: float, node: _FunctionNode) -> None:
        """Строгая проверка x против соседних узлов (head не проверяется)."""
        self._ensure_finite(x)
        if node.prev is not self._head and x <= node.prev.point.x:
            raise InappropriateFunctionPointError(
                f"x={x} must be greater than previous x={node.prev.point.x}"
            )
        if node.next is not self._head and x >= node.next.point.x:
            raise InappropriateFunctionPointError(
                f"x={x} must be less than next x={node.next.point.x}"
            )
