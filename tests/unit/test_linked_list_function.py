"""
Тесты LinkedListTabulatedFunction: целостность кольца

Проверяет:
1. Sentinel-узел не хранит точку и замыкает кольцо
2. Согласованность prev/next после вставок и удалений
3. Поиск узла с обоих концов списка
4. Отсоединённый узел не ссылается на кольцо
"""

import pytest

from tabfunc.core.domain.point import FunctionPoint
from tabfunc.functions import LinkedListTabulatedFunction


def assert_ring_consistent(function: LinkedListTabulatedFunction) -> None:
    """Обход вперёд и назад даёт count() узлов, ссылки взаимны."""
    head = function._head
    assert head.point is None

    forward = []
    node = head.next
    while node is not head:
        assert node.next.prev is node
        assert node.prev.next is node
        forward.append(node.point.x)
        node = node.next

    backward = []
    node = head.prev
    while node is not head:
        backward.append(node.point.x)
        node = node.prev

    assert len(forward) == function.count()
    assert forward == list(reversed(backward))


class TestRingStructure:
    """Тесты структуры кольца"""

    def test_constructed_ring(self) -> None:
        function = LinkedListTabulatedFunction(0.0, 4.0, 5)
        assert_ring_consistent(function)
        assert function._head.next.point.x == 0.0
        assert function._head.prev.point.x == 4.0

    def test_ring_after_insertions(self) -> None:
        function = LinkedListTabulatedFunction(0.0, 1.0, 2)
        for x in [0.5, -1.0, 3.0, 0.75]:
            function.add_point(FunctionPoint(x=x, y=0.0))
            assert_ring_consistent(function)
        assert [p.x for p in function] == [-1.0, 0.0, 0.5, 0.75, 1.0, 3.0]

    def test_ring_after_deletions(self) -> None:
        function = LinkedListTabulatedFunction(0.0, 5.0, 6)
        function.delete_point(0)
        assert_ring_consistent(function)
        function.delete_point(function.count() - 1)
        assert_ring_consistent(function)
        function.delete_point(1)
        assert_ring_consistent(function)
        assert [p.x for p in function] == [1.0, 3.0, 4.0]

    def test_unlinked_node_is_detached(self) -> None:
        function = LinkedListTabulatedFunction(0.0, 2.0, 3)
        node = function._head.next.next
        function.delete_point(1)
        assert node.next is node
        assert node.prev is node


class TestNodeLookup:
    """Поиск узла по индексу с ближайшего конца"""

    @pytest.mark.parametrize("points_count", [2, 3, 7, 10])
    def test_every_index_resolves(self, points_count: int) -> None:
        function = LinkedListTabulatedFunction(0.0, float(points_count - 1), points_count)
        for i in range(points_count):
            assert function.point_x(i) == float(i)

    def test_lookup_from_both_ends_after_mutation(self) -> None:
        function = LinkedListTabulatedFunction(0.0, 9.0, values=[float(i) for i in range(10)])
        function.add_point(FunctionPoint(x=4.5, y=4.5))
        function.delete_point(8)
        expected = [0.0, 1.0, 2.0, 3.0, 4.0, 4.5, 5.0, 6.0, 8.0, 9.0]
        assert [function.point_x(i) for i in range(function.count())] == expected
        assert [function.point_y(i) for i in range(function.count())] == expected
