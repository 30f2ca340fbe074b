"""
Демонстрация табулированных функций.

Строит функции обоих типов на [0, pi], заполняет их значениями sin(x),
изменяет, вставляет и удаляет точки, затем вызывает каждую ошибку контракта.

Запуск:
    python -m tabfunc.demo
"""

import logging
import math
import sys
from typing import Optional, TextIO

from tabfunc.core.domain.point import FunctionPoint
from tabfunc.functions import (
    FunctionKind,
    FunctionPointIndexError,
    FunctionStateError,
    InappropriateFunctionPointError,
    TabulatedFunction,
    create_tabulated_function,
)

log = logging.getLogger(__name__)


def fill_with_sine_values(function: TabulatedFunction) -> None:
    for i in range(function.count()):
        function.set_point_y(i, math.sin(function.point_x(i)))


def print_points(title: str, function: TabulatedFunction, out: TextIO) -> None:
    print(title, file=out)
    for i in range(function.count()):
        print(f"Point {i}: x={function.point_x(i):.4f}, y={function.point_y(i):.6f}", file=out)
    print(file=out)


def demonstrate_implementation(title: str, function: TabulatedFunction, out: TextIO) -> None:
    """Заполнение, изменение, вставка и удаление точек с печатью до/после."""
    fill_with_sine_values(function)
    print_points(f"{title}: initial state", function, out)

    function.set_point(2, FunctionPoint(x=function.point_x(2), y=function.point_y(2) + 0.3))
    function.add_point(FunctionPoint(x=math.pi * 0.75, y=math.sin(math.pi * 0.75)))
    function.delete_point(0)

    print_points(f"{title}: after modifications", function, out)


def demonstrate_errors(function: TabulatedFunction, out: TextIO) -> None:
    """Вызов каждой ошибки контракта на функции с тремя точками."""
    print(f"Demonstrating errors for {type(function).__name__}", file=out)

    try:
        function.point_at(-1)
    except FunctionPointIndexError as e:
        print(f"Caught expected index error: {e}", file=out)

    try:
        function.set_point_x(1, function.point_x(0))
    except InappropriateFunctionPointError as e:
        print(f"Caught expected ordering error: {e}", file=out)

    try:
        function.add_point(FunctionPoint(x=function.point_x(1), y=42.0))
    except InappropriateFunctionPointError as e:
        print(f"Caught expected duplicate point error: {e}", file=out)

    try:
        while function.count() > 2:
            function.delete_point(0)
        function.delete_point(0)
    except FunctionStateError as e:
        print(f"Caught expected deletion error: {e}", file=out)

    print(file=out)


def run(out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    for kind, title in (
        (FunctionKind.ARRAY, "Array-based implementation"),
        (FunctionKind.LINKED_LIST, "Linked-list implementation"),
    ):
        demonstrate_implementation(title, create_tabulated_function(kind, 0.0, math.pi, 6), out)

    for kind in FunctionKind:
        demonstrate_errors(create_tabulated_function(kind, 0.0, 2.0, 3), out)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    log.info("running tabulated function demo")
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
