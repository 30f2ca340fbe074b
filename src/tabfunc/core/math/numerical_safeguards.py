"""
Numerical Safeguards — Epsilon-сравнения для табулированных функций

Модуль содержит единственную толерантность EPSILON и примитивы,
через которые проходят все сравнения x-координат:
- Проверка, что float валиден (не NaN, не Inf)
- Сравнение float с абсолютной толерантностью
- Линейная интерполяция между двумя точками

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. "Одинаковый x" всегда означает abs(a - b) <= EPSILON, точного == нет
2. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для сравнения x-координат:
# поиск точки, детекция дубликатов, границы области определения
EPSILON: Final[float] = 1e-9

# Минимальное количество точек табулированной функции
MIN_POINTS_COUNT: Final[int] = 2


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что координата конечна (не NaN, не Inf).

    NaN и Inf ломают строгие сравнения порядка: NaN не меньше и не больше
    любого x, а шаг сетки на бесконечной границе даёт inf * 0 = NaN.

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float("nan"))
        False
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close_abs(a: float, b: float, tol: float = EPSILON) -> bool:
    """
    Сравнение двух float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) <= tol

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если значения совпадают в пределах tol

    Examples:
        >>> is_close_abs(1.0, 1.0 + 1e-10)
        True
        >>> is_close_abs(1.0, 1.0 + 1e-8)
        False
    """
    return abs(a - b) <= tol


def is_outside_domain(x: float, left: float, right: float, tol: float = EPSILON) -> bool:
    """
    Проверка, лежит ли x вне толерантной области [left - tol, right + tol].

    NaN-границы (пустая функция) дают False в обоих сравнениях,
    поэтому вызывающий код должен проверять пустоту отдельно.
    """
    return x < left - tol or x > right + tol


# =============================================================================
# ИНТЕРПОЛЯЦИЯ
# =============================================================================


def lerp(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """
    Линейная интерполяция на отрезке [x0, x1].

    Формула:
        y0 + (x - x0) / (x1 - x0) * (y1 - y0)

    Args:
        x0, y0: Левая точка отрезка
        x1, y1: Правая точка отрезка (x1 > x0)
        x: Аргумент

    Returns:
        Интерполированное значение

    Raises:
        ValueError: Если x1 <= x0 (вырожденный отрезок)

    Examples:
        >>> lerp(0.0, 0.0, 1.0, 10.0, 0.5)
        5.0
    """
    if not x1 > x0:
        raise ValueError(f"Segment must be ascending, got x0={x0}, x1={x1}")

    ratio = (x - x0) / (x1 - x0)
    return y0 + ratio * (y1 - y0)
