"""
FunctionPoint — Модель точки табулированной функции

Pydantic модель пары (x, y). Точка не проверяет порядок x:
порядок обеспечивает контейнер, которому точка принадлежит.

Контейнеры хранят и отдают только копии точек (clone()),
поэтому изменение точки снаружи не нарушает порядок внутри функции.
"""

from pydantic import BaseModel, Field


# =============================================================================
# POINT MODEL
# =============================================================================


class FunctionPoint(BaseModel):
    """
    Точка табулированной функции.

    Mutable модель (validate_assignment=True): присваивание x/y
    проходит валидацию типа, но не проверку порядка.
    """

    x: float = Field(0.0, description="Координата x")
    y: float = Field(0.0, description="Значение функции в x")

    model_config = {"validate_assignment": True}

    def clone(self) -> "FunctionPoint":
        """Независимая копия точки."""
        return self.model_copy()

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
