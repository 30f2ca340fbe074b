"""
Тесты фабрики create_tabulated_function
"""

import pytest

from tabfunc.functions import (
    ArrayTabulatedFunction,
    FunctionConstructionError,
    FunctionKind,
    LinkedListTabulatedFunction,
    TabulatedFunction,
    TabulatedFunctionConfig,
    create_tabulated_function,
)


class TestCreateTabulatedFunction:
    """Тесты для create_tabulated_function"""

    @pytest.mark.parametrize(
        "kind, expected_cls",
        [
            (FunctionKind.ARRAY, ArrayTabulatedFunction),
            (FunctionKind.LINKED_LIST, LinkedListTabulatedFunction),
            ("array", ArrayTabulatedFunction),
            ("linked_list", LinkedListTabulatedFunction),
        ],
    )
    def test_kind_selects_implementation(
        self, kind: FunctionKind, expected_cls: type[TabulatedFunction]
    ) -> None:
        function = create_tabulated_function(kind, 0.0, 1.0, 3)
        assert isinstance(function, expected_cls)
        assert isinstance(function, TabulatedFunction)
        assert function.count() == 3

    def test_values_forwarded(self) -> None:
        function = create_tabulated_function(FunctionKind.LINKED_LIST, 0.0, 2.0, values=[1.0, 2.0, 3.0])
        assert [p.y for p in function] == [1.0, 2.0, 3.0]

    def test_config_forwarded(self) -> None:
        config = TabulatedFunctionConfig(default_capacity=16)
        function = create_tabulated_function(FunctionKind.ARRAY, 0.0, 1.0, 3, config=config)
        assert function.capacity == 16

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(ValueError):
            create_tabulated_function("tree", 0.0, 1.0, 3)

    def test_construction_errors_propagate(self) -> None:
        with pytest.raises(FunctionConstructionError):
            create_tabulated_function(FunctionKind.ARRAY, 1.0, 0.0, 3)
