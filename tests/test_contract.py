from collections.abc import Callable
from typing import Any, NoReturn

import pytest

from attendees_finder.contract import ContractViolationError, contract


def custom_map_err(
    err: Exception,
    fn: Callable[..., Any],
    args: tuple[Any, ...],  # noqa: ARG001
    kwargs: dict[str, Any],  # noqa: ARG001
) -> NoReturn:
    raise ContractViolationError(f"custom contract violation in {fn.__name__}") from err


class TestContract:
    def test_unexpected_error_is_mapped(self) -> None:
        @contract()
        def initial(name: str) -> str:
            return name[0]

        with pytest.raises(ContractViolationError) as exc_info:
            _ = initial("")

        err = exc_info.value
        assert err.function_name == "initial"
        assert isinstance(err.original_exception, IndexError)
        assert err.__cause__ is err.original_exception
        assert err.context == {"args": ("",), "kwargs": {}}

    def test_known_error_passes_through(self) -> None:
        @contract(known_err=(KeyError,))
        def lookup(table: dict[str, int], key: str) -> int:
            return table[key]

        with pytest.raises(KeyError, match="missing"):
            _ = lookup({}, "missing")

    def test_multiple_known_errors(self) -> None:
        @contract(known_err=(ValueError, TypeError))
        def fail(kind: str) -> None:
            if kind == "value":
                raise ValueError("value")
            if kind == "type":
                raise TypeError("type")
            raise RuntimeError("runtime")

        with pytest.raises(ValueError, match="value"):
            fail("value")
        with pytest.raises(TypeError, match="type"):
            fail("type")
        with pytest.raises(ContractViolationError):
            fail("runtime")

    def test_custom_map_err(self) -> None:
        @contract(map_err=custom_map_err)
        def failing() -> None:
            raise ValueError("Something went wrong")

        with pytest.raises(
            ContractViolationError,
            match="custom contract violation in failing",
        ):
            failing()

    def test_success_returns_value(self) -> None:
        @contract()
        def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == 5

    def test_keyword_arguments_recorded(self) -> None:
        @contract()
        def divide(a: int, b: int) -> float:
            return a / b

        with pytest.raises(ContractViolationError) as exc_info:
            _ = divide(1, b=0)

        assert exc_info.value.context == {"args": (1,), "kwargs": {"b": 0}}

    def test_preserves_metadata(self) -> None:
        @contract()
        def documented() -> None:
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestContractViolationError:
    def test_default_message(self) -> None:
        assert str(ContractViolationError()) == "contract violation"

    def test_message_with_context(self) -> None:
        err = ContractViolationError(
            "contract violation",
            function_name="find",
            original_exception=TypeError("bad query"),
        )
        assert str(err) == "contract violation in function 'find' caused by TypeError: bad query"

    def test_context_defaults_to_empty(self) -> None:
        assert ContractViolationError().context == {}
