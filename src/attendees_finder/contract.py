from collections.abc import Callable
from functools import wraps
from typing import Any, NoReturn

type MapErr = Callable[
    [Exception, Callable[..., Any], tuple[Any, ...], dict[str, Any]],
    NoReturn,
]


class ContractViolationError(Exception):
    """Exception raised when a caller breaks a function's preconditions.

    The contract decorator raises it when an unexpected exception escapes the
    decorated function, unless that exception is listed in ``known_err``.

    Attributes
    ----------
    function_name : str | None
        Name of the function where the contract violation occurred.
    original_exception : Exception | None
        The original exception that triggered the contract violation.
    context : dict[str, Any]
        The positional and keyword arguments of the failing call.

    Examples
    --------
    >>> @contract()
    ... def first_letter(name: str) -> str:
    ...     return name[0]
    >>> try:
    ...     first_letter("")
    ... except ContractViolationError as e:
    ...     print(f"Function: {e.function_name}")
    ...     print(f"Original error: {type(e.original_exception).__name__}")
    Function: first_letter
    Original error: IndexError
    """

    def __init__(
        self,
        message: str = "contract violation",
        *,
        function_name: str | None = None,
        original_exception: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.function_name = function_name
        self.original_exception = original_exception
        self.context = context or {}

    def __str__(self) -> str:
        parts = [super().__str__()]

        if self.function_name:
            parts.append(f"in function '{self.function_name}'")

        if self.original_exception:
            parts.append(f"caused by {type(self.original_exception).__name__}: {self.original_exception}")

        return " ".join(parts)


def _default_map_err(
    err: Exception,
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> NoReturn:
    """Map an exception to ContractViolationError carrying the call arguments.

    Raises
    ------
    ContractViolationError
        Always.
    """
    raise ContractViolationError(
        "contract violation",
        function_name=fn.__name__,
        original_exception=err,
        context={"args": args, "kwargs": kwargs},
    ) from err


def contract[R, **P](
    *,
    map_err: MapErr = _default_map_err,
    known_err: tuple[type[Exception], ...] = (),
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Turn unexpected exceptions of the decorated function into contract violations.

    Parameters
    ----------
    map_err : MapErr, optional
        Receives the original exception, the failing function and its
        arguments, and must raise. By default raises ContractViolationError.
    known_err : tuple[type[Exception], ...], optional
        Exception types that pass through unchanged.

    Returns
    -------
    Callable[[Callable[P, R]], Callable[P, R]]
        The decorator.

    Examples
    --------
    >>> @contract(known_err=(KeyError,))
    ... def lookup(table: dict[str, int], key: str) -> int:
    ...     return table[key]
    >>> try:
    ...     lookup({}, "missing")
    ... except KeyError:
    ...     print("Known error")
    Known error
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return fn(*args, **kwargs)
            except known_err:
                raise
            except Exception as e:
                map_err(e, fn, args, kwargs)

        return wrapper

    return decorator
