"""Small combinators the later refactoring steps are built from."""

import inspect
from collections.abc import Callable
from functools import partial, reduce
from typing import Any


def identity[T](x: T) -> T:
    """Return the argument unchanged.

    Examples
    --------
    >>> identity("Marc")
    'Marc'
    """
    return x


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Combine functions from right to left.

    ``compose(f, g)(x) == f(g(x))``; ``compose()`` is ``identity``.

    Examples
    --------
    >>> shout = compose(str.upper, str.strip)
    >>> shout("  marc ")
    'MARC'
    >>> compose()(42)
    42
    """
    return reduce(lambda f, g: lambda x: f(g(x)), fns, identity)


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``fns`` from left to right.

    Examples
    --------
    >>> pipe("  marc ", str.strip, str.title)
    'Marc'
    """
    return reduce(lambda acc, f: f(acc), fns, value)


def curry(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Defer calling ``fn`` until all of its positional parameters are supplied.

    Examples
    --------
    >>> @curry
    ... def contains(needle: str, haystack: str) -> bool:
    ...     return needle in haystack
    >>> contains("ar")("Marc")
    True
    >>> contains("ar", "Christelle")
    False
    """
    arity = len(
        [
            p
            for p in inspect.signature(fn).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
        ]
    )

    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return fn(*args)
        return curry(partial(fn, *args))

    return curried
