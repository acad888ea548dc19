"""A minimal integer helper."""

import operator


def do_something(x: int) -> int:
    """Return the integer value of ``x``.

    Raises TypeError when ``x`` is not an integer.
    """
    if isinstance(x, bool):
        raise TypeError("expected an integer, got bool")
    try:
        value = operator.index(x)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(x).__name__}") from None
    return value