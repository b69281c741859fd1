# -*- coding: utf-8 -*-
"""Monadic functions for optional values.

An optional value is either ``Some(x)`` or ``nothing``. Unlike a bare
``None``, this distinguishes "no value" from "the value ``None``", so
``ret(None)`` is ``Some(None)``, not ``nothing``.

Usage with ``mdo[]``::

    from mdo.syntax import macros, mdo, when  # noqa: F401
    from mdo.option import bind, ret, mzero

    mdo[x << ret(5),
        when[x == 0],
        ret(x * 2)]  # --> nothing
"""

__all__ = ["Some", "nothing", "bind", "ret", "mzero",
           "from_optional", "to_optional", "Option"]

from .monad import MonadZero

class Some:
    """A present optional value."""
    __slots__ = ("value",)

    def __init__(self, value):
        object.__setattr__(self, "value", value)

    def __setattr__(self, k, v):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, Some):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((Some, self.value))

    def __reduce__(self):
        return (Some, (self.value,))

    def __repr__(self):
        return f"Some({repr(self.value)})"

class _Nothing:
    """The empty optional value. There is only one; use ``nothing``."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    # Unpickle to the module-level singleton, so that `is` checks keep working.
    def __reduce__(self):
        return "nothing"

    def __bool__(self):
        return False

    def __repr__(self):
        return "nothing"

nothing = _Nothing()

def bind(m, f):
    """bind for optional values.

    If ``m`` is ``Some(v)``, return ``f(v)``. If ``m`` is ``nothing``,
    return ``nothing`` without calling ``f``.
    """
    if m is nothing:
        return nothing
    if not isinstance(m, Some):
        raise TypeError(f"Expected Some(...) or nothing, got {type(m)} with value {repr(m)}")
    return f(m.value)

def ret(x):
    """return for optional values, equivalent to ``Some(x)``."""
    return Some(x)

def mzero():
    """mzero for optional values, equivalent to ``nothing``."""
    return nothing

def from_optional(x):
    """Convert Python's ``None``-or-value convention into an optional value.

    ``None`` becomes ``nothing``; anything else becomes ``Some(x)``.
    """
    if x is None:
        return nothing
    return Some(x)

def to_optional(m):
    """The inverse of ``from_optional``.

    ``nothing`` becomes ``None``; ``Some(x)`` becomes ``x``. Note ``Some(None)``
    also becomes ``None``, so this loses information.
    """
    if m is nothing:
        return None
    return bind(m, lambda x: x)

class OptionMonad(MonadZero):
    bind = staticmethod(bind)
    ret = staticmethod(ret)
    mzero = staticmethod(mzero)

Option = OptionMonad()
