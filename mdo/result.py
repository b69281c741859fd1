# -*- coding: utf-8 -*-
"""Monadic functions for fallible results.

A result is either ``Ok(value)`` or ``Err(error)``. ``bind`` propagates an
``Err`` unchanged, without looking at its payload, so failure travels through
an ``mdo[]`` body as a value instead of as an exception.

There is no ``mzero``: a failure needs an error payload, and a guard has no
generic way to make one up. Hence ``when[]`` can't be used with this family.
To fail with a specific error, use a conditional expression as a bind::

    mdo[x << parse(s),
        ign[Ok(None) if x >= 0 else Err("negative")],
        ret(sqrt(x))]
"""

__all__ = ["Ok", "Err", "bind", "ret", "attempt", "Result"]

from .monad import Monad

class _Outcome:
    __slots__ = ("_payload",)

    def __init__(self, payload):
        object.__setattr__(self, "_payload", payload)

    def __setattr__(self, k, v):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self):
        return hash((type(self), self._payload))

    def __reduce__(self):
        return (type(self), (self._payload,))

    def __repr__(self):
        return f"{self.__class__.__name__}({repr(self._payload)})"

class Ok(_Outcome):
    """A successful result."""
    __slots__ = ()

    @property
    def value(self):
        return self._payload

class Err(_Outcome):
    """A failed result."""
    __slots__ = ()

    @property
    def error(self):
        return self._payload

def bind(m, f):
    """bind for results.

    If ``m`` is ``Ok(v)``, return ``f(v)``. If ``m`` is an ``Err``, return
    that same ``Err`` without calling ``f``.
    """
    if isinstance(m, Err):
        return m
    if not isinstance(m, Ok):
        raise TypeError(f"Expected Ok(...) or Err(...), got {type(m)} with value {repr(m)}")
    return f(m.value)

def ret(x):
    """return for results, equivalent to ``Ok(x)``."""
    return Ok(x)

def attempt(f, *args, catch=Exception, **kwargs):
    """Call ``f(*args, **kwargs)``, converting an exception into an ``Err``.

    Return ``Ok(value)`` if ``f`` returns normally, and ``Err(exc)`` if it
    raises an instance of ``catch`` (an exception type, or a tuple of them).
    Other exceptions propagate.

    Example::

        attempt(int, "42")                      # --> Ok(42)
        attempt(int, "forty-two").error         # --> ValueError(...)
        attempt(int, "42", catch=ValueError)    # --> Ok(42)
    """
    try:
        return Ok(f(*args, **kwargs))
    except catch as err:
        return Err(err)

class ResultMonad(Monad):
    bind = staticmethod(bind)
    ret = staticmethod(ret)

Result = ResultMonad()
