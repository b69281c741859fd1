# -*- coding: utf-8 -*-
"""Monadic functions for lazy sequences (the List monad, on iterators).

Any iterable can be bound. The results are iterators: single-pass, and lazy,
so infinite inputs are fine as long as the consumer takes only a finite
prefix. The first bind is the outermost loop::

    from itertools import count, islice
    from mdo.syntax import macros, mdo, when  # noqa: F401
    from mdo.seq import bind, ret, mzero

    # pythagorean triples
    pt = mdo[z << count(1),
             x << range(1, z),
             y << range(x, z),
             when[x * x + y * y == z * z],
             ret((x, y, z))]
    assert list(islice(pt, 2)) == [(3, 4, 5), (6, 8, 10)]
"""

__all__ = ["bind", "ret", "mzero", "Seq"]

from .monad import MonadZero

def bind(m, f):
    """bind for sequences: flatmap.

    Apply ``f`` to each element of ``m`` in order, and chain the resulting
    iterables. Nothing is computed until the result is iterated over.
    """
    return (y for x in m for y in f(x))

def ret(x):
    """return for sequences, an iterator yielding just ``x``."""
    return iter((x,))

def mzero():
    """mzero for sequences, an empty iterator."""
    return iter(())

class SeqMonad(MonadZero):
    bind = staticmethod(bind)
    ret = staticmethod(ret)
    mzero = staticmethod(mzero)

Seq = SeqMonad()
