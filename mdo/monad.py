# -*- coding: utf-8 -*-
"""The interface a monad family exposes to ``mdo[]``.

A *family* is an object bundling the monadic operations for one effect type.
The bare form of ``mdo[]`` doesn't need one; it just calls whatever ``bind``,
``ret`` and ``mzero`` are in scope at the use site. The parametric form,
``mdo[M][...]``, takes the family explicitly, and checks here that it has
what the body needs.

Quick vocabulary for haskellers:
    - ``bind`` = ``>>=``
    - ``ret`` = ``return`` (``pure``)
    - ``mzero`` = ``mzero``, for a ``MonadPlus`` (here: ``MonadZero``)
    - ``then`` = ``>>``
    - ``guard`` = ``guard``
"""

__all__ = ["Monad", "MonadZero", "operations"]

from abc import ABCMeta, abstractmethod

class Monad(metaclass=ABCMeta):
    """Base class for monad families.

    Subclasses provide ``bind`` and ``ret``, typically as staticmethods
    wrapping the module-level functions of the family, and are instantiated
    once; the instance is the family object.
    """
    @abstractmethod
    def bind(self, m, f):
        """Monadic bind.

        m: M a
        f: a -> M b
        returns: M b
        """

    @abstractmethod
    def ret(self, x):
        """The unit operator. Lift a plain value into the monad.

        x: a
        returns: M a
        """

    def fmap(self, m, f):
        """The map operator.

        m: M a
        f: a -> b
        returns: M b
        """
        return self.bind(m, lambda x: self.ret(f(x)))

    def join(self, mm):
        """Flatten one level of nesting.

        mm: M (M a)
        returns: M a
        """
        return self.bind(mm, lambda m: m)

    def then(self, m, k):
        """Sequence, discarding the value of ``m``.

        m: M a
        k: M b
        returns: M b
        """
        return self.bind(m, lambda _: k)

    def __repr__(self):  # pragma: no cover
        return f"<monad family {self.__class__.__name__}>"

class MonadZero(Monad):
    """A monad family that also has a "no result" value.

    Only these support ``when[]`` guards in ``mdo[]``.
    """
    @abstractmethod
    def mzero(self):
        """The empty value.

        returns: M a
        """

    def guard(self, b):
        """Allow a branch of the computation to continue only if ``b`` is truthy.

        Returns ``ret(None)`` if ``b`` is truthy, and ``mzero()`` if not.
        Binding through the ``mzero()`` cancels the rest of that branch.
        """
        if b:
            return self.ret(None)
        return self.mzero()

def operations(family, zero=False):
    """Get the operations of ``family`` as a tuple, checking its capabilities first.

    Return ``(bind, ret, mzero)``. If ``family`` is not a ``MonadZero``, the
    ``mzero`` slot is a function that raises ``TypeError`` when called. Either
    way, inside ``mdo[family][...]`` the name ``mzero`` belongs to ``family``.

    This is the run-time part of the parametric form ``mdo[family][...]``;
    ``zero=True`` when the body contains guards.

    Raise ``TypeError`` if ``family`` is not a ``Monad``, or if ``zero=True``
    and it is not a ``MonadZero``.
    """
    if not isinstance(family, Monad):
        raise TypeError(f"Expected a monad family (an instance of mdo.monad.Monad), got {type(family)} with value {repr(family)}")
    if isinstance(family, MonadZero):
        return family.bind, family.ret, family.mzero
    if zero:
        raise TypeError(f"when[] needs a family with mzero (an instance of mdo.monad.MonadZero), but {repr(family)} has none")
    return family.bind, family.ret, _nozero(family)

def _nozero(family):
    def mzero():
        raise TypeError(f"{repr(family)} has no mzero (it is not an instance of mdo.monad.MonadZero)")
    return mzero
