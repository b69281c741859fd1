# -*- coding: utf-8 -*-

from unpythonic.syntax import macros, test, test_raises, the  # noqa: F401
from unpythonic.test.fixtures import session, testset

import pickle

from ..option import (Some, nothing, bind, ret, mzero,
                      from_optional, to_optional, Option)
from ..monad import MonadZero

def runtests():
    with testset("values"):
        test[Some(5) == Some(5)]
        test[Some(5) != Some(6)]
        test[Some(None) != nothing]
        test[Some(5).value == 5]
        test[hash(Some(5)) == hash(Some(5))]
        test[not nothing]
        test[repr(Some(5)) == "Some(5)"]
        test[repr(nothing) == "nothing"]
        test_raises[AttributeError, Some(5).__setattr__("value", 6), "Some should be immutable"]

    with testset("pickling"):
        test[pickle.loads(pickle.dumps(Some(42))) == Some(42)]
        test[pickle.loads(pickle.dumps(nothing)) is nothing]

    with testset("bind, ret, mzero"):
        test[ret(5) == Some(5)]
        test[mzero() is nothing]
        test[bind(ret(5), lambda x: ret(x + 1)) == Some(6)]
        test[bind(ret(5), lambda x: bind(ret(x + 5), lambda x: ret(x * 2))) == Some(20)]
        # guard, written out by hand
        test[bind(ret(5), lambda x: bind(ret(None) if x == 0 else mzero(),
                                         lambda _: ret(x * 2))) is nothing]

        calls = []
        def f(x):
            calls.append(x)
            return ret(x)
        test[bind(nothing, f) is nothing]
        test[the[calls] == []]  # the continuation is not invoked on nothing
        bind(Some(3), f)
        test[the[calls] == [3]]  # ...and exactly once on Some

        test_raises[TypeError, bind(None, f), "None is not an optional value"]
        test_raises[TypeError, bind(5, f)]

    with testset("monad laws"):
        f = lambda x: ret(x * 2) if x > 0 else mzero()
        for x in (-1, 0, 1):
            test[bind(ret(x), f) == f(x)]  # left identity
        for m in (Some(1), Some(None), nothing):
            test[bind(m, ret) == m]  # right identity
        test[bind(mzero(), f) is nothing]

        g = lambda x: ret(x + 1)
        m = Some(3)
        test[bind(bind(m, f), g) == bind(m, lambda x: bind(f(x), g))]  # associativity

    with testset("None bridge"):
        test[from_optional(None) is nothing]
        test[from_optional(0) == Some(0)]
        test[to_optional(Some(0)) == 0]
        test[to_optional(nothing) is None]
        test[to_optional(Some(None)) is None]  # lossy

    with testset("family object"):
        test[isinstance(Option, MonadZero)]
        test[Option.bind(Option.ret(2), lambda x: Some(x * 21)) == Some(42)]
        test[Option.mzero() is nothing]
        test[Option.fmap(Some(20), lambda x: x + 1) == Some(21)]
        test[Option.fmap(nothing, lambda x: x + 1) is nothing]
        test[Option.join(Some(Some(42))) == Some(42)]
        test[Option.join(Some(nothing)) is nothing]
        test[Option.then(Some(1), Some(2)) == Some(2)]
        test[Option.then(nothing, Some(2)) is nothing]
        test[Option.guard(True) == Some(None)]
        test[Option.guard(False) is nothing]

if __name__ == '__main__':  # pragma: no cover
    with session(__file__):
        runtests()
