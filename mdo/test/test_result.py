# -*- coding: utf-8 -*-

from unpythonic.syntax import macros, test, test_raises, the  # noqa: F401
from unpythonic.test.fixtures import session, testset

from ..result import Ok, Err, bind, ret, attempt, Result
from ..monad import Monad, MonadZero, operations
from .. import result

def runtests():
    with testset("values"):
        test[Ok(1) == Ok(1)]
        test[Ok(1) != Err(1)]
        test[Err("nope") == Err("nope")]
        test[Ok(1).value == 1]
        test[Err("nope").error == "nope"]
        test[repr(Ok(1)) == "Ok(1)"]
        test[repr(Err("nope")) == "Err('nope')"]
        test_raises[AttributeError, Ok(1).__setattr__("value", 2), "Ok should be immutable"]

    with testset("bind, ret"):
        test[ret(5) == Ok(5)]
        test[bind(ret(5), lambda x: ret(x + 1)) == Ok(6)]
        test[bind(ret(5), lambda x: Err(f"bad {x}")) == Err("bad 5")]

        test_raises[TypeError, bind(5, ret), "5 is not a result"]

    with testset("error propagation"):
        calls = []
        def f(x):
            calls.append(x)
            return ret(x)
        for payload in ("nope", 42, None, ValueError("nope"), Err("nested")):
            e = Err(payload)
            test[bind(e, f) is the[e]]  # same object, unchanged
        test[the[calls] == []]  # continuation never invoked

        # an error in the middle of a chain short-circuits the rest
        out = bind(ret(1), lambda x: bind(Err("stop"), lambda y: f(x + y)))
        test[out == Err("stop")]
        test[the[calls] == []]

    with testset("no zero"):
        test[isinstance(Result, Monad)]
        test[not isinstance(Result, MonadZero)]
        test[not hasattr(result, "mzero")]
        test_raises[TypeError, operations(Result, zero=True), "Result has no mzero"]
        test[operations(Result)[:2] == (Result.bind, Result.ret)]
        test_raises[TypeError, operations(Result)[2](), "Result has no mzero to call"]

    with testset("family object"):
        test[Result.fmap(Ok(20), lambda x: x + 1) == Ok(21)]
        test[Result.fmap(Err("nope"), lambda x: x + 1) == Err("nope")]
        test[Result.join(Ok(Ok(42))) == Ok(42)]
        test[Result.join(Ok(Err("inner"))) == Err("inner")]
        test[Result.then(Ok(1), Ok(2)) == Ok(2)]
        test[Result.then(Err("first"), Ok(2)) == Err("first")]

    with testset("attempt"):
        test[attempt(int, "42") == Ok(42)]
        test[attempt(int, "42", catch=ValueError) == Ok(42)]
        err = attempt(int, "forty-two")
        test[isinstance(err, Err)]
        test[isinstance(the[err.error], ValueError)]
        test[attempt(lambda x, *, scale: x * scale, 2, scale=21) == Ok(42)]
        # exceptions not listed in `catch` propagate
        test_raises[ValueError, attempt(int, "forty-two", catch=KeyError)]

if __name__ == '__main__':  # pragma: no cover
    with session(__file__):
        runtests()
