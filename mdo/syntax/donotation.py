# -*- coding: utf-8 -*-
"""Monadic do-notation, for any monad."""

__all__ = ["mdo", "let", "ign", "when"]

from ast import Name, arg

from mcpyrate.quotes import macros, q, u, n, a, h  # noqa: F401

from mcpyrate import gensym, parametricmacro

from .clauses import Bind, Let, Ignore, When, KEYWORDS, parse, targetnames
from ..monad import operations

@parametricmacro
def mdo(tree, *, args, syntax, expander, **kw):
    """[syntax, expr] Monadic do-notation.

    Fully based on AST transformation, with real lexical variables.
    Like Haskell's do-notation, for any monad whose operations you bring
    into scope.

    Usage::

        mdo[clause, ..., final_expression]
        mdo[family][clause, ..., final_expression]

    where each clause is one of::

        target << expr          # bind: run expr in the monad, name its result
        let[target << expr]     # plain local binding, not monadic
        ign[expr]               # run expr in the monad, discard its result
        when[test]              # guard: cancel this branch if test is falsey

    and the final expression is already a monadic value; typically ``ret(...)``.

    Example::

        from mdo.seq import bind, ret, mzero

        out = mdo[x << range(0, 5),  # for each x in [0, 5)
                  ign[range(0, 2)],  # do the rest twice
                  when[x % 2 == 0],  # keep only even x
                  let[y << x + 5],
                  ret(y + 5)]
        assert list(out) == [10, 10, 12, 12, 14, 14]

    This transforms to::

        out = bind(range(0, 5),
                   lambda x: bind(range(0, 2),
                                  lambda _: bind(ret(None) if x % 2 == 0 else mzero(),
                                                 lambda _: (lambda y: ret(y + 5))(x + 5))))

    **Bare form**: ``bind``, ``ret`` and (if ``when[]`` is used) ``mzero``
    are looked up, at run time, in the lexical scope of the use site. The macro
    doesn't import them. Import them from ``mdo.option``, ``mdo.result`` or
    ``mdo.seq``, or define your own.

    **Parametric form**: ``mdo[family][...]``, where ``family`` is an instance
    of ``mdo.monad.Monad`` (such as ``mdo.Option``, ``mdo.Result``, ``mdo.Seq``).
    Inside the body, ``bind``, ``ret`` and ``mzero`` refer to the family's
    operations; for a family that is not a ``MonadZero``, calling ``mzero()``
    raises ``TypeError``. Before any clause runs, a ``TypeError`` is raised if
    ``family`` is not a ``Monad``, or if the body uses ``when[]`` and
    ``family`` is not a ``MonadZero``.

    **Targets** of ``<<`` are a name, or a flat tuple of names that may end in
    one starred name: ``(k, v) << ...``, ``(first, *others) << ...``.

    ``let``, ``ign`` and ``when`` are recognized by name, so they don't need to
    be imported; if imported as macros, as-imports are recognized too. Because
    recognition is by shape, a variable named like a keyword is fine::

        mdo[when << range(5),
            when[when != 3],
            ret(when)]  # --> 0, 1, 2, 4

    **Syntactic ambiguity**: like ``do[]`` in ``unpythonic``, a tuple body is
    the list of items. To return a literal tuple, ``mdo[(a, b),]``. Also, any
    item that is a left shift is a bind; to return ``x << 2``, write it inside
    a call, e.g. ``ret(x << 2)``.

    Quick vocabulary for haskellers:
        - ``mdo[...]`` = ``do ...``
        - ``x << foo`` = ``x <- foo``
        - ``let[x << foo]`` = ``let x = foo``
        - ``ign[foo]`` = ``foo`` (as a non-final statement)
        - ``when[x]`` = ``guard x``
        - ``ret`` = ``return``
    """
    if syntax != "expr":
        raise SyntaxError("mdo is an expr macro only")  # pragma: no cover
    if len(args) > 1:
        raise SyntaxError(f"mdo[family][...]: expected at most one macro argument (the monad family), got {len(args)}")

    clauses = parse(tree, keywords=_keywords(expander))
    body = build(clauses)
    if not args:
        return body

    family = args[0]
    needs_zero = any(type(clause) is When for clause in clauses)
    lam = _lambda(["bind", "ret", "mzero"], body)
    return q[a[lam](*h[operations](a[family], u[needs_zero]))]

# The clause keywords. They only mean something at the top level of an `mdo[]`,
# which eliminates them before the expander gets to see them.

def let(tree, *, syntax, **kw):
    """[syntax, expr] Plain local binding in an ``mdo``.

    Usage::

        let[target << value, ...]

    Only meaningful at the top level of an ``mdo[...]``. The binding is in
    scope for the remaining items.
    """
    if syntax != "expr":
        raise SyntaxError("let is an expr macro only")  # pragma: no cover
    raise SyntaxError("let[] is only valid at the top level of an mdo[]")

def ign(tree, *, syntax, **kw):
    """[syntax, expr] Run a monadic value for its effect only, in an ``mdo``.

    Usage::

        ign[expr]

    Only meaningful at the top level of an ``mdo[...]``.
    """
    if syntax != "expr":
        raise SyntaxError("ign is an expr macro only")  # pragma: no cover
    raise SyntaxError("ign[] is only valid at the top level of an mdo[]")

def when(tree, *, syntax, **kw):
    """[syntax, expr] Guard in an ``mdo``.

    Usage::

        when[test]

    Only meaningful at the top level of an ``mdo[...]``. If ``test`` is falsey,
    the rest of the current branch of the computation is replaced by ``mzero()``.
    """
    if syntax != "expr":
        raise SyntaxError("when is an expr macro only")  # pragma: no cover
    raise SyntaxError("when[] is only valid at the top level of an mdo[]")

def _keywords(expander):
    """Map the names that stand for a clause keyword at this use site to that keyword."""
    keywords = {k: k for k in KEYWORDS}
    ours = ((let, "let"), (ign, "ign"), (when, "when"))
    for name, macro in expander.bindings.items():
        for function, keyword in ours:
            if macro is function:
                keywords[name] = keyword
    return keywords

# --------------------------------------------------------------------------------
# Syntax transformer

def build(clauses):
    """Fold a list of clauses into one expression, right to left.

    The final ``Return`` is the innermost expression; each earlier clause
    wraps everything after it.
    """
    *init, last = clauses
    tree = last.value
    for clause in reversed(init):
        tree = _wrap(clause, tree)
    return tree

def _wrap(clause, body):
    if type(clause) is Let:
        if type(clause.target) is Name:
            return q[a[_lambda([clause.target.id], body)](a[clause.value])]
        return q[a[_destructuring_lambda(clause.target, body)](*a[clause.value])]

    elif type(clause) is Bind:
        if type(clause.target) is Name:
            k = _lambda([clause.target.id], body)
        else:
            item = gensym("_mdo_item")
            k = _lambda([item], q[a[_destructuring_lambda(clause.target, body)](*n[item])])
        return q[n["bind"](a[clause.value], a[k])]

    elif type(clause) is Ignore:
        k = _lambda([gensym("_mdo_ignored")], body)
        return q[n["bind"](a[clause.value], a[k])]

    elif type(clause) is When:
        k = _lambda([gensym("_mdo_unit")], body)
        return q[n["bind"](n["ret"](None) if a[clause.test] else n["mzero"](), a[k])]

    raise TypeError(f"Expected a non-final clause, got {type(clause)} with value {repr(clause)}")  # pragma: no cover

def _lambda(params, body, vararg=None):
    lam = q[lambda: a[body]]
    lam.args.args = [arg(arg=x) for x in params]
    if vararg is not None:
        lam.args.vararg = arg(arg=vararg)
    return lam

def _destructuring_lambda(target, body):
    names = targetnames(target)
    if type(target.elts[-1]) is Name:
        return _lambda(names, body)
    # As in Python's unpacking assignment, the starred name gets a list.
    *params, vararg = names
    aslist = q[a[_lambda([vararg], body)]([*n[vararg]])]
    return _lambda(params, aslist, vararg)
