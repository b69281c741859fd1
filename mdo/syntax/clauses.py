# -*- coding: utf-8 -*-
"""Parse the body of an ``mdo[]`` into clauses.

The body is a comma-separated sequence of items. Each item is classified
purely by its shape:

    target << expr           # Bind
    let[target << expr, ...] # Let (one clause per binding)
    ign[expr]                # Ignore
    when[test]               # When
    expr                     # Return; the last item, and only the last item

A target is a bare name, or a flat tuple or list of bare names, optionally
ending in one starred name (``(a, b) << e``, ``[head, *tail] << e``).

Nothing here looks at what the expressions mean; that's for the code the
``mdo[]`` macro emits, at run time.
"""

__all__ = ["Bind", "Let", "Ignore", "When", "Return",
           "KEYWORDS", "isbind", "istarget", "targetnames", "parse"]

from ast import BinOp, LShift, Name, Tuple, List, Starred, Subscript, Slice
from collections import namedtuple

from mcpyrate import unparse

Bind = namedtuple("Bind", "target value")
Let = namedtuple("Let", "target value")
Ignore = namedtuple("Ignore", "value")
When = namedtuple("When", "test")
Return = namedtuple("Return", "value")

KEYWORDS = ("let", "ign", "when")

def isbind(tree):
    """Detect whether tree looks like a bind, ``target << value``.

    Only the operator is checked. A left shift in clause position is always
    a bind, so an invalid target is an error (see ``istarget``), not a
    plain expression.
    """
    return type(tree) is BinOp and type(tree.op) is LShift

def istarget(tree):
    """Detect whether tree is a valid target for a bind or let clause."""
    if type(tree) is Name:
        return True
    if type(tree) not in (Tuple, List) or not tree.elts:
        return False
    *init, last = tree.elts
    if not all(type(elt) is Name for elt in init):
        return False
    return type(last) is Name or (type(last) is Starred and type(last.value) is Name)

def targetnames(tree):
    """Return the names bound by a target, as a list of str."""
    if type(tree) is Name:
        return [tree.id]
    return [elt.value.id if type(elt) is Starred else elt.id for elt in tree.elts]

def parse(tree, keywords=None):
    """Parse the body of an ``mdo[]`` into a list of clauses.

    ``tree``: the body AST. A ``Tuple`` is a sequence of items; anything else
    is a body consisting of just the final expression.

    ``keywords``: mapping of names to the keyword (``"let"``, ``"ign"`` or
    ``"when"``) they stand for. The default recognizes the bare keywords only;
    the macro interface adds any as-imported names.

    The result ends with exactly one ``Return``. Raise ``SyntaxError`` if the
    body doesn't fit the grammar.
    """
    if keywords is None:
        keywords = {k: k for k in KEYWORDS}
    items = tree.elts if type(tree) is Tuple else [tree]
    if not items:
        raise SyntaxError("mdo body: expected at least a final expression, got nothing")
    return _parse(items, keywords)

def _parse(items, keywords):
    item, *rest = items
    clauses = _clauses(item, keywords)
    if clauses is None:  # plain expression
        if rest:
            raise SyntaxError(f"mdo body: a plain expression is only allowed as the last item, got '{unparse(item)}' followed by {len(rest)} more. To run something for its effect only, use ign[...].")
        return [Return(item)]
    if not rest:
        raise SyntaxError(f"mdo body: must end with a final expression, but the last item is the clause '{unparse(item)}'")
    return clauses + _parse(rest, keywords)

def _clauses(item, keywords):
    """Classify one item. Return a list of clauses, or ``None`` if it's a plain expression."""
    if isbind(item):
        return [Bind(*_binding(item))]
    kind = _keyword(item, keywords)
    if kind == "let":
        bindings = item.slice.elts if type(item.slice) is Tuple else [item.slice]
        for b in bindings:
            if not isbind(b):
                raise SyntaxError(f"let[]: expected bindings of the form 'target << value', got '{unparse(b)}'")
        return [Let(*_binding(b)) for b in bindings]
    elif kind == "ign":
        return [Ignore(_single(item, "ign"))]
    elif kind == "when":
        return [When(_single(item, "when"))]
    return None

def _keyword(tree, keywords):
    if type(tree) is not Subscript or type(tree.value) is not Name:
        return None
    return keywords.get(tree.value.id)

def _binding(tree):
    target, value = tree.left, tree.right
    if not istarget(target):
        raise SyntaxError(f"mdo: invalid binding target '{unparse(target)}'; expected a name, or a tuple of names (optionally ending in one starred name)")
    names = targetnames(target)
    if len(set(names)) < len(names):
        raise SyntaxError(f"mdo: names in a binding target must be unique, got '{unparse(target)}'")
    return target, value

def _single(tree, name):
    if type(tree.slice) in (Tuple, Slice):
        raise SyntaxError(f"{name}[]: expected exactly one expression, got '{unparse(tree.slice)}'")
    return tree.slice
