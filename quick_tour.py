#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Short quick tour. Run with `macropython quick_tour.py`."""

from mdo.syntax import macros, mdo, let, ign, when  # noqa: F401

from itertools import count, islice

from mdo import Some, nothing, Ok, Err, Result, Seq

def sequences():
    # the monadic functions for lazy sequences (similar to a list comprehension)
    from mdo.seq import bind, ret, mzero

    # the list of (x, y, z) such that
    #  - 1 <= x <= y < z < 11
    #  - x^2 + y^2 == z^2
    pt = bind(range(1, 11),
              lambda z: bind(range(1, z + 1),
                             lambda y: bind(range(1, y + 1),
                                            lambda x: bind(ret(None) if x * x + y * y == z * z else mzero(),
                                                           lambda _: ret((x, y, z))))))
    print(list(pt))

    # the same thing, using the mdo[] macro
    pt = mdo[z << range(1, 11),
             x << range(1, z),
             y << range(x, z),
             when[x * x + y * y == z * z],
             ret((x, y, z))]
    print(list(pt))

    # lazy, so infinite sequences are fine
    pt = mdo[z << count(1),
             x << range(1, z),
             y << range(x, z),
             when[x * x + y * y == z * z],
             ret((x, y, z))]
    print(list(islice(pt, 6)))

def optionals():
    from mdo.option import bind, ret, mzero

    def lookup(d, k):
        return Some(d[k]) if k in d else nothing

    config = {"width": 80, "height": 24}
    print(mdo[w << lookup(config, "width"),
              h << lookup(config, "height"),
              let[area << w * h],
              when[area > 0],
              ret(area)])  # --> Some(1920)
    print(mdo[w << lookup(config, "width"),
              d << lookup(config, "depth"),
              ret(w * d)])  # --> nothing

def results():
    # the family can also be given explicitly
    def parse_int(s):
        return Ok(int(s)) if s.lstrip("-").isdigit() else Err(f"not a number: {s!r}")

    def checked_sqrt(s):
        return mdo[Result][x << parse_int(s),
                           ign[Ok(None) if x >= 0 else Err("negative")],
                           ret(x ** 0.5)]

    for s in ("16", "-4", "sixteen"):
        print(s, "-->", checked_sqrt(s))

    print(list(mdo[Seq][x << "abc", ign[range(2)], ret(x.upper())]))

if __name__ == '__main__':
    sequences()
    optionals()
    results()
