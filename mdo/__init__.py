# -*- coding: utf-8 -*
"""Monadic do-notation for Python.

The regular-code part: monad families for optional values (``mdo.option``),
fallible results (``mdo.result``) and lazy sequences (``mdo.seq``), and the
family interface (``mdo.monad``). Each family module exports ``bind``, ``ret``
and, where it makes sense, ``mzero``; import them from the family you want.

For the ``mdo[]`` macro itself, see ``mdo.syntax`` (requires ``mcpyrate``).
"""

__version__ = '0.1.0'

from .monad import *  # noqa: F401, F403
from .option import Some, nothing, Option  # noqa: F401
from .result import Ok, Err, attempt, Result  # noqa: F401
from .seq import Seq  # noqa: F401
