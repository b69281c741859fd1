# -*- coding: utf-8 -*-
"""mdo.syntax: the ``mdo[]`` macro.

Requires `mcpyrate`.
"""

# --------------------------------------------------------------------------------
# This module only re-exports the macro interfaces so the macros can be imported
# by `from mdo.syntax import macros, ...`. The submodules contain the actual
# macro interfaces (and their docstrings), as well as the syntax transformers
# (i.e. regular functions that process ASTs) that implement the macros.
#
# The transformation happens in two phases:
#   - `clauses.parse` turns the body of an `mdo[]` into a list of clauses,
#   - `donotation.build` folds that list, right to left, into nested calls.
#
# `mdo` expands outside-in (the `mcpyrate` default), so the clause keywords
# `let`, `ign` and `when` are gone before the expander would see them as macros.
# --------------------------------------------------------------------------------

from .donotation import *  # noqa: F401, F403
