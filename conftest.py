# -*- coding: utf-8 -*-
"""pytest plumbing: run the macro-enabled `unpythonic` test modules under pytest.

The test modules use macros, so they must be imported through `mcpyrate`'s
import hook (not pytest's assertion-rewriting importer), and they expose a
`runtests()` entry point instead of `test_*` functions. Each test module
becomes one pytest item that calls its `runtests()` (same as `runtests.py`).
"""

import mcpyrate.activate  # noqa: F401

from importlib import import_module

import pytest

from unpythonic.test.fixtures import session, tests_errored, tests_failed
from unpythonic.collections import unbox


def pytest_pycollect_makemodule(module_path, parent):
    # Replace pytest's default `Module` collector for the test modules.
    return MacroTestModule.from_parent(parent, path=module_path)


class MacroTestModule(pytest.File):
    def collect(self):
        yield RunTestsItem.from_parent(self, name="runtests")


class RunTestsItem(pytest.Item):
    def runtest(self):
        relpath = self.path.relative_to(self.config.rootpath).with_suffix("")
        modname = ".".join(relpath.parts)
        failed_before = unbox(tests_failed)
        errored_before = unbox(tests_errored)
        with session(modname):
            mod = import_module(modname)
            mod.runtests()
        failed = unbox(tests_failed) - failed_before
        errored = unbox(tests_errored) - errored_before
        if failed or errored:
            raise AssertionError(f"{modname}: {failed} failed, {errored} errored")

    def reportinfo(self):
        return self.path, None, f"{self.path.name}::runtests"
