import datetime
import io
import os.path
import sys
import types

from typewarden import classify
from typewarden.registry import (
    class_identity,
    is_interface_type,
    is_open_resource,
    lookup_name,
    names_routine,
    resolve_class,
)


class Widget:
    class Part:
        pass


def test_class_identity():
    assert class_identity(int) == "int"
    assert class_identity(datetime.datetime) == "datetime.datetime"
    assert class_identity(Widget.Part) == f"{__name__}.Widget.Part"


def test_lookup_name_follows_loaded_modules():
    assert lookup_name("os.path.join") is os.path.join
    assert lookup_name("len") is len
    assert lookup_name("str.upper") is str.upper
    assert lookup_name(f"{__name__}.Widget.Part") is Widget.Part


def test_lookup_name_misses():
    assert lookup_name("") is None
    assert lookup_name("os..path") is None
    assert lookup_name("os.path.no_such_function") is None
    assert lookup_name("definitely_not_loaded_module.thing") is None


def test_names_routine():
    assert names_routine("len")
    assert names_routine("str.upper")
    assert not names_routine("str")
    assert not names_routine("os.path")
    assert not names_routine("hello world")


def test_resolve_class():
    assert resolve_class(int) is int
    assert resolve_class("datetime.date") is datetime.date
    assert resolve_class(f"{__name__}.Widget") is Widget
    assert resolve_class("os.path.join") is None
    assert resolve_class(3) is None
    assert resolve_class("") is None


def test_resolve_class_searches_loaded_classes():
    detached = type("DetachedWidget", (), {"__module__": "not_in_sys_modules"})
    assert resolve_class("not_in_sys_modules.DetachedWidget") is detached
    assert resolve_class("DetachedWidget") is detached


def test_ambiguous_bare_names_do_not_resolve():
    first = type("TwinWidget", (), {"__module__": "twins_one"})
    second = type("TwinWidget", (), {"__module__": "twins_two"})
    assert resolve_class("TwinWidget") is None
    assert resolve_class("twins_one.TwinWidget") is first
    assert resolve_class("twins_two.TwinWidget") is second


def test_is_interface_type():
    import collections.abc
    assert is_interface_type(collections.abc.Iterable)
    assert not is_interface_type(list)


def test_is_open_resource():
    stream = io.BytesIO(b"data")
    assert is_open_resource(stream)
    stream.close()
    assert not is_open_resource(stream)
    assert not is_open_resource("file.txt")


def test_lookup_name_skips_module_getattr_hooks(monkeypatch):
    hooked = []
    lazy = types.ModuleType("lazy_warden_pkg")

    def __getattr__(name):
        hooked.append(name)
        module = types.ModuleType(f"lazy_warden_pkg.{name}")
        sys.modules[module.__name__] = module
        return module

    lazy.__getattr__ = __getattr__
    monkeypatch.setitem(sys.modules, "lazy_warden_pkg", lazy)
    loaded = set(sys.modules)

    assert lookup_name("lazy_warden_pkg.Executor.submit") is None
    assert classify("lazy_warden_pkg.Executor.submit") == "string"
    assert hooked == []
    assert set(sys.modules) == loaded


def test_lookup_name_returns_raw_class_attributes(monkeypatch):
    class Tool:
        @staticmethod
        def build():
            return "built"

    module = types.ModuleType("static_warden_pkg")
    module.Tool = Tool
    monkeypatch.setitem(sys.modules, "static_warden_pkg", module)
    assert names_routine("static_warden_pkg.Tool.build")
    assert resolve_class("static_warden_pkg.Tool") is Tool
