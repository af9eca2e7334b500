"""Tests for dwoo_bridge.plugins."""

from __future__ import annotations

import pytest
from jinja2.ext import LoopControlExtension

from dwoo_bridge.core import Core
from dwoo_bridge.plugins import (
    Compilable,
    CompilableBlock,
    FunctionPlugin,
    Plugin,
    SpacelessPlugin,
    is_compilable,
)


class LoopControls(Plugin, Compilable):
    name = "loopcontrols"
    extension = LoopControlExtension


class Shout(FunctionPlugin):
    name = "shout"

    def __call__(self, value):
        return f"{value}!".upper()


class TestPluginNames:
    def test_class_name_attribute(self):
        assert Shout().get_name() == "shout"

    def test_function_plugin_name(self):
        assert FunctionPlugin("slug", str.lower).get_name() == "slug"

    def test_fallback_to_class_name(self):
        class Unnamed(Plugin):
            pass

        assert Unnamed().get_name() == "unnamed"


class TestFunctionPlugin:
    def test_calls_function(self):
        plugin = FunctionPlugin("slug", lambda s: s.lower().replace(" ", "-"))
        assert plugin("Hello World") == "hello-world"

    def test_without_function_raises(self):
        with pytest.raises(TypeError, match="needs a callable"):
            FunctionPlugin("empty")

    def test_subclass_call(self):
        assert Shout()("hey") == "HEY!"


class TestIsCompilable:
    def test_runtime_plugin(self):
        assert not is_compilable(Shout())

    def test_compilable_marker(self):
        assert is_compilable(LoopControls())

    def test_block_marker(self):
        assert is_compilable(SpacelessPlugin())
        assert isinstance(SpacelessPlugin(), CompilableBlock)

    def test_plain_object(self):
        assert not is_compilable(object())


class TestSpaceless:
    def _core(self) -> Core:
        core = Core()
        plugin = SpacelessPlugin()
        core.add_plugin(plugin.get_name(), plugin, compilable=True)
        return core

    def test_strips_whitespace_between_tags(self):
        core = self._core()
        template = core.environment.from_string(
            "{% spaceless %}\n<ul>\n  <li>{{ item }}</li>\n</ul>\n{% endspaceless %}"
        )
        assert core.get(template, {"item": "a b"}) == "<ul><li>a b</li></ul>"

    def test_output_stays_safe_under_autoescape(self):
        core = self._core()
        core.set_autoescape(True)
        template = core.environment.from_string(
            "{% spaceless %}<p>  {{ text }}  </p>\n<p></p>{% endspaceless %}"
        )
        assert core.get(template, {"text": "<b>"}) == "<p>  &lt;b&gt;  </p><p></p>"
