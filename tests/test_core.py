"""Tests for dwoo_bridge.core."""

from __future__ import annotations

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from dwoo_bridge.core import Core, Data


def test_render_from_template_dir(tmp_path):
    (tmp_path / "test.tpl").write_text("Hello {{ name }}!")

    core = Core(template_dirs=[tmp_path])
    assert core.get("test.tpl", Data({"name": "World"})) == "Hello World!"


def test_first_dir_wins(tmp_path):
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "test.tpl").write_text("app: {{ x }}")

    bundle_dir = tmp_path / "bundle"
    bundle_dir.mkdir()
    (bundle_dir / "test.tpl").write_text("bundle: {{ x }}")

    core = Core(template_dirs=[app_dir, bundle_dir])
    assert core.get("test.tpl", {"x": "val"}) == "app: val"


def test_fallback_to_later_dir(tmp_path):
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    bundle_dir = tmp_path / "bundle"
    bundle_dir.mkdir()
    (bundle_dir / "only_bundle.tpl").write_text("from bundle")

    core = Core(template_dirs=[app_dir, bundle_dir])
    assert core.get("only_bundle.tpl") == "from bundle"


def test_missing_template_raises(tmp_path):
    core = Core(template_dirs=[tmp_path])
    with pytest.raises(TemplateNotFound):
        core.get("nonexistent.tpl")


def test_parent_dir_escape_is_not_found(tmp_path):
    inner = tmp_path / "inner"
    inner.mkdir()
    (tmp_path / "secret.tpl").write_text("secret")

    core = Core(template_dirs=[inner])
    with pytest.raises(TemplateNotFound):
        core.get("../secret.tpl")


def test_namespaced_lookup(tmp_path):
    shop = tmp_path / "shop"
    (shop / "cart").mkdir(parents=True)
    (shop / "cart" / "show.html.dwoo").write_text("shop cart")
    blog = tmp_path / "blog"
    (blog / "cart").mkdir(parents=True)
    (blog / "cart" / "show.html.dwoo").write_text("blog cart")

    core = Core()
    core.set_template_dir(blog, namespace="BlogBundle")
    core.set_template_dir(shop, namespace="ShopBundle")

    assert core.get("cart/show.html.dwoo") == "blog cart"
    assert core.get("[ShopBundle]/cart/show.html.dwoo") == "shop cart"
    assert core.get("file:[ShopBundle]/cart/show.html.dwoo") == "shop cart"
    with pytest.raises(TemplateNotFound):
        core.get("[OtherBundle]/cart/show.html.dwoo")


def test_file_prefix_on_plain_name(tmp_path):
    (tmp_path / "page.tpl").write_text("page")
    core = Core(template_dirs=[tmp_path])
    assert core.get("file:page.tpl") == "page"


def test_set_template_dir_skips_duplicates(tmp_path):
    core = Core()
    core.set_template_dir(tmp_path)
    core.set_template_dir(tmp_path)
    assert core.get_template_dirs() == [tmp_path.resolve()]


def test_reference_with_path_attribute(tmp_path):
    (tmp_path / "page.tpl").write_text("ref {{ n }}")

    class Ref:
        path = "page.tpl"

    core = Core(template_dirs=[tmp_path])
    assert core.get(Ref(), {"n": 1}) == "ref 1"


def test_compiled_template_passes_through():
    core = Core()
    template = core.environment.from_string("inline {{ v }}")
    assert core.get(template, {"v": "ok"}) == "inline ok"


def test_jinja_conditionals(tmp_path):
    (tmp_path / "cond.tpl").write_text(
        "{% if show_price %}Price: {{ price }}{% endif %}"
    )

    core = Core(template_dirs=[tmp_path])
    assert core.get("cond.tpl", {"show_price": True, "price": "9.99"}) == "Price: 9.99"
    assert core.get("cond.tpl", {"show_price": False, "price": "9.99"}) == ""


def test_jinja_loops(tmp_path):
    (tmp_path / "loop.tpl").write_text(
        "{% for item in items %}- {{ item }}\n{% endfor %}"
    )

    core = Core(template_dirs=[tmp_path])
    result = core.get("loop.tpl", {"items": ["a", "b", "c"]})
    assert "- a" in result
    assert "- c" in result


class TestGlobalsAndPlugins:
    def test_add_global(self, tmp_path):
        (tmp_path / "g.tpl").write_text("{{ site }}")
        core = Core(template_dirs=[tmp_path])
        core.add_global("site", "Example")
        assert core.get("g.tpl") == "Example"
        assert core.get_globals()["site"] == "Example"

    def test_runtime_plugin_is_filter_and_function(self, tmp_path):
        (tmp_path / "p.tpl").write_text("{{ name|shout }} {{ shout(name) }}")
        core = Core(template_dirs=[tmp_path])
        core.add_plugin("shout", lambda v: f"{v.upper()}!")
        assert core.get("p.tpl", {"name": "hi"}) == "HI! HI!"

    def test_compilable_plugin_installs_extension(self):
        from jinja2.ext import LoopControlExtension

        class Plugin:
            extension = LoopControlExtension

        core = Core()
        core.add_plugin("loopcontrols", Plugin(), compilable=True)
        template = core.environment.from_string(
            "{% for i in items %}{% if i > 2 %}{% break %}{% endif %}{{ i }}{% endfor %}"
        )
        assert core.get(template, {"items": [1, 2, 3, 4]}) == "12"


class TestOptionSetters:
    def test_caching_zero_disables_cache(self):
        core = Core()
        core.set_caching(0)
        assert core.environment.cache is None

    def test_caching_size(self):
        core = Core()
        core.set_caching(10)
        assert core.environment.cache.capacity == 10

    def test_strict_variables(self, tmp_path):
        (tmp_path / "u.tpl").write_text("{{ missing }}")
        core = Core(template_dirs=[tmp_path])
        assert core.get("u.tpl") == ""

        core.set_strict_variables(True)
        core.clear_cache()
        with pytest.raises(UndefinedError):
            core.get("u.tpl")

    def test_trim_blocks(self, tmp_path):
        (tmp_path / "t.tpl").write_text("{% if true %}\nyes{% endif %}")
        core = Core(template_dirs=[tmp_path])
        core.set_trim_blocks(True)
        assert core.get("t.tpl") == "yes"

    def test_autoescape(self, tmp_path):
        (tmp_path / "e.tpl").write_text("{{ html }}")
        core = Core(template_dirs=[tmp_path])
        core.set_autoescape(True)
        assert core.get("e.tpl", {"html": "<b>"}) == "&lt;b&gt;"

    def test_compile_dir(self, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "c.tpl").write_text("compiled {{ n }}")
        compile_dir = tmp_path / "compiled"

        core = Core(template_dirs=[templates])
        core.set_compile_dir(compile_dir)
        assert core.get("c.tpl", {"n": 1}) == "compiled 1"
        assert any(compile_dir.iterdir())

        core.set_compile_dir(None)
        assert core.environment.bytecode_cache is None

    def test_charset(self, tmp_path):
        (tmp_path / "latin.tpl").write_bytes("caf\xe9".encode("latin-1"))
        core = Core(template_dirs=[tmp_path])
        core.set_charset("latin-1")
        assert core.get("latin.tpl") == "caf\xe9"


class TestData:
    def test_assign_mapping_and_single(self):
        data = Data()
        data.assign({"a": 1, "b": 2})
        data.assign("c", 3)
        assert data.get_data() == {"a": 1, "b": 2, "c": 3}
        assert len(data) == 3
        assert "c" in data

    def test_append(self):
        data = Data({"tags": "x"})
        data.append("tags", "y")
        data.append("new", 1)
        assert data.get_data() == {"tags": ["x", "y"], "new": [1]}

    def test_clear(self):
        data = Data({"a": 1, "b": 2})
        data.clear("a")
        assert not data.is_assigned("a")
        data.clear()
        assert len(data) == 0

    def test_get_data_is_a_copy(self):
        data = Data({"a": 1})
        data.get_data()["a"] = 2
        assert data.get_data() == {"a": 1}
