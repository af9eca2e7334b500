# dwoo_bridge — Dwoo-style template rendering for Python web applications
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Templating engine for web applications, rendering through :class:`Core`.

The application talks to :class:`DwooEngine` in framework terms (template
names, existence checks, responses) and the engine translates those into
calls on the Jinja2-backed core: parsed references become template paths,
options become core setters, and plugins become Jinja2 filters, functions
or extensions.

Every bundle listed in the ``kernel.bundles`` container parameter that
ships a ``templates/`` directory next to its source file gets that
directory registered, which also enables the
``file:[ShopBundle]/cart/show.html.dwoo`` syntax.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import threading
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from fastapi.responses import HTMLResponse, Response
from jinja2 import Template

from dwoo_bridge.core import Core, Data, EngineOptions
from dwoo_bridge.plugins import is_compilable
from dwoo_bridge.templating.container import Container
from dwoo_bridge.templating.exceptions import TemplateNotFoundError
from dwoo_bridge.templating.globals import GlobalVariables
from dwoo_bridge.templating.loader import FilesystemLoader
from dwoo_bridge.templating.parser import TemplateNameParser
from dwoo_bridge.templating.reference import TemplateReference

logger = logging.getLogger(__name__)

# "tpl" is kept for backwards compatibility
ENGINE_TAGS = ("dwoo", "tpl")

BUNDLE_TEMPLATES_DIR = "templates"


def iter_bundles(container: Container) -> Iterator[tuple[str, Any]]:
    if not container.has_parameter("kernel.bundles"):
        return
    bundles = container.get_parameter("kernel.bundles")
    if isinstance(bundles, Mapping):
        yield from bundles.items()
    else:
        for bundle in bundles:
            yield getattr(bundle, "__name__", str(bundle)), bundle


def bundle_templates_dir(bundle: Any) -> Path:
    """Return where *bundle* keeps its templates (the dir may not exist).

    *bundle* is a class, a module, or a dotted module path.
    """
    if isinstance(bundle, str):
        bundle = importlib.import_module(bundle)
    return Path(inspect.getfile(bundle)).parent / BUNDLE_TEMPLATES_DIR


class DwooEngine:
    """Render templates for a web application.

    Args:
        core: The template engine core.
        container: Application container; exposed to templates as
            ``container`` and read for ``kernel.bundles``.
        parser: Template name parser.
        loader: Finds template files for parsed references.
        options: Engine options (see :class:`EngineOptions`).  Unknown
            keys are logged and skipped.
        globals: Application globals, exposed to templates as ``app``.
    """

    def __init__(
        self,
        core: Core,
        container: Container,
        parser: TemplateNameParser,
        loader: FilesystemLoader,
        options: Mapping[str, Any] | None = None,
        globals: GlobalVariables | None = None,
    ) -> None:
        self._core = core
        self._parser = parser
        self._loader = loader
        self._plugins: list[Any] = []
        self._registered: set[int] = set()
        self._lock = threading.Lock()

        engine_options = EngineOptions.from_mapping(options)
        for key in engine_options.unknown:
            logger.warning(
                "Ignoring unknown engine option %r (supported: %s)",
                key, ", ".join(EngineOptions.names()),
            )
        engine_options.apply(core)

        for bundle_name, bundle in iter_bundles(container):
            directory = bundle_templates_dir(bundle)
            if directory.is_dir():
                core.set_template_dir(directory, namespace=bundle_name)

        core.add_global("container", container)
        if globals is not None:
            core.add_global("app", globals)

    @property
    def core(self) -> Core:
        return self._core

    # --- Rendering ---

    def render(
        self,
        name: str | TemplateReference | Template,
        parameters: Mapping[str, Any] | None = None,
    ) -> str:
        """Render a template and return the output.

        Errors from the core (``jinja2.TemplateNotFound``, syntax errors,
        undefined variables in strict mode) propagate unchanged.
        """
        self.register_plugins()

        data = Data()
        data.assign(parameters or {})

        template = name if isinstance(name, Template) else self._parser.parse(name)
        return self._core.get(template, data)

    def render_response(
        self,
        view: str | TemplateReference | Template,
        parameters: Mapping[str, Any] | None = None,
        response: Response | None = None,
    ) -> Response:
        """Render *view* into *response* (a new ``HTMLResponse`` by default).

        The output is encoded with the response charset and replaces the
        body as is, whatever media type the response carries.
        """
        if response is None:
            response = HTMLResponse()

        response.body = self.render(view, parameters).encode(response.charset)
        response.headers["content-length"] = str(len(response.body))
        return response

    # --- Lookup ---

    def exists(self, name: str | TemplateReference | Template) -> bool:
        if isinstance(name, Template):
            return True
        try:
            self.load(name)
        except TemplateNotFoundError:
            return False
        return True

    def supports(self, name: str | TemplateReference | Template) -> bool:
        """Return True if *name* is a template this engine can render."""
        if isinstance(name, Template):
            return True
        return self._parser.parse(name).get("engine") in ENGINE_TAGS

    def load(self, name: str | TemplateReference | Template) -> str | Template:
        """Return the template file path, or *name* if already compiled.

        Raises :class:`TemplateNotFoundError` if the loader cannot find it.
        """
        if isinstance(name, Template):
            return name

        resource = self._loader.load(self._parser.parse(name))
        if resource is None or resource is False:
            raise TemplateNotFoundError(name)
        return str(resource)

    # --- Plugins ---

    def add_plugin(self, plugin: Any) -> None:
        with self._lock:
            self._plugins.append(plugin)

    def get_plugins(self) -> list[Any]:
        with self._lock:
            return list(self._plugins)

    def register_plugins(self) -> None:
        """Register plugins added since the last call with the core."""
        with self._lock:
            for plugin in self._plugins:
                if id(plugin) in self._registered:
                    continue
                self._core.add_plugin(plugin.get_name(), plugin, is_compilable(plugin))
                self._registered.add(id(plugin))

    # --- Core operations ---

    def add_global(self, name: str, value: Any) -> None:
        self._core.add_global(name, value)

    def get_globals(self) -> dict[str, Any]:
        return self._core.get_globals()

    def set_template_dir(self, path: str | Path, namespace: str | None = None) -> None:
        self._core.set_template_dir(path, namespace=namespace)

    def get_template_dirs(self) -> list[Path]:
        return self._core.get_template_dirs()

    def clear_cache(self) -> None:
        self._core.clear_cache()
