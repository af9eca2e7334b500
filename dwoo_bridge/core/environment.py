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

"""Jinja2-backed template engine core.

Templates are looked up in the registered template directories in
registration order; the first directory holding the file wins.
Directories registered under a namespace can also be addressed
explicitly::

    core.set_template_dir("shop/templates", namespace="ShopBundle")
    core.get("file:[ShopBundle]/cart/show.html.dwoo", data)

Only that namespace's directories are searched for such names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemBytecodeCache,
    StrictUndefined,
    Template,
    TemplateNotFound,
    Undefined,
)
from jinja2.environment import create_cache
from jinja2.loaders import split_template_path

from dwoo_bridge.core.data import Data

logger = logging.getLogger(__name__)

_NAMESPACED = re.compile(r"^(?:file:)?\[(?P<namespace>[^\]/]+)\]/(?P<path>.+)$")


class _TemplateDirLoader(BaseLoader):
    """Jinja2 loader that checks each registered directory in turn."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.dirs: list[tuple[Path, str | None]] = []
        self.encoding = encoding

    def get_source(
        self, environment: Environment, template: str,
    ) -> tuple[str, str, Callable[[], bool]]:
        namespace = None
        relative = template
        match = _NAMESPACED.match(template)
        if match:
            namespace, relative = match.group("namespace"), match.group("path")
        elif template.startswith("file:"):
            relative = template[len("file:"):]

        pieces = split_template_path(relative)
        for directory, dir_namespace in self.dirs:
            if namespace is not None and dir_namespace != namespace:
                continue
            path = directory.joinpath(*pieces)
            if path.is_file():
                source = path.read_text(encoding=self.encoding)
                mtime = path.stat().st_mtime

                def uptodate() -> bool:
                    try:
                        return path.stat().st_mtime == mtime
                    except OSError:
                        return False

                return source, str(path), uptodate
        raise TemplateNotFound(template)


class Core:
    """Render templates from disk through a Jinja2 environment.

    Args:
        template_dirs: Initial template directories, searched in order.
    """

    def __init__(self, template_dirs: Iterable[str | Path] | None = None) -> None:
        self._loader = _TemplateDirLoader()
        self._env = Environment(
            loader=self._loader,
            keep_trailing_newline=True,
            autoescape=False,  # enable with the ``autoescape`` option
        )
        for directory in template_dirs or ():
            self.set_template_dir(directory)

    @property
    def environment(self) -> Environment:
        return self._env

    # --- Template directories ---

    def set_template_dir(self, path: str | Path, namespace: str | None = None) -> None:
        """Append a template directory; already registered entries are skipped."""
        entry = (Path(path).expanduser().resolve(), namespace)
        if entry in self._loader.dirs:
            return
        self._loader.dirs.append(entry)
        logger.debug("Registered template dir %s (namespace=%s)", entry[0], namespace)

    def get_template_dirs(self) -> list[Path]:
        return [directory for directory, _ in self._loader.dirs]

    # --- Globals and plugins ---

    def add_global(self, name: str, value: Any) -> None:
        """Expose *value* to every template as *name*."""
        self._env.globals[name] = value

    def get_globals(self) -> dict[str, Any]:
        """Return all template globals, Jinja2's built-ins included."""
        return dict(self._env.globals)

    def add_plugin(self, name: str, plugin: Any, compilable: bool = False) -> None:
        """Register a plugin with the environment.

        Compilable plugins take part in template compilation: their
        ``extension`` class is installed as a Jinja2 extension.  Runtime
        plugins are callables, exposed both as the filter ``x|name`` and
        as the function ``name(x)``.
        """
        if compilable:
            self._env.add_extension(plugin.extension)
        else:
            self._env.filters[name] = plugin
            self._env.globals[name] = plugin
        logger.debug("Registered plugin %r (compilable=%s)", name, compilable)

    # --- Rendering ---

    def get(self, template: Any, data: Data | Mapping[str, Any] | None = None) -> str:
        """Render *template* with the variables held in *data*.

        *template* may be a template name, a reference object with a
        ``path`` attribute, or a compiled :class:`jinja2.Template`.

        Raises ``jinja2.TemplateNotFound`` if no directory holds the
        template.
        """
        if isinstance(data, Data):
            variables = data.get_data()
        else:
            variables = dict(data or {})
        return self._resolve(template).render(variables)

    def _resolve(self, template: Any) -> Template:
        if isinstance(template, Template):
            return template
        return self._env.get_template(str(getattr(template, "path", template)))

    def clear_cache(self) -> None:
        """Forget all compiled templates, in memory and on disk."""
        if self._env.cache is not None:
            self._env.cache.clear()
        if self._env.bytecode_cache is not None:
            self._env.bytecode_cache.clear()

    # --- Option setters (see EngineOptions) ---

    def set_autoescape(self, value: bool | Callable[[str | None], bool]) -> None:
        self._env.autoescape = value

    def set_trim_blocks(self, value: bool) -> None:
        self._env.trim_blocks = bool(value)

    def set_lstrip_blocks(self, value: bool) -> None:
        self._env.lstrip_blocks = bool(value)

    def set_keep_trailing_newline(self, value: bool) -> None:
        self._env.keep_trailing_newline = bool(value)

    def set_auto_reload(self, value: bool) -> None:
        self._env.auto_reload = bool(value)

    def set_caching(self, size: int) -> None:
        """Set the compiled-template cache size (0 disables, -1 unbounded)."""
        self._env.cache = create_cache(int(size))

    def set_compile_dir(self, path: str | Path | None) -> None:
        """Persist compiled bytecode under *path*; ``None`` turns it off."""
        if path is None:
            self._env.bytecode_cache = None
            return
        directory = Path(path).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
        self._env.bytecode_cache = FileSystemBytecodeCache(str(directory))

    def set_charset(self, encoding: str) -> None:
        self._loader.encoding = encoding

    def set_strict_variables(self, value: bool) -> None:
        self._env.undefined = StrictUndefined if value else Undefined
