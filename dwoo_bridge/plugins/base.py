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

"""Plugin base classes and capability markers.

A plugin is a named object contributed by the application.  Runtime
plugins are called while a template renders; compilable plugins hook into
template compilation through a Jinja2 extension class::

    class Shout(FunctionPlugin):
        name = "shout"

        def __call__(self, value):
            return str(value).upper() + "!"

    class Cache(Plugin, CompilableBlock):
        name = "cache"
        extension = CacheExtension  # a jinja2.ext.Extension subclass
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from jinja2.ext import Extension


class Plugin(ABC):
    """A named template extension.

    Subclasses set the class attribute ``name`` or override
    :meth:`get_name`.
    """

    name: ClassVar[str] = ""

    def get_name(self) -> str:
        return self.name or type(self).__name__.lower()


class Compilable:
    """Marker: the plugin takes part in template compilation.

    Implementations expose ``extension``, the Jinja2 extension class to
    install.
    """

    extension: ClassVar[type[Extension]]


class CompilableBlock:
    """Marker: the plugin compiles a ``{% name %}...{% endname %}`` block."""

    extension: ClassVar[type[Extension]]


class FunctionPlugin(Plugin):
    """Runtime plugin wrapping a plain callable.

    Args:
        name: Name the function is exposed under.
        func: The callable; may be omitted by subclasses that define
            ``__call__`` themselves.

    Raises:
        TypeError: If neither *func* nor a subclass ``__call__`` is given.
    """

    def __init__(self, name: str | None = None, func: Callable[..., Any] | None = None) -> None:
        if func is None and type(self).__call__ is FunctionPlugin.__call__:
            raise TypeError(f"FunctionPlugin {name!r} needs a callable")
        self._name = name
        self._func = func

    def get_name(self) -> str:
        return self._name or super().get_name()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._func(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_name()!r})"


def is_compilable(plugin: object) -> bool:
    """Return True if *plugin* carries one of the compilation markers."""
    return isinstance(plugin, (Compilable, CompilableBlock))
