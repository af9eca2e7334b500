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

"""Engine options.

Every option the engine understands is a field of :class:`EngineOptions`.
Each field ``foo_bar`` is applied through the matching ``Core.set_foo_bar``
setter, so adding an option means adding a field here and a setter on
:class:`~dwoo_bridge.core.environment.Core`.

Usage::

    opts = EngineOptions.from_mapping({"trim_blocks": True, "caching": 0})
    opts.apply(core)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any


def property_to_setter(name: str, prefix: str = "set") -> str:
    """Return the accessor method name for an option.

    ``property_to_setter("compile_dir")`` gives ``"set_compile_dir"``;
    pass ``prefix="get"`` or ``prefix="add"`` for other accessors.
    Dashes and spaces in *name* are treated like underscores.
    """
    words = [w for w in name.replace("-", "_").replace(" ", "_").split("_") if w]
    return "_".join([prefix, *(w.lower() for w in words)])


@dataclass
class EngineOptions:
    """Explicit set of engine options.

    Attributes:
        autoescape: HTML-escape variable output.
        trim_blocks: Remove the first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before a block tag.
        keep_trailing_newline: Keep the final newline of a template file.
        auto_reload: Recompile templates whose source changed on disk.
        caching: Number of compiled templates kept in memory
            (``0`` disables the cache, ``-1`` keeps everything).
        compile_dir: Directory for persisted compiled bytecode.
        charset: Encoding used to read template files.
        strict_variables: Raise on undefined template variables.
        unknown: Options that did not match any field.
    """

    autoescape: bool | None = None
    trim_blocks: bool | None = None
    lstrip_blocks: bool | None = None
    keep_trailing_newline: bool | None = None
    auto_reload: bool | None = None
    caching: int | None = None
    compile_dir: str | Path | None = None
    charset: str | None = None
    strict_variables: bool | None = None
    unknown: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the names of all supported options."""
        return tuple(f.name for f in fields(cls) if f.name != "unknown")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> EngineOptions:
        """Split *options* into known fields and :attr:`unknown` leftovers."""
        known: dict[str, Any] = {}
        unknown: dict[str, Any] = {}
        supported = cls.names()
        for key, value in (options or {}).items():
            if key in supported:
                known[key] = value
            else:
                unknown[key] = value
        return cls(**known, unknown=unknown)

    def items(self) -> list[tuple[str, Any]]:
        """Return ``(name, value)`` for every option that was set."""
        return [
            (name, getattr(self, name))
            for name in self.names()
            if getattr(self, name) is not None
        ]

    def apply(self, core: Any) -> None:
        """Call the setter on *core* for every option that was set."""
        for name, value in self.items():
            getattr(core, property_to_setter(name))(value)
