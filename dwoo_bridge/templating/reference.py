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

"""Structured template references."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class TemplateReference:
    """A parsed template name.

    Attributes:
        name: Template file name without format and engine suffixes for
            bundle references, or the full relative path otherwise.
        engine: Engine tag (``"dwoo"``, ``"tpl"``, ...), ``None`` if the
            name carries no extension.
        bundle: Owning bundle, empty for plain names.
        controller: Sub-directory inside the bundle's templates.
        format: Output format (``"html"``, ``"txt"``...), bundle names only.
    """

    name: str
    engine: str | None = None
    bundle: str = ""
    controller: str = ""
    format: str = ""

    def get(self, key: str) -> str | None:
        """Return the field called *key*.  Raises ``KeyError`` if unknown."""
        if key not in {f.name for f in fields(self)}:
            raise KeyError(f"The template does not support the {key!r} parameter.")
        return getattr(self, key)

    @property
    def is_bundle_reference(self) -> bool:
        return bool(self.bundle)

    @property
    def relative_path(self) -> str:
        """Path of the file relative to its templates directory."""
        if not self.is_bundle_reference:
            return self.name
        filename = ".".join(p for p in (self.name, self.format, self.engine) if p)
        return f"{self.controller}/{filename}" if self.controller else filename

    @property
    def path(self) -> str:
        """Name the engine core resolves: ``[Bundle]/...`` for bundle references."""
        if self.is_bundle_reference:
            return f"[{self.bundle}]/{self.relative_path}"
        return self.name

    @property
    def logical_name(self) -> str:
        if not self.is_bundle_reference:
            return self.name
        filename = ".".join(p for p in (self.name, self.format, self.engine) if p)
        return f"{self.bundle}:{self.controller}:{filename}"

    def __str__(self) -> str:
        return self.logical_name
