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

"""Template name parsing.

Three spellings are understood:

* ``ShopBundle:cart:show.html.dwoo``: bundle, controller directory,
  file name, format, engine
* ``file:[ShopBundle]/cart/show.html.dwoo``: path inside a bundle's
  templates directory
* ``layouts/base.html.tpl``: plain path searched in every directory

The engine tag is always the last dot-separated suffix.
"""

from __future__ import annotations

import functools
import re
from pathlib import PurePosixPath

from dwoo_bridge.templating.exceptions import InvalidTemplateNameError
from dwoo_bridge.templating.reference import TemplateReference

_BUNDLE_NAME = re.compile(
    r"^(?P<bundle>[^:/\[\]]+):(?P<controller>[^:]*):(?P<filename>[^:/]+)$"
)
_BUNDLE_PATH = re.compile(r"^(?:file:)?\[(?P<bundle>[^\]/]+)\]/(?P<path>.+)$")


def _split_filename(filename: str) -> tuple[str, str, str | None]:
    """Split ``show.html.dwoo`` into ``("show", "html", "dwoo")``."""
    parts = filename.split(".")
    if len(parts) >= 3:
        return ".".join(parts[:-2]), parts[-2], parts[-1]
    if len(parts) == 2:
        return parts[0], "", parts[1]
    return filename, "", None


class TemplateNameParser:
    """Turn template names into :class:`TemplateReference` objects.

    Results are memoised per name in a bounded LRU cache; the parser holds
    no other state.

    Args:
        cache_size: Number of parsed names kept.
    """

    def __init__(self, cache_size: int = 1024) -> None:
        self._parse_cached = functools.lru_cache(maxsize=cache_size)(self._parse)

    def parse(self, name: str | TemplateReference) -> TemplateReference:
        """Parse *name*.  References are returned unchanged.

        Raises :class:`InvalidTemplateNameError` for empty names, absolute
        paths, and names that climb out of their directory with ``..``.
        """
        if isinstance(name, TemplateReference):
            return name
        return self._parse_cached(str(name))

    def _parse(self, name: str) -> TemplateReference:
        normalized = name.replace("\\", "/")
        if not normalized.strip():
            raise InvalidTemplateNameError(name, "empty name")
        if PurePosixPath(normalized.removeprefix("file:")).is_absolute():
            raise InvalidTemplateNameError(name, "absolute paths are not allowed")
        if ".." in re.split(r"[/:]", normalized):
            raise InvalidTemplateNameError(name, "parent directory references are not allowed")

        reference = self._parse_bundle_name(normalized) or self._parse_bundle_path(normalized)
        if reference is None:
            normalized = normalized.removeprefix("file:")
            _, fmt, engine = _split_filename(normalized.rpartition("/")[2])
            reference = TemplateReference(name=normalized, engine=engine, format=fmt)
        return reference

    @staticmethod
    def _parse_bundle_name(name: str) -> TemplateReference | None:
        match = _BUNDLE_NAME.match(name)
        if match is None:
            return None
        stem, fmt, engine = _split_filename(match.group("filename"))
        return TemplateReference(
            name=stem,
            engine=engine,
            bundle=match.group("bundle"),
            controller=match.group("controller").strip("/"),
            format=fmt,
        )

    @staticmethod
    def _parse_bundle_path(name: str) -> TemplateReference | None:
        match = _BUNDLE_PATH.match(name)
        if match is None:
            return None
        directory, _, filename = match.group("path").rpartition("/")
        stem, fmt, engine = _split_filename(filename)
        return TemplateReference(
            name=stem,
            engine=engine,
            bundle=match.group("bundle"),
            controller=directory.strip("/"),
            format=fmt,
        )
