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

"""Filesystem lookup of parsed template references.

A plain name such as ``layouts/base.html.tpl`` is looked up in every
directory, bundle directories included, in the order they were added.
``ShopBundle:cart:show.html.dwoo`` is only looked up in the directories
added for ``ShopBundle``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePosixPath

from dwoo_bridge.templating.reference import TemplateReference

logger = logging.getLogger(__name__)


class FilesystemLoader:
    """Find template files for :class:`TemplateReference` objects.

    Args:
        paths: Directories searched for plain template names.
        bundle_paths: Bundle name to that bundle's templates directory.
    """

    def __init__(
        self,
        paths: Iterable[str | Path] = (),
        bundle_paths: Mapping[str, str | Path] | None = None,
    ) -> None:
        self._paths: list[Path] = []
        self._bundle_paths: dict[str, list[Path]] = {}
        for path in paths:
            self.add_path(path)
        for bundle, path in (bundle_paths or {}).items():
            self.add_path(path, bundle=bundle)

    def add_path(self, path: str | Path, bundle: str | None = None) -> None:
        """Add a search directory, optionally owned by *bundle*.

        Bundle directories also serve plain names.
        """
        directory = Path(path).expanduser().resolve()
        if bundle:
            owned = self._bundle_paths.setdefault(bundle, [])
            if directory not in owned:
                owned.append(directory)
        if directory not in self._paths:
            self._paths.append(directory)

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def load(self, reference: TemplateReference) -> Path | None:
        """Return the template file, or ``None`` if no directory holds it."""
        if reference.is_bundle_reference:
            directories = self._bundle_paths.get(reference.bundle, [])
            relative = reference.relative_path
        else:
            directories = self._paths
            relative = reference.name

        # Same rule as the core: lookups stay inside the search directories
        pieces = PurePosixPath(relative.replace("\\", "/"))
        if pieces.is_absolute() or ".." in pieces.parts:
            logger.debug("Template %s points outside the template dirs", reference)
            return None

        for directory in directories:
            path = directory / relative
            if path.is_file():
                return path

        logger.debug("Template %s not found in %d dir(s)", reference, len(directories))
        return None
