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

"""Wire a ready-to-use :class:`DwooEngine`."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from dwoo_bridge.core import Core
from dwoo_bridge.templating.container import Container
from dwoo_bridge.templating.engine import DwooEngine, bundle_templates_dir, iter_bundles
from dwoo_bridge.templating.globals import GlobalVariables
from dwoo_bridge.templating.loader import FilesystemLoader
from dwoo_bridge.templating.parser import TemplateNameParser

logger = logging.getLogger(__name__)


def build_engine(
    template_dirs: Iterable[str | Path] = (),
    *,
    bundles: Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
    plugins: Iterable[Any] = (),
    container: Container | None = None,
    environment: str = "prod",
    debug: bool = False,
    expose_app: bool = True,
) -> DwooEngine:
    """Build an engine whose core and loader search the same directories.

    Args:
        template_dirs: Application template directories, searched first.
        bundles: Bundle name to bundle class, module, or dotted module
            path.  Stored as the ``kernel.bundles`` container parameter.
        options: Engine options, see
            :class:`~dwoo_bridge.core.options.EngineOptions`.
        plugins: Plugins to add.
        container: Existing container to use; a new one is created
            otherwise.
        environment: Stored as ``kernel.environment`` unless already set.
        debug: Stored as ``kernel.debug`` unless already set.
        expose_app: Expose :class:`GlobalVariables` as the ``app`` global.
    """
    dirs = list(template_dirs)
    container = container if container is not None else Container()
    if bundles is not None:
        container.set_parameter("kernel.bundles", dict(bundles))
    if not container.has_parameter("kernel.environment"):
        container.set_parameter("kernel.environment", environment)
    if not container.has_parameter("kernel.debug"):
        container.set_parameter("kernel.debug", debug)

    loader = FilesystemLoader(dirs)
    for name, bundle in iter_bundles(container):
        directory = bundle_templates_dir(bundle)
        if directory.is_dir():
            loader.add_path(directory, bundle=name)

    engine = DwooEngine(
        Core(dirs),
        container,
        TemplateNameParser(),
        loader,
        options=options,
        globals=GlobalVariables(container) if expose_app else None,
    )
    for plugin in plugins:
        engine.add_plugin(plugin)

    logger.info(
        "Template engine ready: %d template dir(s), %d plugin(s)",
        len(engine.get_template_dirs()), len(engine.get_plugins()),
    )
    return engine
