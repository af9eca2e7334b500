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

"""Template rendering for web applications.

Usage::

    from fastapi import FastAPI
    from dwoo_bridge.templating import build_engine

    engine = build_engine(
        [Path("templates")],
        bundles={"ShopBundle": "myapp.shop"},
        options={"autoescape": True},
    )
    app = FastAPI()

    @app.get("/cart")
    def cart():
        return engine.render_response("ShopBundle:cart:show.html.dwoo", {"items": []})
"""

from dwoo_bridge.templating.container import Container
from dwoo_bridge.templating.engine import ENGINE_TAGS, DwooEngine
from dwoo_bridge.templating.exceptions import (
    InvalidTemplateNameError,
    ParameterNotFoundError,
    TemplateNotFoundError,
)
from dwoo_bridge.templating.factory import build_engine
from dwoo_bridge.templating.globals import GlobalVariables
from dwoo_bridge.templating.loader import FilesystemLoader
from dwoo_bridge.templating.parser import TemplateNameParser
from dwoo_bridge.templating.reference import TemplateReference

__all__ = [
    "Container",
    "DwooEngine",
    "ENGINE_TAGS",
    "FilesystemLoader",
    "GlobalVariables",
    "InvalidTemplateNameError",
    "ParameterNotFoundError",
    "TemplateNameParser",
    "TemplateNotFoundError",
    "TemplateReference",
    "build_engine",
]
