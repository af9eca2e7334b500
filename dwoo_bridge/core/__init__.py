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

"""Template engine core built on Jinja2.

Usage::

    from dwoo_bridge.core import Core, Data

    core = Core(template_dirs=[Path("templates")])
    data = Data({"title": "Hello"})
    html = core.get("page.tpl", data)
"""

from dwoo_bridge.core.data import Data
from dwoo_bridge.core.environment import Core
from dwoo_bridge.core.options import EngineOptions, property_to_setter

__all__ = ["Core", "Data", "EngineOptions", "property_to_setter"]
