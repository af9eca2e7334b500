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

"""Template plugins.

Usage::

    from dwoo_bridge.plugins import FunctionPlugin, SpacelessPlugin

    engine.add_plugin(FunctionPlugin("slugify", slugify))
    engine.add_plugin(SpacelessPlugin())
"""

from dwoo_bridge.plugins.base import (
    Compilable,
    CompilableBlock,
    FunctionPlugin,
    Plugin,
    is_compilable,
)
from dwoo_bridge.plugins.spaceless import SpacelessExtension, SpacelessPlugin

__all__ = [
    "Compilable",
    "CompilableBlock",
    "FunctionPlugin",
    "Plugin",
    "SpacelessExtension",
    "SpacelessPlugin",
    "is_compilable",
]
