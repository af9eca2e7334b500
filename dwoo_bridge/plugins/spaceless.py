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

"""``{% spaceless %}`` block: strip whitespace between HTML tags."""

from __future__ import annotations

import re
from collections.abc import Callable

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from markupsafe import Markup

from dwoo_bridge.plugins.base import CompilableBlock, Plugin

_BETWEEN_TAGS = re.compile(r">\s+<")


class SpacelessExtension(Extension):
    tags = {"spaceless"}

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        body = parser.parse_statements(("name:endspaceless",), drop_needle=True)
        return nodes.CallBlock(
            self.call_method("_strip_whitespace"), [], [], body,
        ).set_lineno(lineno)

    def _strip_whitespace(self, caller: Callable[[], str]) -> str:
        content = caller()
        stripped = _BETWEEN_TAGS.sub("><", content.strip())
        # Keep already-escaped output safe under autoescape
        return Markup(stripped) if isinstance(content, Markup) else stripped


class SpacelessPlugin(Plugin, CompilableBlock):
    name = "spaceless"
    extension = SpacelessExtension
