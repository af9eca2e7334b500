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

"""Application globals exposed to templates as ``app``."""

from __future__ import annotations

from typing import Any

from dwoo_bridge.templating.container import Container


class GlobalVariables:
    """Read-only view of request-level application state.

    Values are looked up in the container on every access, so templates
    always see the current request.
    """

    def __init__(self, container: Container) -> None:
        self._container = container

    def _service(self, service_id: str) -> Any:
        return self._container.get(service_id, None)

    def _parameter(self, name: str) -> Any:
        if not self._container.has_parameter(name):
            return None
        return self._container.get_parameter(name)

    @property
    def request(self) -> Any:
        return self._service("request")

    @property
    def session(self) -> Any:
        return self._service("session")

    @property
    def user(self) -> Any:
        return self._service("user")

    @property
    def environment(self) -> str | None:
        return self._parameter("kernel.environment")

    @property
    def debug(self) -> bool:
        return bool(self._parameter("kernel.debug"))
