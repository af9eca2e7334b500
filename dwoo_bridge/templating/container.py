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

"""Minimal service container.

Holds configuration parameters (``kernel.bundles``, ``kernel.debug``, ...)
and named services.  Templates see the container as the ``container``
global.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dwoo_bridge.templating.exceptions import ParameterNotFoundError

_MISSING = object()


class Container:
    """Parameters and services shared by an application."""

    def __init__(
        self,
        parameters: Mapping[str, Any] | None = None,
        services: Mapping[str, Any] | None = None,
    ) -> None:
        self._parameters: dict[str, Any] = dict(parameters or {})
        self._services: dict[str, Any] = dict(services or {})

    # --- Parameters ---

    def get_parameter(self, name: str) -> Any:
        """Return parameter *name*.  Raises :class:`ParameterNotFoundError`."""
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(name) from None

    def set_parameter(self, name: str, value: Any) -> None:
        self._parameters[name] = value

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    # --- Services ---

    def get(self, service_id: str, default: Any = _MISSING) -> Any:
        """Return service *service_id*, or *default* when it is not set.

        Raises ``KeyError`` for unknown services if no default is given.
        """
        if service_id in self._services:
            return self._services[service_id]
        if default is _MISSING:
            raise KeyError(f"You have requested a non-existent service {service_id!r}.")
        return default

    def set(self, service_id: str, service: Any) -> None:
        self._services[service_id] = service

    def has(self, service_id: str) -> bool:
        return service_id in self._services
