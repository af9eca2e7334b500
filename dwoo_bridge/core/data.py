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

"""Per-render variable container."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class Data:
    """Variables assigned to a single template render.

    A fresh instance is built for every render so that nothing leaks
    between requests.
    """

    def __init__(self, variables: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if variables:
            self.assign(variables)

    def assign(self, name: str | Mapping[str, Any], value: Any = None) -> None:
        """Assign one variable, or every key/value pair of a mapping."""
        if isinstance(name, Mapping):
            for key, val in name.items():
                self._data[str(key)] = val
        else:
            self._data[name] = value

    def append(self, name: str, value: Any) -> None:
        """Append *value* to the list variable *name*, creating it if needed.

        A non-list value already assigned under *name* becomes the first
        element of the new list.
        """
        current = self._data.get(name)
        if current is None:
            self._data[name] = [value]
        elif isinstance(current, list):
            current.append(value)
        else:
            self._data[name] = [current, value]

    def clear(self, name: str | None = None) -> None:
        """Remove one variable, or all of them when *name* is ``None``."""
        if name is None:
            self._data.clear()
        else:
            self._data.pop(name, None)

    def is_assigned(self, name: str) -> bool:
        return name in self._data

    def get_data(self) -> dict[str, Any]:
        """Return a shallow copy of the assigned variables."""
        return dict(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Data({sorted(self._data)!r})"
