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

"""Errors raised by the templating layer."""

from __future__ import annotations


class TemplateNotFoundError(ValueError):
    """The loader could not find the named template."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f'The template "{name}" does not exist.')


class InvalidTemplateNameError(ValueError):
    """A template name cannot be parsed."""

    def __init__(self, name: object, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f'Template name "{name}" is not valid ({reason}).')


class ParameterNotFoundError(KeyError):
    """A container parameter was requested but never set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"You have requested a non-existent parameter {self.name!r}."
