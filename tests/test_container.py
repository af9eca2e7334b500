"""Tests for the service container and application globals."""

from __future__ import annotations

import pytest

from dwoo_bridge.templating import Container, GlobalVariables, ParameterNotFoundError


class TestContainer:
    def test_parameters(self):
        container = Container({"kernel.debug": True})
        assert container.has_parameter("kernel.debug")
        assert container.get_parameter("kernel.debug") is True

        container.set_parameter("kernel.environment", "dev")
        assert container.get_parameter("kernel.environment") == "dev"

    def test_missing_parameter_raises(self):
        with pytest.raises(ParameterNotFoundError, match="kernel.bundles"):
            Container().get_parameter("kernel.bundles")

    def test_missing_parameter_is_key_error(self):
        with pytest.raises(KeyError):
            Container().get_parameter("nope")

    def test_services(self):
        service = object()
        container = Container(services={"mailer": service})
        assert container.has("mailer")
        assert container.get("mailer") is service
        assert container.get("other", None) is None

    def test_missing_service_raises(self):
        with pytest.raises(KeyError, match="non-existent service"):
            Container().get("mailer")


class TestGlobalVariables:
    def test_reads_container(self):
        request = object()
        container = Container(
            {"kernel.environment": "test", "kernel.debug": 1},
            {"request": request},
        )
        app = GlobalVariables(container)
        assert app.request is request
        assert app.environment == "test"
        assert app.debug is True

    def test_missing_values(self):
        app = GlobalVariables(Container())
        assert app.request is None
        assert app.session is None
        assert app.user is None
        assert app.environment is None
        assert app.debug is False

    def test_values_follow_container(self):
        container = Container()
        app = GlobalVariables(container)
        container.set("user", "alice")
        assert app.user == "alice"
