"""Tests for the pizza resource operations."""

import logging

import pytest
from pytest_httpx import HTTPXMock

import pizza_httpx
from pizza_httpx import (
    DEFAULTS,
    DefaultConfig,
    HTTPMethod,
    PizzaResource,
    RequestDescriptor,
    RequestState,
    ValidationError,
    add_pizza,
    create_item,
    get_pizzas,
    read_collection,
)

COLLECTION_URL = f"{DEFAULTS.authority}/api/v1/pizzas"


class TestReadCollection:
    """Tests for read_collection."""

    def test_no_arguments(self) -> None:
        """Test the request built without overrides."""
        request = read_collection()

        assert isinstance(request, RequestDescriptor)
        assert request.method is HTTPMethod.GET
        assert request.url == COLLECTION_URL
        assert request.headers["Accept"] == "application/json"
        assert request.body is None
        assert request.state is RequestState.CONSTRUCTED

    def test_base_path_override(self) -> None:
        """Test that only the path changes."""
        request = read_collection({"base_path": "/api/v2"})

        assert request.url == f"{DEFAULTS.authority}/api/v2/pizzas"
        assert request.method is HTTPMethod.GET
        assert request.headers == dict(DEFAULTS.headers)

    def test_header_override(self) -> None:
        """Test that headers overlay the defaults."""
        request = read_collection(headers={"Accept": "application/xml"})

        assert request.url == COLLECTION_URL
        assert request.headers == {
            "Content-Type": "application/json",
            "Accept": "application/xml",
        }

    def test_resource_path_and_authority(self) -> None:
        """Test the remaining overrides."""
        request = read_collection(
            authority="https://pizza.test", resource_path="/pizzas/1"
        )

        assert request.url == "https://pizza.test/api/v1/pizzas/1"

    def test_verb_is_fixed(self) -> None:
        """Test that the verb cannot be overridden."""
        with pytest.raises(TypeError, match="verb"):
            read_collection(verb="delete")

    def test_name_is_rejected(self) -> None:
        """Test that create-only keys are rejected."""
        with pytest.raises(TypeError, match="name"):
            read_collection({"name": "margherita"})

    def test_alias(self) -> None:
        """Test the get_pizzas alias."""
        assert get_pizzas == read_collection
        assert get_pizzas().url == COLLECTION_URL


class TestCreateItem:
    """Tests for create_item."""

    def test_missing_name_raises_synchronously(self, httpx_mock: HTTPXMock) -> None:
        """Test that a missing name fails before any request is made."""
        for _ in range(3):
            with pytest.raises(ValidationError, match="missing name") as exc_info:
                create_item()
            assert exc_info.value.field == "name"

        assert httpx_mock.get_requests() == []

    @pytest.mark.parametrize("config", [{}, {"name": ""}, {"name": None}])
    def test_falsy_names(self, config: dict) -> None:
        """Test every falsy spelling of the name."""
        with pytest.raises(ValidationError):
            create_item(config)

    def test_keyword_name_overrides_empty_config_name(self) -> None:
        """Test that keyword arguments win over the mapping."""
        request = create_item({"name": ""}, name="marinara")

        assert request.body == {"name": "marinara"}

    def test_json_request(self) -> None:
        """Test the default POST request."""
        request = create_item(name="margherita")

        assert request.method is HTTPMethod.POST
        assert request.url == COLLECTION_URL
        assert request.headers == {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-API-Key": "foobar",
        }
        assert request.body == {"name": "margherita"}
        assert request.content == b'{"name":"margherita"}'

    def test_form_request(self) -> None:
        """Test a form-encoded body."""
        request = create_item(
            {
                "name": "margherita",
                "headers": {"Content-Type": "application/x-www-form-urlencoded"},
            }
        )

        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.headers["X-API-Key"] == "foobar"
        assert request.content == b"name=margherita"

    def test_non_ascii_name(self) -> None:
        """Test that the name is sent as UTF-8 JSON."""
        request = create_item(name="margheritè")

        assert request.content == '{"name":"margheritè"}'.encode()

    def test_api_key_value_is_not_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that debug logging shows header names but not the key."""
        with caplog.at_level(logging.DEBUG, logger="pizza_httpx"):
            create_item(name="margherita")

        assert "X-API-Key" in caplog.text
        assert "foobar" not in caplog.text

    def test_api_key_cannot_be_overridden(self) -> None:
        """Test that the API key is merged after caller headers."""
        request = create_item(
            name="margherita", headers={"X-API-Key": "stolen", "x-api-key": "also"}
        )

        api_keys = {
            name: value
            for name, value in request.headers.items()
            if name.lower() == "x-api-key"
        }
        assert api_keys == {"X-API-Key": "foobar"}

    def test_body_can_be_replaced(self) -> None:
        """Test last-write-wins body replacement."""
        request = create_item(name="margherita").send({"name": "capricciosa"})

        assert request.body == {"name": "capricciosa"}
        assert request.content == b'{"name":"capricciosa"}'
        assert request.method is HTTPMethod.POST
        assert request.headers["X-API-Key"] == "foobar"

    def test_verb_is_fixed(self) -> None:
        """Test that the verb cannot be overridden."""
        with pytest.raises(TypeError, match="verb"):
            create_item(name="margherita", verb="put")

    def test_requests_are_independent(self) -> None:
        """Test that two calls share no mutable state."""
        first = create_item(name="margherita", headers={"X-Trace": "1"})
        second = create_item(name="diavola")

        first.set("X-Extra", "1").send({"name": "changed"})

        assert "X-Trace" not in second.headers
        assert "X-Extra" not in second.headers
        assert second.body == {"name": "diavola"}
        assert "X-API-Key" not in DEFAULTS.headers

    def test_alias(self) -> None:
        """Test the add_pizza alias."""
        assert add_pizza == create_item
        with pytest.raises(ValidationError):
            add_pizza()


class TestPizzaResource:
    """Tests for resources bound to custom defaults."""

    def test_custom_defaults(self) -> None:
        """Test that operations read the resource's defaults."""
        resource = PizzaResource(
            DefaultConfig(authority="http://echo:9000", base_path="/api/v3")
        )

        assert resource.read_collection().url == "http://echo:9000/api/v3/pizzas"
        assert resource.create_item(name="x").url == "http://echo:9000/api/v3/pizzas"

    def test_default_defaults(self) -> None:
        """Test that DEFAULTS is used when nothing is passed."""
        assert PizzaResource().defaults is DEFAULTS

    def test_public_names(self) -> None:
        """Test the package exports."""
        for name in ("read_collection", "create_item", "get_pizzas", "add_pizza"):
            assert name in pizza_httpx.__all__
