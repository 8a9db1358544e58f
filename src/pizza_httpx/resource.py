"""Operations on the pizza collection resource."""

from __future__ import annotations

import logging

from typing_extensions import Unpack

from pizza_httpx._defaults import API_KEY, API_KEY_HEADER, DEFAULTS
from pizza_httpx._headers import merge_headers
from pizza_httpx._request_builder import build_request, merge_operation_config
from pizza_httpx.config import DefaultConfig, OperationConfig
from pizza_httpx.exceptions import ValidationError
from pizza_httpx.request import RequestDescriptor
from pizza_httpx.types import HTTPMethod

logger = logging.getLogger(__name__)

READ_KEYS = frozenset({"authority", "base_path", "resource_path", "headers"})
CREATE_KEYS = READ_KEYS | {"name"}


class PizzaResource:
    """
    Request factory for the pizza collection.

    Every operation returns a RequestDescriptor that has not been sent yet.
    Call execute() or await it to perform the request.

    Attributes:
        defaults: Read-only defaults shared by every call.

    Example:
        >>> pizzas = PizzaResource()
        >>> response = pizzas.read_collection(base_path="/api/v2").execute()
        >>>
        >>> request = pizzas.create_item(name="margherita")
        >>> request.send({"name": "capricciosa"})
        >>> response = await request
    """

    def __init__(self, defaults: DefaultConfig | None = None) -> None:
        self.defaults = defaults if defaults is not None else DEFAULTS

    def read_collection(
        self,
        config: OperationConfig | None = None,
        **overrides: Unpack[OperationConfig],
    ) -> RequestDescriptor:
        """
        Build a GET request for the collection.

        Args:
            config: Optional overrides (authority, base_path, resource_path,
                headers).
            **overrides: Same keys as ``config``; these win over ``config``.

        Raises:
            TypeError: If an unsupported key such as ``verb`` is given.
        """
        options = merge_operation_config(config, overrides, READ_KEYS)
        return build_request(options, self.defaults, verb=HTTPMethod.GET)

    def create_item(
        self,
        config: OperationConfig | None = None,
        **overrides: Unpack[OperationConfig],
    ) -> RequestDescriptor:
        """
        Build a POST request that creates a pizza.

        The API key header is merged after the caller's headers, so it is
        always sent with its fixed value. The body is ``{"name": name}``,
        encoded according to the effective Content-Type.

        Args:
            config: Overrides; ``name`` is required.
            **overrides: Same keys as ``config``; these win over ``config``.

        Returns:
            A mutable RequestDescriptor. Its body can still be replaced with
            send() before execution.

        Raises:
            ValidationError: If ``name`` is missing or empty. Raised right
                away, before a request exists.
            TypeError: If an unsupported key such as ``verb`` is given.
        """
        options = merge_operation_config(config, overrides, CREATE_KEYS)
        name = options.pop("name", None)
        if not name:
            logger.debug("Rejected create_item call without a name")
            raise ValidationError("name")

        options["headers"] = merge_headers(
            options.get("headers"), {API_KEY_HEADER: API_KEY}
        )
        request = build_request(options, self.defaults, verb=HTTPMethod.POST)
        return request.send({"name": name})


_default_resource = PizzaResource()

read_collection = _default_resource.read_collection
create_item = _default_resource.create_item

get_pizzas = read_collection
add_pizza = create_item
