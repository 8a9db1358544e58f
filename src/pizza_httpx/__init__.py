"""Request construction helpers for the pizza API, built on HTTPX."""

__version__ = "0.1.0"

from pizza_httpx._defaults import DEFAULTS
from pizza_httpx._headers import merge_headers
from pizza_httpx._request_builder import build_request
from pizza_httpx.config import DefaultConfig, OperationConfig
from pizza_httpx.exceptions import (
    HTTPError,
    RequestError,
    RequestStateError,
    ResponseError,
    ValidationError,
)
from pizza_httpx.request import RequestDescriptor, RequestState, body_params
from pizza_httpx.resource import (
    PizzaResource,
    add_pizza,
    create_item,
    get_pizzas,
    read_collection,
)
from pizza_httpx.types import VALID_HTTP_METHODS, HTTPMethod, parse_method

__all__ = [
    "__version__",
    "DEFAULTS",
    "DefaultConfig",
    "OperationConfig",
    "HTTPError",
    "RequestError",
    "RequestStateError",
    "ResponseError",
    "ValidationError",
    "RequestDescriptor",
    "RequestState",
    "body_params",
    "merge_headers",
    "build_request",
    "PizzaResource",
    "read_collection",
    "create_item",
    "get_pizzas",
    "add_pizza",
    "HTTPMethod",
    "VALID_HTTP_METHODS",
    "parse_method",
]
