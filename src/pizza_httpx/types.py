"""Type definitions for pizza-httpx."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeAlias

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP method enumeration."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


VALID_HTTP_METHODS: set[str] = {method.value for method in HTTPMethod}

Headers: TypeAlias = dict[str, str]
Body: TypeAlias = Mapping[str, Any] | BaseModel | str | bytes | None


def parse_method(verb: HTTPMethod | str) -> HTTPMethod:
    """
    Convert a verb such as "get" or "POST" to an HTTPMethod.

    Raises:
        ValueError: If the verb is not a known HTTP method.
    """
    if isinstance(verb, HTTPMethod):
        return verb
    try:
        return HTTPMethod(verb.upper())
    except (AttributeError, ValueError):
        raise ValueError(
            f"Invalid HTTP method: {verb!r}. Must be one of {sorted(VALID_HTTP_METHODS)}"
        ) from None
