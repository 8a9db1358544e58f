"""Internal module for composing requests from defaults and overrides."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from typing_extensions import Unpack

from pizza_httpx._defaults import DEFAULT_RESOURCE_PATH, DEFAULT_VERB, DEFAULTS
from pizza_httpx._headers import merge_headers
from pizza_httpx.config import DefaultConfig, OperationConfig
from pizza_httpx.request import RequestDescriptor
from pizza_httpx.types import parse_method

logger = logging.getLogger(__name__)

BUILDER_KEYS = frozenset({"authority", "base_path", "resource_path", "headers", "verb"})


def merge_operation_config(
    config: Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
    allowed: frozenset[str],
) -> OperationConfig:
    """
    Combine a config mapping with keyword overrides.

    Keyword overrides win over the mapping. Keys outside ``allowed`` raise
    TypeError, the same way an unexpected keyword argument would.
    """
    merged: dict[str, Any] = {**(config or {}), **overrides}
    unknown = set(merged) - allowed
    if unknown:
        raise TypeError(
            f"Unexpected configuration key(s): {', '.join(sorted(unknown))}"
        )
    return merged  # type: ignore[return-value]


def _pick(options: Mapping[str, Any], key: str, fallback: Any) -> Any:
    # None means "not given"
    value = options.get(key)
    return fallback if value is None else value


def build_request(
    config: OperationConfig | None = None,
    defaults: DefaultConfig = DEFAULTS,
    **overrides: Unpack[OperationConfig],
) -> RequestDescriptor:
    """
    Compose a RequestDescriptor without sending anything.

    Each field is taken from the operation config if present, otherwise from
    the hardcoded operation default (resource_path, verb) or from
    ``defaults`` (authority, base_path). Headers are overlaid on the default
    headers rather than replacing them.

    Args:
        config: Optional per-call overrides.
        defaults: Process-wide defaults. Read only.
        **overrides: Same keys as ``config``; these win over ``config``.

    Returns:
        A RequestDescriptor bound to the verb, URL and merged headers.

    Example:
        >>> request = build_request(base_path="/api/v2", verb="delete")
        >>> request.url
        'http://localhost:8061/api/v2/pizzas'
    """
    options = merge_operation_config(config, overrides, BUILDER_KEYS)

    authority = _pick(options, "authority", defaults.authority)
    base_path = _pick(options, "base_path", defaults.base_path)
    resource_path = _pick(options, "resource_path", DEFAULT_RESOURCE_PATH)
    method = parse_method(_pick(options, "verb", DEFAULT_VERB))
    headers = merge_headers(defaults.headers, options.get("headers"))

    url = f"{authority}{base_path}{resource_path}"
    logger.debug(
        "Built %s %s with header names %s", method.value, url, sorted(headers)
    )
    return RequestDescriptor(method, url, headers=headers)
