"""Default values shared by the request builder and resource operations.

DEFAULTS is built once at import time and never mutated afterwards.
"""

from __future__ import annotations

from pizza_httpx.config import DefaultConfig

DEFAULT_RESOURCE_PATH = "/pizzas"
DEFAULT_VERB = "get"

API_KEY_HEADER = "X-API-Key"
API_KEY = "foobar"

DEFAULTS: DefaultConfig = DefaultConfig.from_env()
