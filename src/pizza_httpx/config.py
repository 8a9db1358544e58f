"""Configuration types for default and per-operation settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator

AUTHORITY_ENV_VAR = "HTTP_CLIENT_AUTHORITY"
DEFAULT_AUTHORITY = "http://localhost:8061"
DEFAULT_BASE_PATH = "/api/v1"
DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
)


class DefaultConfig(BaseModel):
    """
    Process-wide defaults used when an operation omits a field.

    Instances are frozen and their headers are exposed through a read-only
    mapping, so the same object can be shared by every operation call.

    Example:
        >>> defaults = DefaultConfig(authority="https://pizza.example.com")
        >>> defaults.base_path
        '/api/v1'
    """

    model_config = ConfigDict(frozen=True)

    authority: str = DEFAULT_AUTHORITY
    base_path: str = DEFAULT_BASE_PATH
    headers: Mapping[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_HEADERS), validate_default=True
    )

    @field_validator("headers", mode="after")
    @classmethod
    def freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        return hash(
            (self.authority, self.base_path, frozenset(self.headers.items()))
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DefaultConfig:
        """
        Build defaults, taking the authority from the environment if set.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        if environ is None:
            environ = os.environ
        return cls(authority=environ.get(AUTHORITY_ENV_VAR) or DEFAULT_AUTHORITY)


class OperationConfig(TypedDict, total=False):
    """
    Per-call overrides for an operation.

    Every key is optional. Missing keys fall back to the operation's own
    default and then to DefaultConfig.

    Example:
        >>> config = OperationConfig(base_path="/api/v2")
        >>> read_collection(config)
    """

    authority: str
    base_path: str
    resource_path: str
    headers: dict[str, str]
    verb: str
    name: str
