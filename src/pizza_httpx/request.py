"""Deferred, mutable HTTP request object."""

from __future__ import annotations

import logging
from collections.abc import Generator, Mapping
from enum import Enum
from typing import Any, overload

import httpx
from pydantic import BaseModel

from pizza_httpx._headers import merge_headers
from pizza_httpx.exceptions import HTTPError, RequestStateError
from pizza_httpx.types import Body, Headers, HTTPMethod, parse_method

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestState(str, Enum):
    """Lifecycle of a RequestDescriptor."""

    CONSTRUCTED = "constructed"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"


def _media_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _content_type(headers: Mapping[str, str]) -> str | None:
    for name, value in headers.items():
        if name.lower() == "content-type":
            return value
    return None


def body_params(body: Body, content_type: str | None) -> dict[str, Any]:
    """
    Choose the httpx body argument for a body and Content-Type.

    Strings and bytes go out verbatim as ``content``. Mappings and Pydantic
    models are handed to httpx as ``json`` for JSON media types and as
    ``data`` for application/x-www-form-urlencoded, and httpx encodes them.

    Raises:
        ValueError: If a mapping body has no encoding for the Content-Type.
    """
    if body is None:
        return {}
    if isinstance(body, (bytes, str)):
        return {"content": body}
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")

    media_type = _media_type(content_type)
    if media_type == JSON_CONTENT_TYPE or media_type.endswith("+json"):
        return {"json": body}
    if media_type == FORM_CONTENT_TYPE:
        return {"data": body}

    raise ValueError(
        f"Cannot encode {type(body).__name__} body as {content_type!r}; "
        "pass str or bytes instead"
    )


class RequestDescriptor:
    """
    A composed request that has not been sent yet.

    Construction never performs I/O. The headers and body can be changed
    until the request is executed with execute(), aexecute(), end() or by
    awaiting it. Execution happens at most once.

    Attributes:
        method: HTTP method.
        url: Full target URL.

    Example:
        >>> request = RequestDescriptor("post", "http://localhost:8061/api/v1/pizzas")
        >>> request.set({"Content-Type": "application/json"}).send({"name": "diavola"})
        >>> response = request.execute()
        >>> print(response.text)
    """

    def __init__(
        self,
        method: HTTPMethod | str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Body = None,
    ) -> None:
        self.method = parse_method(method)
        self.url = url
        self._headers: Headers = merge_headers(headers or {})
        body_params(body, self.content_type)
        self._body = body
        self._state = RequestState.CONSTRUCTED

    @property
    def headers(self) -> Headers:
        """Copy of the current header mapping."""
        return dict(self._headers)

    @property
    def body(self) -> Body:
        """The body as last passed to send(), before serialization."""
        return self._body

    @property
    def content_type(self) -> str | None:
        return _content_type(self._headers)

    @property
    def content(self) -> bytes:
        """The body as httpx encodes it with the current Content-Type."""
        return self.build().content

    @property
    def state(self) -> RequestState:
        return self._state

    def _ensure_mutable(self, action: str) -> None:
        if self._state is not RequestState.CONSTRUCTED:
            raise RequestStateError(
                f"Cannot {action} a request that is {self._state.value}"
            )

    @overload
    def set(self, headers: Mapping[str, str]) -> RequestDescriptor: ...

    @overload
    def set(self, headers: str, value: str) -> RequestDescriptor: ...

    def set(
        self, headers: Mapping[str, str] | str, value: str | None = None
    ) -> RequestDescriptor:
        """
        Merge headers into the request.

        Accepts either a mapping or a single name and value. Names are matched
        case-insensitively and the new value replaces the old one.

        Raises:
            ValueError: If the current body cannot be encoded with the
                resulting Content-Type. The request is left unchanged.
        """
        self._ensure_mutable("set headers on")
        if isinstance(headers, str):
            if value is None:
                raise TypeError("set() with a header name requires a value")
            headers = {headers: value}
        merged = merge_headers(self._headers, headers)
        body_params(self._body, _content_type(merged))
        self._headers = merged
        return self

    def send(self, body: Body) -> RequestDescriptor:
        """
        Replace the request body. The last body set before execution wins.

        Raises:
            ValueError: If the body cannot be encoded with the current
                Content-Type. The previous body is kept.
        """
        self._ensure_mutable("replace the body of")
        body_params(body, self.content_type)
        self._body = body
        return self

    def build(
        self, client: httpx.Client | httpx.AsyncClient | None = None
    ) -> httpx.Request:
        """
        Build the httpx.Request that execution would send.

        When a client is given, its default headers are merged in the same
        way they are at execution time.
        """
        params = body_params(self._body, self.content_type)
        if client is not None:
            return client.build_request(
                self.method.value, self.url, headers=self._headers, **params
            )
        return httpx.Request(
            self.method.value, self.url, headers=self._headers, **params
        )

    def _start(self) -> None:
        self._ensure_mutable("execute")
        self._state = RequestState.EXECUTING
        logger.debug("Executing %s %s", self.method.value, self.url)

    def _finish(
        self, response: httpx.Response, raise_on_error: bool
    ) -> httpx.Response:
        if raise_on_error and not response.is_success:
            self._state = RequestState.FAILED
            logger.warning(
                "%s %s returned %s", self.method.value, self.url, response.status_code
            )
            raise HTTPError(response)
        self._state = RequestState.COMPLETED
        return response

    def execute(
        self, client: httpx.Client | None = None, *, raise_on_error: bool = True
    ) -> httpx.Response:
        """
        Send the request and return the response.

        Args:
            client: httpx.Client to send with. A temporary client is used
                and closed when omitted.
            raise_on_error: Raise HTTPError for non-2xx responses.

        Raises:
            RequestStateError: If the request was already executed.
            HTTPError: If raise_on_error is set and the status is not 2xx.
            httpx.HTTPError: Transport failures, unmodified.
        """
        self._start()
        try:
            if client is None:
                with httpx.Client() as owned_client:
                    response = owned_client.send(self.build(owned_client))
            else:
                response = client.send(self.build(client))
        except Exception:
            self._state = RequestState.FAILED
            raise
        return self._finish(response, raise_on_error)

    def end(
        self, client: httpx.Client | None = None, *, raise_on_error: bool = True
    ) -> httpx.Response:
        """Finalize the request. Same as execute()."""
        return self.execute(client, raise_on_error=raise_on_error)

    async def aexecute(
        self, client: httpx.AsyncClient | None = None, *, raise_on_error: bool = True
    ) -> httpx.Response:
        """Async version of execute() using httpx.AsyncClient."""
        self._start()
        try:
            if client is None:
                async with httpx.AsyncClient() as owned_client:
                    response = await owned_client.send(self.build(owned_client))
            else:
                response = await client.send(self.build(client))
        except Exception:
            self._state = RequestState.FAILED
            raise
        return self._finish(response, raise_on_error)

    def __await__(self) -> Generator[Any, None, httpx.Response]:
        return self.aexecute().__await__()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"({self.method.value} {self.url}, state={self._state.value})"
        )
