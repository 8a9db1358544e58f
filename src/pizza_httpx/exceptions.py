"""Exception classes for pizza-httpx."""

import httpx


class ValidationError(ValueError):
    """
    Raised synchronously when an operation is called without a required field.

    This is a caller-contract violation: it is raised before any request
    object exists, so no network I/O has been attempted.

    Attributes:
        field: Name of the offending configuration field.
        message: Human-readable error message.
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or f"missing {field}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class RequestError(Exception):
    """
    Raised when there's an error building or driving a request.

    Network failures are not wrapped; httpx exceptions reach the caller as is.
    """

    def __init__(
        self,
        message: str,
        original_exception: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message}: {self.original_exception}"
        return self.message


class RequestStateError(RequestError):
    """Raised when a request is mutated or executed after execution started."""


class ResponseError(Exception):
    """
    Base exception for errors carried by a response.

    Attributes:
        message: Human-readable error message.
        response: The httpx.Response object.
        status_code: HTTP status code from the response.
    """

    def __init__(self, message: str, response: httpx.Response) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.status_code = response.status_code

    @property
    def is_client_error(self) -> bool:
        """Check if this is a 4xx client error."""
        return self.response.is_client_error

    @property
    def is_server_error(self) -> bool:
        """Check if this is a 5xx server error."""
        return self.response.is_server_error

    @property
    def is_error(self) -> bool:
        return self.response.is_error

    def __str__(self) -> str:
        return f"{self.message} (status: {self.status_code})"


class HTTPError(ResponseError):
    """Raised when the response status code is not 2xx."""

    def __init__(self, response: httpx.Response) -> None:
        message = (
            f"HTTP error occurred: {response.status_code} {response.reason_phrase}"
        )
        super().__init__(message, response)
