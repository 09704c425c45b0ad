"""
Exceptions raised by the client.

Recoverable failures derive from ClientException. DecodeError does not:
a body that cannot be decoded means client and server disagree on the
schema, and callers are not expected to recover from it.
"""

import sentry_sdk


class ClientException(Exception):
    """Base class of the errors a caller is expected to handle."""


class TransportError(ClientException):
    """The HTTP round trip could not be completed (connection, TLS, timeout)."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class UnexpectedStatusError(ClientException):
    """The server answered with a status outside of the acceptable ones."""

    def __init__(self, status: int, body: bytes, method: str = "", url: str = "") -> None:
        self.status = status
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} returned unexpected status {status}: {body!r}")


class PaginationError(ClientException):
    """A listing cannot be traversed any further."""


class TaskError(ClientException):
    """A work unit failed inside a WorkPool. The original error is the __cause__."""

    def __init__(self, unit, error: BaseException) -> None:
        self.unit = unit
        self.error = error
        super().__init__(f"task for {unit!r} failed: {error!r}")


class DecodeError(RuntimeError):
    """A response body does not match the expected document shape."""

    def __init__(self, detail: str, body: bytes | None = None) -> None:
        self.detail = detail
        self.body = body
        super().__init__(detail)


def report_exception(e: BaseException, **tags) -> str | None:
    """Send an exception to Sentry with tags, if Sentry is configured."""
    if not sentry_sdk.get_client().is_active():
        return None
    with sentry_sdk.new_scope() as scope:
        scope.set_tags({key: value for key, value in tags.items() if value is not None})
        return sentry_sdk.capture_exception(e)
