from typing import Any, Mapping, Optional

import aiohttp
import attr

from .request import RequestConfig
from .response import Outcome

__all__ = (
    "ClientException",
    "RequestError",
    "PendingError",
    "Unauthorized",
    "Forbidden",
    "error_for",
)


class ClientException(Exception):
    """Base class for HTTP client exceptions"""


@attr.define(init=False, repr=False)
class RequestError(ClientException):
    """Raised when a request made through the client failed, either
    because of the network or because the API answered with an
    error status. Carries everything needed to log or replay the
    failing call.
    """

    message: str = attr.field()
    """ A human readable description of the failure """

    config: RequestConfig = attr.field()
    """ The configuration of the failing request """

    request: Optional[aiohttp.RequestInfo] = attr.field()
    """ The raw request handle from aiohttp, `None` when the
    request never got a response (network failure).
    """

    data: Optional[Mapping[str, Any]] = attr.field()
    """ The error payload sent by the API (`code`, `message` and
    sometimes `data`), if it sent one.
    """

    status: Optional[int] = attr.field()
    """ The HTTP status code """

    def __init__(
        self,
        message: str,
        config: RequestConfig,
        request: Optional[aiohttp.RequestInfo] = None,
        data: Optional[Mapping[str, Any]] = None,
        status: Optional[int] = None,
    ):
        self.message = message
        self.config = config
        self.request = request
        self.data = data
        self.status = status

        super().__init__(repr(self))

    @property
    def code(self) -> Optional[int]:
        """The error code of the API, see
        https://bot.q.qq.com/wiki/develop/api/openapi/error/error.html
        """

        if self.data is not None:
            return self.data.get("code")

    @property
    def details(self) -> Optional[Any]:
        """Auxiliary data some errors come with"""

        if self.data is not None:
            return self.data.get("data")

    def __repr__(self) -> str:
        status = "-" if self.status is None else self.status
        return (
            f"{self.config.method} {self.config.url} [{status}]: "
            f"{self.message} ({self.code})"
        )


class PendingError(RequestError):
    """The request was accepted (201/202) but the operation has
    not completed yet.
    """


class Unauthorized(RequestError):
    """The token is missing or invalid (401)"""


class Forbidden(RequestError):
    """The bot lacks the permissions for this request (403)"""


_ERRORS = {
    Outcome.PENDING: PendingError,
    Outcome.UNAUTHORIZED: Unauthorized,
    Outcome.FORBIDDEN: Forbidden,
}


def error_for(outcome: Outcome) -> type:
    """Returns the exception class used for an outcome"""
    return _ERRORS.get(outcome, RequestError)
