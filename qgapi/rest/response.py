import enum
import json as jsonlib
from typing import Any, Optional, final

import attr

from .casing import camel_case_keys

__all__ = ("Response", "Outcome", "classify")


class Outcome(enum.Enum):
    """What a status code means for the caller"""

    OK = "ok"
    PENDING = "pending"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    ERROR = "error"


def classify(status: int) -> Outcome:
    """Maps a HTTP status code to an `Outcome`.

    201 and 202 are success codes for HTTP, but the platform sends
    them when a request was accepted and is still being processed,
    so they are reported as `Outcome.PENDING`.
    """

    if status in (201, 202):
        return Outcome.PENDING
    if 200 <= status < 300:
        return Outcome.OK
    if status == 401:
        return Outcome.UNAUTHORIZED
    if status == 403:
        return Outcome.FORBIDDEN
    return Outcome.ERROR


@final
@attr.define
class Response:
    """The object that represents the response that the API
    sends back after a HTTP request.
    """

    code: int = attr.field()
    """ The status code of the response """

    data: str = attr.field()
    """ The raw data of the response, probably should not be used
    directly, rather call a helper method to get the parsed data.
    """

    content_type: Optional[str] = attr.field()
    """ The content-type of the response of the request, most
    likely application/json but could be something else.
    """

    @property
    def outcome(self) -> Outcome:
        return classify(self.code)

    @property
    def is_json(self) -> bool:
        if self.content_type is None:
            return False
        return self.content_type.split(";")[0].strip() == "application/json"

    def json(self) -> Any:
        """Returns the parsed JSON data of the response, will
        raise a `ValueError` if the content type is incorrect.
        """

        if self.is_json:
            return jsonlib.loads(self.data)
        else:
            raise ValueError(
                f"content-type must be `application/json` not `{self.content_type}`"
            )

    def body(self) -> Any:
        """Returns the body with its keys in camelCase, `None` for
        an empty body and the raw text when it isn't JSON. Bodies that
        look like JSON are parsed whatever the content-type says.
        """

        if not self.data:
            return None

        if self.is_json or self.data.lstrip()[:1] in ("{", "["):
            try:
                return camel_case_keys(jsonlib.loads(self.data))
            except jsonlib.JSONDecodeError:
                return self.data

        return self.data
