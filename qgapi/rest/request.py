from typing import Any, Mapping, Optional

import attr

__all__ = ("RequestConfig",)


@attr.define(kw_only=True)
class RequestConfig:
    """Represents the configuration of a HTTP request as it was
    sent over the wire, kept around so a failed request can be
    inspected or replayed.
    """

    method: str = attr.field()
    """ The HTTP method """

    url: str = attr.field()
    """ The full URL, including the host """

    headers: Mapping[str, str] = attr.field(factory=dict, repr=False)
    """ The headers that were sent (including `Authorization`!) """

    json: Optional[Any] = attr.field(default=None)
    """ The body, already converted to snake_case """

    params: Optional[Mapping[str, str]] = attr.field(default=None)
    """ The query string parameters """

    def to_kwargs(self) -> Mapping[str, Any]:
        """The keyword arguments for `aiohttp.ClientSession.request`"""

        kwargs = {"headers": dict(self.headers)}
        if self.json is not None:
            kwargs["json"] = self.json
        if self.params is not None:
            kwargs["params"] = dict(self.params)
        return kwargs
