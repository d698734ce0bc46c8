import re
from typing import Any, Dict, Final, final
from urllib import parse

import attr

__all__ = ("Route", "BASE_URL", "SANDBOX_PREFIX", "sandbox_host", "quote_segment")

BASE_URL: Final[str] = "https://api.sgroup.qq.com"
SANDBOX_PREFIX: Final[str] = "sandbox."

_SCHEME = re.compile(r"^(https?://)")


def sandbox_host(host: str) -> str:
    """Rewrites a host to its sandbox counterpart, e.g.
    `https://api.example.com` -> `https://sandbox.api.example.com`
    """

    return _SCHEME.sub(r"\g<1>" + SANDBOX_PREFIX, host, count=1)


def quote_segment(value: Any) -> str:
    """Quotes a single path segment, `@` is kept so `@me` survives"""
    return parse.quote(str(value), safe="@")


@final
@attr.define(init=False)
class Route:
    """Container class for routes that the http client will interact with,
    contains the method, the path template and the parameters that get
    interpolated into it.
    """

    method: str = attr.field()
    """ HTTP method the request will take """

    path: str = attr.field()
    """ The path of the Route (not interpolated with the parameters) """

    params: Dict[str, Any] = attr.field()
    """ The parameters that the route will take """

    def __init__(self, method: str, path: str, **params: Any):
        self.method = method.upper()
        self.path = path

        self.params = dict(sorted(params.items()))

    @property
    def compiled_path(self) -> str:
        """The path with the parameters quoted and interpolated"""
        return self.path.format_map(
            {key: quote_segment(value) for key, value in self.params.items()}
        )

    def url(self, host: str) -> str:
        """The full URL of the route on the given host"""
        return host.rstrip("/") + self.compiled_path
