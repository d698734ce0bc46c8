import asyncio
import logging
from typing import Any, Final, Mapping, MutableMapping, Optional, Union

import aiohttp
import attr

from .. import __version__
from .builders import JSONBuilder, ParamsBuilder
from .casing import snake_case_keys
from .errors import RequestError, error_for
from .request import RequestConfig
from .response import Outcome, Response
from .route import BASE_URL, Route, sandbox_host

__all__ = ("RESTClient", "USER_AGENT", "bot_token")

_log = logging.getLogger(__name__)

USER_AGENT: Final[str] = f"qgapi ({__version__})"

Params = Union[ParamsBuilder, Mapping[str, Any]]


def bot_token(app_id: Union[int, str], token: str) -> str:
    """Formats the credential the API expects from a bot"""
    return f"Bot {app_id}.{token}"


@attr.define(kw_only=True)
class RESTClient:
    """Client that handles HTTP requests to the guild bot REST API,
    this does not create a session itself and needs one passed to
    it.

    Request bodies are converted to snake_case before they are sent
    and response bodies are converted to camelCase before they are
    returned.
    """

    session: aiohttp.ClientSession = attr.field()
    """ The actual session that the client uses for its HTTP
    requests, closing it is up to you.
    """

    token: str = attr.field(repr=False)
    """ The value of the `Authorization` header (see `bot_token`),
    it is important to note that you should not share this with
    anyone!
    """

    host: str = attr.field(default=BASE_URL)
    """ The host every route is requested on """

    sandbox: bool = attr.field(default=False)
    """ Whether to talk to the sandbox environment, this rewrites
    `host` once the client is created.
    """

    user_agent: str = attr.field(default=USER_AGENT)
    """ The user agent that you want to use for your HTTP client """

    def __attrs_post_init__(self):
        if self.sandbox:
            self.host = sandbox_host(self.host)

    def build_config(
        self,
        route: Route,
        *,
        json: Optional[Any] = None,
        params: Optional[Params] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestConfig:
        """Builds the configuration of a request without sending it.
        See `request` for the parameters.
        """

        merged: MutableMapping[str, str] = dict(headers or {})
        merged["Authorization"] = self.token
        merged["User-Agent"] = self.user_agent

        body = None
        if json is not None:
            body = snake_case_keys(JSONBuilder.coerce(json))
            merged["Content-Type"] = "application/json"

        query = ParamsBuilder.coerce(params)
        if query is not None:
            query = snake_case_keys(query)

        return RequestConfig(
            method=route.method,
            url=route.url(self.host),
            headers=merged,
            json=body,
            params=query,
        )

    async def request(
        self,
        route: Route,
        *,
        json: Optional[Any] = None,
        params: Optional[Params] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Makes a HTTP request to the provided `Route`.

        Parameters
        ----------
        route : qgapi.rest.route.Route
            The route to request to.
        json : typing.Optional[typing.Any]
            JSON body of the request, a mapping, a
            `qgapi.rest.builders.JSONBuilder` or a model.
        params : typing.Optional[qgapi.rest.builders.ParamsBuilder]
            The request parameters (a plain mapping works too).
        headers : typing.Optional[typing.Dict[builtins.str, builtins.str]]
            Extra headers, `Authorization` and `User-Agent` are
            always overwritten.

        Raises
        ------
        qgapi.rest.errors.PendingError
            The API accepted the request (201/202) but has not
            finished processing it.
        qgapi.rest.errors.Unauthorized
            The token was rejected (401).
        qgapi.rest.errors.Forbidden
            The bot is not allowed to do this (403).
        qgapi.rest.errors.RequestError
            Any other error status, or the request never got a
            response at all.

        Returns
        -------
        typing.Any
            The response body with camelCase keys, `None` for an
            empty body.
        """

        config = self.build_config(route, json=json, params=params, headers=headers)
        _log.debug("%s %s", config.method, config.url)

        try:
            async with self.session.request(
                config.method, config.url, **config.to_kwargs()
            ) as response:
                try:
                    text = await response.text(encoding="utf-8")
                except UnicodeDecodeError as exc:
                    raise RequestError(
                        f"response body is not valid utf-8: {exc.reason}",
                        config,
                        request=response.request_info,
                        status=response.status,
                    ) from exc

                result = Response(
                    response.status,
                    data=text,
                    content_type=response.headers.get("Content-Type"),
                )
                request_info = response.request_info
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise RequestError(str(exc) or type(exc).__name__, config) from exc

        _log.debug("%s %s -> %d", config.method, config.url, result.code)

        body = result.body()
        outcome = result.outcome
        if outcome is Outcome.OK:
            return body

        data = body if isinstance(body, Mapping) else None
        if data is not None and data.get("message"):
            message = data["message"]
        else:
            message = body if isinstance(body, str) and body else f"HTTP {result.code}"

        raise error_for(outcome)(
            message, config, request=request_info, data=data, status=result.code
        )

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request(Route("GET", path), **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request(Route("DELETE", path), **kwargs)

    async def head(self, path: str, **kwargs: Any) -> Any:
        return await self.request(Route("HEAD", path), **kwargs)

    async def options(self, path: str, **kwargs: Any) -> Any:
        return await self.request(Route("OPTIONS", path), **kwargs)

    async def post(self, path: str, json: Optional[Any] = None, **kwargs: Any) -> Any:
        return await self.request(Route("POST", path), json=json, **kwargs)

    async def put(self, path: str, json: Optional[Any] = None, **kwargs: Any) -> Any:
        return await self.request(Route("PUT", path), json=json, **kwargs)

    async def patch(self, path: str, json: Optional[Any] = None, **kwargs: Any) -> Any:
        return await self.request(Route("PATCH", path), json=json, **kwargs)
