from __future__ import annotations

from typing import Any, Union

import aiohttp
import attr

from .rest.client import RESTClient, bot_token
from .rest.plurals import is_resource, pluralize
from .rest.resource import Resource
from .rest.route import BASE_URL, quote_segment

__all__ = ("Api", "CollectionRoot")


class CollectionRoot(Resource):
    """A collection reached straight from the `Api`, awaiting it
    lists the current user's collection (`/users/@me/guilds`) while
    looking an id up addresses the top level collection
    (`/guilds/{id}`).
    """

    __slots__ = ()

    def item(self, id: Any) -> Resource:
        return Resource(self._client, (self._segments[-1], quote_segment(id)))


@attr.define
class Api:
    """Entry point of the REST API, names that are not declared
    here are turned into resources.

    ```py
    # [GET] /users/@me/guilds
    await api.guilds
    # [GET] /guilds/{id}
    await api.guild(id)
    # [GET] /guilds/{id}/members
    await api.guild(id).members
    ```

    Only registered resources (see
    `qgapi.rest.plurals.register_resource`) are resolved, anything
    else raises `AttributeError`.
    """

    client: RESTClient = attr.field()
    """ The client that every request goes through """

    @classmethod
    def create(
        cls,
        session: aiohttp.ClientSession,
        token: str,
        *,
        host: str = BASE_URL,
        sandbox: bool = False,
    ) -> Api:
        """Creates an `Api` with its own `RESTClient`"""

        return cls(RESTClient(session=session, token=token, host=host, sandbox=sandbox))

    @classmethod
    def for_bot(
        cls,
        session: aiohttp.ClientSession,
        app_id: Union[int, str],
        token: str,
        **kwargs: Any,
    ) -> Api:
        return cls.create(session, bot_token(app_id, token), **kwargs)

    @property
    def host(self) -> str:
        return self.client.host

    @property
    def me(self) -> Resource:
        """The current user, `await api.me`"""
        return Resource(self.client, ("users", "@me"))

    def __getattr__(self, name: str) -> CollectionRoot:
        if name.startswith("_") or not is_resource(name):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return CollectionRoot(self.client, ("users", "@me", pluralize(name)))
