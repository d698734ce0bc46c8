from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generator, Optional, Tuple

from .plurals import pluralize
from .route import quote_segment

if TYPE_CHECKING:
    from .client import Params, RESTClient

__all__ = ("Resource",)


class Resource:
    """A node of a REST path that is built lazily.

    Attribute access appends a segment, calling a node looks an id
    up in the collection named by the last segment (which gets
    pluralized), nothing is requested until the node is awaited or
    one of the verbs is awaited.

    Example
    -------
    ```py
    # [GET] /guilds/{id}/members
    await api.guild(id).members
    # [GET] /guilds/{id}/members/{member_id}
    await api.guild(id).member(member_id)
    # [POST] /guilds/{id}/roles
    await api.guild(id).roles.add({"name": "mods"})
    # [PATCH] /guilds/{id}/roles/{role_id}
    await api.guild(id).role(role_id).upd({"name": "admins"})
    # [DELETE] /guilds/{id}/roles/{role_id}
    await api.guild(id).role(role_id).delete()
    ```

    Segments that collide with a method name (`get`, `add`, ...)
    can be reached with `child`.
    """

    __slots__ = ("_client", "_segments")

    _client: RESTClient
    _segments: Tuple[str, ...]

    def __init__(self, client: RESTClient, segments: Tuple[str, ...] = ()):
        object.__setattr__(self, "_client", client)
        object.__setattr__(self, "_segments", tuple(segments))

    @property
    def path(self) -> str:
        """The path accumulated so far"""
        return "/" + "/".join(self._segments)

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def child(self, segment: str) -> Resource:
        """Returns a new node with `segment` appended"""
        return Resource(self._client, self._segments + (segment,))

    def item(self, id: Any) -> Resource:
        """Returns the node of `id` inside the collection named by
        the last segment, `.role` followed by `item(1)` becomes
        `/roles/1`.
        """

        if not self._segments:
            raise ValueError("cannot look an id up on an empty path")

        *parents, last = self._segments
        return Resource(
            self._client, (*parents, pluralize(last), quote_segment(id))
        )

    def __getattr__(self, name: str) -> Resource:
        if name.startswith("_"):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self.child(name)

    def __call__(self, id: Any, *_: Any) -> Resource:
        return self.item(id)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' objects are immutable")

    def __await__(self) -> Generator[Any, None, Any]:
        return self.get().__await__()

    async def get(self, params: Optional[Params] = None) -> Any:
        """[GET] the path, awaiting the node does the same without
        parameters.
        """
        return await self._client.get(self.path, params=params)

    async def add(self, body: Optional[Any] = None) -> Any:
        """[POST] `body` to the path"""
        return await self._client.post(self.path, body)

    async def upd(self, body: Optional[Any] = None) -> Any:
        """[PATCH] the path with `body`"""
        return await self._client.patch(self.path, body)

    async def put(self, body: Optional[Any] = None) -> Any:
        """[PUT] `body` to the path"""
        return await self._client.put(self.path, body)

    async def delete(self) -> Any:
        """[DELETE] the path"""
        return await self._client.delete(self.path)

    post = add
    patch = upd

    def __repr__(self) -> str:
        return f"<{type(self).__name__} path={self.path!r}>"
