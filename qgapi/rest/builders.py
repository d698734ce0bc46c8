from __future__ import annotations

import copy
from typing import Any, Mapping, MutableMapping, Optional

import attr

__all__ = ("JSONBuilder", "ParamsBuilder")


def _serialize(value: Any) -> Any:
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, Mapping):
        return {key: _serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


@attr.define(init=False)
class JSONBuilder:
    """Represents a JSON object"""

    inner: MutableMapping[str, Any] = attr.field(init=False)
    """ The inner representation of the JSON """

    def __init__(self, data: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        self.inner = {}

        for key, value in {**(data or {}), **kwargs}.items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> JSONBuilder:
        """Add a key to the JSON mapping

        Parameters
        ----------
        key : builtins.str
            The key, camelCase or snake_case (the client converts it).
        value : typing.Any
            The value that the key represents. (Will implicitly
            call `to_json` if the type supports it).

        Returns
        -------
        qgapi.rest.builders.JSONBuilder
            The builder object, can be used for chaining.
        """

        self.inner[key] = _serialize(value)
        return self

    def build(self) -> Mapping[str, Any]:
        """Builds the JSON object into a mapping. (This makes
        a deepcopy of the underlying object).

        Returns
        -------
        typing.Mapping[builtins.str, typing.Any]
        """

        return copy.deepcopy(self.inner)

    @classmethod
    def coerce(cls, body: Any) -> Any:
        """Turns whatever was passed as a request body into plain
        JSON-able data, a `JSONBuilder` is built, a model is turned
        into its JSON form and anything else is returned unchanged.
        """

        if isinstance(body, cls):
            return body.build()
        return _serialize(body)


@attr.define(init=False)
class ParamsBuilder:
    """Represents the parameters of the query string"""

    inner: MutableMapping[str, str] = attr.field(init=False)
    """ The inner representation of the parameters """

    def __init__(self, **kwargs: Any):
        self.inner = {}

        for key, value in kwargs.items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> ParamsBuilder:
        """Add a parameter to the parameters, `None` values are
        skipped and booleans are lowercased.

        Parameters
        ----------
        key : builtins.str
            The key.
        value : typing.Any
            The value that the key represents.

        Returns
        -------
        qgapi.rest.builders.ParamsBuilder
            The builder object, can be used for chaining.
        """

        if value is None:
            return self

        if isinstance(value, bool):
            value = "true" if value else "false"

        self.inner[key] = str(value)
        return self

    def build(self) -> Mapping[str, str]:
        """Build the parameters into a mapping.

        Returns
        -------
        typing.Mapping[builtins.str, builtins.str]
            The mapping referring to the parameters.
        """

        return dict(self.inner)

    @classmethod
    def coerce(cls, params: Any) -> Optional[Mapping[str, str]]:
        if params is None:
            return None
        if isinstance(params, cls):
            return params.build()
        return cls(**params).build()
