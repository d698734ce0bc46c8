import re
from typing import Any, Callable, Mapping

__all__ = ("to_camel", "to_snake", "camel_case_keys", "snake_case_keys")

_SNAKE_BOUNDARY = re.compile(r"(?<=[a-z0-9])_([a-z])")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_camel(key: str) -> str:
    """Converts a snake_case key into camelCase, keys that cannot be
    converted back losslessly (`_errors`, `ALL_CAPS`, `a__b`,
    `is_a_bot`) are returned untouched.
    """

    converted = _SNAKE_BOUNDARY.sub(lambda m: m.group(1).upper(), key)
    if to_snake(converted) != key:
        return key
    return converted


def to_snake(key: str) -> str:
    """Converts a camelCase key into snake_case"""

    converted, count = _CAMEL_BOUNDARY.subn(r"_\1", key)
    if count == 0:
        return key
    return converted.lower()


def _convert(value: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(value, Mapping):
        return {
            (convert(k) if isinstance(k, str) else k): _convert(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_convert(item, convert) for item in value]
    if isinstance(value, tuple):
        return tuple(_convert(item, convert) for item in value)
    return value


def camel_case_keys(value: Any) -> Any:
    """Returns a deep copy of `value` with every mapping key
    converted to camelCase.

    Parameters
    ----------
    value : typing.Any
        A mapping, sequence or scalar, scalars (including `None`)
        are passed through unchanged.

    Returns
    -------
    typing.Any
        The converted copy, the input is never mutated.
    """

    return _convert(value, to_camel)


def snake_case_keys(value: Any) -> Any:
    """Returns a deep copy of `value` with every mapping key
    converted to snake_case. See `camel_case_keys`.
    """

    return _convert(value, to_snake)
