from typing import Dict, Optional

__all__ = ("pluralize", "register_resource", "is_resource")

_PLURALS: Dict[str, str] = {
    "user": "users",
    "guild": "guilds",
    "member": "members",
    "role": "roles",
    "channel": "channels",
    "announce": "announces",
    "schedule": "schedules",
    "emoji": "emojis",
    "message": "messages",
    "reaction": "reactions",
    "pin": "pins",
    "dm": "dms",
    "permission": "permissions",
}


def pluralize(segment: str) -> str:
    """Returns the collection segment for a singular resource name,
    e.g. `guild` -> `guilds`. Unknown segments are returned as-is,
    a wrong path shows up as a 404 from the API instead.
    """

    return _PLURALS.get(segment, segment)


def register_resource(singular: str, plural: Optional[str] = None) -> None:
    """Registers a resource that this package does not know about
    yet (for endpoints released after this version).

    Parameters
    ----------
    singular : builtins.str
        The singular name, used as `api.<singular>(id)`.
    plural : typing.Optional[builtins.str]
        The collection segment, defaults to `singular + "s"`.
    """

    _PLURALS[singular] = plural if plural is not None else singular + "s"


def is_resource(name: str) -> bool:
    return name in _PLURALS or name in _PLURALS.values()
