""" Records of the objects the API sends and accepts. The client
itself returns plain mappings, these are here for when you want
something typed, build them with `from_json` and send them as
request bodies directly.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

import attr

from .rest.casing import camel_case_keys, snake_case_keys

__all__ = (
    "Model",
    "User",
    "Role",
    "DefaultRoles",
    "Member",
    "MemberWithGuild",
    "Guild",
    "ChannelType",
    "ChannelSubType",
    "ChannelPermissions",
    "Channel",
    "Announce",
    "ReactionTargetType",
    "ReactionTarget",
    "EmojiType",
    "Emoji",
    "MessageReaction",
    "RemindType",
    "Schedule",
    "Mute",
    "OpenApiError",
)

M = TypeVar("M", bound="Model")


class Model:
    __slots__ = ()

    @classmethod
    def from_json(cls: Type[M], data: Mapping[str, Any]) -> M:
        """Builds the record from a payload, keys may be camelCase
        or snake_case and unknown keys are ignored.
        """

        fields = attr.fields_dict(cls)
        return cls(
            **{
                key: value
                for key, value in snake_case_keys(data).items()
                if key in fields
            }
        )

    def to_json(self) -> Dict[str, Any]:
        """Returns the record as a camelCase mapping, unset fields
        are left out.
        """

        return camel_case_keys(
            attr.asdict(self, filter=lambda _, value: value is not None)
        )


def _record(cls: Type[M]) -> Callable[[Any], Optional[M]]:
    def convert(value: Any) -> Optional[M]:
        if value is None or isinstance(value, cls):
            return value
        return cls.from_json(value)

    return convert


def _records(cls: Type[M]) -> Callable[[Any], Optional[List[M]]]:
    convert = _record(cls)

    def convert_all(value: Any) -> Optional[List[M]]:
        if value is None:
            return None
        return [convert(item) for item in value]

    return convert_all


@attr.define(kw_only=True)
class User(Model):
    id: str = attr.field()
    username: Optional[str] = attr.field(default=None)
    avatar: Optional[str] = attr.field(default=None)
    bot: Optional[bool] = attr.field(default=None)


class DefaultRoles(enum.IntEnum):
    ALL = 1
    ADMIN = 2
    OWNER = 4
    SUBCHANNEL_ADMIN = 5


@attr.define(kw_only=True)
class Role(Model):
    id: str = attr.field()
    """ The role id, see `DefaultRoles` for the built in ones """

    name: Optional[str] = attr.field(default=None)

    color: Optional[int] = attr.field(default=None)
    """ ARGB colour as a decimal number """

    hoist: Optional[int] = attr.field(default=None)
    """ Whether the role is listed separately (0 or 1) """

    number: Optional[int] = attr.field(default=None)
    """ How many members have the role """

    member_limit: Optional[int] = attr.field(default=None)


@attr.define(kw_only=True)
class Member(Model):
    user: Optional[User] = attr.field(default=None, converter=_record(User))
    nick: Optional[str] = attr.field(default=None)
    roles: List[str] = attr.field(factory=list)
    joined_at: Optional[str] = attr.field(default=None)
    """ ISO 8601 timestamp of when the member joined """


@attr.define(kw_only=True)
class MemberWithGuild(Model):
    guild_id: str = attr.field()
    user: Optional[User] = attr.field(default=None, converter=_record(User))
    nick: Optional[str] = attr.field(default=None)
    roles: List[str] = attr.field(factory=list)
    joined_at: Optional[str] = attr.field(default=None)


@attr.define(kw_only=True)
class Guild(Model):
    id: str = attr.field()
    name: Optional[str] = attr.field(default=None)
    icon: Optional[str] = attr.field(default=None)
    owner: Optional[bool] = attr.field(default=None)
    owner_id: Optional[str] = attr.field(default=None)
    member_count: Optional[int] = attr.field(default=None)
    max_members: Optional[int] = attr.field(default=None)
    description: Optional[str] = attr.field(default=None)
    joined_at: Optional[str] = attr.field(default=None)


class ChannelType(enum.IntEnum):
    TEXT = 0
    VOICE = 2
    GROUP = 4
    LIVE = 10005
    APPLICATION = 10006
    FORUM = 10007


class ChannelSubType(enum.IntEnum):
    IDLE = 0
    ANNOUNCEMENT = 1
    STRATEGY = 2
    BLACK = 3


@attr.define(kw_only=True)
class ChannelPermissions(Model):
    channel_id: str = attr.field()
    user_id: str = attr.field()
    permissions: str = attr.field()
    """ Bit set of the permissions, as a decimal string """


@attr.define(kw_only=True)
class Channel(Model):
    id: Optional[str] = attr.field(default=None)
    guild_id: Optional[str] = attr.field(default=None)
    name: Optional[str] = attr.field(default=None)
    type: Optional[int] = attr.field(default=None)
    """ One of `ChannelType` """

    sub_type: Optional[int] = attr.field(default=None)
    """ One of `ChannelSubType` """

    position: Optional[int] = attr.field(default=None)
    """ Must be unique among the channels of a guild """

    parent_id: Optional[str] = attr.field(default=None)
    owner_id: Optional[str] = attr.field(default=None)


@attr.define(kw_only=True)
class Announce(Model):
    guild_id: Optional[str] = attr.field(default=None)
    channel_id: Optional[str] = attr.field(default=None)
    message_id: Optional[str] = attr.field(default=None)


class ReactionTargetType(enum.IntEnum):
    MESSAGE = 0
    POST = 1
    COMMENT = 2
    REPLY = 3


@attr.define(kw_only=True)
class ReactionTarget(Model):
    id: str = attr.field()
    type: int = attr.field()
    """ One of `ReactionTargetType` """


class EmojiType(enum.IntEnum):
    SYSTEM = 1
    DEFAULT = 2


@attr.define(kw_only=True)
class Emoji(Model):
    id: str = attr.field()
    """ Numeric for system emojis, the emoji itself otherwise """

    type: int = attr.field()
    """ One of `EmojiType` """


@attr.define(kw_only=True)
class MessageReaction(Model):
    user_id: str = attr.field()
    guild_id: str = attr.field()
    channel_id: str = attr.field()
    target: ReactionTarget = attr.field(converter=_record(ReactionTarget))
    emoji: Emoji = attr.field(converter=_record(Emoji))


class RemindType(str, enum.Enum):
    NEVER = "0"
    START = "1"
    BEFORE_5 = "2"
    BEFORE_15 = "3"
    BEFORE_30 = "4"
    BEFORE_60 = "5"


@attr.define(kw_only=True)
class Schedule(Model):
    id: Optional[str] = attr.field(default=None)
    """ Not set when creating a schedule """

    name: Optional[str] = attr.field(default=None)
    description: Optional[str] = attr.field(default=None)
    start_timestamp: Optional[str] = attr.field(default=None)
    """ Milliseconds since the epoch, as a string """

    end_timestamp: Optional[str] = attr.field(default=None)
    creator: Optional[Member] = attr.field(default=None, converter=_record(Member))
    jump_channel_id: Optional[str] = attr.field(default=None)
    remind_type: Optional[str] = attr.field(default=None)
    """ One of `RemindType` """


@attr.define(kw_only=True)
class Mute(Model):
    mute_end_timestamp: Optional[str] = attr.field(default=None)
    """ Absolute timestamp in seconds, wins over `mute_seconds` """

    mute_seconds: Optional[int] = attr.field(default=None)


@attr.define(kw_only=True)
class OpenApiError(Model):
    code: int = attr.field()
    message: str = attr.field()
    data: Optional[Any] = attr.field(default=None)
