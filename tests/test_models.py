from qgapi.models import (
    ChannelType,
    Member,
    MessageReaction,
    Mute,
    RemindType,
    Schedule,
    User,
)


def test_from_json_builds_nested_records():
    member = Member.from_json(
        {"user": {"id": "U1", "username": "bob"}, "nick": "b", "roles": ["1"], "joinedAt": "2022"}
    )

    assert member.user == User(id="U1", username="bob")
    assert member.joined_at == "2022"


def test_from_json_ignores_unknown_keys():
    assert User.from_json({"id": "U1", "unionOpenid": "x"}) == User(id="U1")


def test_to_json_is_camel_case_without_unset_fields():
    schedule = Schedule(
        name="raid",
        start_timestamp="1",
        jump_channel_id="C1",
        remind_type=RemindType.START,
    )

    assert schedule.to_json() == {
        "name": "raid",
        "startTimestamp": "1",
        "jumpChannelId": "C1",
        "remindType": RemindType.START,
    }


def test_reaction():
    reaction = MessageReaction.from_json(
        {
            "user_id": "U1",
            "guild_id": "G1",
            "channel_id": "C1",
            "target": {"id": "M1", "type": 0},
            "emoji": {"id": "4", "type": 1},
        }
    )

    assert reaction.target.id == "M1"
    assert reaction.emoji.type == 1


async def test_models_can_be_sent(client, session):
    await client.patch("/guilds/G1/mute", Mute(mute_seconds=60))

    assert session.calls[0].kwargs["json"] == {"mute_seconds": 60}


def test_enums():
    assert ChannelType(10007) is ChannelType.FORUM
    assert RemindType("5") is RemindType.BEFORE_60
