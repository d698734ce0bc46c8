import pytest

from qgapi.rest import plurals
from qgapi.rest.plurals import is_resource, pluralize, register_resource


@pytest.mark.parametrize(
    "singular, plural",
    [
        ("user", "users"),
        ("guild", "guilds"),
        ("member", "members"),
        ("role", "roles"),
        ("channel", "channels"),
        ("announce", "announces"),
        ("schedule", "schedules"),
        ("emoji", "emojis"),
    ],
)
def test_known_resources(singular, plural):
    assert pluralize(singular) == plural


def test_unknown_segments_are_returned_unchanged():
    assert pluralize("mute") == "mute"
    assert pluralize("guilds") == "guilds"


@pytest.fixture
def restore_table(monkeypatch):
    monkeypatch.setattr(plurals, "_PLURALS", dict(plurals._PLURALS))


def test_register_resource(restore_table):
    assert not is_resource("thread")

    register_resource("thread")
    register_resource("forum_post", "posts")

    assert pluralize("thread") == "threads"
    assert pluralize("forum_post") == "posts"
    assert is_resource("threads")
