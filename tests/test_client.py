import asyncio

import pytest

from qgapi.models import Role
from qgapi.rest.builders import JSONBuilder, ParamsBuilder
from qgapi.rest.client import RESTClient, bot_token
from qgapi.rest.errors import Forbidden, PendingError, RequestError, Unauthorized
from qgapi.rest.route import Route

from .conftest import HOST, TOKEN, FakeResponse


async def test_sends_authorization_and_snake_cased_body(client, session):
    await client.post("/channels/C1/announces", {"messageId": "M1"})

    (call,) = session.calls
    assert call.method == "POST"
    assert call.url == f"{HOST}/channels/C1/announces"
    assert call.kwargs["json"] == {"message_id": "M1"}
    assert call.kwargs["headers"]["Authorization"] == TOKEN
    assert call.kwargs["headers"]["Content-Type"] == "application/json"


async def test_get_has_no_body(client, session):
    await client.get("/users/@me")

    (call,) = session.calls
    assert "json" not in call.kwargs
    assert "Content-Type" not in call.kwargs["headers"]


async def test_response_keys_are_camel_cased(client, session):
    session.respond(200, [{"user": {"id": "U1"}, "joined_at": "2022-01-01"}])

    members = await client.get("/guilds/G1/members")

    assert members == [{"user": {"id": "U1"}, "joinedAt": "2022-01-01"}]


async def test_empty_body_is_none(client, session):
    session.respond(204)

    assert await client.delete("/guilds/G1/roles/R1") is None


async def test_text_body_is_returned_as_is(client, session):
    session.respond(200, text="pong", content_type="text/plain")

    assert await client.get("/ping") == "pong"


async def test_params_are_sent(client, session):
    await client.get("/guilds/G1/members", params=ParamsBuilder(limit=400, after="0"))

    (call,) = session.calls
    assert call.kwargs["params"] == {"limit": "400", "after": "0"}


async def test_json_builder_body(client, session):
    body = JSONBuilder(name="mods").add("roleColor", 1)

    await client.request(Route("POST", "/guilds/{guild_id}/roles", guild_id="G1"), json=body)

    (call,) = session.calls
    assert call.kwargs["json"] == {"name": "mods", "role_color": 1}


async def test_extra_headers_cannot_override_authorization(client, session):
    await client.get("/users/@me", headers={"Authorization": "nope", "X-Trace": "1"})

    headers = session.calls[0].kwargs["headers"]
    assert headers["Authorization"] == TOKEN
    assert headers["X-Trace"] == "1"


@pytest.mark.parametrize("status", [201, 202])
async def test_accepted_statuses_are_failures(client, session, status):
    session.respond(status, {"code": 1, "message": "pending"})

    with pytest.raises(PendingError) as info:
        await client.post("/channels/C1/messages", {"content": "hi"})

    exc = info.value
    assert exc.data["code"] == 1
    assert exc.code == 1
    assert exc.message == "pending"
    assert exc.status == status
    assert exc.config.json == {"content": "hi"}


@pytest.mark.parametrize("status, cls", [(401, Unauthorized), (403, Forbidden)])
async def test_auth_failures_have_their_own_class(client, session, status, cls):
    session.respond(status, {"code": 11241, "message": "denied"})

    with pytest.raises(cls) as info:
        await client.get("/users/@me")

    assert isinstance(info.value, RequestError)
    assert len(session.calls) == 1


async def test_error_status_carries_payload(client, session):
    session.respond(404, {"code": 50001, "message": "not found", "error_data": {"trace_id": "x"}})

    with pytest.raises(RequestError) as info:
        await client.get("/guilds/G1/nope")

    exc = info.value
    assert type(exc) is RequestError
    assert exc.data == {"code": 50001, "message": "not found", "errorData": {"traceId": "x"}}
    assert exc.request is not None
    assert exc.config.url == f"{HOST}/guilds/G1/nope"


async def test_error_without_json_body(client, session):
    session.respond(500, text="oops", content_type="text/plain")

    with pytest.raises(RequestError) as info:
        await client.get("/users/@me")

    assert info.value.data is None
    assert info.value.message == "oops"
    assert info.value.code is None


async def test_network_failure(client, session, connection_error):
    session.fail(connection_error)

    with pytest.raises(RequestError) as info:
        await client.get("/users/@me")

    exc = info.value
    assert exc.__cause__ is connection_error
    assert exc.request is None
    assert exc.status is None


async def test_timeout(client, session):
    session.fail(asyncio.TimeoutError())

    with pytest.raises(RequestError) as info:
        await client.get("/users/@me")

    assert info.value.message == "TimeoutError"


def test_sandbox_rewrites_host(session):
    client = RESTClient(session=session, token=TOKEN, host="https://api.example.com", sandbox=True)

    assert client.host == "https://sandbox.api.example.com"


def test_bot_token():
    assert bot_token(123, "abc") == "Bot 123.abc"


class UndecodableResponse(FakeResponse):
    async def text(self, encoding: str = "utf-8") -> str:
        return b"\xff\xfe".decode(encoding)


async def test_undecodable_body(client, session):
    session.responses.append(UndecodableResponse(200))

    with pytest.raises(RequestError) as info:
        await client.get("/users/@me")

    exc = info.value
    assert isinstance(exc.__cause__, UnicodeDecodeError)
    assert exc.status == 200
    assert exc.request is not None
    assert exc.config.url == f"{HOST}/users/@me"


async def test_json_error_without_json_content_type(client, session):
    session.respond(400, text='{"code": 304003, "message": "bad"}', content_type="text/plain")

    with pytest.raises(RequestError) as info:
        await client.get("/guilds/G1")

    assert info.value.code == 304003
    assert info.value.message == "bad"


async def test_nested_models_in_body(client, session):
    await client.post("/guilds/G1/roles", {"roleList": [Role(id="R1", member_limit=5)]})

    assert session.calls[0].kwargs["json"] == {
        "role_list": [{"id": "R1", "member_limit": 5}]
    }


async def test_list_of_models_body(client, session):
    await client.post("/guilds/G1/roles", [Role(id="R1"), Role(id="R2")])

    assert session.calls[0].kwargs["json"] == [{"id": "R1"}, {"id": "R2"}]
